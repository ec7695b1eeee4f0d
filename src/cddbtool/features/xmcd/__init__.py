"""Public surface for the XMCD feature."""

from .domain.disc_title import UNKNOWN_ARTIST, UNKNOWN_TITLE, split_disc_title
from .domain.models import CddbMatch, XmcdRecord
from .domain.parser import parse_xmcd_record
from .domain.serializer import one_line, to_xmcd, to_xmcd_lines

__all__ = [
    "CddbMatch",
    "UNKNOWN_ARTIST",
    "UNKNOWN_TITLE",
    "XmcdRecord",
    "one_line",
    "parse_xmcd_record",
    "split_disc_title",
    "to_xmcd",
    "to_xmcd_lines",
]
