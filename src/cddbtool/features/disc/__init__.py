"""Public surface for the disc feature."""

from .domain.disc_id import compute_disc_id, digit_sum
from .domain.toc import FRAMES_PER_SECOND, TableOfContents
from .usecases.toc_loader import SAMPLE_TOC, load_toc_json, toc_from_mapping

__all__ = [
    "FRAMES_PER_SECOND",
    "SAMPLE_TOC",
    "TableOfContents",
    "compute_disc_id",
    "digit_sum",
    "load_toc_json",
    "toc_from_mapping",
]
