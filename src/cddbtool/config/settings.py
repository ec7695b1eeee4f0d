"""Where: src/cddbtool/config/settings.py
What: Built-in defaults for the CDDB client and CLI.
Why: Give every layer the same fallback values when config leaves them unset.
"""

from __future__ import annotations

from typing import Final

from cddbtool import __version__

APP_NAME: Final[str] = "cddbtool"
APP_VERSION: Final[str] = __version__

# Public gnudb mirror of the FreeDB CGI interface.
DEFAULT_CGI_URL: Final[str] = "http://gnudb.gnudb.org/~cddb/cddb.cgi"

DEFAULT_PROTO_LEVEL: Final[int] = 6

# Japanese FreeDB entries are most often EUC-JP; shift_jis and utf-8 are
# the usual alternatives.
DEFAULT_RESPONSE_ENCODING: Final[str] = "euc-jp"

FALLBACK_ENCODING: Final[str] = "utf-8"

# (connect, read) seconds passed to requests.
HTTP_TIMEOUT: Final[tuple[float, float]] = (5.0, 15.0)


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_CGI_URL",
    "DEFAULT_PROTO_LEVEL",
    "DEFAULT_RESPONSE_ENCODING",
    "FALLBACK_ENCODING",
    "HTTP_TIMEOUT",
]
