"""Where: src/cddbtool/shared/errors.py
What: Exception taxonomy for validation, transport and export failures.
Why: Let callers separate fatal errors from expected protocol soft misses.
"""

from __future__ import annotations


class CddbError(Exception):
    """Base exception for cddbtool errors."""


class InvalidTocError(CddbError, ValueError):
    """Raised when a table of contents cannot describe a disc."""


class IdentityValidationError(CddbError, ValueError):
    """Raised when the hello identity or server URL is incomplete."""


class CddbTransportError(CddbError):
    """Raised when the HTTP exchange with the CDDB server fails."""

    def __init__(self, message: str, *, url: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url: str = url
        self.status: int | None = status


class ExportError(CddbError):
    """Raised when an export cannot be rendered or written."""


__all__ = [
    "CddbError",
    "CddbTransportError",
    "ExportError",
    "IdentityValidationError",
    "InvalidTocError",
]
