"""Application service layer."""

from .lookup_service import LookupOutcome, LookupRequest, LookupResult, LookupService

__all__ = ["LookupOutcome", "LookupRequest", "LookupResult", "LookupService"]
