"""User interfaces for cddbtool."""
