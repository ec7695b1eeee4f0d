"""Platform adapters (logging, CDDB transport)."""
