"""cddbtool: FreeDB/CDDB disc lookup client."""

__version__ = "0.1.0"
