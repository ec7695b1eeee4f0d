"""Feature packages for cddbtool."""
