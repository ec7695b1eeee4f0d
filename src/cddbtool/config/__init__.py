"""Configuration package for cddbtool."""
