"""Shared building blocks used across features."""
