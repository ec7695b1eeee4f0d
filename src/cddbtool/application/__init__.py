"""Application services orchestrating features and platform adapters."""
