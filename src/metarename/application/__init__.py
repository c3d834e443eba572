"""Application layer orchestrating features."""
