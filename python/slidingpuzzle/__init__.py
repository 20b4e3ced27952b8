"""Sliding puzzle state-space search engine."""
