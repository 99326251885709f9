"""Presentation layer: wire schemas for errors and accounts."""
