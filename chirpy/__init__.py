"""Chirpy - a small chirp moderation web service."""

__version__ = "0.1.0"
