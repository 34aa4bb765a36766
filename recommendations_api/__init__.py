"""
Top‑level package for the Recommendations API.

The HTTP service lives under ``app``; ``client`` holds a small
``requests`` based client for talking to a running instance.
"""

__all__ = []
