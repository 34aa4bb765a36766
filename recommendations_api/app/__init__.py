"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, database, errors),
``schemas`` (pydantic payloads), ``repositories`` (SQL),
``services`` (business rules) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
