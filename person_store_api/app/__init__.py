"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Configuration, logging, errors and the in‑memory store
live in ``core``; request and response models in ``schemas``; the
validation rules and CRUD logic in ``services``; and the HTTP routes
in ``api``.
"""

from .main import app  # noqa: F401
