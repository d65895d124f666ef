"""
Top‑level package for the PersonStore API.

This file makes ``person_store_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``person_store_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
