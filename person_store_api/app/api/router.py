"""
Top‑level API router.

Aggregates the domain routers under their path prefixes.  The service
has a single resource, mounted at ``/person``.
"""

from fastapi import APIRouter

from .endpoints import persons

router = APIRouter()

router.include_router(persons.router, prefix="/person", tags=["person"])
