"""
Pydantic schema definitions for API payloads.

The service exposes a single resource, the person record, defined in
``schemas.person``.
"""
