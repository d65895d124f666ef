"""
API package containing the HTTP routes.

``router`` aggregates the endpoint modules under ``endpoints`` and is
included by ``main.create_app``.  Shared request dependencies live in
``dependencies``.
"""
