"""
Request dependencies shared by the endpoint modules.

``get_person_service`` hands each request the service stored on
``app.state`` by ``create_app``.  ``read_json_body`` parses the raw
body itself instead of declaring a Pydantic body model, so that field
problems are reported by ``services.validation`` with its own messages
and a body that is not JSON at all is rejected before the endpoint
runs.
"""

import json
from typing import Any

from fastapi import Request

from person_store_api.app.core.exceptions import MalformedRequestError
from person_store_api.app.services.person_service import PersonService


def get_person_service(request: Request) -> PersonService:
    return request.app.state.person_service


async def read_json_body(request: Request) -> Any:
    """Return the decoded JSON body or raise ``MalformedRequestError``."""
    body = await request.body()
    try:
        return json.loads(body)
    except ValueError as exc:
        # json.JSONDecodeError and UnicodeDecodeError both land here.
        raise MalformedRequestError() from exc
