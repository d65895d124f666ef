"""
Person endpoints.

These routes expose CRUD operations for person records keyed by social
security number.  Handlers delegate to ``PersonService`` and let its
``PersonStoreError`` exceptions propagate to the handler registered in
``main.create_app``, which answers with the matching status code and a
plain‑text message.  Write endpoints additionally turn any unexpected
exception into an ``InternalError`` so clients always get a 500 with a
generic body.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, status

from person_store_api.app.api.dependencies import get_person_service, read_json_body
from person_store_api.app.core.exceptions import InternalError, PersonStoreError
from person_store_api.app.schemas.person import Person
from person_store_api.app.services.person_service import PersonService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Person])
async def list_people(service: PersonService = Depends(get_person_service)) -> List[Person]:
    """Return all stored people in insertion order.

    An empty store yields ``200`` with an empty list, not ``404``.
    """
    return service.list_people()


@router.get("/{ssn}", response_model=Person)
async def get_person(ssn: str, service: PersonService = Depends(get_person_service)) -> Person:
    """Retrieve a single person by SSN.  Raises 404 if none matches."""
    return service.get_person(ssn)


@router.post("", response_model=Person, status_code=status.HTTP_201_CREATED)
async def create_person(
    payload: Any = Depends(read_json_body),
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Register a new person.

    The body must contain every person field.  Returns 400 with the
    first validation message, or when the SSN is already registered.
    """
    try:
        return service.create_person(payload)
    except PersonStoreError:
        raise
    except Exception as exc:
        logger.exception("Unexpected error while creating a person")
        raise InternalError() from exc


@router.put("/{ssn}", response_model=Person)
async def update_person(
    ssn: str,
    payload: Any = Depends(read_json_body),
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Replace every field but the SSN of an existing person.

    Returns 404 for an unknown SSN, 400 for an invalid body and 400
    when the body's SSN differs from the one in the path.
    """
    try:
        return service.update_person(ssn, payload)
    except PersonStoreError:
        raise
    except Exception as exc:
        logger.exception("Unexpected error while updating person")
        raise InternalError() from exc


@router.delete("/{ssn}", response_model=Person)
async def delete_person(ssn: str, service: PersonService = Depends(get_person_service)) -> Person:
    """Delete a person and return the record as it was before removal."""
    return service.delete_person(ssn)
