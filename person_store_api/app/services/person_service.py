"""
Business logic for person records.

``PersonService`` implements the CRUD state machine on top of a
``PersonRepository``.  Each operation checks its preconditions in a
fixed order and raises one of the errors from ``core.exceptions`` on
the first failure:

* create: body passes validation, then SSN not yet registered
* update: record exists, body passes validation, then the body SSN
  matches the stored SSN
* get / delete: record exists

Lookup‑then‑mutate sequences run under a lock so the SSN uniqueness
and existence checks still hold if handlers ever run in a thread pool.
"""

import logging
import threading
from typing import Any, List

from person_store_api.app.core.exceptions import ConflictError, NotFoundError, ValidationError
from person_store_api.app.core.repository import PersonRepository
from person_store_api.app.schemas.person import Person
from person_store_api.app.services.validation import validate_person

DUPLICATE_SSN_MESSAGE = "A person with the given SSN is already registered"
SSN_CHANGE_MESSAGE = "Cannot update SSN"

logger = logging.getLogger(__name__)


class PersonService:
    """Service class for managing person records."""

    def __init__(self, repository: PersonRepository) -> None:
        self.repository = repository
        self._lock = threading.Lock()

    def list_people(self) -> List[Person]:
        """Return every record in insertion order; possibly an empty list."""
        return self.repository.list_all()

    def get_person(self, ssn: str) -> Person:
        person = self.repository.find_by_ssn(ssn)
        if person is None:
            raise NotFoundError()
        return person

    def create_person(self, payload: Any) -> Person:
        """Validate ``payload`` and store it as a new record."""
        self._ensure_valid(payload)
        with self._lock:
            if self.repository.find_by_ssn(payload["socialSecurityNumber"]) is not None:
                logger.warning("Rejected duplicate SSN on create")
                raise ConflictError(DUPLICATE_SSN_MESSAGE)
            person = self.repository.insert(Person.from_payload(payload))
        logger.info("Created person record (%d stored)", len(self.repository))
        return person

    def update_person(self, ssn: str, payload: Any) -> Person:
        """Overwrite every field but the SSN of the record identified by ``ssn``.

        The body must carry the full record, SSN included, and that SSN
        must equal the stored one.
        """
        with self._lock:
            existing = self.get_person(ssn)
            self._ensure_valid(payload)
            if payload["socialSecurityNumber"] != existing.social_security_number:
                logger.warning("Rejected SSN change on update")
                raise ConflictError(SSN_CHANGE_MESSAGE)
            person = self.repository.update_fields(existing, Person.from_payload(payload))
        logger.info("Updated person record")
        return person

    def delete_person(self, ssn: str) -> Person:
        """Remove the record identified by ``ssn`` and return its last state."""
        with self._lock:
            person = self.get_person(ssn)
            self.repository.remove(person)
        logger.info("Deleted person record (%d stored)", len(self.repository))
        return person

    @staticmethod
    def _ensure_valid(payload: Any) -> None:
        result = validate_person(payload)
        if not result.is_valid:
            logger.warning("Rejected person payload: %s", result.error.message)
            raise ValidationError(result.error.message, field=result.error.field)
