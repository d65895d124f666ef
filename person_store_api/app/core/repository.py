"""
In‑memory storage for person records.

``PersonRepository`` owns a plain list of ``Person`` objects.  One
instance is created per application by ``main.create_app`` and shared
with the service layer through ``app.state``; there is no module level
store, so tests can run several isolated applications side by side.

The repository does no validation and no uniqueness checks; callers
(``PersonService``) are responsible for both.  Nothing is persisted:
the records disappear when the process exits.
"""

import logging
from typing import Iterable, List, Optional

from person_store_api.app.schemas.person import MUTABLE_FIELDS, Person

logger = logging.getLogger(__name__)


class PersonRepository:
    """Ordered, in‑memory collection of person records."""

    def __init__(self, people: Optional[Iterable[Person]] = None) -> None:
        self._people: List[Person] = list(people or [])

    def __len__(self) -> int:
        return len(self._people)

    def find_by_ssn(self, ssn: str) -> Optional[Person]:
        """Return the record whose SSN equals ``ssn`` exactly, or ``None``."""
        for person in self._people:
            if person.social_security_number == ssn:
                return person
        return None

    def list_all(self) -> List[Person]:
        """Return all records in insertion order.

        A copy of the internal list is returned so callers cannot
        reorder or drop records behind the repository's back.
        """
        return list(self._people)

    def insert(self, person: Person) -> Person:
        self._people.append(person)
        logger.debug("Stored person %s (%d records)", person.social_security_number, len(self._people))
        return person

    def update_fields(self, existing: Person, new_fields: Person) -> Person:
        """Copy every field except the SSN from ``new_fields`` onto ``existing``.

        The record is modified in place and keeps its position in the
        collection.
        """
        for name in MUTABLE_FIELDS:
            setattr(existing, name, getattr(new_fields, name))
        return existing

    def remove(self, person: Person) -> Person:
        # Match by identity, not field equality.
        for index, stored in enumerate(self._people):
            if stored is person:
                del self._people[index]
                break
        else:
            raise ValueError(f"Person {person.social_security_number} is not stored")
        logger.debug("Removed person %s (%d records)", person.social_security_number, len(self._people))
        return person


def sample_person() -> Person:
    """Record used to pre‑seed the store when ``SEED_SAMPLE_PERSON`` is set."""
    return Person(
        first_name="John",
        last_name="Smith",
        date_of_birth="1985-06-15",
        email_address="john.smith@example.com",
        social_security_number="111223333",
    )
