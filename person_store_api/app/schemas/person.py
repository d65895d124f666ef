"""
Pydantic model for person records.

Clients exchange camelCase JSON (``firstName``, ``socialSecurityNumber``
and so on) while Python code uses snake_case attributes; the mapping is
done with field aliases.  Incoming bodies are checked by
``services.validation`` before a ``Person`` is built, so the model
itself performs no further checks.  ``dateOfBirth`` is kept as the
client sent it, date or date and time, so a record reads back exactly
as it was written.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


# Fields a client may change with PUT.  The SSN is the identifier and
# never changes after creation.
MUTABLE_FIELDS = ("first_name", "last_name", "date_of_birth", "email_address")


class Person(BaseModel):
    """A person record as stored and as returned by the API."""

    first_name: str = Field(..., alias="firstName", examples=["Jane"])
    last_name: str = Field(..., alias="lastName", examples=["Doe"])
    date_of_birth: str = Field(
        ...,
        alias="dateOfBirth",
        examples=["1990-01-01", "1990-01-01T00:00:00.000Z"],
        description="ISO-8601 date or date and time",
    )
    email_address: str = Field(..., alias="emailAddress", examples=["jane@example.com"])
    social_security_number: str = Field(
        ...,
        alias="socialSecurityNumber",
        examples=["123456789"],
        description="Nine digit identifier, unique across the store",
    )

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Person":
        """Build a record from an already validated request body."""
        return cls.model_validate(payload)

    def to_payload(self) -> Dict[str, Any]:
        """Return the record in its JSON wire form."""
        return self.model_dump(mode="json", by_alias=True)
