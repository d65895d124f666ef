"""
Field rules for person payloads.

Validation is an explicit, ordered list of ``FieldRule`` objects, one
per schema field.  ``validate_person`` walks the list and stops at the
first failure, so a client always sees a single message naming the
first offending field in schema order:

1. ``firstName``: letters only
2. ``lastName``: letters only
3. ``dateOfBirth``: an ISO‑8601 date (``YYYY-MM-DD``) or date and time
4. ``emailAddress``: syntactically valid email address
5. ``socialSecurityNumber``: exactly nine digits, as a string

A field that is absent, ``null`` or an empty string fails with
``"<field>" is required``.  Keys outside the schema are rejected once
all five rules pass.

The function is pure: it never looks at stored records.  Checking for
duplicate SSNs is the job of ``PersonService``.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Tuple

from email_validator import EmailNotValidError, validate_email

_LETTERS_RE = re.compile(r"[A-Za-z]*")
_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}(?:[T ].+)?")
_SSN_RE = re.compile(r"[0-9]{9}")


@dataclass(frozen=True)
class FieldError:
    """The first rule a payload broke."""

    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    error: Optional[FieldError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


VALID = ValidationResult()


@dataclass(frozen=True)
class FieldRule:
    field: str
    check: Callable[[Any], bool]
    message: str


def _is_letters(value: Any) -> bool:
    return isinstance(value, str) and _LETTERS_RE.fullmatch(value) is not None


def _is_date(value: Any) -> bool:
    if not isinstance(value, str) or _ISO_DATE_RE.fullmatch(value) is None:
        return False
    # fromisoformat only learned the "Z" suffix in Python 3.11.
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


def _is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_ssn(value: Any) -> bool:
    return isinstance(value, str) and _SSN_RE.fullmatch(value) is not None


PERSON_RULES: Tuple[FieldRule, ...] = (
    FieldRule("firstName", _is_letters, "firstName must only be letters."),
    FieldRule("lastName", _is_letters, "lastName must only be letters."),
    FieldRule("dateOfBirth", _is_date, "dateOfBirth must be a valid date."),
    FieldRule("emailAddress", _is_email, "emailAddress must be a valid email."),
    FieldRule(
        "socialSecurityNumber",
        _is_ssn,
        "socialSecurityNumber must be a number and have 9 digits.",
    ),
)

PERSON_FIELDS = tuple(rule.field for rule in PERSON_RULES)


def required_message(field: str) -> str:
    return f'"{field}" is required'


def not_allowed_message(field: str) -> str:
    return f'"{field}" is not allowed'


def validate_person(candidate: Any) -> ValidationResult:
    """Check ``candidate`` against ``PERSON_RULES``.

    ``candidate`` is whatever the client sent.  Anything that is not a
    JSON object is treated as an object with no fields, so it fails on
    the first required field.
    """
    payload: Mapping[str, Any] = candidate if isinstance(candidate, Mapping) else {}

    for rule in PERSON_RULES:
        value = payload.get(rule.field)
        if value is None or value == "":
            return ValidationResult(FieldError(rule.field, required_message(rule.field)))
        if not rule.check(value):
            return ValidationResult(FieldError(rule.field, rule.message))

    for key in payload:
        if key not in PERSON_FIELDS:
            return ValidationResult(FieldError(str(key), not_allowed_message(str(key))))

    return VALID
