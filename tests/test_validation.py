"""Unit tests for the person field rules."""

import pytest

from person_store_api.app.services.validation import (
    PERSON_FIELDS,
    VALID,
    validate_person,
)

SSN_MESSAGE = "socialSecurityNumber must be a number and have 9 digits."


class TestValidPayloads:
    def test_complete_payload_is_valid(self, jane):
        result = validate_person(jane)
        assert result.is_valid
        assert result == VALID

    def test_fields_are_in_schema_order(self):
        assert PERSON_FIELDS == (
            "firstName",
            "lastName",
            "dateOfBirth",
            "emailAddress",
            "socialSecurityNumber",
        )

    def test_leap_day_is_a_valid_date(self, jane):
        jane["dateOfBirth"] = "2000-02-29"
        assert validate_person(jane).is_valid

    @pytest.mark.parametrize(
        "value",
        [
            "1990-01-01T00:00:00.000Z",
            "1990-01-01T00:00:00",
            "1990-01-01T08:30:00+02:00",
            "1990-01-01 08:30",
        ],
    )
    def test_iso_datetime_is_a_valid_date(self, jane, value):
        jane["dateOfBirth"] = value
        assert validate_person(jane).is_valid


class TestRequiredFields:
    @pytest.mark.parametrize("field", PERSON_FIELDS)
    def test_missing_field_is_required(self, jane, field):
        del jane[field]
        result = validate_person(jane)
        assert not result.is_valid
        assert result.error.field == field
        assert result.error.message == f'"{field}" is required'

    @pytest.mark.parametrize("blank", [None, ""])
    def test_null_or_empty_counts_as_missing(self, jane, blank):
        jane["lastName"] = blank
        assert validate_person(jane).error.message == '"lastName" is required'

    @pytest.mark.parametrize("candidate", [None, [], "jane", 42])
    def test_non_object_fails_on_first_field(self, candidate):
        result = validate_person(candidate)
        assert result.error.field == "firstName"
        assert result.error.message == '"firstName" is required'


class TestFieldRules:
    @pytest.mark.parametrize("value", ["Jane2", "Mary Ann", "Zoë", 7])
    def test_first_name_letters_only(self, jane, value):
        jane["firstName"] = value
        assert validate_person(jane).error.message == "firstName must only be letters."

    def test_last_name_letters_only(self, jane):
        jane["lastName"] = "O'Neil"
        assert validate_person(jane).error.message == "lastName must only be letters."

    @pytest.mark.parametrize("value", ["1990-02-30", "1990-01-01T25:00:00", "1990-01-01T", "01/01/1990", "yesterday", "19900101", 19900101])
    def test_date_of_birth_must_be_a_date(self, jane, value):
        jane["dateOfBirth"] = value
        result = validate_person(jane)
        assert result.error.field == "dateOfBirth"
        assert result.error.message == "dateOfBirth must be a valid date."

    @pytest.mark.parametrize("value", ["jane", "jane@", "@x.com", "jane@@x.com"])
    def test_email_syntax(self, jane, value):
        jane["emailAddress"] = value
        assert validate_person(jane).error.message == "emailAddress must be a valid email."

    @pytest.mark.parametrize("value", ["12345678", "1234567890", "12345678a", "123-45-678", 123456789])
    def test_ssn_nine_digit_string(self, jane, value):
        jane["socialSecurityNumber"] = value
        result = validate_person(jane)
        assert result.error.field == "socialSecurityNumber"
        assert result.error.message == SSN_MESSAGE

    def test_unknown_key_rejected_after_schema_fields(self, jane):
        jane["nickname"] = "JD"
        assert validate_person(jane).error.message == '"nickname" is not allowed'


class TestRuleOrder:
    def test_first_failure_wins(self, jane):
        jane["firstName"] = "J4ne"
        jane["socialSecurityNumber"] = "1"
        jane["emailAddress"] = "nope"
        assert validate_person(jane).error.field == "firstName"

    def test_schema_errors_before_unknown_keys(self, jane):
        jane["extra"] = True
        jane["emailAddress"] = "nope"
        assert validate_person(jane).error.field == "emailAddress"

    def test_validation_does_not_mutate_input(self, jane):
        before = dict(jane)
        validate_person(jane)
        assert jane == before
