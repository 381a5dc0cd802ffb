from datetime import date, timedelta

import pytest
from marshmallow import ValidationError

from kmdb.errors import ErrorKind, MalformedDate
from kmdb.schemas.fields import database_integer, is_blank, parse_iso_date, validate_past_or_present


def test_parses_iso_dates():
    assert parse_iso_date("1980-05-01") == date(1980, 5, 1)
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize("value, message", [
    ("1980-13-01", "Invalid month in birthDate: 1980-13-01 Valid month dates are (01-12)"),
    ("1980-00-10", "Invalid month in birthDate: 1980-00-10 Valid month dates are (01-12)"),
    ("1981-02-29", "Invalid day in birthDate: 1981-02-29 Valid day dates are (01-28/31)"),
    ("1980-04-31", "Invalid day in birthDate: 1980-04-31 Valid day dates are (01-28/31)"),
    ("01/05/1980", "Invalid birthDate format: 01/05/1980 Correct format is yyyy-MM-dd"),
    ("1980-5-1", "Invalid birthDate format: 1980-5-1 Correct format is yyyy-MM-dd"),
])
def test_reports_which_part_is_wrong(value, message):
    with pytest.raises(MalformedDate) as excinfo:
        parse_iso_date(value)
    assert str(excinfo.value) == message
    assert excinfo.value.kind is ErrorKind.MALFORMED_DATE


def test_non_string_is_a_format_error():
    with pytest.raises(MalformedDate, match="Correct format is yyyy-MM-dd"):
        parse_iso_date(19800501)


def test_birth_date_must_not_be_in_the_future():
    validate_past_or_present(date.today())
    with pytest.raises(ValidationError):
        validate_past_or_present(date.today() + timedelta(days=1))


@pytest.mark.parametrize("value, blank", [(None, True), ("", True), (" \t", True), ("Drama", False)])
def test_is_blank(value, blank):
    assert is_blank(value) is blank


def test_database_integer_bounds():
    check = database_integer("Duration")

    assert check(2**63 - 1) == 2**63 - 1
    with pytest.raises(ValidationError, match="Duration is out of range"):
        check(2**63)
