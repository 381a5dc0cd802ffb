import calendar
import re
from datetime import date

from marshmallow import fields, validate, ValidationError

from kmdb.errors import MalformedDate
from kmdb.models import MAX_INTEGER, MIN_INTEGER

ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

# parses yyyy-MM-dd and reports which part of the date is wrong
def parse_iso_date(value, field_name="birthDate"):
    match = ISO_DATE.match(value) if isinstance(value, str) else None
    if match is None:
        raise MalformedDate(
            f"Invalid {field_name} format: {value} Correct format is yyyy-MM-dd"
        )

    year, month, day = (int(part) for part in match.groups())
    if year < 1:
        raise MalformedDate(
            f"Invalid {field_name} format: {value} Correct format is yyyy-MM-dd"
        )
    if not 1 <= month <= 12:
        raise MalformedDate(
            f"Invalid month in {field_name}: {value} Valid month dates are (01-12)"
        )
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        raise MalformedDate(
            f"Invalid day in {field_name}: {value} Valid day dates are (01-28/31)"
        )
    return date(year, month, day)

# ensures the date is not in the future
def validate_past_or_present(value):
    if value > date.today():
        raise ValidationError("Birth date must be in the past or present.")

class IsoDate(fields.Field):
    """yyyy-MM-dd date whose parse errors surface as MalformedDate."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return value.isoformat()

    def _deserialize(self, value, attr, data, **kwargs):
        return parse_iso_date(value, self.data_key or attr)

def is_blank(value):
    return value is None or not value.strip()

# rejects None, empty and whitespace-only strings
def not_blank(message):
    def validator(value):
        if is_blank(value):
            raise ValidationError(message)
    return validator

# keeps client integers within what the database column can hold
def database_integer(name):
    return validate.Range(min=MIN_INTEGER, max=MAX_INTEGER, error=f"{name} is out of range")
