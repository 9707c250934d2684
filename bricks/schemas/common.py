from datetime import timezone

from marshmallow import EXCLUDE, fields, validate

from bricks.extensions import ma


class NaiveDateTime(fields.DateTime):
    """ISO-8601 datetime stored as naive UTC; offsets are converted first."""

    def _deserialize(self, value, attr, data, **kwargs):
        result = super()._deserialize(value, attr, data, **kwargs)
        if result.tzinfo is not None:
            result = result.astimezone(timezone.utc).replace(tzinfo=None)
        return result


class BaseSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE


def first_error(messages):
    """First human readable message of a marshmallow error tree."""
    if isinstance(messages, dict):
        for value in messages.values():
            found = first_error(value)
            if found:
                return found
        return None
    if isinstance(messages, (list, tuple)):
        for value in messages:
            found = first_error(value)
            if found:
                return found
        return None
    return str(messages)


def optional_url(value):
    """Empty string is allowed, anything else must be a URL."""
    if value in (None, ""):
        return True
    return validate.URL(error="Invalid URL")(value)


class DateRangeQuerySchema(BaseSchema):
    start_date = NaiveDateTime(load_default=None)
    end_date = NaiveDateTime(load_default=None)
