from marshmallow import ValidationError, fields, validate, validates_schema

from bricks.models.appointment import APPOINTMENT_STATUSES
from bricks.schemas.common import BaseSchema, NaiveDateTime


class TimeRangeMixin:
    @validates_schema
    def check_range(self, data, **kwargs):
        start, end = data.get("start_time"), data.get("end_time")
        if start and end and end <= start:
            raise ValidationError("End time must be after start time", "end_time")


class AvailabilitySlotSchema(TimeRangeMixin, BaseSchema):
    start_time = NaiveDateTime(required=True, error_messages={"required": "start_time is required"})
    end_time = NaiveDateTime(required=True, error_messages={"required": "end_time is required"})
    is_recurring = fields.Bool(load_default=False)


class AppointmentSchema(TimeRangeMixin, BaseSchema):
    personal_id = fields.Int(required=True, error_messages={"required": "personal_id is required"})
    slot_id = fields.Int(load_default=None, allow_none=True)
    start_time = NaiveDateTime(required=True, error_messages={"required": "start_time is required"})
    end_time = NaiveDateTime(required=True, error_messages={"required": "end_time is required"})
    notes = fields.Str(load_default=None, allow_none=True)


class AppointmentStatusSchema(BaseSchema):
    status = fields.Str(
        required=True,
        validate=validate.OneOf(APPOINTMENT_STATUSES, error="Invalid status"),
        error_messages={"required": "Status is required"},
    )


class PersonalEventSchema(TimeRangeMixin, BaseSchema):
    title = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=150, error="Title is required"),
        error_messages={"required": "Title is required"},
    )
    description = fields.Str(allow_none=True)
    start_time = NaiveDateTime(required=True, error_messages={"required": "start_time is required"})
    end_time = NaiveDateTime(required=True, error_messages={"required": "end_time is required"})
    color = fields.Str(allow_none=True)


class CalendarQuerySchema(BaseSchema):
    view = fields.Str(
        load_default="week",
        validate=validate.OneOf(("week", "day"), error="View must be week or day"),
    )
    date = fields.Date(load_default=None, error_messages={"invalid": "Invalid date"})
    start_hour = fields.Int(load_default=None, validate=validate.Range(min=0, max=23))
    end_hour = fields.Int(load_default=None, validate=validate.Range(min=1, max=24))

    @validates_schema
    def check_hours(self, data, **kwargs):
        start, end = data.get("start_hour"), data.get("end_hour")
        if start is not None and end is not None and end <= start:
            raise ValidationError("end_hour must be after start_hour", "end_hour")
