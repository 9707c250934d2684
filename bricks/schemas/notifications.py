import re
from datetime import datetime

from marshmallow import ValidationError, fields, validate, validates_schema

from bricks.models.notification import CHANNELS, FREQUENCIES, RECIPIENT_GROUPS
from bricks.schemas.common import BaseSchema, NaiveDateTime

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class NotificationSchema(BaseSchema):
    title = fields.Str(
        required=True,
        validate=validate.Length(min=2, error="Title must be at least 2 characters"),
        error_messages={"required": "Title is required"},
    )
    message = fields.Str(
        required=True,
        validate=validate.Length(min=5, error="Message must be at least 5 characters"),
        error_messages={"required": "Message is required"},
    )
    recipient_type = fields.Str(
        required=True,
        validate=validate.OneOf(("student", "group"), error="Recipient type must be student or group"),
        error_messages={"required": "Recipient type is required"},
    )
    recipient_id = fields.Int(load_default=None, allow_none=True)
    recipient_group = fields.Str(
        load_default=None,
        allow_none=True,
        validate=validate.OneOf(RECIPIENT_GROUPS, error="Invalid recipient group"),
    )
    channel = fields.Str(
        load_default="in_app",
        validate=validate.OneOf(CHANNELS, error="Invalid channel"),
    )

    @validates_schema
    def check_recipient(self, data, **kwargs):
        if data.get("recipient_type") == "student" and not data.get("recipient_id"):
            raise ValidationError("recipient_id is required for student notifications", "recipient_id")
        if data.get("recipient_type") == "group" and not data.get("recipient_group"):
            raise ValidationError("recipient_group is required for group notifications", "recipient_group")


class ScheduledNotificationSchema(NotificationSchema):
    scheduled_at = NaiveDateTime(required=True, error_messages={"required": "scheduled_at is required"})

    @validates_schema
    def check_future(self, data, **kwargs):
        scheduled_at = data.get("scheduled_at")
        if scheduled_at and scheduled_at <= datetime.utcnow():
            raise ValidationError("scheduled_at must be in the future", "scheduled_at")


class RecurringNotificationSchema(NotificationSchema):
    recurring_frequency = fields.Str(
        required=True,
        validate=validate.OneOf(FREQUENCIES, error="Invalid frequency"),
        error_messages={"required": "recurring_frequency is required"},
    )
    recurring_time = fields.Str(
        required=True,
        validate=validate.Regexp(TIME_PATTERN, error="recurring_time must be HH:MM"),
        error_messages={"required": "recurring_time is required"},
    )
    recurring_days = fields.List(
        fields.Int(validate=validate.Range(min=0, max=6, error="Days go from 0 (Sunday) to 6")),
        load_default=list,
    )

    @validates_schema
    def check_days(self, data, **kwargs):
        if data.get("recurring_frequency") == "weekly" and not data.get("recurring_days"):
            raise ValidationError("Weekly notifications need at least one day", "recurring_days")
