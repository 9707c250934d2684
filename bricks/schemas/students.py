from marshmallow import fields, post_load, validate

from bricks.schemas.auth import PASSWORD_RULE
from bricks.schemas.common import BaseSchema

STUDENT_STATUSES = ("training", "single_consultation")


class StudentDetailsSchema(BaseSchema):
    goals = fields.Str(allow_none=True)
    notes = fields.Str(allow_none=True)
    phone = fields.Str(allow_none=True)
    birth_date = fields.Date(allow_none=True, error_messages={"invalid": "Invalid birth date"})
    gender = fields.Str(allow_none=True)
    city = fields.Str(allow_none=True)
    state = fields.Str(allow_none=True)
    student_status = fields.Str(
        allow_none=True,
        validate=validate.OneOf(STUDENT_STATUSES, error="Invalid student status"),
    )


class StudentCreateSchema(StudentDetailsSchema):
    name = fields.Str(
        required=True,
        validate=validate.Length(min=2, error="Name must be at least 2 characters"),
        error_messages={"required": "Name is required"},
    )
    email = fields.Email(
        required=True,
        error_messages={"required": "Email is required", "invalid": "Invalid email"},
    )

    @post_load
    def normalize(self, data, **kwargs):
        data["email"] = data["email"].strip().lower()
        return data


class StudentSelfRegisterSchema(StudentCreateSchema):
    password = fields.Str(
        required=True,
        validate=PASSWORD_RULE,
        error_messages={"required": "Password is required"},
    )


class StudentUpdateSchema(StudentDetailsSchema):
    personal_id = fields.Int(allow_none=True)
