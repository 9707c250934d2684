from marshmallow import fields, post_load, validate

from bricks.schemas.common import BaseSchema

USER_TYPES = ("personal", "student")
PASSWORD_RULE = validate.Length(min=6, error="Password must be at least 6 characters")


def _normalize_email(data):
    if data.get("email"):
        data["email"] = data["email"].strip().lower()
    return data


class RegisterSchema(BaseSchema):
    name = fields.Str(
        required=True,
        validate=validate.Length(min=2, error="Name must be at least 2 characters"),
        error_messages={"required": "Name is required"},
    )
    email = fields.Email(
        required=True,
        error_messages={"required": "Email is required", "invalid": "Invalid email"},
    )
    password = fields.Str(
        required=True,
        validate=PASSWORD_RULE,
        error_messages={"required": "Password is required"},
    )
    user_type = fields.Str(
        required=True,
        validate=validate.OneOf(USER_TYPES, error="User type must be personal or student"),
        error_messages={"required": "User type is required"},
    )

    @post_load
    def normalize(self, data, **kwargs):
        data["name"] = data["name"].strip()
        return _normalize_email(data)


class LoginSchema(BaseSchema):
    email = fields.Email(
        required=True,
        error_messages={"required": "Email is required", "invalid": "Invalid email"},
    )
    password = fields.Str(
        required=True,
        validate=validate.Length(min=1, error="Password is required"),
        error_messages={"required": "Password is required"},
    )

    @post_load
    def normalize(self, data, **kwargs):
        return _normalize_email(data)


class ChangePasswordSchema(BaseSchema):
    current_password = fields.Str(load_default=None, allow_none=True)
    new_password = fields.Str(
        required=True,
        validate=PASSWORD_RULE,
        error_messages={"required": "New password is required"},
    )


class UserUpdateSchema(BaseSchema):
    name = fields.Str(validate=validate.Length(min=2, error="Name must be at least 2 characters"))
    photo_url = fields.Str(allow_none=True)
