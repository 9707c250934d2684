from marshmallow import ValidationError, fields, validate, validates_schema

from bricks.models.quote_request import QUOTE_STATUSES
from bricks.schemas.common import BaseSchema


class PersonalProfileUpdateSchema(BaseSchema):
    bio = fields.Str(allow_none=True)
    specialties = fields.List(fields.Str(), allow_none=True)
    city = fields.Str(allow_none=True)
    neighborhood = fields.Str(allow_none=True)
    average_price = fields.Float(
        allow_none=True, validate=validate.Range(min=0, error="Price must not be negative")
    )
    cref = fields.Str(allow_none=True)


class ReviewSchema(BaseSchema):
    rating = fields.Int(
        required=True,
        validate=validate.Range(min=1, max=5, error="Rating must be between 1 and 5"),
        error_messages={"required": "Rating is required"},
    )
    comment = fields.Str(load_default=None, allow_none=True)


class QuoteRequestSchema(BaseSchema):
    name = fields.Str(
        required=True,
        validate=validate.Length(min=2, error="Name must be at least 2 characters"),
        error_messages={"required": "Name is required"},
    )
    email = fields.Email(
        required=True,
        error_messages={"required": "Email is required", "invalid": "Invalid email"},
    )
    phone = fields.Str(load_default=None, allow_none=True)
    message = fields.Str(load_default=None, allow_none=True)


class QuoteStatusSchema(BaseSchema):
    status = fields.Str(
        required=True,
        validate=validate.OneOf(QUOTE_STATUSES, error="Invalid status"),
    )


class ServiceSchema(BaseSchema):
    name = fields.Str(
        required=True,
        validate=validate.Length(min=2, error="Name must be at least 2 characters"),
    )
    description = fields.Str(allow_none=True)
    price = fields.Float(allow_none=True, validate=validate.Range(min=0, error="Price must not be negative"))
    duration_minutes = fields.Int(
        allow_none=True, validate=validate.Range(min=1, error="Duration must be positive")
    )


class ExperienceSchema(BaseSchema):
    title = fields.Str(
        required=True,
        validate=validate.Length(min=2, error="Title must be at least 2 characters"),
    )
    company = fields.Str(allow_none=True)
    start_year = fields.Int(allow_none=True, validate=validate.Range(min=1900, max=2100))
    end_year = fields.Int(allow_none=True, validate=validate.Range(min=1900, max=2100))
    description = fields.Str(allow_none=True)

    @validates_schema
    def check_years(self, data, **kwargs):
        start, end = data.get("start_year"), data.get("end_year")
        if start and end and end < start:
            raise ValidationError("End year must not be before start year", "end_year")


class GalleryItemSchema(BaseSchema):
    image_url = fields.Url(
        required=True,
        error_messages={"required": "Image URL is required", "invalid": "Invalid URL"},
    )
    caption = fields.Str(load_default=None, allow_none=True)
    order_index = fields.Int(load_default=None, allow_none=True)


class PersonalSearchSchema(BaseSchema):
    specialty = fields.Str(load_default=None)
    city = fields.Str(load_default=None)
    search = fields.Str(load_default=None)
