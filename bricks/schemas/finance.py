from marshmallow import ValidationError, fields, validate, validates_schema

from bricks.models.student_plan import PLAN_TYPES
from bricks.schemas.common import BaseSchema


class FinancialRecordSchema(BaseSchema):
    type = fields.Str(
        required=True,
        validate=validate.OneOf(("income", "expense"), error="Type must be income or expense"),
        error_messages={"required": "Type is required"},
    )
    category = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=50, error="Category is required"),
        error_messages={"required": "Category is required"},
    )
    description = fields.Str(allow_none=True)
    amount = fields.Float(
        required=True,
        validate=validate.Range(min=0, min_inclusive=False, error="Amount must be greater than zero"),
        error_messages={"required": "Amount is required"},
    )
    date = fields.Date(required=True, error_messages={"required": "Date is required"})
    student_id = fields.Int(allow_none=True)


class FinancialQuerySchema(BaseSchema):
    start_date = fields.Date(load_default=None)
    end_date = fields.Date(load_default=None)
    type = fields.Str(load_default=None, validate=validate.OneOf(("income", "expense")))
    category = fields.Str(load_default=None)


class StudentPlanSchema(BaseSchema):
    student_id = fields.Int(required=True, error_messages={"required": "student_id is required"})
    plan_type = fields.Str(
        required=True,
        validate=validate.OneOf(PLAN_TYPES, error="Invalid plan type"),
        error_messages={"required": "plan_type is required"},
    )
    status = fields.Str(
        load_default="active",
        validate=validate.OneOf(("active", "inactive", "expired"), error="Invalid plan status"),
    )
    start_date = fields.Date(required=True, error_messages={"required": "start_date is required"})
    end_date = fields.Date(load_default=None, allow_none=True)
    price = fields.Float(load_default=None, allow_none=True, validate=validate.Range(min=0))

    @validates_schema
    def check_dates(self, data, **kwargs):
        start, end = data.get("start_date"), data.get("end_date")
        if start and end and end < start:
            raise ValidationError("end_date must not be before start_date", "end_date")


class FinancialExportSchema(FinancialQuerySchema):
    format = fields.Str(
        load_default="pdf",
        validate=validate.OneOf(("pdf", "excel", "csv"), error="Invalid format"),
    )
