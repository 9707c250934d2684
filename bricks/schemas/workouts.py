from marshmallow import fields, validate

from bricks.models.student_workout import WORKOUT_STATUSES
from bricks.schemas.common import BaseSchema, NaiveDateTime, optional_url

LEVELS = ("beginner", "intermediate", "advanced")


class ExerciseSchema(BaseSchema):
    exercise_name = fields.Str(
        required=True,
        validate=validate.Length(min=2, error="Exercise name must be at least 2 characters"),
        error_messages={"required": "Exercise name is required"},
    )
    video_url = fields.Str(allow_none=True, validate=optional_url)
    muscle_group = fields.Str(allow_none=True)
    equipment = fields.Str(allow_none=True)
    sets = fields.Int(allow_none=True, validate=validate.Range(min=1, error="Sets must be at least 1"))
    reps = fields.Int(allow_none=True, validate=validate.Range(min=1, error="Reps must be at least 1"))
    weight = fields.Float(allow_none=True, validate=validate.Range(min=0, error="Weight must not be negative"))
    time_in_seconds = fields.Int(
        allow_none=True, validate=validate.Range(min=0, error="Time must not be negative")
    )
    rest_time_seconds = fields.Int(
        allow_none=True, validate=validate.Range(min=0, error="Rest time must not be negative")
    )
    observations = fields.Str(allow_none=True)
    order_index = fields.Int(allow_none=True, validate=validate.Range(min=0))


class WorkoutSchema(BaseSchema):
    name = fields.Str(
        required=True,
        validate=validate.Length(min=2, error="Name must be at least 2 characters"),
        error_messages={"required": "Name is required"},
    )
    objective = fields.Str(allow_none=True)
    level = fields.Str(allow_none=True, validate=validate.OneOf(LEVELS, error="Invalid level"))
    description = fields.Str(allow_none=True)
    exercises = fields.List(fields.Nested(ExerciseSchema), load_default=list)


class ExerciseOrderSchema(BaseSchema):
    exercise_ids = fields.List(
        fields.Int(),
        required=True,
        error_messages={"required": "exercise_ids is required"},
    )


class SuggestionRequestSchema(BaseSchema):
    objective = fields.Str(
        required=True,
        validate=validate.Length(min=2, error="Objective is required"),
        error_messages={"required": "Objective is required"},
    )
    level = fields.Str(load_default="beginner", validate=validate.OneOf(LEVELS, error="Invalid level"))
    frequency = fields.Str(load_default="3x per week")
    equipment = fields.List(fields.Str(), load_default=list)
    session_time = fields.Int(load_default=60, validate=validate.Range(min=10, max=240))
    restrictions = fields.Str(load_default=None, allow_none=True)
    include_meal_plan = fields.Bool(load_default=False)
    include_supplements = fields.Bool(load_default=False)


class TrendingQuerySchema(BaseSchema):
    objective = fields.Str(load_default=None)
    level = fields.Str(load_default=None)


class AssignmentSchema(BaseSchema):
    student_id = fields.Int(required=True, error_messages={"required": "student_id is required"})
    workout_id = fields.Int(required=True, error_messages={"required": "workout_id is required"})
    start_date = NaiveDateTime(required=True, error_messages={"required": "start_date is required"})
    end_date = NaiveDateTime(load_default=None, allow_none=True)


class CompleteAssignmentSchema(BaseSchema):
    feedback = fields.Str(load_default=None, allow_none=True)


class AssignmentStatusSchema(BaseSchema):
    status = fields.Str(
        required=True,
        validate=validate.OneOf(WORKOUT_STATUSES, error="Invalid status"),
        error_messages={"required": "Status is required"},
    )
