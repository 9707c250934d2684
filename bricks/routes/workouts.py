from flask import Blueprint, jsonify, request

from bricks.extensions import db
from bricks.models import StudentWorkout, Workout, WorkoutExercise
from bricks.schemas import (
    ExerciseOrderSchema, ExerciseSchema, SuggestionRequestSchema, TrendingQuerySchema, WorkoutSchema,
)
from bricks.services import catalog
from bricks.services.suggestions import suggest_workout
from bricks.utils.decorators import login_required, personal_required

workout_bp = Blueprint("workout", __name__)

WORKOUT_FIELDS = ("name", "objective", "level", "description")


def _payload():
    return request.get_json(silent=True) or {}


def _owned_workout(workout_id, current_user):
    """(workout, None) for the owner, (None, error_response) otherwise."""
    workout = db.session.get(Workout, workout_id)
    if not workout:
        return None, (jsonify({"msg": "Workout not found"}), 404)
    if not current_user.is_personal or workout.personal_id != current_user.personal_profile.id:
        return None, (jsonify({"msg": "Unauthorized"}), 403)
    return workout, None


@workout_bp.route("", methods=["GET"])
@login_required
def list_workouts(current_user):
    if current_user.is_personal:
        workouts = current_user.personal_profile.workouts.order_by(Workout.created_at.desc(), Workout.id.desc()).all()
        return jsonify([w.to_dict(with_exercises=True) for w in workouts]), 200

    student = current_user.student
    if not student:
        return jsonify({"msg": "Profile not found"}), 404
    assignments = student.assignments.order_by(StudentWorkout.start_date.desc()).all()
    return jsonify([a.to_dict(with_workout=True) for a in assignments]), 200


@workout_bp.route("", methods=["POST"])
@personal_required
def create_workout(current_user):
    data = WorkoutSchema().load(_payload())
    exercises = data.pop("exercises", [])

    workout = Workout(personal_id=current_user.personal_profile.id, **data)
    for index, exercise in enumerate(exercises):
        if exercise.get("order_index") is None:
            exercise["order_index"] = index
        workout.exercises.append(WorkoutExercise(**exercise))

    db.session.add(workout)
    db.session.commit()
    return jsonify({"msg": "Workout created", "workout": workout.to_dict(with_exercises=True)}), 201


@workout_bp.route("/<int:workout_id>", methods=["GET"])
@login_required
def get_workout(workout_id, current_user):
    workout = db.session.get(Workout, workout_id)
    if not workout:
        return jsonify({"msg": "Workout not found"}), 404
    return jsonify(workout.to_dict(with_exercises=True)), 200


@workout_bp.route("/<int:workout_id>", methods=["PATCH"])
@login_required
def update_workout(workout_id, current_user):
    workout, error = _owned_workout(workout_id, current_user)
    if error:
        return error

    data = WorkoutSchema().load(_payload(), partial=True)
    for field in WORKOUT_FIELDS:
        if field in data:
            setattr(workout, field, data[field])
    db.session.commit()
    return jsonify({"msg": "Workout updated", "workout": workout.to_dict(with_exercises=True)}), 200


@workout_bp.route("/<int:workout_id>", methods=["DELETE"])
@login_required
def delete_workout(workout_id, current_user):
    workout, error = _owned_workout(workout_id, current_user)
    if error:
        return error
    db.session.delete(workout)
    db.session.commit()
    return "", 204


# ---------- exercises ----------

@workout_bp.route("/<int:workout_id>/exercises", methods=["POST"])
@login_required
def add_exercise(workout_id, current_user):
    workout, error = _owned_workout(workout_id, current_user)
    if error:
        return error

    data = ExerciseSchema().load(_payload())
    if data.get("order_index") is None:
        data["order_index"] = workout.next_order_index()
    exercise = WorkoutExercise(**data)
    workout.exercises.append(exercise)
    db.session.commit()
    return jsonify({"msg": "Exercise added", "exercise": exercise.to_dict()}), 201


def _workout_exercise(workout, exercise_id):
    exercise = db.session.get(WorkoutExercise, exercise_id)
    if not exercise or exercise.workout_id != workout.id:
        return None
    return exercise


@workout_bp.route("/<int:workout_id>/exercises/<int:exercise_id>", methods=["PATCH"])
@login_required
def update_exercise(workout_id, exercise_id, current_user):
    workout, error = _owned_workout(workout_id, current_user)
    if error:
        return error
    exercise = _workout_exercise(workout, exercise_id)
    if not exercise:
        return jsonify({"msg": "Exercise not found"}), 404

    data = ExerciseSchema().load(_payload(), partial=True)
    for field, value in data.items():
        setattr(exercise, field, value)
    db.session.commit()
    return jsonify({"msg": "Exercise updated", "exercise": exercise.to_dict()}), 200


@workout_bp.route("/<int:workout_id>/exercises/<int:exercise_id>", methods=["DELETE"])
@login_required
def delete_exercise(workout_id, exercise_id, current_user):
    workout, error = _owned_workout(workout_id, current_user)
    if error:
        return error
    exercise = _workout_exercise(workout, exercise_id)
    if not exercise:
        return jsonify({"msg": "Exercise not found"}), 404

    workout.exercises.remove(exercise)
    db.session.commit()
    return "", 204


@workout_bp.route("/<int:workout_id>/exercises/order", methods=["PUT"])
@login_required
def reorder_exercises(workout_id, current_user):
    """Rewrite order_index to follow the given id list."""
    workout, error = _owned_workout(workout_id, current_user)
    if error:
        return error

    ids = ExerciseOrderSchema().load(_payload())["exercise_ids"]
    by_id = {e.id: e for e in workout.exercises}
    if len(ids) != len(set(ids)) or set(ids) != set(by_id):
        return jsonify({"msg": "exercise_ids must list every exercise of the workout exactly once"}), 400

    for index, exercise_id in enumerate(ids):
        by_id[exercise_id].order_index = index
    db.session.commit()
    return jsonify({"msg": "Exercises reordered", "workout": workout.to_dict(with_exercises=True)}), 200


# ---------- presets ----------

@workout_bp.route("/trending", methods=["GET"])
def list_trending():
    filters = TrendingQuerySchema().load(request.args.to_dict())
    return jsonify(catalog.list_trending(filters["objective"], filters["level"])), 200


@workout_bp.route("/trending/<workout_id>", methods=["GET"])
def get_trending(workout_id):
    workout = catalog.get_trending(workout_id)
    if not workout:
        return jsonify({"msg": "Workout not found"}), 404
    return jsonify(workout), 200


@workout_bp.route("/suggest", methods=["POST"])
@personal_required
def suggest(current_user):
    params = SuggestionRequestSchema().load(_payload())
    return jsonify(suggest_workout(**params)), 200
