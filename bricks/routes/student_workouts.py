from datetime import datetime

from flask import Blueprint, current_app, jsonify, request

from bricks.extensions import db
from bricks.models import Student, StudentWorkout, Workout
from bricks.schemas import AssignmentSchema, AssignmentStatusSchema, CompleteAssignmentSchema
from bricks.utils.decorators import login_required, personal_required, student_required

student_workout_bp = Blueprint("student_workout", __name__)


def _payload():
    return request.get_json(silent=True) or {}


def _can_view(assignment, user):
    if user.is_student:
        return user.student is not None and assignment.student_id == user.student.id
    return user.personal_profile is not None and assignment.workout.personal_id == user.personal_profile.id


@student_workout_bp.route("", methods=["GET"])
@login_required
def list_assignments(current_user):
    if current_user.is_student:
        if not current_user.student:
            return jsonify({"msg": "Profile not found"}), 404
        query = current_user.student.assignments
    else:
        query = StudentWorkout.query.join(Workout).filter(
            Workout.personal_id == current_user.personal_profile.id
        )
    assignments = query.order_by(StudentWorkout.start_date.desc()).all()
    return jsonify([a.to_dict(with_workout=True) for a in assignments]), 200


@student_workout_bp.route("", methods=["POST"])
@personal_required
def assign_workout(current_user):
    data = AssignmentSchema().load(_payload())
    profile = current_user.personal_profile

    workout = db.session.get(Workout, data["workout_id"])
    if not workout:
        return jsonify({"msg": "Workout not found"}), 404
    if workout.personal_id != profile.id:
        return jsonify({"msg": "Unauthorized"}), 403

    student = db.session.get(Student, data["student_id"])
    if not student:
        return jsonify({"msg": "Student not found"}), 404
    if student.personal_id != profile.id:
        return jsonify({"msg": "Student is not linked to you"}), 403

    if data.get("end_date") and data["end_date"] < data["start_date"]:
        return jsonify({"msg": "end_date must not be before start_date"}), 400

    assignment = StudentWorkout(
        student_id=student.id,
        workout_id=workout.id,
        start_date=data["start_date"],
        end_date=data.get("end_date"),
        status="active",
    )
    db.session.add(assignment)
    db.session.commit()
    current_app.logger.info("Workout %s assigned to student %s", workout.id, student.id)
    return jsonify({"msg": "Workout assigned", "assignment": assignment.to_dict(with_workout=True)}), 201


@student_workout_bp.route("/<int:assignment_id>", methods=["GET"])
@login_required
def get_assignment(assignment_id, current_user):
    assignment = db.session.get(StudentWorkout, assignment_id)
    if not assignment:
        return jsonify({"msg": "Assignment not found"}), 404
    if not _can_view(assignment, current_user):
        return jsonify({"msg": "Unauthorized"}), 403
    return jsonify(assignment.to_dict(with_workout=True)), 200


@student_workout_bp.route("/<int:assignment_id>/complete", methods=["PATCH"])
@student_required
def complete_assignment(assignment_id, current_user):
    assignment = db.session.get(StudentWorkout, assignment_id)
    if not assignment:
        return jsonify({"msg": "Assignment not found"}), 404
    if assignment.student_id != current_user.student.id:
        return jsonify({"msg": "Unauthorized"}), 403

    data = CompleteAssignmentSchema().load(_payload())
    assignment.mark_complete(data.get("feedback"))
    db.session.commit()
    return jsonify({"msg": "Workout completed", "assignment": assignment.to_dict(with_workout=True)}), 200


@student_workout_bp.route("/<int:assignment_id>/status", methods=["PATCH"])
@personal_required
def update_assignment_status(assignment_id, current_user):
    assignment = db.session.get(StudentWorkout, assignment_id)
    if not assignment:
        return jsonify({"msg": "Assignment not found"}), 404
    if assignment.workout.personal_id != current_user.personal_profile.id:
        return jsonify({"msg": "Unauthorized"}), 403

    status = AssignmentStatusSchema().load(_payload())["status"]
    if status == "completed" and assignment.status != "completed":
        assignment.completed_at = datetime.utcnow()
    elif status != "completed":
        assignment.completed_at = None
    assignment.status = status
    db.session.commit()
    return jsonify({"msg": "Status updated", "assignment": assignment.to_dict(with_workout=True)}), 200
