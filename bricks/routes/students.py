from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from bricks.extensions import db, limiter
from bricks.models import PersonalProfile, Student, User
from bricks.routes.auth import auth_response
from bricks.schemas import StudentCreateSchema, StudentSelfRegisterSchema, StudentUpdateSchema
from bricks.services.dashboard import student_stats
from bricks.utils.decorators import personal_required, student_required
from bricks.utils.ownership import get_owned
from bricks.utils.security import generate_registration_token, generate_temporary_password

student_bp = Blueprint("student", __name__)


def _payload():
    return request.get_json(silent=True) or {}


def _pending_invitation(token):
    return Student.query.filter_by(
        registration_token=token, registration_status="pending", user_id=None
    ).first()


@student_bp.route("", methods=["GET"])
@personal_required
def list_students(current_user):
    students = current_user.personal_profile.students.order_by(Student.created_at.desc()).all()
    return jsonify([s.to_dict(with_user=True) for s in students]), 200


@student_bp.route("/create", methods=["POST"])
@personal_required
def create_student(current_user):
    """Create a student account with a temporary password."""
    data = StudentCreateSchema().load(_payload())
    if User.query.filter_by(email=data["email"]).first():
        return jsonify({"msg": "Email already registered"}), 400

    temporary_password = generate_temporary_password(current_app.config["TEMPORARY_PASSWORD_LENGTH"])
    user = User(
        name=data.pop("name").strip(),
        email=data.pop("email"),
        user_type="student",
        must_change_password=True,
    )
    user.set_password(temporary_password)
    user.student = Student(
        personal_id=current_user.personal_profile.id,
        registration_status="approved",
        **data,
    )

    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Could not create student %s", user.email)
        return jsonify({"msg": "Could not create student"}), 500

    current_app.logger.info("Personal %s created student %s", current_user.id, user.email)
    return jsonify({
        "msg": "Student created",
        "student": user.student.to_dict(with_user=True),
        "temporary_password": temporary_password,
    }), 201


@student_bp.route("/generate-link", methods=["POST"])
@personal_required
def generate_link(current_user):
    student = Student(
        personal_id=current_user.personal_profile.id,
        registration_status="pending",
        registration_token=generate_registration_token(),
    )
    db.session.add(student)
    db.session.commit()
    return jsonify({"student_id": student.id, "token": student.registration_token}), 201


@student_bp.route("/register/<token>", methods=["GET"])
def get_invitation(token):
    student = _pending_invitation(token)
    if not student:
        return jsonify({"msg": "Invalid or expired registration link"}), 404

    personal = student.personal
    return jsonify({
        "student_id": student.id,
        "personal": {
            "id": personal.id,
            "name": personal.user.name if personal.user else None,
            "photo_url": personal.user.photo_url if personal.user else None,
        } if personal else None,
    }), 200


@student_bp.route("/register/<token>", methods=["POST"])
@limiter.limit("5 per hour")
def register_with_token(token):
    """Self registration from an invitation link."""
    student = _pending_invitation(token)
    if not student:
        return jsonify({"msg": "Invalid or expired registration link"}), 404

    data = StudentSelfRegisterSchema().load(_payload())
    if User.query.filter_by(email=data["email"]).first():
        return jsonify({"msg": "Email already registered"}), 400

    user = User(name=data.pop("name").strip(), email=data.pop("email"), user_type="student")
    user.set_password(data.pop("password"))
    for field, value in data.items():
        setattr(student, field, value)
    student.user = user
    student.registration_status = "approved"
    student.registration_token = None

    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Self registration failed for %s", user.email)
        return jsonify({"msg": "Registration failed"}), 500

    current_app.logger.info("Student %s registered through invitation %s", user.email, student.id)
    return auth_response(user, "Registered successfully", 201)


def _set_registration_status(student_id, personal_id, status):
    student, error = get_owned(Student, student_id, personal_id, "Student")
    if error:
        return error
    student.registration_status = status
    db.session.commit()
    return jsonify({"msg": f"Student {status}", "student": student.to_dict(with_user=True)}), 200


@student_bp.route("/<int:student_id>/approve", methods=["PATCH"])
@personal_required
def approve_student(student_id, current_user):
    return _set_registration_status(student_id, current_user.personal_profile.id, "approved")


@student_bp.route("/<int:student_id>/reject", methods=["PATCH"])
@personal_required
def reject_student(student_id, current_user):
    return _set_registration_status(student_id, current_user.personal_profile.id, "rejected")


@student_bp.route("/<int:student_id>", methods=["DELETE"])
@personal_required
def delete_student(student_id, current_user):
    student, error = get_owned(Student, student_id, current_user.personal_profile.id, "Student")
    if error:
        return error
    # the student account goes with its profile
    db.session.delete(student.user if student.user else student)
    db.session.commit()
    return jsonify({"msg": "Student deleted"}), 200


@student_bp.route("/me", methods=["PATCH"])
@student_required
def update_me(current_user):
    data = StudentUpdateSchema().load(_payload(), partial=True)
    personal_id = data.get("personal_id")
    if personal_id is not None and not db.session.get(PersonalProfile, personal_id):
        return jsonify({"msg": "Personal not found"}), 404

    student = current_user.student
    for field, value in data.items():
        setattr(student, field, value)
    db.session.commit()
    return jsonify({"msg": "Profile updated", "student": student.to_dict(with_user=True)}), 200


@student_bp.route("/stats", methods=["GET"])
@student_required
def get_stats(current_user):
    return jsonify(student_stats(current_user.student)), 200
