from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import create_access_token, set_access_cookies, unset_jwt_cookies
from sqlalchemy.exc import SQLAlchemyError

from bricks.extensions import db, limiter
from bricks.models import PersonalProfile, Student, User
from bricks.schemas import ChangePasswordSchema, LoginSchema, RegisterSchema
from bricks.utils.decorators import login_required

auth_bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
change_password_schema = ChangePasswordSchema()


def issue_token(user):
    return create_access_token(
        identity=str(user.id),
        additional_claims={"user_type": user.user_type},
    )


def auth_response(user, msg, status=200):
    """JSON body with user and token; the token is also set as the access cookie."""
    token = issue_token(user)
    response = jsonify({"msg": msg, "user": user.to_dict(), "token": token})
    set_access_cookies(response, token)
    return response, status


@auth_bp.route("/register", methods=["POST"])
@limiter.limit("5 per hour")
def register():
    data = register_schema.load(request.get_json(silent=True) or {})

    if User.query.filter_by(email=data["email"]).first():
        return jsonify({"msg": "Email already registered"}), 400

    user = User(name=data["name"], email=data["email"], user_type=data["user_type"])
    user.set_password(data["password"])
    if user.user_type == "personal":
        user.personal_profile = PersonalProfile(specialties=[])
    else:
        user.student = Student(registration_status="approved")

    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Registration failed for %s", data["email"])
        return jsonify({"msg": "Registration failed"}), 500

    current_app.logger.info("Registered %s user %s", user.user_type, user.email)
    return auth_response(user, "Registered successfully", 201)


@auth_bp.route("/login", methods=["POST"])
@limiter.limit("10 per 15 minutes")
def login():
    data = login_schema.load(request.get_json(silent=True) or {})

    user = User.query.filter_by(email=data["email"]).first()
    if not user or not user.check_password(data["password"]):
        current_app.logger.warning("Login failed for %s", data["email"])
        return jsonify({"msg": "Invalid email or password"}), 401

    current_app.logger.info("Login successful for %s", user.email)
    return auth_response(user, "Login successful")


@auth_bp.route("/me", methods=["GET"])
@login_required
def me(current_user):
    """Current user with its role profile."""
    profile = current_user.profile
    return jsonify({
        "user": current_user.to_dict(),
        "profile": profile.to_dict() if profile else None,
    }), 200


@auth_bp.route("/change-password", methods=["POST"])
@login_required
def change_password(current_user):
    data = change_password_schema.load(request.get_json(silent=True) or {})
    current = data.get("current_password")

    if not current and not current_user.must_change_password:
        return jsonify({"msg": "Current password is required"}), 400
    if current and not current_user.check_password(current):
        return jsonify({"msg": "Current password is incorrect"}), 400

    current_user.set_password(data["new_password"])
    current_user.must_change_password = False
    db.session.commit()
    return jsonify({"msg": "Password changed successfully"}), 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify({"msg": "Logged out"})
    unset_jwt_cookies(response)
    return response, 200
