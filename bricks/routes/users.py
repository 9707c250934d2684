from flask import Blueprint, jsonify, request

from bricks.extensions import db
from bricks.schemas import UserUpdateSchema
from bricks.utils.decorators import login_required

user_bp = Blueprint("user", __name__)

user_update_schema = UserUpdateSchema()


@user_bp.route("/me", methods=["PATCH"])
@login_required
def update_me(current_user):
    data = user_update_schema.load(request.get_json(silent=True) or {}, partial=True)
    for field, value in data.items():
        setattr(current_user, field, value)
    db.session.commit()
    return jsonify({"msg": "Profile updated", "user": current_user.to_dict()}), 200
