# bricks/utils/decorators.py
from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_current_user, jwt_required


def login_required(view_func):
    """
    Require a valid JWT and pass the User as the `current_user` keyword argument.
    """
    @wraps(view_func)
    @jwt_required()
    def wrapper(*args, **kwargs):
        kwargs["current_user"] = get_current_user()
        return view_func(*args, **kwargs)
    return wrapper


def role_required(*roles):
    """Like login_required, but the user_type must be one of `roles`."""
    def decorator(view_func):
        @wraps(view_func)
        @jwt_required()
        def wrapper(*args, **kwargs):
            user = get_current_user()
            if user.user_type not in roles:
                return jsonify({"msg": "Unauthorized"}), 403
            if user.profile is None:
                return jsonify({"msg": "Profile not found"}), 404
            kwargs["current_user"] = user
            return view_func(*args, **kwargs)
        return wrapper
    return decorator


personal_required = role_required("personal")
student_required = role_required("student")
