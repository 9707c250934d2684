import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from bricks.config import config
from bricks.extensions import db, jwt, limiter, ma, migrate, socketio

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(app):
    logger = logging.getLogger("bricks")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(app.config["LOG_LEVEL"])


def register_jwt_callbacks():
    from bricks.models import User

    @jwt.user_lookup_loader
    def user_lookup_callback(_jwt_header, jwt_data):
        return db.session.get(User, int(jwt_data["sub"]))

    @jwt.user_lookup_error_loader
    def user_lookup_error_callback(_jwt_header, jwt_data):
        return jsonify({"msg": "User not found"}), 404

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"msg": "Token has expired"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return jsonify({"msg": f"Invalid token: {error}"}), 401

    @jwt.unauthorized_loader
    def unauthorized_callback(error):
        return jsonify({"msg": "Missing authorization token"}), 401


def register_error_handlers(app):
    from bricks.schemas import first_error

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify({"msg": first_error(e.messages) or "Invalid input", "errors": e.messages}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"msg": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        app.logger.exception("Unhandled error: %s", e)
        return jsonify({"msg": "Internal server error"}), 500


def register_blueprints(app):
    from bricks.routes.auth import auth_bp
    from bricks.routes.users import user_bp
    from bricks.routes.personals import personal_bp
    from bricks.routes.students import student_bp
    from bricks.routes.dashboard import dashboard_bp
    from bricks.routes.workouts import workout_bp
    from bricks.routes.student_workouts import student_workout_bp
    from bricks.routes.schedule import schedule_bp
    from bricks.routes.notifications import notification_bp
    from bricks.routes.store import store_bp
    from bricks.routes.finance import finance_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(user_bp, url_prefix="/api/users")
    app.register_blueprint(personal_bp, url_prefix="/api/personals")
    app.register_blueprint(student_bp, url_prefix="/api/students")
    app.register_blueprint(dashboard_bp, url_prefix="/api/dashboard")
    app.register_blueprint(workout_bp, url_prefix="/api/workouts")
    app.register_blueprint(student_workout_bp, url_prefix="/api/student-workouts")
    app.register_blueprint(schedule_bp, url_prefix="/api")
    app.register_blueprint(notification_bp, url_prefix="/api/notifications")
    app.register_blueprint(store_bp, url_prefix="/api/store")
    app.register_blueprint(finance_bp, url_prefix="/api")


def create_app(config_name=None):
    config_name = config_name or os.getenv("FLASK_CONFIG", "development")
    app = Flask(__name__)
    app.config.from_object(config[config_name])

    configure_logging(app)

    # Extensions
    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    from bricks import sockets  # noqa: F401  Socket.IO handlers must exist before init_app
    CORS(app, resources={r"/api/*": {
        "origins": app.config["CORS_ORIGINS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "methods": ["GET", "POST", "PATCH", "PUT", "DELETE", "OPTIONS"],
    }}, supports_credentials=True)
    socketio.init_app(app, async_mode=app.config["SOCKETIO_ASYNC_MODE"])

    register_jwt_callbacks()
    register_error_handlers(app)
    register_blueprints(app)

    from bricks.jobs import configure_scheduler
    configure_scheduler(app)

    return app
