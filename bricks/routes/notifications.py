from datetime import datetime

from flask import Blueprint, current_app, jsonify, request

from bricks.extensions import db
from bricks.models import Notification, Student
from bricks.schemas import NotificationSchema, RecurringNotificationSchema, ScheduledNotificationSchema
from bricks.services.notifications import deliver, inbox_query, notification_stats
from bricks.utils.decorators import login_required, personal_required
from bricks.utils.ownership import get_owned

notification_bp = Blueprint("notification", __name__)


def _payload():
    return request.get_json(silent=True) or {}


def _build(data, personal_id, kind, status):
    """Notification row from validated input, or an error response for a foreign student."""
    if data["recipient_type"] == "student":
        student = db.session.get(Student, data["recipient_id"])
        if not student or student.personal_id != personal_id:
            return None, (jsonify({"msg": "Student not found"}), 404)
        data["recipient_group"] = None
    else:
        data["recipient_id"] = None
    return Notification(personal_id=personal_id, type=kind, status=status, **data), None


def _outgoing(personal_id):
    return Notification.query.filter(
        Notification.personal_id == personal_id,
        Notification.recipient_type != "user",
    )


@notification_bp.route("/send", methods=["POST"])
@personal_required
def send_now(current_user):
    data = NotificationSchema().load(_payload())
    notification, error = _build(data, current_user.personal_profile.id, "immediate", "sent")
    if error:
        return error
    notification.sent_at = datetime.utcnow()
    db.session.add(notification)
    db.session.commit()
    reached = deliver(notification)
    return jsonify({"msg": "Notification sent", "notification": notification.to_dict(), "recipients": reached}), 201


@notification_bp.route("/schedule", methods=["POST"])
@personal_required
def schedule(current_user):
    data = ScheduledNotificationSchema().load(_payload())
    notification, error = _build(data, current_user.personal_profile.id, "scheduled", "pending")
    if error:
        return error
    db.session.add(notification)
    db.session.commit()
    return jsonify({"msg": "Notification scheduled", "notification": notification.to_dict()}), 201


@notification_bp.route("/recurring", methods=["POST"])
@personal_required
def create_recurring(current_user):
    data = RecurringNotificationSchema().load(_payload())
    notification, error = _build(data, current_user.personal_profile.id, "recurring", "sent")
    if error:
        return error
    db.session.add(notification)
    db.session.commit()
    return jsonify({"msg": "Recurring notification created", "notification": notification.to_dict()}), 201


@notification_bp.route("", methods=["GET"])
@personal_required
def list_notifications(current_user):
    notifications = (
        _outgoing(current_user.personal_profile.id)
        .filter(Notification.type.in_(["immediate", "scheduled"]))
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .all()
    )
    return jsonify([n.to_dict() for n in notifications]), 200


@notification_bp.route("/scheduled", methods=["GET"])
@personal_required
def list_scheduled(current_user):
    notifications = (
        _outgoing(current_user.personal_profile.id)
        .filter(Notification.type == "scheduled")
        .order_by(Notification.scheduled_at)
        .all()
    )
    return jsonify([n.to_dict() for n in notifications]), 200


@notification_bp.route("/recurring", methods=["GET"])
@personal_required
def list_recurring(current_user):
    notifications = (
        _outgoing(current_user.personal_profile.id)
        .filter(Notification.type == "recurring")
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .all()
    )
    return jsonify([n.to_dict() for n in notifications]), 200


@notification_bp.route("/stats", methods=["GET"])
@personal_required
def stats(current_user):
    return jsonify(notification_stats(current_user.personal_profile.id)), 200


def _change_status(notification_id, current_user, kind, allowed_from, status):
    notification, error = get_owned(
        Notification, notification_id, current_user.personal_profile.id, "Notification"
    )
    if error:
        return error
    if notification.type != kind:
        return jsonify({"msg": f"Only {kind} notifications can be changed this way"}), 400
    if notification.status not in allowed_from:
        return jsonify({"msg": f"Notification is {notification.status}"}), 400
    notification.status = status
    db.session.commit()
    current_app.logger.info("Notification %s is now %s", notification.id, status)
    return jsonify({"msg": f"Notification {status}", "notification": notification.to_dict()}), 200


@notification_bp.route("/<int:notification_id>/cancel", methods=["POST"])
@personal_required
def cancel(notification_id, current_user):
    return _change_status(notification_id, current_user, "scheduled", ("pending",), "cancelled")


@notification_bp.route("/<int:notification_id>/pause", methods=["POST"])
@personal_required
def pause(notification_id, current_user):
    return _change_status(notification_id, current_user, "recurring", ("sent",), "paused")


@notification_bp.route("/<int:notification_id>/resume", methods=["POST"])
@personal_required
def resume(notification_id, current_user):
    return _change_status(notification_id, current_user, "recurring", ("paused",), "sent")


@notification_bp.route("/<int:notification_id>", methods=["DELETE"])
@personal_required
def delete_recurring(notification_id, current_user):
    notification, error = get_owned(
        Notification, notification_id, current_user.personal_profile.id, "Notification"
    )
    if error:
        return error
    if notification.type != "recurring":
        return jsonify({"msg": "Only recurring notifications can be deleted"}), 400
    db.session.delete(notification)
    db.session.commit()
    return jsonify({"msg": "Notification deleted"}), 200


@notification_bp.route("/inbox", methods=["GET"])
@login_required
def inbox(current_user):
    """Notifications delivered to the current user."""
    notifications = inbox_query(current_user).all()
    return jsonify([n.to_dict() for n in notifications]), 200
