from flask import jsonify, request

from bricks.extensions import db
from bricks.models import PersonalEvent
from bricks.schemas import DateRangeQuerySchema, PersonalEventSchema
from bricks.utils.decorators import personal_required
from bricks.utils.ownership import get_owned

from . import schedule_bp


@schedule_bp.route("/personal-events", methods=["GET"])
@personal_required
def list_events(current_user):
    params = DateRangeQuerySchema().load(request.args.to_dict())
    query = current_user.personal_profile.events
    if params["start_date"]:
        query = query.filter(PersonalEvent.start_time >= params["start_date"])
    if params["end_date"]:
        query = query.filter(PersonalEvent.end_time <= params["end_date"])
    events = query.order_by(PersonalEvent.start_time).all()
    return jsonify([e.to_dict() for e in events]), 200


@schedule_bp.route("/personal-events", methods=["POST"])
@personal_required
def create_event(current_user):
    data = PersonalEventSchema().load(request.get_json(silent=True) or {})
    event = PersonalEvent(personal_id=current_user.personal_profile.id, **data)
    db.session.add(event)
    db.session.commit()
    return jsonify({"msg": "Event created", "event": event.to_dict()}), 201


@schedule_bp.route("/personal-events/<int:event_id>", methods=["GET"])
@personal_required
def get_event(event_id, current_user):
    event, error = get_owned(PersonalEvent, event_id, current_user.personal_profile.id, "Event")
    if error:
        return error
    return jsonify(event.to_dict()), 200


@schedule_bp.route("/personal-events/<int:event_id>", methods=["PATCH"])
@personal_required
def update_event(event_id, current_user):
    event, error = get_owned(PersonalEvent, event_id, current_user.personal_profile.id, "Event")
    if error:
        return error

    data = PersonalEventSchema().load(request.get_json(silent=True) or {}, partial=True)
    start = data.get("start_time", event.start_time)
    end = data.get("end_time", event.end_time)
    if end <= start:
        return jsonify({"msg": "End time must be after start time"}), 400

    for field, value in data.items():
        setattr(event, field, value)
    db.session.commit()
    return jsonify({"msg": "Event updated", "event": event.to_dict()}), 200


@schedule_bp.route("/personal-events/<int:event_id>", methods=["DELETE"])
@personal_required
def delete_event(event_id, current_user):
    event, error = get_owned(PersonalEvent, event_id, current_user.personal_profile.id, "Event")
    if error:
        return error
    db.session.delete(event)
    db.session.commit()
    return jsonify({"msg": "Event deleted"}), 200
