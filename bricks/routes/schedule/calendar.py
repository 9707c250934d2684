from flask import current_app, jsonify, request

from bricks.schemas import CalendarQuerySchema
from bricks.services.calendar import render_calendar
from bricks.utils.dates import utc_today
from bricks.utils.decorators import login_required

from . import schedule_bp


@schedule_bp.route("/calendar", methods=["GET"])
@login_required
def calendar(current_user):
    """Week or day grid of the current user's agenda."""
    if current_user.profile is None:
        return jsonify({"msg": "Profile not found"}), 404

    params = CalendarQuerySchema().load(request.args.to_dict())
    start_hour = params["start_hour"]
    end_hour = params["end_hour"]
    if start_hour is None:
        start_hour = current_app.config["CALENDAR_START_HOUR"]
    if end_hour is None:
        end_hour = current_app.config["CALENDAR_END_HOUR"]
    if end_hour <= start_hour:
        return jsonify({"msg": "end_hour must be after start_hour"}), 400

    result = render_calendar(
        current_user,
        params["view"],
        params["date"] or utc_today(),
        start_hour=start_hour,
        end_hour=end_hour,
        slot_minutes=current_app.config["CALENDAR_SLOT_MINUTES"],
    )
    return jsonify(result), 200
