from flask import Blueprint, jsonify

from bricks.services.dashboard import personal_dashboard
from bricks.utils.decorators import personal_required

dashboard_bp = Blueprint("dashboard", __name__)


@dashboard_bp.route("/stats", methods=["GET"])
@personal_required
def stats(current_user):
    """Overview shown on the personal dashboard."""
    return jsonify(personal_dashboard(current_user.personal_profile)), 200
