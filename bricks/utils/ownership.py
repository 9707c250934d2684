from flask import jsonify
from bricks.extensions import db


def get_owned(model, item_id, personal_id, label="Item"):
    """
    Load a row owned by a personal.

    Returns (row, None) or (None, error_response) with 404 when missing and
    403 when the row belongs to someone else.
    """
    item = db.session.get(model, item_id)
    if item is None:
        return None, (jsonify({"msg": f"{label} not found"}), 404)
    if item.personal_id != personal_id:
        return None, (jsonify({"msg": "Unauthorized"}), 403)
    return item, None
