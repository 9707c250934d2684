from flask import jsonify, request

from bricks.extensions import db
from bricks.models import AvailabilitySlot
from bricks.schemas import AvailabilitySlotSchema
from bricks.utils.decorators import personal_required
from bricks.utils.ownership import get_owned

from . import schedule_bp


@schedule_bp.route("/availability-slots", methods=["GET"])
@personal_required
def list_slots(current_user):
    slots = current_user.personal_profile.availability_slots.order_by(AvailabilitySlot.start_time).all()
    return jsonify([s.to_dict() for s in slots]), 200


@schedule_bp.route("/availability-slots", methods=["POST"])
@personal_required
def create_slot(current_user):
    data = AvailabilitySlotSchema().load(request.get_json(silent=True) or {})
    slot = AvailabilitySlot(personal_id=current_user.personal_profile.id, **data)
    db.session.add(slot)
    db.session.commit()
    return jsonify({"msg": "Slot created", "slot": slot.to_dict()}), 201


@schedule_bp.route("/availability-slots/<int:slot_id>", methods=["DELETE"])
@personal_required
def delete_slot(slot_id, current_user):
    slot, error = get_owned(AvailabilitySlot, slot_id, current_user.personal_profile.id, "Slot")
    if error:
        return error
    db.session.delete(slot)
    db.session.commit()
    return jsonify({"msg": "Slot deleted"}), 200
