from flask import current_app, jsonify, request

from bricks.extensions import db
from bricks.models import Appointment, AvailabilitySlot, PersonalProfile
from bricks.schemas import AppointmentSchema, AppointmentStatusSchema
from bricks.services.notifications import deliver, notify_user
from bricks.utils.decorators import login_required, student_required

from . import schedule_bp

STATUS_MESSAGES = {
    "confirmed": "Your appointment on {when} was confirmed.",
    "cancelled": "The appointment on {when} was cancelled.",
    "completed": "The appointment on {when} was marked as completed.",
}


def _when(appointment):
    return appointment.start_time.strftime("%Y-%m-%d %H:%M")


@schedule_bp.route("/appointments", methods=["GET"])
@login_required
def list_appointments(current_user):
    profile = current_user.profile
    if profile is None:
        return jsonify({"msg": "Profile not found"}), 404
    appointments = profile.appointments.order_by(Appointment.start_time.desc()).all()
    return jsonify([a.to_dict() for a in appointments]), 200


@schedule_bp.route("/appointments", methods=["POST"])
@student_required
def create_appointment(current_user):
    data = AppointmentSchema().load(request.get_json(silent=True) or {})
    student = current_user.student

    personal = db.session.get(PersonalProfile, data["personal_id"])
    if not personal:
        return jsonify({"msg": "Personal not found"}), 404

    if data.get("slot_id") is not None:
        slot = db.session.get(AvailabilitySlot, data["slot_id"])
        if not slot or slot.personal_id != personal.id:
            return jsonify({"msg": "Slot not found"}), 404
        if not slot.contains(data["start_time"], data["end_time"]):
            return jsonify({"msg": "Requested time is outside the selected slot"}), 400

    if Appointment.find_conflict(personal.id, data["start_time"], data["end_time"]):
        return jsonify({"msg": "This time slot is already booked with this personal."}), 409

    appointment = Appointment(
        student_id=student.id,
        personal_id=personal.id,
        slot_id=data.get("slot_id"),
        start_time=data["start_time"],
        end_time=data["end_time"],
        notes=data.get("notes"),
        status="pending",
    )
    db.session.add(appointment)
    db.session.flush()
    notice = notify_user(
        personal.id,
        personal.user,
        "New appointment request",
        f"{current_user.name} requested an appointment on {_when(appointment)}.",
    )
    db.session.commit()
    deliver(notice)
    current_app.logger.info("Appointment %s requested by student %s", appointment.id, student.id)
    return jsonify({"msg": "Appointment requested", "appointment": appointment.to_dict()}), 201


@schedule_bp.route("/appointments/<int:appointment_id>/status", methods=["PATCH"])
@schedule_bp.route("/appointments/<int:appointment_id>", methods=["PATCH"])
@login_required
def update_appointment_status(appointment_id, current_user):
    appointment = db.session.get(Appointment, appointment_id)
    if not appointment:
        return jsonify({"msg": "Appointment not found"}), 404

    profile = current_user.profile
    if profile is None:
        return jsonify({"msg": "Profile not found"}), 404
    is_owner = current_user.is_personal and profile.id == appointment.personal_id
    is_student = current_user.is_student and profile.id == appointment.student_id
    if not (is_owner or is_student):
        return jsonify({"msg": "Unauthorized"}), 403

    status = AppointmentStatusSchema().load(request.get_json(silent=True) or {})["status"]
    if status == appointment.status:
        return jsonify({"msg": "Status unchanged", "appointment": appointment.to_dict()}), 200
    if not appointment.can_transition_to(status):
        return jsonify({"msg": f"Cannot change appointment from {appointment.status} to {status}"}), 400
    if is_student and status != "cancelled":
        return jsonify({"msg": "Students can only cancel appointments"}), 403

    if status == "confirmed" and Appointment.find_conflict(
        appointment.personal_id, appointment.start_time, appointment.end_time, exclude_id=appointment.id
    ):
        return jsonify({"msg": "This time slot is already booked with this personal."}), 409

    previous = appointment.status
    appointment.status = status

    if is_owner:
        recipient = appointment.student.user if appointment.student else None
    else:
        recipient = appointment.personal.user
    notice = None
    if recipient:
        notice = notify_user(
            appointment.personal_id,
            recipient,
            f"Appointment {status}",
            STATUS_MESSAGES[status].format(when=_when(appointment)),
        )

    db.session.commit()
    if notice:
        deliver(notice)
    current_app.logger.info(
        "Appointment %s changed from %s to %s by user %s", appointment.id, previous, status, current_user.id
    )
    return jsonify({"msg": "Status updated", "appointment": appointment.to_dict()}), 200
