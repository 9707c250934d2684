"""
Notification delivery.

Rows are the source of truth; in-app delivery pushes each row over Socket.IO
to the `user_<id>` room of every resolved recipient. Email and WhatsApp
channels are recorded only.
"""
import logging
from datetime import datetime, timedelta

from sqlalchemy import and_, func, or_

from bricks.extensions import db, socketio
from bricks.models import Appointment, Notification, Student, StudentWorkout, User, Workout

logger = logging.getLogger(__name__)

NEW_STUDENT_DAYS = 30
INACTIVE_DAYS = 30


def user_room(user_id):
    return f"user_{user_id}"


# ---------- audiences ----------

def _approved_students(personal_id):
    return Student.query.filter(
        Student.personal_id == personal_id,
        Student.registration_status == "approved",
        Student.user_id.isnot(None),
    )


def _active_student_ids(personal_id, since):
    """Students with a completed assignment or appointment since `since`."""
    from_workouts = {
        row.student_id for row in StudentWorkout.query.join(Workout).filter(
            Workout.personal_id == personal_id,
            StudentWorkout.status == "completed",
            StudentWorkout.completed_at >= since,
        ).with_entities(StudentWorkout.student_id)
    }
    from_appointments = {
        row.student_id for row in Appointment.query.filter(
            Appointment.personal_id == personal_id,
            Appointment.status == "completed",
            Appointment.start_time >= since,
        ).with_entities(Appointment.student_id)
    }
    return from_workouts | from_appointments


def resolve_group(personal_id, group, now=None):
    now = now or datetime.utcnow()
    students = _approved_students(personal_id)
    if group == "all_active":
        return students.all()
    if group == "new_students":
        return students.filter(Student.created_at >= now - timedelta(days=NEW_STUDENT_DAYS)).all()
    if group == "inactive_30d":
        active = _active_student_ids(personal_id, now - timedelta(days=INACTIVE_DAYS))
        return [s for s in students.all() if s.id not in active]
    raise ValueError(f"Unknown recipient group: {group}")


def groups_of(student, now=None):
    """Groups of its personal the student currently belongs to."""
    if not student.personal_id or student.registration_status != "approved":
        return []
    return [
        group for group in ("all_active", "new_students", "inactive_30d")
        if any(s.id == student.id for s in resolve_group(student.personal_id, group, now))
    ]


def resolve_recipients(notification, now=None):
    """Users a notification is delivered to."""
    if notification.recipient_type == "user":
        user = db.session.get(User, notification.recipient_id)
        return [user] if user else []
    if notification.recipient_type == "student":
        student = db.session.get(Student, notification.recipient_id)
        if not student or student.personal_id != notification.personal_id or not student.user:
            return []
        return [student.user]
    return [s.user for s in resolve_group(notification.personal_id, notification.recipient_group, now) if s.user]


# ---------- delivery ----------

def deliver(notification, now=None):
    """Push a notification to its recipients; returns how many were reached."""
    recipients = resolve_recipients(notification, now)
    if notification.channel != "in_app":
        logger.info(
            "Notification %s recorded for %d recipient(s) on channel %s",
            notification.id, len(recipients), notification.channel,
        )
        return len(recipients)

    payload = notification.to_dict()
    for user in recipients:
        socketio.emit("notification", payload, to=user_room(user.id))
    logger.info("Notification %s pushed to %d recipient(s)", notification.id, len(recipients))
    return len(recipients)


def notify_user(personal_id, user, title, message):
    """Stage a direct in-app notice to one user; deliver it once the session is committed."""
    notification = Notification(
        personal_id=personal_id,
        title=title,
        message=message,
        type="immediate",
        recipient_type="user",
        recipient_id=user.id,
        channel="in_app",
        status="sent",
        sent_at=datetime.utcnow(),
    )
    db.session.add(notification)
    return notification


def recurring_occurrence(notification, now):
    """Today's occurrence if it has passed and was not delivered yet, else None."""
    if not notification.is_active_recurring or not notification.recurring_time:
        return None
    hour, minute = (int(part) for part in notification.recurring_time.split(":"))
    occurrence = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if occurrence > now:
        return None
    if notification.created_at and notification.created_at > occurrence:
        return None

    frequency = notification.recurring_frequency
    if frequency == "weekly" and (now.weekday() + 1) % 7 not in (notification.recurring_days or []):
        return None
    if frequency == "monthly" and notification.created_at and now.day != notification.created_at.day:
        return None

    if notification.last_sent_at and notification.last_sent_at >= occurrence:
        return None
    return occurrence


def dispatch_due(now=None):
    """Send due scheduled notifications and recurring occurrences. Returns the number sent."""
    now = now or datetime.utcnow()
    due = []

    scheduled = Notification.query.filter(
        Notification.type == "scheduled",
        Notification.status == "pending",
        Notification.scheduled_at <= now,
    ).all()
    for notification in scheduled:
        notification.status = "sent"
        notification.sent_at = now
        due.append(notification)

    recurring = Notification.query.filter(
        Notification.type == "recurring",
        Notification.status == "sent",
    ).all()
    for notification in recurring:
        if recurring_occurrence(notification, now) is None:
            continue
        notification.last_sent_at = now
        due.append(notification)

    db.session.commit()
    for notification in due:
        deliver(notification, now)
    if due:
        logger.info("Dispatched %d notification(s)", len(due))
    return len(due)


# ---------- queries ----------

def inbox_query(user, now=None):
    """Delivered notifications addressed to the user, newest first."""
    delivered = and_(
        Notification.status != "cancelled",
        or_(Notification.sent_at.isnot(None), Notification.last_sent_at.isnot(None)),
    )
    conditions = [and_(Notification.recipient_type == "user", Notification.recipient_id == user.id)]

    student = user.student if user.is_student else None
    if student:
        conditions.append(and_(
            Notification.recipient_type == "student",
            Notification.recipient_id == student.id,
        ))
        groups = groups_of(student, now)
        if groups:
            conditions.append(and_(
                Notification.recipient_type == "group",
                Notification.personal_id == student.personal_id,
                Notification.recipient_group.in_(groups),
            ))

    return Notification.query.filter(delivered, or_(*conditions)).order_by(
        func.coalesce(Notification.last_sent_at, Notification.sent_at).desc()
    )


def notification_stats(personal_id, now=None):
    now = now or datetime.utcnow()
    day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    outgoing = Notification.query.filter(
        Notification.personal_id == personal_id,
        Notification.recipient_type != "user",
    )
    return {
        "sent_today": outgoing.filter(Notification.sent_at >= day_start).count(),
        "scheduled": outgoing.filter(Notification.status == "pending").count(),
    }
