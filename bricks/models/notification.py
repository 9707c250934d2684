# ================================
# Notification Model
# ================================

from datetime import datetime
from bricks.extensions import db

RECIPIENT_GROUPS = ("all_active", "inactive_30d", "new_students")
CHANNELS = ("in_app", "email", "whatsapp")
FREQUENCIES = ("daily", "weekly", "monthly")

class Notification(db.Model):
    __tablename__ = "notifications"

    id = db.Column(db.Integer, primary_key=True)
    # Sender; appointment updates are addressed to a user and keep the personal as owner
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    type = db.Column(
        db.String(20),
        db.CheckConstraint("type IN ('immediate','scheduled','recurring')"),
        nullable=False,
        index=True,
    )

    # Audience
    recipient_type = db.Column(
        db.String(20),
        db.CheckConstraint("recipient_type IN ('student','group','user')"),
        nullable=False,
    )
    recipient_id = db.Column(db.Integer, nullable=True)  # students.id, or users.id for 'user'
    recipient_group = db.Column(
        db.String(20),
        db.CheckConstraint("recipient_group IN ('all_active','inactive_30d','new_students')"),
        nullable=True,
    )
    channel = db.Column(
        db.String(20),
        db.CheckConstraint("channel IN ('in_app','email','whatsapp')"),
        default="in_app",
        nullable=False,
    )

    # Delivery
    status = db.Column(
        db.String(20),
        db.CheckConstraint("status IN ('pending','sent','cancelled','paused')"),
        default="pending",
        nullable=False,
        index=True,
    )
    scheduled_at = db.Column(db.DateTime, nullable=True)
    sent_at = db.Column(db.DateTime, nullable=True)

    # Recurrence
    recurring_frequency = db.Column(
        db.String(10),
        db.CheckConstraint("recurring_frequency IN ('daily','weekly','monthly')"),
        nullable=True,
    )
    recurring_time = db.Column(db.String(5), nullable=True)  # HH:MM
    recurring_days = db.Column(db.JSON, nullable=True)  # 0 = Sunday
    last_sent_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    personal = db.relationship("PersonalProfile", back_populates="notifications")

    __table_args__ = (
        db.Index("idx_notifications_personal_type", "personal_id", "type"),
        db.Index("idx_notifications_recipient", "recipient_type", "recipient_id"),
        db.Index("idx_notifications_scheduled_at", "scheduled_at"),
    )

    @property
    def is_active_recurring(self):
        return self.type == "recurring" and self.status == "sent"

    def to_dict(self):
        return {
            "id": self.id,
            "personal_id": self.personal_id,
            "sender_name": self.personal.user.name if self.personal and self.personal.user else None,
            "title": self.title,
            "message": self.message,
            "type": self.type,
            "recipient_type": self.recipient_type,
            "recipient_id": self.recipient_id,
            "recipient_group": self.recipient_group,
            "channel": self.channel,
            "status": self.status,
            "scheduled_at": self.scheduled_at.isoformat() if self.scheduled_at else None,
            "sent_at": self.sent_at.isoformat() if self.sent_at else None,
            "recurring_frequency": self.recurring_frequency,
            "recurring_time": self.recurring_time,
            "recurring_days": self.recurring_days or [],
            "last_sent_at": self.last_sent_at.isoformat() if self.last_sent_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
