from datetime import datetime
from bricks.extensions import db

APPOINTMENT_STATUSES = ("pending", "confirmed", "cancelled", "completed")

# cancelled and completed are final
ALLOWED_TRANSITIONS = {
    "pending": {"confirmed", "cancelled"},
    "confirmed": {"completed", "cancelled"},
    "cancelled": set(),
    "completed": set(),
}

class Appointment(db.Model):
    __tablename__ = "appointments"

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(
        db.Integer, db.ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    slot_id = db.Column(
        db.Integer, db.ForeignKey("availability_slots.id", ondelete="SET NULL"), nullable=True
    )
    start_time = db.Column(db.DateTime, nullable=False)
    end_time = db.Column(db.DateTime, nullable=False)
    status = db.Column(
        db.String(20),
        db.CheckConstraint("status IN ('pending','confirmed','cancelled','completed')"),
        default="pending",
        nullable=False,
        index=True,
    )
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    student = db.relationship("Student", back_populates="appointments")
    personal = db.relationship("PersonalProfile", back_populates="appointments")
    slot = db.relationship("AvailabilitySlot", back_populates="appointments")

    __table_args__ = (
        db.CheckConstraint("end_time > start_time", name="ck_appointments_range"),
        db.Index("idx_appointments_personal_start", "personal_id", "start_time"),
    )

    def can_transition_to(self, status):
        return status == self.status or status in ALLOWED_TRANSITIONS.get(self.status, set())

    @classmethod
    def find_conflict(cls, personal_id, start, end, exclude_id=None):
        """First non-cancelled appointment of the personal overlapping [start, end)."""
        query = cls.query.filter(
            cls.personal_id == personal_id,
            cls.status != "cancelled",
            cls.start_time < end,
            cls.end_time > start,
        )
        if exclude_id is not None:
            query = query.filter(cls.id != exclude_id)
        return query.first()

    def to_dict(self):
        return {
            "id": self.id,
            "student_id": self.student_id,
            "personal_id": self.personal_id,
            "slot_id": self.slot_id,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "status": self.status,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "student_name": self.student.name if self.student else None,
            "personal_name": self.personal.user.name if self.personal and self.personal.user else None,
        }
