from datetime import timedelta
from bricks.extensions import db

WEEK = timedelta(weeks=1)

class AvailabilitySlot(db.Model):
    __tablename__ = "availability_slots"

    id = db.Column(db.Integer, primary_key=True)
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_time = db.Column(db.DateTime, nullable=False)
    end_time = db.Column(db.DateTime, nullable=False)
    is_recurring = db.Column(db.Boolean, default=False, nullable=False)

    personal = db.relationship("PersonalProfile", back_populates="availability_slots")
    appointments = db.relationship("Appointment", back_populates="slot", lazy="dynamic")

    __table_args__ = (
        db.CheckConstraint("end_time > start_time", name="ck_availability_slots_range"),
        db.Index("idx_availability_slots_personal_start", "personal_id", "start_time"),
    )

    @property
    def duration_minutes(self):
        return int((self.end_time - self.start_time) / timedelta(minutes=1))

    def contains(self, start, end):
        """Whether [start, end) fits in the slot, or in a weekly repetition of it."""
        shift = timedelta(0)
        if self.is_recurring and start >= self.start_time:
            shift = ((start - self.start_time) // WEEK) * WEEK
        return self.start_time + shift <= start and end <= self.end_time + shift

    def to_dict(self):
        return {
            "id": self.id,
            "personal_id": self.personal_id,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "is_recurring": self.is_recurring,
            "duration_minutes": self.duration_minutes,
        }
