from datetime import datetime
from bricks.extensions import db

class PersonalEvent(db.Model):
    __tablename__ = "personal_events"

    id = db.Column(db.Integer, primary_key=True)
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text)
    start_time = db.Column(db.DateTime, nullable=False)
    end_time = db.Column(db.DateTime, nullable=False)
    color = db.Column(db.String(30))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    personal = db.relationship("PersonalProfile", back_populates="events")

    __table_args__ = (
        db.CheckConstraint("end_time > start_time", name="ck_personal_events_range"),
        db.Index("idx_personal_events_personal_start", "personal_id", "start_time"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "personal_id": self.personal_id,
            "title": self.title,
            "description": self.description,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "color": self.color,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
