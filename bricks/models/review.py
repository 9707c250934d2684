from datetime import datetime
from bricks.extensions import db

class Review(db.Model):
    __tablename__ = "reviews"

    id = db.Column(db.Integer, primary_key=True)
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    student_id = db.Column(db.Integer, db.ForeignKey("students.id", ondelete="SET NULL"), nullable=True)
    rating = db.Column(
        db.Integer,
        db.CheckConstraint("rating BETWEEN 1 AND 5"),
        nullable=False,
    )
    comment = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    personal = db.relationship("PersonalProfile", back_populates="reviews")
    student = db.relationship("Student")

    def to_dict(self):
        return {
            "id": self.id,
            "personal_id": self.personal_id,
            "student_id": self.student_id,
            "student_name": self.student.name if self.student else None,
            "rating": self.rating,
            "comment": self.comment,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
