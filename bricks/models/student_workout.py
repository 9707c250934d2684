from datetime import datetime
from bricks.extensions import db

WORKOUT_STATUSES = ("active", "completed", "paused")

class StudentWorkout(db.Model):
    __tablename__ = "student_workouts"

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(
        db.Integer, db.ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )
    workout_id = db.Column(
        db.Integer, db.ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_date = db.Column(db.DateTime, nullable=False)
    end_date = db.Column(db.DateTime, nullable=True)
    status = db.Column(
        db.String(20),
        db.CheckConstraint("status IN ('active','completed','paused')"),
        default="active",
        nullable=False,
        index=True,
    )
    feedback = db.Column(db.Text)
    completed_at = db.Column(db.DateTime, nullable=True)

    student = db.relationship("Student", back_populates="assignments")
    workout = db.relationship("Workout", back_populates="assignments")

    def mark_complete(self, feedback=None):
        self.status = "completed"
        self.completed_at = datetime.utcnow()
        self.feedback = feedback

    def to_dict(self, with_workout=False):
        data = {
            "id": self.id,
            "student_id": self.student_id,
            "workout_id": self.workout_id,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "status": self.status,
            "feedback": self.feedback,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }
        if with_workout:
            data["workout"] = self.workout.to_dict(with_exercises=True) if self.workout else None
        return data
