from datetime import datetime
from bricks.extensions import db

class Workout(db.Model):
    __tablename__ = "workouts"

    id = db.Column(db.Integer, primary_key=True)
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = db.Column(db.String(150), nullable=False)
    objective = db.Column(db.String(100))
    level = db.Column(db.String(20))  # beginner, intermediate, advanced
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    personal = db.relationship("PersonalProfile", back_populates="workouts")
    exercises = db.relationship(
        "WorkoutExercise",
        back_populates="workout",
        order_by="WorkoutExercise.order_index",
        cascade="all, delete-orphan",
    )
    assignments = db.relationship(
        "StudentWorkout", back_populates="workout", lazy="dynamic", cascade="all, delete-orphan"
    )

    def next_order_index(self):
        if not self.exercises:
            return 0
        return max(e.order_index or 0 for e in self.exercises) + 1

    def to_dict(self, with_exercises=False):
        data = {
            "id": self.id,
            "personal_id": self.personal_id,
            "name": self.name,
            "objective": self.objective,
            "level": self.level,
            "description": self.description,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if with_exercises:
            data["exercises"] = [e.to_dict() for e in self.exercises]
        return data

    def __repr__(self):
        return f"<Workout {self.name}>"
