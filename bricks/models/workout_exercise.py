from bricks.extensions import db

class WorkoutExercise(db.Model):
    __tablename__ = "workout_exercises"

    id = db.Column(db.Integer, primary_key=True)
    workout_id = db.Column(
        db.Integer, db.ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_name = db.Column(db.String(150), nullable=False)
    video_url = db.Column(db.String(255))
    muscle_group = db.Column(db.String(50))
    equipment = db.Column(db.String(100))

    # Prescription
    sets = db.Column(db.Integer)
    reps = db.Column(db.Integer)
    weight = db.Column(db.Numeric(6, 2, asdecimal=False))
    time_in_seconds = db.Column(db.Integer)
    rest_time_seconds = db.Column(db.Integer)
    observations = db.Column(db.Text)
    order_index = db.Column(db.Integer, default=0, nullable=False)

    workout = db.relationship("Workout", back_populates="exercises")

    __table_args__ = (
        db.Index("idx_workout_exercises_order", "workout_id", "order_index"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "workout_id": self.workout_id,
            "exercise_name": self.exercise_name,
            "video_url": self.video_url,
            "muscle_group": self.muscle_group,
            "equipment": self.equipment,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "time_in_seconds": self.time_in_seconds,
            "rest_time_seconds": self.rest_time_seconds,
            "observations": self.observations,
            "order_index": self.order_index,
        }

    def __repr__(self):
        return f"<WorkoutExercise {self.exercise_name}>"
