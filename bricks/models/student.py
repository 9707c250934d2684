from datetime import datetime
from bricks.extensions import db

class Student(db.Model):
    __tablename__ = "students"

    id = db.Column(db.Integer, primary_key=True)
    # Empty until a student invited by link finishes self registration
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=True, unique=True, index=True
    )
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="SET NULL"), nullable=True, index=True
    )
    goals = db.Column(db.Text)
    notes = db.Column(db.Text)
    phone = db.Column(db.String(30))
    birth_date = db.Column(db.Date)
    gender = db.Column(db.String(20))
    city = db.Column(db.String(100))
    state = db.Column(db.String(50))
    student_status = db.Column(
        db.String(30),
        db.CheckConstraint("student_status IN ('training','single_consultation')"),
        default="training",
    )
    registration_status = db.Column(
        db.String(20),
        db.CheckConstraint("registration_status IN ('pending','approved','rejected')"),
        default="approved",
        nullable=False,
        index=True,
    )
    registration_token = db.Column(db.String(64), unique=True, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    user = db.relationship("User", back_populates="student")
    personal = db.relationship("PersonalProfile", back_populates="students")
    assignments = db.relationship(
        "StudentWorkout", back_populates="student", lazy="dynamic", cascade="all, delete-orphan"
    )
    appointments = db.relationship(
        "Appointment", back_populates="student", lazy="dynamic", cascade="all, delete-orphan"
    )
    plans = db.relationship(
        "StudentPlan", back_populates="student", lazy="dynamic", cascade="all, delete-orphan"
    )

    @property
    def name(self):
        return self.user.name if self.user else None

    def to_dict(self, with_user=False):
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "personal_id": self.personal_id,
            "goals": self.goals,
            "notes": self.notes,
            "phone": self.phone,
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "gender": self.gender,
            "city": self.city,
            "state": self.state,
            "student_status": self.student_status,
            "registration_status": self.registration_status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if with_user:
            data["user"] = self.user.to_dict() if self.user else None
        return data
