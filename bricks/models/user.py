from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from bricks.extensions import db

USERS_TABLE = "users"

class User(db.Model):
    __tablename__ = USERS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    user_type = db.Column(
        db.String(20),
        db.CheckConstraint("user_type IN ('personal','student')"),
        nullable=False,
        index=True,
    )
    photo_url = db.Column(db.String(255), nullable=True)
    must_change_password = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # One-to-One profiles
    personal_profile = db.relationship(
        "PersonalProfile", uselist=False, back_populates="user", cascade="all, delete-orphan"
    )
    student = db.relationship(
        "Student", uselist=False, back_populates="user", cascade="all, delete-orphan"
    )

    # Helpers
    def set_password(self, password: str):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    @property
    def is_personal(self):
        return self.user_type == "personal"

    @property
    def is_student(self):
        return self.user_type == "student"

    @property
    def profile(self):
        return self.personal_profile if self.is_personal else self.student

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "user_type": self.user_type,
            "photo_url": self.photo_url,
            "must_change_password": self.must_change_password,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User {self.email}>"
