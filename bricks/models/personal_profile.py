from bricks.extensions import db

class PersonalProfile(db.Model):
    __tablename__ = "personal_profiles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )
    bio = db.Column(db.Text)
    specialties = db.Column(db.JSON, default=list)  # ["Hipertrofia", "Funcional"]
    city = db.Column(db.String(100), index=True)
    neighborhood = db.Column(db.String(100))
    cref = db.Column(db.String(30))
    average_price = db.Column(db.Numeric(10, 2, asdecimal=False))
    average_rating = db.Column(db.Numeric(3, 2, asdecimal=False), default=0)
    total_ratings = db.Column(db.Integer, default=0)

    user = db.relationship("User", back_populates="personal_profile")
    students = db.relationship("Student", back_populates="personal", lazy="dynamic")
    workouts = db.relationship(
        "Workout", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    availability_slots = db.relationship(
        "AvailabilitySlot", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    appointments = db.relationship(
        "Appointment", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    events = db.relationship(
        "PersonalEvent", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    reviews = db.relationship(
        "Review", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    quote_requests = db.relationship(
        "QuoteRequest", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    services = db.relationship(
        "PersonalService", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    experience = db.relationship(
        "PersonalExperience", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    gallery = db.relationship(
        "PersonalGalleryItem", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    financial_records = db.relationship(
        "FinancialRecord", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    student_plans = db.relationship(
        "StudentPlan", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )
    notifications = db.relationship(
        "Notification", back_populates="personal", lazy="dynamic", cascade="all, delete-orphan"
    )

    def registered_students(self):
        """Students with an account; invitation placeholders have no user yet."""
        from bricks.models.student import Student
        return self.students.filter(Student.user_id.isnot(None))

    def recompute_rating(self):
        """Refresh average_rating/total_ratings from the stored reviews."""
        ratings = [r.rating for r in self.reviews]
        self.total_ratings = len(ratings)
        self.average_rating = round(sum(ratings) / len(ratings), 2) if ratings else 0

    def to_dict(self, with_user=False):
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "bio": self.bio,
            "specialties": self.specialties or [],
            "city": self.city,
            "neighborhood": self.neighborhood,
            "cref": self.cref,
            "average_price": self.average_price,
            "average_rating": float(self.average_rating or 0),
            "total_ratings": self.total_ratings or 0,
        }
        if with_user:
            data["user"] = self.user.to_dict() if self.user else None
            data["student_count"] = self.registered_students().count()
        return data
