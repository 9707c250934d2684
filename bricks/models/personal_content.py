"""Public profile content a personal curates: services, experience, gallery."""
from bricks.extensions import db


class PersonalService(db.Model):
    __tablename__ = "personal_services"

    id = db.Column(db.Integer, primary_key=True)
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(10, 2, asdecimal=False))
    duration_minutes = db.Column(db.Integer)

    personal = db.relationship("PersonalProfile", back_populates="services")

    def to_dict(self):
        return {
            "id": self.id,
            "personal_id": self.personal_id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "duration_minutes": self.duration_minutes,
        }


class PersonalExperience(db.Model):
    __tablename__ = "personal_experience"

    id = db.Column(db.Integer, primary_key=True)
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = db.Column(db.String(150), nullable=False)
    company = db.Column(db.String(150))
    start_year = db.Column(db.Integer)
    end_year = db.Column(db.Integer)  # None while current
    description = db.Column(db.Text)

    personal = db.relationship("PersonalProfile", back_populates="experience")

    def to_dict(self):
        return {
            "id": self.id,
            "personal_id": self.personal_id,
            "title": self.title,
            "company": self.company,
            "start_year": self.start_year,
            "end_year": self.end_year,
            "description": self.description,
        }


class PersonalGalleryItem(db.Model):
    __tablename__ = "personal_gallery"

    id = db.Column(db.Integer, primary_key=True)
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    image_url = db.Column(db.String(255), nullable=False)
    caption = db.Column(db.String(255))
    order_index = db.Column(db.Integer, default=0, nullable=False)

    personal = db.relationship("PersonalProfile", back_populates="gallery")

    def to_dict(self):
        return {
            "id": self.id,
            "personal_id": self.personal_id,
            "image_url": self.image_url,
            "caption": self.caption,
            "order_index": self.order_index,
        }
