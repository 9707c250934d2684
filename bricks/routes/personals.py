from flask import Blueprint, current_app, jsonify, request
from sqlalchemy import or_

from bricks.extensions import db
from bricks.models import (
    AvailabilitySlot, PersonalExperience, PersonalGalleryItem, PersonalProfile,
    PersonalService, QuoteRequest, Review, User,
)
from bricks.schemas import (
    DateRangeQuerySchema, ExperienceSchema, GalleryItemSchema, PersonalProfileUpdateSchema,
    PersonalSearchSchema, QuoteRequestSchema, QuoteStatusSchema, ReviewSchema, ServiceSchema,
)
from bricks.services.dashboard import personal_stats
from bricks.utils.decorators import personal_required, student_required
from bricks.utils.ownership import get_owned

personal_bp = Blueprint("personal", __name__)


def _payload():
    return request.get_json(silent=True) or {}


# ---------- marketplace ----------

@personal_bp.route("", methods=["GET"])
def list_personals():
    """Public marketplace listing."""
    filters = PersonalSearchSchema().load(request.args.to_dict())
    query = PersonalProfile.query.join(User, PersonalProfile.user_id == User.id)

    if filters["city"]:
        query = query.filter(PersonalProfile.city.ilike(f"%{filters['city']}%"))
    if filters["search"]:
        pattern = f"%{filters['search']}%"
        query = query.filter(or_(User.name.ilike(pattern), PersonalProfile.bio.ilike(pattern)))

    personals = query.order_by(PersonalProfile.average_rating.desc(), User.name).all()

    if filters["specialty"]:
        term = filters["specialty"].lower()
        personals = [
            p for p in personals
            if any(term in specialty.lower() for specialty in (p.specialties or []))
        ]

    return jsonify([p.to_dict(with_user=True) for p in personals]), 200


@personal_bp.route("/<int:personal_id>", methods=["GET"])
def get_personal(personal_id):
    personal = db.session.get(PersonalProfile, personal_id)
    if not personal:
        return jsonify({"msg": "Personal not found"}), 404

    data = personal.to_dict(with_user=True)
    data["reviews"] = [r.to_dict() for r in personal.reviews.order_by(Review.created_at.desc())]
    data["services"] = [s.to_dict() for s in personal.services.order_by(PersonalService.id)]
    data["experience"] = [
        e.to_dict() for e in personal.experience.order_by(PersonalExperience.start_year.desc())
    ]
    data["gallery"] = [g.to_dict() for g in personal.gallery.order_by(PersonalGalleryItem.order_index)]
    return jsonify(data), 200


@personal_bp.route("/<int:personal_id>/slots", methods=["GET"])
def get_personal_slots(personal_id):
    """Availability of a personal, optionally limited to a date range."""
    if not db.session.get(PersonalProfile, personal_id):
        return jsonify({"msg": "Personal not found"}), 404

    params = DateRangeQuerySchema().load(request.args.to_dict())
    query = AvailabilitySlot.query.filter_by(personal_id=personal_id)
    if params["start_date"] and params["end_date"]:
        query = query.filter(
            AvailabilitySlot.start_time >= params["start_date"],
            AvailabilitySlot.end_time <= params["end_date"],
        )
    slots = query.order_by(AvailabilitySlot.start_time).all()
    return jsonify([s.to_dict() for s in slots]), 200


@personal_bp.route("/me", methods=["PATCH"])
@personal_required
def update_my_profile(current_user):
    data = PersonalProfileUpdateSchema().load(_payload(), partial=True)
    profile = current_user.personal_profile
    for field, value in data.items():
        setattr(profile, field, value)
    db.session.commit()
    return jsonify({"msg": "Profile updated", "profile": profile.to_dict(with_user=True)}), 200


@personal_bp.route("/stats", methods=["GET"])
@personal_required
def get_stats(current_user):
    return jsonify(personal_stats(current_user.personal_profile)), 200


# ---------- reviews ----------

@personal_bp.route("/<int:personal_id>/reviews", methods=["GET"])
def list_reviews(personal_id):
    personal = db.session.get(PersonalProfile, personal_id)
    if not personal:
        return jsonify({"msg": "Personal not found"}), 404
    reviews = personal.reviews.order_by(Review.created_at.desc()).all()
    return jsonify([r.to_dict() for r in reviews]), 200


@personal_bp.route("/<int:personal_id>/reviews", methods=["POST"])
@student_required
def create_review(personal_id, current_user):
    personal = db.session.get(PersonalProfile, personal_id)
    if not personal:
        return jsonify({"msg": "Personal not found"}), 404

    data = ReviewSchema().load(_payload())
    review = Review(
        personal_id=personal.id,
        student_id=current_user.student.id,
        rating=data["rating"],
        comment=data.get("comment"),
    )
    db.session.add(review)
    db.session.flush()
    personal.recompute_rating()
    db.session.commit()
    return jsonify({
        "msg": "Review created",
        "review": review.to_dict(),
        "average_rating": float(personal.average_rating or 0),
        "total_ratings": personal.total_ratings,
    }), 201


# ---------- quote requests ----------

@personal_bp.route("/<int:personal_id>/quotes", methods=["POST"])
def create_quote(personal_id):
    """Public contact form on a personal's page."""
    if not db.session.get(PersonalProfile, personal_id):
        return jsonify({"msg": "Personal not found"}), 404

    data = QuoteRequestSchema().load(_payload())
    quote = QuoteRequest(personal_id=personal_id, **data)
    db.session.add(quote)
    db.session.commit()
    current_app.logger.info("Quote request %s for personal %s", quote.id, personal_id)
    return jsonify({"msg": "Quote request sent", "quote": quote.to_dict()}), 201


@personal_bp.route("/me/quotes", methods=["GET"])
@personal_required
def list_quotes(current_user):
    quotes = current_user.personal_profile.quote_requests.order_by(QuoteRequest.created_at.desc()).all()
    return jsonify([q.to_dict() for q in quotes]), 200


@personal_bp.route("/me/quotes/<int:quote_id>", methods=["PATCH"])
@personal_required
def update_quote(quote_id, current_user):
    quote, error = get_owned(QuoteRequest, quote_id, current_user.personal_profile.id, "Quote request")
    if error:
        return error
    data = QuoteStatusSchema().load(_payload())
    quote.status = data["status"]
    db.session.commit()
    return jsonify({"msg": "Quote request updated", "quote": quote.to_dict()}), 200


# ---------- services ----------

@personal_bp.route("/me/services", methods=["GET"])
@personal_required
def list_services(current_user):
    services = current_user.personal_profile.services.order_by(PersonalService.id).all()
    return jsonify([s.to_dict() for s in services]), 200


@personal_bp.route("/me/services", methods=["POST"])
@personal_required
def create_service(current_user):
    data = ServiceSchema().load(_payload())
    service = PersonalService(personal_id=current_user.personal_profile.id, **data)
    db.session.add(service)
    db.session.commit()
    return jsonify({"msg": "Service created", "service": service.to_dict()}), 201


@personal_bp.route("/me/services/<int:service_id>", methods=["PATCH"])
@personal_required
def update_service(service_id, current_user):
    service, error = get_owned(PersonalService, service_id, current_user.personal_profile.id, "Service")
    if error:
        return error
    data = ServiceSchema().load(_payload(), partial=True)
    for field, value in data.items():
        setattr(service, field, value)
    db.session.commit()
    return jsonify({"msg": "Service updated", "service": service.to_dict()}), 200


@personal_bp.route("/me/services/<int:service_id>", methods=["DELETE"])
@personal_required
def delete_service(service_id, current_user):
    service, error = get_owned(PersonalService, service_id, current_user.personal_profile.id, "Service")
    if error:
        return error
    db.session.delete(service)
    db.session.commit()
    return jsonify({"msg": "Service deleted"}), 200


# ---------- experience ----------

@personal_bp.route("/me/experience", methods=["GET"])
@personal_required
def list_experience(current_user):
    items = current_user.personal_profile.experience.order_by(PersonalExperience.start_year.desc()).all()
    return jsonify([e.to_dict() for e in items]), 200


@personal_bp.route("/me/experience", methods=["POST"])
@personal_required
def create_experience(current_user):
    data = ExperienceSchema().load(_payload())
    item = PersonalExperience(personal_id=current_user.personal_profile.id, **data)
    db.session.add(item)
    db.session.commit()
    return jsonify({"msg": "Experience created", "experience": item.to_dict()}), 201


@personal_bp.route("/me/experience/<int:experience_id>", methods=["PATCH"])
@personal_required
def update_experience(experience_id, current_user):
    item, error = get_owned(PersonalExperience, experience_id, current_user.personal_profile.id, "Experience")
    if error:
        return error
    data = ExperienceSchema().load(_payload(), partial=True)
    for field, value in data.items():
        setattr(item, field, value)
    if item.start_year and item.end_year and item.end_year < item.start_year:
        db.session.rollback()
        return jsonify({"msg": "End year must not be before start year"}), 400
    db.session.commit()
    return jsonify({"msg": "Experience updated", "experience": item.to_dict()}), 200


@personal_bp.route("/me/experience/<int:experience_id>", methods=["DELETE"])
@personal_required
def delete_experience(experience_id, current_user):
    item, error = get_owned(PersonalExperience, experience_id, current_user.personal_profile.id, "Experience")
    if error:
        return error
    db.session.delete(item)
    db.session.commit()
    return jsonify({"msg": "Experience deleted"}), 200


# ---------- gallery ----------

@personal_bp.route("/me/gallery", methods=["GET"])
@personal_required
def list_gallery(current_user):
    items = current_user.personal_profile.gallery.order_by(PersonalGalleryItem.order_index).all()
    return jsonify([g.to_dict() for g in items]), 200


@personal_bp.route("/me/gallery", methods=["POST"])
@personal_required
def create_gallery_item(current_user):
    data = GalleryItemSchema().load(_payload())
    profile = current_user.personal_profile
    if data.get("order_index") is None:
        data["order_index"] = profile.gallery.count()
    item = PersonalGalleryItem(personal_id=profile.id, **data)
    db.session.add(item)
    db.session.commit()
    return jsonify({"msg": "Image added", "item": item.to_dict()}), 201


@personal_bp.route("/me/gallery/<int:item_id>", methods=["DELETE"])
@personal_required
def delete_gallery_item(item_id, current_user):
    item, error = get_owned(PersonalGalleryItem, item_id, current_user.personal_profile.id, "Image")
    if error:
        return error
    db.session.delete(item)
    db.session.commit()
    return jsonify({"msg": "Image deleted"}), 200
