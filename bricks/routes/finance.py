from flask import Blueprint, current_app, jsonify, request

from bricks.extensions import db
from bricks.models import FinancialRecord, Student, StudentPlan
from bricks.schemas import FinancialExportSchema, FinancialQuerySchema, FinancialRecordSchema, StudentPlanSchema
from bricks.services.reports import export_financial_report
from bricks.utils.dates import month_bounds, utc_today
from bricks.utils.decorators import personal_required
from bricks.utils.ownership import get_owned

finance_bp = Blueprint("finance", __name__)


def _payload():
    return request.get_json(silent=True) or {}


def _check_student(student_id, personal_id):
    """Error response when student_id is not one of the personal's students."""
    if student_id is None:
        return None
    student = db.session.get(Student, student_id)
    if not student or student.personal_id != personal_id:
        return jsonify({"msg": "Student not found"}), 404
    return None


# ---------- financial records ----------

@finance_bp.route("/financial-records", methods=["GET"])
@personal_required
def list_records(current_user):
    filters = FinancialQuerySchema().load(request.args.to_dict())
    records = _filtered(current_user.personal_profile, filters).all()
    return jsonify([r.to_dict() for r in records]), 200


def _filtered(profile, filters):
    query = profile.financial_records
    if filters["start_date"]:
        query = query.filter(FinancialRecord.date >= filters["start_date"])
    if filters["end_date"]:
        query = query.filter(FinancialRecord.date <= filters["end_date"])
    if filters["type"]:
        query = query.filter(FinancialRecord.type == filters["type"])
    if filters["category"]:
        query = query.filter(FinancialRecord.category == filters["category"])
    return query.order_by(FinancialRecord.date.desc(), FinancialRecord.id.desc())


@finance_bp.route("/financial-records/summary", methods=["GET"])
@personal_required
def summary(current_user):
    filters = FinancialQuerySchema().load(request.args.to_dict())
    first_day, last_day = month_bounds(utc_today())
    start = filters["start_date"] or first_day
    end = filters["end_date"] or last_day
    result = FinancialRecord.summarize(current_user.personal_profile.id, start, end)
    result.update({"start_date": start.isoformat(), "end_date": end.isoformat()})
    return jsonify(result), 200


@finance_bp.route("/financial-records/export", methods=["POST"])
@personal_required
def export_records(current_user):
    """Download the period's records as pdf, excel or csv (current month by default)."""
    profile = current_user.personal_profile
    filters = FinancialExportSchema().load(_payload())
    first_day, last_day = month_bounds(utc_today())
    filters["start_date"] = filters["start_date"] or first_day
    filters["end_date"] = filters["end_date"] or last_day

    records = _filtered(profile, filters).all()
    totals = FinancialRecord.summarize(profile.id, filters["start_date"], filters["end_date"])
    current_app.logger.info(
        "Personal %s exported %d financial record(s) as %s", profile.id, len(records), filters["format"]
    )
    return export_financial_report(
        filters["format"], records, totals, filters["start_date"], filters["end_date"]
    )


@finance_bp.route("/financial-records", methods=["POST"])
@personal_required
def create_record(current_user):
    profile = current_user.personal_profile
    data = FinancialRecordSchema().load(_payload())
    error = _check_student(data.get("student_id"), profile.id)
    if error:
        return error
    record = FinancialRecord(personal_id=profile.id, **data)
    db.session.add(record)
    db.session.commit()
    return jsonify({"msg": "Record created", "record": record.to_dict()}), 201


@finance_bp.route("/financial-records/<int:record_id>", methods=["GET"])
@personal_required
def get_record(record_id, current_user):
    record, error = get_owned(FinancialRecord, record_id, current_user.personal_profile.id, "Record")
    if error:
        return error
    return jsonify(record.to_dict()), 200


@finance_bp.route("/financial-records/<int:record_id>", methods=["PATCH"])
@personal_required
def update_record(record_id, current_user):
    profile = current_user.personal_profile
    record, error = get_owned(FinancialRecord, record_id, profile.id, "Record")
    if error:
        return error
    data = FinancialRecordSchema().load(_payload(), partial=True)
    error = _check_student(data.get("student_id"), profile.id)
    if error:
        return error
    for field, value in data.items():
        setattr(record, field, value)
    db.session.commit()
    return jsonify({"msg": "Record updated", "record": record.to_dict()}), 200


@finance_bp.route("/financial-records/<int:record_id>", methods=["DELETE"])
@personal_required
def delete_record(record_id, current_user):
    record, error = get_owned(FinancialRecord, record_id, current_user.personal_profile.id, "Record")
    if error:
        return error
    db.session.delete(record)
    db.session.commit()
    return jsonify({"msg": "Record deleted"}), 200


# ---------- student plans ----------

@finance_bp.route("/student-plans", methods=["GET"])
@personal_required
def list_plans(current_user):
    query = current_user.personal_profile.student_plans
    student_id = request.args.get("student_id", type=int)
    if student_id:
        query = query.filter(StudentPlan.student_id == student_id)
    plans = query.order_by(StudentPlan.start_date.desc()).all()
    return jsonify([p.to_dict() for p in plans]), 200


@finance_bp.route("/student-plans", methods=["POST"])
@personal_required
def create_plan(current_user):
    profile = current_user.personal_profile
    data = StudentPlanSchema().load(_payload())
    error = _check_student(data["student_id"], profile.id)
    if error:
        return error
    plan = StudentPlan(personal_id=profile.id, **data)
    db.session.add(plan)
    db.session.commit()
    return jsonify({"msg": "Plan created", "plan": plan.to_dict()}), 201
