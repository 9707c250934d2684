from datetime import datetime
from sqlalchemy import or_, select
from bricks.extensions import db
from bricks.models.financial_record import FinancialRecord

PLAN_TYPES = ("monthly", "quarterly", "semiannual", "annual")

class StudentPlan(db.Model):
    __tablename__ = "student_plans"

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(
        db.Integer, db.ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    plan_type = db.Column(
        db.String(20),
        db.CheckConstraint("plan_type IN ('monthly','quarterly','semiannual','annual')"),
        nullable=False,
    )
    status = db.Column(
        db.String(20),
        db.CheckConstraint("status IN ('active','inactive','expired')"),
        default="active",
        nullable=False,
    )
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=True)
    price = db.Column(db.Numeric(10, 2, asdecimal=False))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    student = db.relationship("Student", back_populates="plans")
    personal = db.relationship("PersonalProfile", back_populates="student_plans")

    @classmethod
    def pending_amount(cls, personal_id, start_date, end_date):
        """Price of active plans running in the period whose student paid nothing in it."""
        paid = select(FinancialRecord.student_id).where(
            FinancialRecord.personal_id == personal_id,
            FinancialRecord.type == "income",
            FinancialRecord.student_id.isnot(None),
            FinancialRecord.date >= start_date,
            FinancialRecord.date <= end_date,
        )
        plans = cls.query.filter(
            cls.personal_id == personal_id,
            cls.status == "active",
            cls.start_date <= end_date,
            or_(cls.end_date.is_(None), cls.end_date >= start_date),
            cls.student_id.not_in(paid),
        ).all()
        return round(sum(float(p.price or 0) for p in plans), 2)

    def to_dict(self):
        return {
            "id": self.id,
            "student_id": self.student_id,
            "personal_id": self.personal_id,
            "student_name": self.student.name if self.student else None,
            "plan_type": self.plan_type,
            "status": self.status,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "price": self.price,
        }
