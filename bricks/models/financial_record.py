from datetime import datetime
from sqlalchemy import func
from bricks.extensions import db

class FinancialRecord(db.Model):
    __tablename__ = "financial_records"

    id = db.Column(db.Integer, primary_key=True)
    personal_id = db.Column(
        db.Integer, db.ForeignKey("personal_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = db.Column(
        db.String(10),
        db.CheckConstraint("type IN ('income','expense')"),
        nullable=False,
    )
    category = db.Column(db.String(50), nullable=False)
    description = db.Column(db.Text)
    amount = db.Column(db.Numeric(10, 2, asdecimal=False), nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)
    student_id = db.Column(db.Integer, db.ForeignKey("students.id", ondelete="SET NULL"), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    personal = db.relationship("PersonalProfile", back_populates="financial_records")
    student = db.relationship("Student")

    __table_args__ = (
        db.CheckConstraint("amount > 0", name="ck_financial_records_amount"),
        db.Index("idx_financial_records_personal_date", "personal_id", "date"),
    )

    @classmethod
    def summarize(cls, personal_id, start_date, end_date):
        """Income/expense totals for [start_date, end_date]."""
        rows = (
            db.session.query(cls.type, func.coalesce(func.sum(cls.amount), 0))
            .filter(
                cls.personal_id == personal_id,
                cls.date >= start_date,
                cls.date <= end_date,
            )
            .group_by(cls.type)
            .all()
        )
        totals = {kind: float(total or 0) for kind, total in rows}
        income = round(totals.get("income", 0.0), 2)
        expenses = round(totals.get("expense", 0.0), 2)
        return {"income": income, "expenses": expenses, "balance": round(income - expenses, 2)}

    def to_dict(self):
        return {
            "id": self.id,
            "personal_id": self.personal_id,
            "type": self.type,
            "category": self.category,
            "description": self.description,
            "amount": self.amount,
            "date": self.date.isoformat() if self.date else None,
            "student_id": self.student_id,
            "student_name": self.student.name if self.student else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
