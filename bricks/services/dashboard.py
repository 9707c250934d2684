from collections import Counter
from datetime import datetime, timedelta

from bricks.models import Appointment, FinancialRecord, StudentPlan
from bricks.utils.dates import day_bounds, month_bounds, utc_today

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
UNKNOWN_CITY = "Not informed"


def short_day_name(day):
    return DAY_NAMES[(day.weekday() + 1) % 7]


def weekly_productivity(appointments, today):
    """Completed appointments per day for the last 7 days, oldest first."""
    counts = Counter(
        a.start_time.date() for a in appointments if a.status == "completed"
    )
    result = []
    for offset in range(6, -1, -1):
        day = today - timedelta(days=offset)
        result.append({"day": short_day_name(day), "date": day.isoformat(), "count": counts.get(day, 0)})
    return result


def personal_dashboard(profile, today=None):
    today = today or utc_today()
    students = profile.registered_students().all()
    appointments = profile.appointments.all()

    day_start, day_end = day_bounds(today)
    today_appointments = sum(
        1 for a in appointments
        if day_start <= a.start_time < day_end and a.status != "cancelled"
    )

    status_counts = Counter(s.student_status or "training" for s in students)
    city_counts = Counter(s.city or UNKNOWN_CITY for s in students)
    birthdays = [
        s.to_dict(with_user=True) for s in students
        if s.birth_date and s.birth_date.month == today.month
    ]
    first_day, last_day = month_bounds(today)
    finances = FinancialRecord.summarize(profile.id, first_day, last_day)
    finances["pending_payments"] = StudentPlan.pending_amount(profile.id, first_day, last_day)

    return {
        "total_students": len(students),
        "active_students": sum(1 for s in students if s.registration_status == "approved"),
        # invitations count as pending before anyone signs up
        "pending_students": profile.students.filter_by(registration_status="pending").count(),
        "today_appointments": today_appointments,
        "active_workouts": profile.workouts.count(),
        "average_rating": float(profile.average_rating or 0),
        "weekly_productivity": weekly_productivity(appointments, today),
        "month_birthdays": birthdays,
        "students_by_status": [{"status": k, "count": v} for k, v in status_counts.items()],
        "students_by_city": [{"city": k, "count": v} for k, v in city_counts.items()],
        "financial_summary": finances,
    }


def personal_stats(profile, now=None):
    now = now or datetime.utcnow()
    upcoming = profile.appointments.filter(
        Appointment.start_time > now,
        Appointment.status != "cancelled",
    ).count()
    return {
        "total_students": profile.registered_students().count(),
        "active_workouts": profile.workouts.count(),
        "upcoming_appointments": upcoming,
        "average_rating": float(profile.average_rating or 0),
        "total_ratings": profile.total_ratings or 0,
    }


def student_stats(student, now=None):
    now = now or datetime.utcnow()
    assignments = student.assignments.all()
    active = sum(1 for a in assignments if a.status == "active")
    completed = sum(1 for a in assignments if a.status == "completed")
    upcoming = student.appointments.filter(
        Appointment.start_time > now,
        Appointment.status != "cancelled",
    ).count()
    total = len(assignments)
    return {
        "active_workouts": active,
        "completed_workouts": completed,
        "upcoming_appointments": upcoming,
        "weekly_progress": round(completed / total * 100) if total else 0,
    }
