"""
Calendar rendering for the week and day views.

Items (appointments, personal events, availability) are bucketed into fixed
cells; an item lands in every cell whose interval it overlaps.
"""
from datetime import datetime, time, timedelta

from bricks.models import Appointment, AvailabilitySlot, PersonalEvent
from bricks.utils.dates import minutes_between

WEEK = timedelta(days=7)

EVENT_COLOR = "purple"
AVAILABILITY_COLOR = "gray"
APPOINTMENT_COLORS = {
    "pending": "orange",
    "confirmed": "green",
    "completed": "blue",
}


def overlaps(start, end, other_start, other_end):
    return start < other_end and end > other_start


def visible_range(view, day):
    """[start, end) of the rendered range; weeks start on Sunday."""
    if view == "day":
        start = datetime.combine(day, time.min)
        return start, start + timedelta(days=1)
    sunday = day - timedelta(days=(day.weekday() + 1) % 7)
    start = datetime.combine(sunday, time.min)
    return start, start + WEEK


def project_weekly(start, end, range_start, range_end):
    """Weekly repetitions of [start, end) from the original date on that overlap the range."""
    occurrences = []
    if end <= range_start:
        skip = (range_start - end) // WEEK
        start, end = start + skip * WEEK, end + skip * WEEK
    while start < range_end:
        if overlaps(start, end, range_start, range_end):
            occurrences.append((start, end))
        start, end = start + WEEK, end + WEEK
    return occurrences


def calendar_item(kind, item_id, title, start, end, color=None, status=None, is_recurring=False):
    return {
        "type": kind,
        "id": item_id,
        "title": title,
        "start": start.isoformat(),
        "end": end.isoformat(),
        "minutes": minutes_between(start, end),
        "color": color,
        "status": status,
        "is_recurring": is_recurring,
        "_start": start,
        "_end": end,
    }


def build_days(range_start, range_end, items, start_hour=6, end_hour=21, slot_minutes=30):
    """Grid of days, each split into `slot_minutes` cells between the given hours."""
    step = timedelta(minutes=slot_minutes)
    days = []
    day = range_start
    while day < range_end:
        cells = []
        cell_start = day + timedelta(hours=start_hour)
        day_end = day + timedelta(hours=end_hour)
        while cell_start < day_end:
            cell_end = cell_start + step
            cells.append({
                "start": cell_start.isoformat(),
                "end": cell_end.isoformat(),
                "items": [
                    public(item) for item in items
                    if overlaps(item["_start"], item["_end"], cell_start, cell_end)
                ],
            })
            cell_start = cell_end
        days.append({"date": day.date().isoformat(), "cells": cells})
        day += timedelta(days=1)
    return days


def public(item):
    return {key: value for key, value in item.items() if not key.startswith("_")}


def collect_items(user, range_start, range_end):
    """Everything the user sees in [range_start, range_end), sorted by start."""
    items = []

    query = Appointment.query.filter(
        Appointment.status != "cancelled",
        Appointment.start_time < range_end,
        Appointment.end_time > range_start,
    )
    if user.is_personal:
        query = query.filter(Appointment.personal_id == user.personal_profile.id)
    else:
        query = query.filter(Appointment.student_id == user.student.id)

    for appointment in query.all():
        if user.is_personal:
            other = appointment.student.name if appointment.student else None
        else:
            other = appointment.personal.user.name if appointment.personal else None
        items.append(calendar_item(
            "appointment",
            appointment.id,
            f"Appointment with {other}" if other else "Appointment",
            appointment.start_time,
            appointment.end_time,
            color=APPOINTMENT_COLORS.get(appointment.status),
            status=appointment.status,
        ))

    if user.is_personal:
        personal_id = user.personal_profile.id
        events = PersonalEvent.query.filter(
            PersonalEvent.personal_id == personal_id,
            PersonalEvent.start_time < range_end,
            PersonalEvent.end_time > range_start,
        ).all()
        for event in events:
            items.append(calendar_item(
                "event", event.id, event.title, event.start_time, event.end_time,
                color=event.color or EVENT_COLOR,
            ))

        slots = AvailabilitySlot.query.filter(
            AvailabilitySlot.personal_id == personal_id,
            AvailabilitySlot.start_time < range_end,
        ).all()
        for slot in slots:
            if slot.is_recurring:
                occurrences = project_weekly(slot.start_time, slot.end_time, range_start, range_end)
            elif overlaps(slot.start_time, slot.end_time, range_start, range_end):
                occurrences = [(slot.start_time, slot.end_time)]
            else:
                occurrences = []
            for start, end in occurrences:
                items.append(calendar_item(
                    "availability", slot.id, "Available", start, end,
                    color=AVAILABILITY_COLOR, is_recurring=slot.is_recurring,
                ))

    items.sort(key=lambda item: (item["_start"], item["type"]))
    return items


def render_calendar(user, view, day, start_hour=6, end_hour=21, slot_minutes=30):
    range_start, range_end = visible_range(view, day)
    items = collect_items(user, range_start, range_end)
    return {
        "view": view,
        "start": range_start.isoformat(),
        "end": range_end.isoformat(),
        "slot_minutes": slot_minutes,
        "start_hour": start_hour,
        "end_hour": end_hour,
        "days": build_days(range_start, range_end, items, start_hour, end_hour, slot_minutes),
        "items": [public(item) for item in items],
    }
