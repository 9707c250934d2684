from flask import Blueprint

schedule_bp = Blueprint('schedule', __name__)

from . import slots, appointments, events, calendar
