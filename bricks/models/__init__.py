from .user import User
from .personal_profile import PersonalProfile
from .student import Student

from .workout import Workout
from .workout_exercise import WorkoutExercise
from .student_workout import StudentWorkout

from .availability_slot import AvailabilitySlot
from .appointment import Appointment
from .personal_event import PersonalEvent

from .review import Review
from .quote_request import QuoteRequest
from .personal_content import PersonalService, PersonalExperience, PersonalGalleryItem

from .student_plan import StudentPlan
from .financial_record import FinancialRecord
from .notification import Notification

__all__ = [
    "User", "PersonalProfile", "Student",
    "Workout", "WorkoutExercise", "StudentWorkout",
    "AvailabilitySlot", "Appointment", "PersonalEvent",
    "Review", "QuoteRequest", "PersonalService", "PersonalExperience", "PersonalGalleryItem",
    "StudentPlan", "FinancialRecord", "Notification",
]
