from .common import BaseSchema, NaiveDateTime, DateRangeQuerySchema, first_error
from .auth import RegisterSchema, LoginSchema, ChangePasswordSchema, UserUpdateSchema
from .marketplace import (
    PersonalProfileUpdateSchema, PersonalSearchSchema, ReviewSchema, QuoteRequestSchema,
    QuoteStatusSchema, ServiceSchema, ExperienceSchema, GalleryItemSchema,
)
from .students import StudentCreateSchema, StudentSelfRegisterSchema, StudentUpdateSchema
from .workouts import (
    WorkoutSchema, ExerciseSchema, ExerciseOrderSchema, SuggestionRequestSchema,
    TrendingQuerySchema, AssignmentSchema, CompleteAssignmentSchema, AssignmentStatusSchema,
)
from .scheduling import (
    AvailabilitySlotSchema, AppointmentSchema, AppointmentStatusSchema,
    PersonalEventSchema, CalendarQuerySchema,
)
from .notifications import NotificationSchema, ScheduledNotificationSchema, RecurringNotificationSchema
from .finance import FinancialRecordSchema, FinancialQuerySchema, FinancialExportSchema, StudentPlanSchema
