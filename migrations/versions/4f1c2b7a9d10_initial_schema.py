"""initial schema

Revision ID: 4f1c2b7a9d10
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f1c2b7a9d10'
down_revision = None
branch_labels = None
depends_on = None


def _personal_fk():
    return sa.Column('personal_id', sa.Integer(),
                     sa.ForeignKey('personal_profiles.id', ondelete='CASCADE'), nullable=False)


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(150), nullable=False),
        sa.Column('email', sa.String(120), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('user_type', sa.String(20), sa.CheckConstraint("user_type IN ('personal','student')"), nullable=False),
        sa.Column('photo_url', sa.String(255)),
        sa.Column('must_change_password', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_user_type', 'users', ['user_type'])

    op.create_table(
        'personal_profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('bio', sa.Text()),
        sa.Column('specialties', sa.JSON()),
        sa.Column('city', sa.String(100)),
        sa.Column('neighborhood', sa.String(100)),
        sa.Column('cref', sa.String(30)),
        sa.Column('average_price', sa.Numeric(10, 2)),
        sa.Column('average_rating', sa.Numeric(3, 2)),
        sa.Column('total_ratings', sa.Integer()),
    )
    op.create_index('ix_personal_profiles_user_id', 'personal_profiles', ['user_id'], unique=True)
    op.create_index('ix_personal_profiles_city', 'personal_profiles', ['city'])

    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=True),
        sa.Column('personal_id', sa.Integer(), sa.ForeignKey('personal_profiles.id', ondelete='SET NULL'), nullable=True),
        sa.Column('goals', sa.Text()),
        sa.Column('notes', sa.Text()),
        sa.Column('phone', sa.String(30)),
        sa.Column('birth_date', sa.Date()),
        sa.Column('gender', sa.String(20)),
        sa.Column('city', sa.String(100)),
        sa.Column('state', sa.String(50)),
        sa.Column('student_status', sa.String(30),
                  sa.CheckConstraint("student_status IN ('training','single_consultation')")),
        sa.Column('registration_status', sa.String(20),
                  sa.CheckConstraint("registration_status IN ('pending','approved','rejected')"), nullable=False),
        sa.Column('registration_token', sa.String(64), unique=True),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_index('ix_students_user_id', 'students', ['user_id'], unique=True)
    op.create_index('ix_students_personal_id', 'students', ['personal_id'])
    op.create_index('ix_students_registration_status', 'students', ['registration_status'])

    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        _personal_fk(),
        sa.Column('name', sa.String(150), nullable=False),
        sa.Column('objective', sa.String(100)),
        sa.Column('level', sa.String(20)),
        sa.Column('description', sa.Text()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_workouts_personal_id', 'workouts', ['personal_id'])

    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise_name', sa.String(150), nullable=False),
        sa.Column('video_url', sa.String(255)),
        sa.Column('muscle_group', sa.String(50)),
        sa.Column('equipment', sa.String(100)),
        sa.Column('sets', sa.Integer()),
        sa.Column('reps', sa.Integer()),
        sa.Column('weight', sa.Numeric(6, 2)),
        sa.Column('time_in_seconds', sa.Integer()),
        sa.Column('rest_time_seconds', sa.Integer()),
        sa.Column('observations', sa.Text()),
        sa.Column('order_index', sa.Integer(), nullable=False),
    )
    op.create_index('ix_workout_exercises_workout_id', 'workout_exercises', ['workout_id'])
    op.create_index('idx_workout_exercises_order', 'workout_exercises', ['workout_id', 'order_index'])

    op.create_table(
        'student_workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime()),
        sa.Column('status', sa.String(20), sa.CheckConstraint("status IN ('active','completed','paused')"), nullable=False),
        sa.Column('feedback', sa.Text()),
        sa.Column('completed_at', sa.DateTime()),
    )
    op.create_index('ix_student_workouts_student_id', 'student_workouts', ['student_id'])
    op.create_index('ix_student_workouts_workout_id', 'student_workouts', ['workout_id'])
    op.create_index('ix_student_workouts_status', 'student_workouts', ['status'])

    op.create_table(
        'availability_slots',
        sa.Column('id', sa.Integer(), primary_key=True),
        _personal_fk(),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('is_recurring', sa.Boolean(), nullable=False),
        sa.CheckConstraint('end_time > start_time', name='ck_availability_slots_range'),
    )
    op.create_index('ix_availability_slots_personal_id', 'availability_slots', ['personal_id'])
    op.create_index('idx_availability_slots_personal_start', 'availability_slots', ['personal_id', 'start_time'])

    op.create_table(
        'appointments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        _personal_fk(),
        sa.Column('slot_id', sa.Integer(), sa.ForeignKey('availability_slots.id', ondelete='SET NULL')),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('status', sa.String(20),
                  sa.CheckConstraint("status IN ('pending','confirmed','cancelled','completed')"), nullable=False),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('end_time > start_time', name='ck_appointments_range'),
    )
    op.create_index('ix_appointments_student_id', 'appointments', ['student_id'])
    op.create_index('ix_appointments_personal_id', 'appointments', ['personal_id'])
    op.create_index('ix_appointments_status', 'appointments', ['status'])
    op.create_index('idx_appointments_personal_start', 'appointments', ['personal_id', 'start_time'])

    op.create_table(
        'personal_events',
        sa.Column('id', sa.Integer(), primary_key=True),
        _personal_fk(),
        sa.Column('title', sa.String(150), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('color', sa.String(30)),
        sa.Column('created_at', sa.DateTime()),
        sa.CheckConstraint('end_time > start_time', name='ck_personal_events_range'),
    )
    op.create_index('ix_personal_events_personal_id', 'personal_events', ['personal_id'])
    op.create_index('idx_personal_events_personal_start', 'personal_events', ['personal_id', 'start_time'])

    op.create_table(
        'reviews',
        sa.Column('id', sa.Integer(), primary_key=True),
        _personal_fk(),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='SET NULL')),
        sa.Column('rating', sa.Integer(), sa.CheckConstraint('rating BETWEEN 1 AND 5'), nullable=False),
        sa.Column('comment', sa.Text()),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_index('ix_reviews_personal_id', 'reviews', ['personal_id'])

    op.create_table(
        'quote_requests',
        sa.Column('id', sa.Integer(), primary_key=True),
        _personal_fk(),
        sa.Column('name', sa.String(150), nullable=False),
        sa.Column('email', sa.String(120), nullable=False),
        sa.Column('phone', sa.String(30)),
        sa.Column('message', sa.Text()),
        sa.Column('status', sa.String(20),
                  sa.CheckConstraint("status IN ('pending','viewed','responded','closed')"), nullable=False),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_index('ix_quote_requests_personal_id', 'quote_requests', ['personal_id'])

    op.create_table(
        'personal_services',
        sa.Column('id', sa.Integer(), primary_key=True),
        _personal_fk(),
        sa.Column('name', sa.String(150), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('price', sa.Numeric(10, 2)),
        sa.Column('duration_minutes', sa.Integer()),
    )
    op.create_index('ix_personal_services_personal_id', 'personal_services', ['personal_id'])

    op.create_table(
        'personal_experience',
        sa.Column('id', sa.Integer(), primary_key=True),
        _personal_fk(),
        sa.Column('title', sa.String(150), nullable=False),
        sa.Column('company', sa.String(150)),
        sa.Column('start_year', sa.Integer()),
        sa.Column('end_year', sa.Integer()),
        sa.Column('description', sa.Text()),
    )
    op.create_index('ix_personal_experience_personal_id', 'personal_experience', ['personal_id'])

    op.create_table(
        'personal_gallery',
        sa.Column('id', sa.Integer(), primary_key=True),
        _personal_fk(),
        sa.Column('image_url', sa.String(255), nullable=False),
        sa.Column('caption', sa.String(255)),
        sa.Column('order_index', sa.Integer(), nullable=False),
    )
    op.create_index('ix_personal_gallery_personal_id', 'personal_gallery', ['personal_id'])

    op.create_table(
        'student_plans',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        _personal_fk(),
        sa.Column('plan_type', sa.String(20),
                  sa.CheckConstraint("plan_type IN ('monthly','quarterly','semiannual','annual')"), nullable=False),
        sa.Column('status', sa.String(20),
                  sa.CheckConstraint("status IN ('active','inactive','expired')"), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date()),
        sa.Column('price', sa.Numeric(10, 2)),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_index('ix_student_plans_student_id', 'student_plans', ['student_id'])
    op.create_index('ix_student_plans_personal_id', 'student_plans', ['personal_id'])

    op.create_table(
        'financial_records',
        sa.Column('id', sa.Integer(), primary_key=True),
        _personal_fk(),
        sa.Column('type', sa.String(10), sa.CheckConstraint("type IN ('income','expense')"), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('students.id', ondelete='SET NULL')),
        sa.Column('created_at', sa.DateTime()),
        sa.CheckConstraint('amount > 0', name='ck_financial_records_amount'),
    )
    op.create_index('ix_financial_records_personal_id', 'financial_records', ['personal_id'])
    op.create_index('ix_financial_records_date', 'financial_records', ['date'])
    op.create_index('idx_financial_records_personal_date', 'financial_records', ['personal_id', 'date'])

    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), primary_key=True),
        _personal_fk(),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('type', sa.String(20),
                  sa.CheckConstraint("type IN ('immediate','scheduled','recurring')"), nullable=False),
        sa.Column('recipient_type', sa.String(20),
                  sa.CheckConstraint("recipient_type IN ('student','group','user')"), nullable=False),
        sa.Column('recipient_id', sa.Integer()),
        sa.Column('recipient_group', sa.String(20),
                  sa.CheckConstraint("recipient_group IN ('all_active','inactive_30d','new_students')")),
        sa.Column('channel', sa.String(20),
                  sa.CheckConstraint("channel IN ('in_app','email','whatsapp')"), nullable=False),
        sa.Column('status', sa.String(20),
                  sa.CheckConstraint("status IN ('pending','sent','cancelled','paused')"), nullable=False),
        sa.Column('scheduled_at', sa.DateTime()),
        sa.Column('sent_at', sa.DateTime()),
        sa.Column('recurring_frequency', sa.String(10),
                  sa.CheckConstraint("recurring_frequency IN ('daily','weekly','monthly')")),
        sa.Column('recurring_time', sa.String(5)),
        sa.Column('recurring_days', sa.JSON()),
        sa.Column('last_sent_at', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_notifications_personal_id', 'notifications', ['personal_id'])
    op.create_index('ix_notifications_type', 'notifications', ['type'])
    op.create_index('ix_notifications_status', 'notifications', ['status'])
    op.create_index('idx_notifications_personal_type', 'notifications', ['personal_id', 'type'])
    op.create_index('idx_notifications_recipient', 'notifications', ['recipient_type', 'recipient_id'])
    op.create_index('idx_notifications_scheduled_at', 'notifications', ['scheduled_at'])


def downgrade():
    for table in (
        'notifications', 'financial_records', 'student_plans', 'personal_gallery',
        'personal_experience', 'personal_services', 'quote_requests', 'reviews',
        'personal_events', 'appointments', 'availability_slots', 'student_workouts',
        'workout_exercises', 'workouts', 'students', 'personal_profiles', 'users',
    ):
        op.drop_table(table)
