import logging

from bricks.extensions import db, scheduler
from bricks.services.notifications import dispatch_due

logger = logging.getLogger(__name__)


def dispatch_notifications():
    """Background job: send due scheduled and recurring notifications."""
    with scheduler.app.app_context():
        try:
            dispatch_due()
        except Exception:
            db.session.rollback()
            logger.exception("Notification dispatch failed")
            raise


def configure_scheduler(app):
    """Register background jobs and start the scheduler when enabled."""
    if not app.config.get("SCHEDULER_ENABLED"):
        return
    if scheduler.running:
        return
    scheduler.init_app(app)
    scheduler.add_job(
        id="dispatch_notifications",
        func=dispatch_notifications,
        trigger="interval",
        minutes=app.config["NOTIFICATION_DISPATCH_MINUTES"],
        replace_existing=True,
    )
    scheduler.start()
    app.logger.info("Scheduler started")
