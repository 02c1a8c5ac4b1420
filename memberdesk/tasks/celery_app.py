"""
Celery application and beat schedule.
"""
from celery import Celery
from celery.schedules import crontab
from flask import has_app_context

celery = Celery("memberdesk", include=["memberdesk.tasks.expiry_tasks"])

celery.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    worker_prefetch_multiplier=1,
    task_acks_late=True,
)


def build_beat_schedule(config):
    """Daily sweep plus daily renewal reminders, both in UTC."""
    hour = config.get("EXPIRY_SWEEP_HOUR", 0)
    minute = config.get("EXPIRY_SWEEP_MINUTE", 5)
    return {
        "expire-memberships-daily": {
            "task": "memberdesk.tasks.expire_memberships",
            "schedule": crontab(hour=hour, minute=minute),
        },
        "send-renewal-reminders-daily": {
            "task": "memberdesk.tasks.send_renewal_reminders",
            "schedule": crontab(hour=hour, minute=(minute + 30) % 60),
        },
    }


def init_celery(app):
    """Bind Celery to the Flask app so tasks run inside an app context."""
    celery.conf.update(
        broker_url=app.config.get("CELERY_BROKER_URL"),
        result_backend=app.config.get("CELERY_RESULT_BACKEND"),
        task_always_eager=app.config.get("CELERY_TASK_ALWAYS_EAGER", False),
        beat_schedule=build_beat_schedule(app.config),
    )

    class ContextTask(celery.Task):
        abstract = True

        def __call__(self, *args, **kwargs):
            if has_app_context():
                return super().__call__(*args, **kwargs)
            with app.app_context():
                return super().__call__(*args, **kwargs)

    celery.Task = ContextTask
    app.extensions["celery"] = celery
    return celery
