"""
Test configuration module.
"""
import logging

from memberdesk import create_app
from memberdesk.logging_config import build_logging_config
from memberdesk.tasks.celery_app import build_beat_schedule


def test_development_config():
    """Test development configuration."""
    app = create_app('development')
    assert app.config['DEBUG'] is True
    assert app.config['TESTING'] is False
    assert 'memberdesk_dev_db' in app.config['SQLALCHEMY_DATABASE_URI']


def test_testing_config():
    """Test testing configuration."""
    app = create_app('testing')
    assert app.config['DEBUG'] is True
    assert app.config['TESTING'] is True
    assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
    assert app.config['CELERY_TASK_ALWAYS_EAGER'] is True


def test_production_config():
    """Test production configuration."""
    app = create_app('production')
    assert app.config['DEBUG'] is False
    assert app.config['TESTING'] is False
    assert app.config['LOG_FORMAT'] == 'json'


def test_unknown_config_falls_back_to_development():
    app = create_app('staging')
    assert app.config['DEBUG'] is True


def test_scheduler_defaults():
    app = create_app('testing')
    assert app.config['EXPIRY_SWEEP_HOUR'] == 0
    assert app.config['EXPIRY_SWEEP_MINUTE'] == 5
    assert app.config['RENEWAL_REMINDER_DAYS'] == 3
    assert app.extensions['celery'].conf.task_always_eager is True


def test_beat_schedule_runs_daily():
    schedule = build_beat_schedule({'EXPIRY_SWEEP_HOUR': 1, 'EXPIRY_SWEEP_MINUTE': 45})

    sweep = schedule['expire-memberships-daily']
    assert sweep['task'] == 'memberdesk.tasks.expire_memberships'
    assert sweep['schedule'].hour == {1}
    assert sweep['schedule'].minute == {45}

    reminders = schedule['send-renewal-reminders-daily']
    assert reminders['task'] == 'memberdesk.tasks.send_renewal_reminders'
    assert reminders['schedule'].minute == {15}


def test_logging_config_formatters():
    config = build_logging_config(level='DEBUG', fmt='json')
    assert config['handlers']['console']['formatter'] == 'json'
    assert config['loggers']['memberdesk']['level'] == 'DEBUG'
    assert config['formatters']['json']['()'] == 'pythonjsonlogger.jsonlogger.JsonFormatter'

    console = build_logging_config(fmt='console')
    assert console['handlers']['console']['formatter'] == 'console'


def test_create_app_configures_package_logger():
    create_app('testing')
    assert logging.getLogger('memberdesk').level == logging.WARNING


def test_not_found_help_disabled():
    app = create_app('testing')
    assert app.config['ERROR_404_HELP'] is False
