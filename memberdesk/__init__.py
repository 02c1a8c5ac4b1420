"""
MemberDesk Application Factory.
"""
import importlib
import logging
import os

import click
from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from flask_restx import Api
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text

# Initialize extensions
db = SQLAlchemy()
jwt = JWTManager()
migrate = Migrate()

logger = logging.getLogger(__name__)


def create_app(config_name=None):
    """
    Application Factory Pattern implementation.

    Args:
        config_name: Configuration name to use (development, testing, production).

    Returns:
        Flask application instance.
    """
    # Load environment variables
    load_dotenv()

    app = Flask(__name__)

    app_config = config_name or os.getenv("FLASK_ENV", "development")

    config_mapping = {
        'development': ('memberdesk.config.development_config', 'DevelopmentConfig'),
        'testing': ('memberdesk.config.testing_config', 'TestingConfig'),
        'production': ('memberdesk.config.production_config', 'ProductionConfig')
    }
    if app_config not in config_mapping:
        # Fall back to development config
        app_config = 'development'
    module_path, class_name = config_mapping[app_config]
    config_class = getattr(importlib.import_module(module_path), class_name)
    app.config.from_object(config_class)

    from memberdesk.logging_config import configure_logging
    configure_logging(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        fmt=app.config.get('LOG_FORMAT', 'console'),
    )
    logger.info("Loaded configuration class: %s", class_name)

    # Initialize extensions with app
    db.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)

    from memberdesk.tasks.celery_app import init_celery
    init_celery(app)

    # Import models to ensure they're registered with SQLAlchemy
    from memberdesk.models import (Business, Member, Membership,  # noqa: F401
                                   Notification, Payment, SubscriptionPlan,
                                   User)

    api = Api(
        app,
        version=app.config.get("API_VERSION", "1.0"),
        title=app.config.get("API_TITLE", "MemberDesk API"),
        description=app.config.get("API_DESCRIPTION", "Membership management API"),
        doc="/api/docs",
        authorizations={
            'Bearer Auth': {
                'type': 'apiKey',
                'in': 'header',
                'name': 'Authorization',
                'description': 'Enter: **Bearer &lt;JWT&gt;**'
            },
        },
        security='Bearer Auth'
    )

    from memberdesk.errors import register_app_error_handlers, register_error_handlers
    register_error_handlers(api)
    register_app_error_handlers(app)

    # Register namespaces
    from memberdesk.api.auth import auth_ns
    from memberdesk.api.business import business_ns
    from memberdesk.api.dashboard import dashboard_ns
    from memberdesk.api.jobs import jobs_ns
    from memberdesk.api.members import member_ns
    from memberdesk.api.memberships import membership_ns, renewal_ns
    from memberdesk.api.notifications import notification_ns
    from memberdesk.api.payments import payment_ns
    from memberdesk.api.plans import plan_ns

    api.add_namespace(auth_ns, path='/api/auth')
    api.add_namespace(business_ns, path='/api/business')
    api.add_namespace(member_ns, path='/api/members')
    api.add_namespace(plan_ns, path='/api/plans')
    api.add_namespace(membership_ns, path='/api/memberships')
    api.add_namespace(renewal_ns, path='/api/renewals')
    api.add_namespace(payment_ns, path='/api/payments')
    api.add_namespace(dashboard_ns, path='/api/dashboard')
    api.add_namespace(notification_ns, path='/api/notifications')
    api.add_namespace(jobs_ns, path='/api/jobs')

    @app.route('/health')
    def health_check():
        """Health check endpoint to verify the application is running."""
        return jsonify({
            'status': 'healthy',
            'environment': app_config,
            'database_connected': _check_db_connection()
        })

    def _check_db_connection():
        """Check if the database connection is working."""
        try:
            db.session.execute(text('SELECT 1'))
            return True
        except Exception:
            logger.exception("Database connection error")
            return False

    @app.cli.command('expire-memberships')
    def expire_memberships_command():
        """Run the membership expiry sweep once."""
        from memberdesk.services.expiry_service import ExpiryService
        result = ExpiryService().expire_memberships()
        click.echo(
            f"Scanned {result.scanned}, expired {result.expired}, failed {result.failed}"
        )

    @app.cli.command('send-renewal-reminders')
    @click.option('--days', type=int, default=None, help='Look-ahead window in days')
    def send_renewal_reminders_command(days):
        """Send renewal reminders for memberships expiring soon."""
        from memberdesk.services.expiry_service import ExpiryService
        sent = ExpiryService().send_renewal_reminders(days=days)
        click.echo(f"Sent {sent} renewal reminders")

    @app.shell_context_processor
    def shell_context():
        return {"app": app, "db": db}

    return app
