"""
Base configuration module with common settings.
"""
import os


class BaseConfig:
    """Base configuration class with common settings."""

    # Flask settings
    SECRET_KEY = os.getenv("SECRET_KEY", "default-dev-key-not-for-production")
    DEBUG = False
    TESTING = False

    # Database settings
    DB_ENGINE = os.getenv("DB_ENGINE", "mysql")
    DB_USER = os.getenv("DB_USER", "user")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "password")
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_PORT = os.getenv("DB_PORT", "3306")
    DB_NAME = os.getenv("DB_NAME", "memberdesk_db")

    # Use pymysql if DB_ENGINE doesn't specify dialect
    if DB_ENGINE == "mysql":
        SQLALCHEMY_DATABASE_URI = f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
    else:
        SQLALCHEMY_DATABASE_URI = f"{DB_ENGINE}://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", SQLALCHEMY_DATABASE_URI)

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT settings
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "default-jwt-key-not-for-production")
    JWT_ACCESS_TOKEN_EXPIRES = int(os.getenv("JWT_ACCESS_TOKEN_EXPIRES", 3600))  # 1 hour
    JWT_REFRESH_TOKEN_EXPIRES = int(os.getenv("JWT_REFRESH_TOKEN_EXPIRES", 604800))  # 7 days
    JWT_ERROR_MESSAGE_KEY = "message"

    # Let flask-jwt-extended errors reach their handlers through flask-restx
    PROPAGATE_EXCEPTIONS = True

    # Celery settings
    CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
    CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/0")
    CELERY_TASK_ALWAYS_EAGER = False

    # Scheduler settings (UTC)
    EXPIRY_SWEEP_HOUR = int(os.getenv("EXPIRY_SWEEP_HOUR", 0))
    EXPIRY_SWEEP_MINUTE = int(os.getenv("EXPIRY_SWEEP_MINUTE", 5))
    RENEWAL_REMINDER_DAYS = int(os.getenv("RENEWAL_REMINDER_DAYS", 3))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.getenv("LOG_FORMAT", "console")

    # Pagination
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", 10))
    MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", 100))

    # API settings
    API_TITLE = "MemberDesk API"
    API_VERSION = "1.0"
    API_DESCRIPTION = "Multi-tenant membership, plan and payment management API"

    # Keep NotFound messages free of flask-restx route suggestions
    ERROR_404_HELP = False
