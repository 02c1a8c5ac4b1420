"""
Development environment configuration module.
"""
import os

from memberdesk.config.base_config import BaseConfig


class DevelopmentConfig(BaseConfig):
    """Development environment configuration class."""

    DEBUG = True
    SQLALCHEMY_ECHO = True  # Log SQL queries

    DB_NAME = "memberdesk_dev_db"
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "SQLALCHEMY_DATABASE_URI",
        "mysql+pymysql://user:password@db:3306/memberdesk_dev_db"
    )

    # JWT settings for development
    JWT_ACCESS_TOKEN_EXPIRES = 86400  # 24 hours for easier development
    JWT_REFRESH_TOKEN_EXPIRES = 604800  # 7 days

    LOG_LEVEL = "DEBUG"
