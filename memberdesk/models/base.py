"""
Base model with common fields and utility methods.
"""
from memberdesk import db
from memberdesk.utils.clock import utcnow


class BaseModel(db.Model):
    """
    Base model class that includes common fields and methods for all models.

    Rows are never removed by the application; ``is_deleted`` marks soft
    deletion and every query has to filter on it explicitly.
    """
    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    is_deleted = db.Column(db.Boolean, default=False, nullable=False)

    def touch(self, now=None):
        """Refresh the updated_at timestamp."""
        self.updated_at = now or utcnow()
        return self
