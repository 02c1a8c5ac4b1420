"""
Base repository over an explicit SQLAlchemy session.
"""
from memberdesk import db


class Repository:
    """
    Generic persistence operations for one model.

    Every read goes through ``_query`` which applies the soft-delete filter;
    models with a ``business_id`` column are additionally scoped when a
    business id is supplied.
    """

    model = None

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def _query(self, business_id=None):
        query = self.session.query(self.model).filter(self.model.is_deleted.is_(False))
        if business_id is not None:
            query = query.filter(self.model.business_id == business_id)
        return query

    def lookup(self, entity_id, business_id=None, for_update=False):
        """Query for one entity, locking its row when for_update is set."""
        query = self._query(business_id).filter(self.model.id == entity_id)
        if for_update:
            query = query.with_for_update()
        return query

    def get(self, entity_id, business_id=None, for_update=False):
        """
        Return the entity or None. Cross-tenant rows are reported as missing.

        With for_update=True the row stays locked until the transaction ends.
        """
        if entity_id is None:
            return None
        return self.lookup(entity_id, business_id, for_update=for_update).first()

    def add(self, entity):
        """Stage a new entity and flush so it gets an id."""
        self.session.add(entity)
        self.session.flush()
        return entity

    def update(self, entity, now=None):
        """Stage changes on an existing entity, refreshing updated_at."""
        entity.touch(now)
        self.session.add(entity)
        return entity
