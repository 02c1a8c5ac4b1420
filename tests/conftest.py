"""
Pytest configuration and fixtures.
"""
import json
from datetime import datetime, timedelta

import pytest

from memberdesk import create_app
from memberdesk import db as _db
from memberdesk.services import (AuthService, MemberService, MembershipService,
                                 PlanService)


class FrozenClock:
    """Callable clock returning a fixed naive UTC instant that tests can move."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture(scope="session")
def app():
    """
    Create a Flask application configured for testing.

    Returns:
        Flask: The Flask application instance.
    """
    app = create_app('testing')

    # Keep one app context for the whole run; the in-memory database lives
    # as long as its single pooled connection.
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for the Flask application.

    Args:
        app: The Flask application fixture.

    Returns:
        FlaskClient: A test client for the Flask application.
    """
    return app.test_client()


@pytest.fixture(scope="function", autouse=True)
def db_session(app):
    """
    Give every test an empty database.

    Services commit for real, so tables are recreated after each test instead
    of rolling back an outer transaction.
    """
    yield _db.session
    _db.session.rollback()
    _db.session.remove()
    _db.drop_all()
    _db.create_all()


@pytest.fixture(scope="function")
def db(app):
    """
    Fixture for the SQLAlchemy database object.

    Returns:
        SQLAlchemy db: The database object for testing.
    """
    return _db


@pytest.fixture
def clock():
    """A clock frozen at 2024-01-01 00:00 UTC."""
    return FrozenClock(datetime(2024, 1, 1))


def register_owner(email="owner@example.com", business_name="Sunrise Gym"):
    return AuthService().register(
        email=email,
        password="password123",
        first_name="Olivia",
        last_name="Owner",
        business_name=business_name,
    )


@pytest.fixture
def owner(app):
    """Registered owner with a business; includes tokens and ids."""
    return register_owner()


@pytest.fixture
def other_owner(app):
    """A second, unrelated business."""
    return register_owner(email="rival@example.com", business_name="Moonlight Fitness")


@pytest.fixture
def business_id(owner):
    return owner['business_id']


@pytest.fixture
def auth_headers(owner):
    return {"Authorization": f"Bearer {owner['access_token']}"}


@pytest.fixture
def make_plan(clock):
    def _make_plan(business_id, name="Monthly", price="29.99", duration_days=30, **kwargs):
        return PlanService(clock=clock).create_plan(
            business_id, name=name, price=price, duration_days=duration_days, **kwargs
        )
    return _make_plan


@pytest.fixture
def make_member(clock):
    def _make_member(business_id, first_name="Jane", last_name="Doe", **kwargs):
        return MemberService(clock=clock).create_member(
            business_id, first_name=first_name, last_name=last_name, **kwargs
        )
    return _make_member


@pytest.fixture
def make_membership(clock):
    def _make_membership(business_id, member_id, plan_id, start_date=None, **kwargs):
        return MembershipService(clock=clock).create_membership(
            business_id, member_id, plan_id, start_date=start_date, **kwargs
        )
    return _make_membership


@pytest.fixture
def send_json(client):
    """Send a JSON body and return (status_code, decoded body)."""
    def _send_json(url, payload, headers=None, method="post"):
        response = getattr(client, method)(
            url,
            data=json.dumps(payload),
            content_type="application/json",
            headers=headers or {},
        )
        return response.status_code, json.loads(response.data)
    return _send_json
