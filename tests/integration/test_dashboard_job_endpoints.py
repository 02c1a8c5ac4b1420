"""
Integration tests for dashboard, notification and job endpoints.
"""
import json
from datetime import timedelta

import pytest

from memberdesk.utils.clock import utcnow


@pytest.fixture
def lapsed_membership(send_json, auth_headers):
    """A membership that ended five days ago but is still flagged active."""
    _, member = send_json('/api/members/', {'first_name': 'John', 'last_name': 'Smith'},
                          headers=auth_headers)
    _, plan = send_json('/api/plans/', {'name': 'Monthly', 'price': 50, 'duration_days': 30},
                        headers=auth_headers)
    start = (utcnow() - timedelta(days=35)).isoformat()
    _, membership = send_json('/api/memberships/', {
        'member_id': member['id'], 'plan_id': plan['id'], 'start_date': start,
    }, headers=auth_headers)
    return membership


def test_dashboard_stats(client, send_json, auth_headers, lapsed_membership):
    send_json('/api/payments/', {
        'membership_id': lapsed_membership['id'], 'amount': 20, 'payment_method': 'cash',
    }, headers=auth_headers)

    response = client.get('/api/dashboard/stats', headers=auth_headers)
    data = json.loads(response.data)

    assert response.status_code == 200
    assert data['total_members'] == 1
    assert data['active_members'] == 0
    assert data['expired_members'] == 1
    assert data['renewals_due_today'] == 1
    assert data['monthly_collection'] == '20.00'
    assert data['total_outstanding'] == '0.00'


def test_run_membership_expiry_job(client, auth_headers, lapsed_membership):
    response = client.post('/api/jobs/membership-expiry', headers=auth_headers)
    data = json.loads(response.data)

    assert response.status_code == 200
    assert data['expired'] == 1
    assert data['expired_ids'] == [lapsed_membership['id']]

    response = client.get(f"/api/memberships/{lapsed_membership['id']}", headers=auth_headers)
    assert json.loads(response.data)['status'] == 'expired'

    # Idempotent
    data = json.loads(client.post('/api/jobs/membership-expiry', headers=auth_headers).data)
    assert data['scanned'] == 0
    assert data['expired'] == 0


def test_expiry_job_reports_only_callers_memberships(client, auth_headers, other_owner,
                                                     lapsed_membership):
    headers = {"Authorization": f"Bearer {other_owner['access_token']}"}

    response = client.post('/api/jobs/membership-expiry', headers=headers)
    data = json.loads(response.data)

    assert response.status_code == 200
    assert data['expired'] == 1
    assert lapsed_membership['id'] not in data['expired_ids']
    assert data['expired_ids'] == []

    # The sweep itself still covers the first business
    response = client.get(f"/api/memberships/{lapsed_membership['id']}", headers=auth_headers)
    assert json.loads(response.data)['status'] == 'expired'


def test_run_renewal_reminders_job(client, auth_headers, lapsed_membership):
    response = client.post('/api/jobs/renewal-reminders?days=3', headers=auth_headers)
    assert response.status_code == 200
    # Lapsed memberships are left to the expiry sweep
    assert json.loads(response.data)['sent'] == 0


def test_jobs_require_authentication(client):
    assert client.post('/api/jobs/membership-expiry').status_code == 401


def test_notifications_flow(client, auth_headers, lapsed_membership):
    response = client.get('/api/notifications/', headers=auth_headers)
    notifications = json.loads(response.data)
    types = {n['type'] for n in notifications}
    assert {'member_added', 'membership_created'} <= types
    assert all(n['is_read'] is False for n in notifications)

    first = notifications[0]['id']
    response = client.post(f'/api/notifications/{first}/read', headers=auth_headers)
    assert response.status_code == 200
    assert json.loads(response.data)['is_read'] is True

    response = client.post('/api/notifications/read-all', headers=auth_headers)
    assert json.loads(response.data)['updated'] == len(notifications) - 1

    response = client.get('/api/notifications/?unread_only=true', headers=auth_headers)
    assert json.loads(response.data) == []


def test_notification_of_other_user_is_not_found(client, auth_headers, other_owner,
                                                 lapsed_membership):
    notifications = json.loads(client.get('/api/notifications/', headers=auth_headers).data)
    headers = {"Authorization": f"Bearer {other_owner['access_token']}"}

    response = client.post(f"/api/notifications/{notifications[0]['id']}/read", headers=headers)
    assert response.status_code == 404
