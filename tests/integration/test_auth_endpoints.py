"""
Integration tests for authentication and business profile endpoints.
"""
import json

from memberdesk.models import Business, User

REGISTRATION = {
    'email': 'owner@example.com',
    'password': 'password123',
    'first_name': 'Olivia',
    'last_name': 'Owner',
    'business_name': 'Sunrise Gym',
}


def test_owner_registration_success(send_json):
    """Test successful owner registration."""
    status, data = send_json('/api/auth/register', REGISTRATION)

    assert status == 201
    assert data['email'] == 'owner@example.com'
    assert data['business_name'] == 'Sunrise Gym'
    assert data['access_token']
    assert data['refresh_token']
    assert 'password' not in data

    user = User.query.filter_by(email='owner@example.com').first()
    assert user is not None
    assert Business.query.filter_by(user_id=user.id).count() == 1


def test_owner_registration_missing_fields(send_json):
    status, data = send_json('/api/auth/register', {'email': 'owner@example.com'})
    assert status == 400
    assert 'Missing required fields' in data['message']


def test_owner_registration_invalid_email(send_json):
    status, data = send_json('/api/auth/register', {**REGISTRATION, 'email': 'invalid-email'})
    assert status == 400
    assert 'Invalid email format' in data['message']


def test_owner_registration_duplicate_email(send_json):
    send_json('/api/auth/register', REGISTRATION)
    status, data = send_json('/api/auth/register', REGISTRATION)
    assert status == 409
    assert data['message'] == 'Email already registered'


def test_login_success(send_json):
    send_json('/api/auth/register', REGISTRATION)

    status, data = send_json('/api/auth/login', {
        'email': 'owner@example.com', 'password': 'password123'
    })

    assert status == 200
    assert data['access_token']
    assert data['business_name'] == 'Sunrise Gym'


def test_login_invalid_credentials(send_json):
    send_json('/api/auth/register', REGISTRATION)

    status, data = send_json('/api/auth/login', {
        'email': 'owner@example.com', 'password': 'wrong-password'
    })

    assert status == 401
    assert data['message'] == 'Invalid email or password'


def test_refresh_token(client, owner):
    response = client.post(
        '/api/auth/refresh',
        headers={"Authorization": f"Bearer {owner['refresh_token']}"}
    )
    assert response.status_code == 200
    assert json.loads(response.data)['access_token']


def test_refresh_rejects_access_token(client, owner):
    response = client.post(
        '/api/auth/refresh',
        headers={"Authorization": f"Bearer {owner['access_token']}"}
    )
    assert response.status_code == 422


def test_business_profile(client, send_json, auth_headers):
    response = client.get('/api/business', headers=auth_headers)
    assert response.status_code == 200
    assert json.loads(response.data)['name'] == 'Sunrise Gym'

    status, data = send_json('/api/business', {'phone': '555-0100', 'currency': 'eur'},
                             headers=auth_headers, method='put')
    assert status == 200
    assert data['phone'] == '555-0100'
    assert data['currency'] == 'EUR'
