"""
Authentication routes.
"""
from flask import request
from flask_jwt_extended import get_jwt, get_jwt_identity, jwt_required
from flask_restx import Resource, fields

from memberdesk.services.auth_service import AuthService

from . import auth_ns

register_model = auth_ns.model('OwnerRegistration', {
    'email': fields.String(required=True, description='Owner email address'),
    'password': fields.String(required=True, description='Owner password'),
    'first_name': fields.String(required=True, description='Owner first name'),
    'last_name': fields.String(required=True, description='Owner last name'),
    'business_name': fields.String(required=True, description='Business name'),
    'currency': fields.String(description='ISO currency code', default='USD'),
})

login_model = auth_ns.model('OwnerLogin', {
    'email': fields.String(required=True, description='Owner email address'),
    'password': fields.String(required=True, description='Owner password'),
})

token_model = auth_ns.model('TokenResponse', {
    'access_token': fields.String(description='JWT access token'),
    'refresh_token': fields.String(description='JWT refresh token'),
    'user_id': fields.Integer(description='User identifier'),
    'email': fields.String(description='Owner email'),
    'business_id': fields.Integer(description='Business identifier'),
    'business_name': fields.String(description='Business name'),
})

refresh_token_model = auth_ns.model('RefreshToken', {
    'access_token': fields.String(description='New JWT access token')
})


@auth_ns.route('/register')
class OwnerRegistration(Resource):
    """Register a business owner and their business."""

    @auth_ns.doc('register_owner', security=None)
    @auth_ns.expect(register_model)
    @auth_ns.response(400, 'Validation error')
    @auth_ns.response(409, 'Email already registered')
    @auth_ns.marshal_with(token_model, code=201)
    def post(self):
        """Register a new owner and business."""
        data = request.get_json(silent=True) or {}
        tokens = AuthService().register(
            email=data.get('email'),
            password=data.get('password'),
            first_name=data.get('first_name'),
            last_name=data.get('last_name'),
            business_name=data.get('business_name'),
            currency=data.get('currency', 'USD'),
        )
        return tokens, 201


@auth_ns.route('/login')
class OwnerLogin(Resource):

    @auth_ns.doc('login_owner', security=None)
    @auth_ns.expect(login_model)
    @auth_ns.response(401, 'Invalid credentials')
    @auth_ns.marshal_with(token_model)
    def post(self):
        """Authenticate an owner and issue JWT tokens."""
        data = request.get_json(silent=True) or {}
        return AuthService().login(data.get('email'), data.get('password'))


@auth_ns.route('/refresh')
class TokenRefresh(Resource):

    @auth_ns.doc('refresh_token')
    @auth_ns.marshal_with(refresh_token_model)
    @jwt_required(refresh=True)
    def post(self):
        """Generate a new access token using a refresh token."""
        return AuthService().refresh(get_jwt_identity(), get_jwt().get('business_id'))
