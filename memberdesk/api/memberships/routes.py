"""
Routes for memberships and renewals.
"""
from flask import request
from flask_jwt_extended import jwt_required
from flask_restx import Resource, fields

from memberdesk.errors import ValidationError
from memberdesk.services.membership_service import MembershipService
from memberdesk.utils.auth import current_business_id
from memberdesk.utils.parsing import parse_bool, parse_datetime

from . import membership_ns, renewal_ns

membership_model = membership_ns.model('Membership', {
    'id': fields.Integer(description='Membership ID'),
    'member_id': fields.Integer(description='Member ID'),
    'plan_id': fields.Integer(description='Subscription plan ID'),
    'start_date': fields.DateTime(description='Start date (UTC)'),
    'expiry_date': fields.DateTime(description='Expiry date (UTC)'),
    'status': fields.String(description='Membership status'),
    'total_amount': fields.Fixed(decimals=2, description='Plan price at creation'),
    'paid_amount': fields.Fixed(decimals=2, description='Total paid so far'),
    'remaining_amount': fields.Fixed(decimals=2, description='Amount still owed'),
    'notes': fields.String(description='Notes'),
    'created_at': fields.DateTime(description='Creation date'),
    'updated_at': fields.DateTime(description='Last update date'),
})

membership_input_model = membership_ns.model('MembershipInput', {
    'member_id': fields.Integer(required=True, description='Member ID'),
    'plan_id': fields.Integer(required=True, description='Subscription plan ID'),
    'start_date': fields.DateTime(description='Start date, defaults to now'),
    'notes': fields.String(description='Notes'),
})


@membership_ns.route('/')
class MembershipList(Resource):
    """Resource for listing and creating memberships"""

    @membership_ns.doc('list_memberships', params={
        'member_id': {'type': 'integer', 'description': 'Only memberships of this member'}
    })
    @membership_ns.marshal_list_with(membership_model)
    @jwt_required()
    def get(self):
        """List memberships of the business, newest first"""
        member_id = request.args.get('member_id', type=int)
        return MembershipService().list_memberships(current_business_id(), member_id=member_id)

    @membership_ns.doc('create_membership')
    @membership_ns.expect(membership_input_model)
    @membership_ns.response(400, 'Validation error')
    @membership_ns.response(404, 'Member or plan not found')
    @membership_ns.response(409, 'Overlapping membership')
    @membership_ns.marshal_with(membership_model, code=201)
    @jwt_required()
    def post(self):
        """Assign a subscription plan to a member"""
        data = request.get_json(silent=True) or {}
        member_id = data.get('member_id')
        plan_id = data.get('plan_id')
        if not member_id or not plan_id:
            raise ValidationError("member_id and plan_id are required")

        membership = MembershipService().create_membership(
            current_business_id(),
            member_id=member_id,
            plan_id=plan_id,
            start_date=parse_datetime(data.get('start_date'), 'start_date'),
            notes=data.get('notes'),
        )
        return membership, 201


@membership_ns.route('/<int:id>')
@membership_ns.param('id', 'The membership identifier')
@membership_ns.response(404, 'Membership not found')
class MembershipResource(Resource):

    @membership_ns.doc('get_membership')
    @membership_ns.marshal_with(membership_model)
    @jwt_required()
    def get(self, id):
        """Get a membership"""
        return MembershipService().get_membership(current_business_id(), id)


@membership_ns.route('/active')
class ActiveMemberships(Resource):

    @membership_ns.doc('active_memberships')
    @membership_ns.marshal_list_with(membership_model)
    @jwt_required()
    def get(self):
        """Active memberships that have not yet expired"""
        return MembershipService().get_active(current_business_id())


@membership_ns.route('/expired')
class ExpiredMemberships(Resource):

    @membership_ns.doc('expired_memberships')
    @membership_ns.marshal_list_with(membership_model)
    @jwt_required()
    def get(self):
        """Memberships flagged expired or past their expiry date"""
        return MembershipService().get_expired(current_business_id())


@renewal_ns.route('/expiring')
class ExpiringMemberships(Resource):

    @renewal_ns.doc('expiring_memberships', params={
        'days': {'type': 'integer', 'default': 7, 'description': 'Look-ahead window in days'},
        'include_overdue': {'type': 'boolean', 'default': 'true',
                            'description': 'Include lapsed memberships still flagged active'},
    })
    @renewal_ns.response(400, 'Invalid window')
    @renewal_ns.marshal_list_with(membership_model)
    @jwt_required()
    def get(self):
        """Active memberships expiring within the next N days, soonest first"""
        days = request.args.get('days', 7, type=int)
        include_overdue = parse_bool(request.args.get('include_overdue'), default=True)
        return MembershipService().get_expiring_within_days(
            current_business_id(), days, include_overdue=include_overdue
        )
