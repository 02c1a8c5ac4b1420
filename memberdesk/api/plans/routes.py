"""
Routes for subscription plans.
"""
from flask import request
from flask_jwt_extended import jwt_required
from flask_restx import Resource, fields

from memberdesk.services.plan_service import PlanService
from memberdesk.utils.auth import current_business_id
from memberdesk.utils.parsing import parse_bool

from . import plan_ns

plan_model = plan_ns.model('SubscriptionPlan', {
    'id': fields.Integer(description='Plan ID'),
    'name': fields.String(description='Plan name'),
    'description': fields.String(description='Plan description'),
    'price': fields.Fixed(decimals=2, description='Plan price'),
    'duration_days': fields.Integer(description='Duration in days'),
    'is_active': fields.Boolean(description='Whether the plan is offered'),
    'created_at': fields.DateTime(description='Creation date'),
    'updated_at': fields.DateTime(description='Last update date'),
})

plan_input_model = plan_ns.model('PlanInput', {
    'name': fields.String(required=True, description='Plan name'),
    'description': fields.String(description='Plan description'),
    'price': fields.Float(required=True, description='Plan price'),
    'duration_days': fields.Integer(required=True, description='Duration in days'),
    'is_active': fields.Boolean(description='Whether the plan is offered', default=True),
})

PLAN_FIELDS = ('name', 'description', 'price', 'duration_days', 'is_active')


@plan_ns.route('/')
class SubscriptionPlanList(Resource):
    """Resource for listing and creating subscription plans"""

    @plan_ns.doc('list_plans', params={
        'active_only': {'type': 'boolean', 'default': 'false', 'description': 'Show only active plans'}
    })
    @plan_ns.marshal_list_with(plan_model)
    @jwt_required()
    def get(self):
        """List subscription plans of the business"""
        active_only = parse_bool(request.args.get('active_only'))
        return PlanService().list_plans(current_business_id(), active_only=active_only)

    @plan_ns.doc('create_plan')
    @plan_ns.expect(plan_input_model)
    @plan_ns.response(400, 'Validation error')
    @plan_ns.marshal_with(plan_model, code=201)
    @jwt_required()
    def post(self):
        """Create a subscription plan"""
        data = request.get_json(silent=True) or {}
        plan = PlanService().create_plan(
            current_business_id(),
            name=data.get('name'),
            price=data.get('price'),
            duration_days=data.get('duration_days'),
            description=data.get('description'),
            is_active=data.get('is_active', True),
        )
        return plan, 201


@plan_ns.route('/<int:id>')
@plan_ns.param('id', 'The subscription plan identifier')
@plan_ns.response(404, 'Plan not found')
class SubscriptionPlanResource(Resource):
    """Resource for individual subscription plan operations"""

    @plan_ns.doc('get_plan')
    @plan_ns.marshal_with(plan_model)
    @jwt_required()
    def get(self, id):
        """Get a subscription plan"""
        return PlanService().get_plan(current_business_id(), id)

    @plan_ns.doc('update_plan')
    @plan_ns.expect(plan_input_model)
    @plan_ns.marshal_with(plan_model)
    @jwt_required()
    def put(self, id):
        """Update a subscription plan. Existing memberships keep their terms."""
        data = request.get_json(silent=True) or {}
        changes = {key: data[key] for key in PLAN_FIELDS if key in data}
        return PlanService().update_plan(current_business_id(), id, **changes)
