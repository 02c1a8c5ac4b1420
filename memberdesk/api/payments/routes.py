"""
Routes for payments.
"""
from flask import request
from flask_jwt_extended import jwt_required
from flask_restx import Resource, fields

from memberdesk.errors import ValidationError
from memberdesk.models import PaymentMethod
from memberdesk.services.payment_service import PaymentService
from memberdesk.utils.auth import current_business_id
from memberdesk.utils.parsing import parse_datetime

from . import payment_ns

payment_model = payment_ns.model('Payment', {
    'id': fields.Integer(description='Payment ID'),
    'membership_id': fields.Integer(description='Membership ID'),
    'amount': fields.Fixed(decimals=2, description='Amount paid'),
    'payment_date': fields.DateTime(description='Payment date (UTC)'),
    'payment_method': fields.String(description='Payment method'),
    'transaction_reference': fields.String(description='External reference'),
    'notes': fields.String(description='Notes'),
    'created_at': fields.DateTime(description='Creation date'),
})

payment_input_model = payment_ns.model('PaymentInput', {
    'membership_id': fields.Integer(required=True, description='Membership ID'),
    'amount': fields.Float(required=True, description='Amount paid'),
    'payment_method': fields.String(
        required=True, description='Payment method',
        enum=[m.value for m in PaymentMethod]
    ),
    'payment_date': fields.DateTime(description='Payment date, defaults to now'),
    'transaction_reference': fields.String(description='External reference'),
    'notes': fields.String(description='Notes'),
})


@payment_ns.route('/')
class PaymentList(Resource):
    """Resource for listing and recording payments"""

    @payment_ns.doc('list_payments', params={
        'membership_id': {'type': 'integer', 'description': 'Only payments of this membership'}
    })
    @payment_ns.marshal_list_with(payment_model)
    @jwt_required()
    def get(self):
        """List payments of the business, most recent first"""
        membership_id = request.args.get('membership_id', type=int)
        return PaymentService().get_payments(current_business_id(), membership_id=membership_id)

    @payment_ns.doc('record_payment')
    @payment_ns.expect(payment_input_model)
    @payment_ns.response(400, 'Validation error')
    @payment_ns.response(404, 'Membership not found')
    @payment_ns.marshal_with(payment_model, code=201)
    @jwt_required()
    def post(self):
        """Record a payment against a membership"""
        data = request.get_json(silent=True) or {}
        if not data.get('membership_id'):
            raise ValidationError("membership_id is required")

        payment = PaymentService().record_payment(
            current_business_id(),
            membership_id=data['membership_id'],
            amount=data.get('amount'),
            method=data.get('payment_method', PaymentMethod.CASH.value),
            reference=data.get('transaction_reference'),
            notes=data.get('notes'),
            payment_date=parse_datetime(data.get('payment_date'), 'payment_date'),
        )
        return payment, 201
