"""
Business profile routes.
"""
from flask import request
from flask_jwt_extended import jwt_required
from flask_restx import Resource, fields

from memberdesk.services.business_service import EDITABLE_FIELDS, BusinessService
from memberdesk.utils.auth import current_business_id

from . import business_ns

business_model = business_ns.model('Business', {
    'id': fields.Integer(description='Business ID'),
    'name': fields.String(description='Business name'),
    'description': fields.String(description='Description'),
    'address': fields.String(description='Address'),
    'phone': fields.String(description='Phone'),
    'email': fields.String(description='Contact email'),
    'currency': fields.String(description='ISO currency code'),
    'tax_id': fields.String(description='Tax identifier'),
    'created_at': fields.DateTime(description='Creation date'),
    'updated_at': fields.DateTime(description='Last update date'),
})

business_input_model = business_ns.model('BusinessInput', {
    'name': fields.String(description='Business name'),
    'description': fields.String(description='Description'),
    'address': fields.String(description='Address'),
    'phone': fields.String(description='Phone'),
    'email': fields.String(description='Contact email'),
    'currency': fields.String(description='ISO currency code'),
    'tax_id': fields.String(description='Tax identifier'),
})


@business_ns.route('')
class BusinessProfile(Resource):

    @business_ns.doc('get_business')
    @business_ns.marshal_with(business_model)
    @jwt_required()
    def get(self):
        """Get the caller's business profile"""
        return BusinessService().get_business(current_business_id())

    @business_ns.doc('update_business')
    @business_ns.expect(business_input_model)
    @business_ns.marshal_with(business_model)
    @jwt_required()
    def put(self):
        """Update the caller's business profile"""
        data = request.get_json(silent=True) or {}
        changes = {key: data[key] for key in EDITABLE_FIELDS if key in data}
        return BusinessService().update_business(current_business_id(), **changes)
