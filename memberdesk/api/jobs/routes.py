"""
Routes that run the scheduled jobs synchronously.
"""
import logging

from flask import request
from flask_jwt_extended import jwt_required
from flask_restx import Resource, fields

from memberdesk.services.expiry_service import ExpiryService
from memberdesk.utils.auth import current_business_id, current_user_id

from . import jobs_ns

logger = logging.getLogger(__name__)

expiry_result_model = jobs_ns.model('ExpiryResult', {
    'scanned': fields.Integer(description='Lapsed memberships found'),
    'expired': fields.Integer(description='Memberships transitioned to expired'),
    'failed': fields.Integer(description='Memberships that could not be updated'),
    'expired_ids': fields.List(fields.Integer, description="Expired membership IDs of the caller's business"),
})

reminder_result_model = jobs_ns.model('ReminderResult', {
    'sent': fields.Integer(description='Renewal reminders sent'),
})


@jobs_ns.route('/membership-expiry')
class MembershipExpiryJob(Resource):

    @jobs_ns.doc('run_membership_expiry')
    @jobs_ns.marshal_with(expiry_result_model)
    @jwt_required()
    def post(self):
        """Run the membership expiry sweep now"""
        business_id = current_business_id()
        logger.info("Expiry sweep triggered by user %s", current_user_id())
        service = ExpiryService()
        result = service.expire_memberships()
        data = result.to_dict()
        # The sweep covers every business; only the caller's ids are reported
        data['expired_ids'] = service.expired_ids_for_business(result, business_id)
        return data


@jobs_ns.route('/renewal-reminders')
class RenewalReminderJob(Resource):

    @jobs_ns.doc('run_renewal_reminders', params={
        'days': {'type': 'integer', 'description': 'Look-ahead window in days'}
    })
    @jobs_ns.marshal_with(reminder_result_model)
    @jwt_required()
    def post(self):
        """Send renewal reminders now"""
        current_business_id()
        days = request.args.get('days', type=int)
        logger.info("Renewal reminders triggered by user %s", current_user_id())
        return {'sent': ExpiryService().send_renewal_reminders(days=days)}
