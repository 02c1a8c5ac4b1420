"""
Routes for the dashboard.
"""
from flask_jwt_extended import jwt_required
from flask_restx import Resource, fields

from memberdesk.services.dashboard_service import DashboardService
from memberdesk.utils.auth import current_business_id

from . import dashboard_ns

stats_model = dashboard_ns.model('DashboardStats', {
    'total_members': fields.Integer(description='Members of the business'),
    'active_members': fields.Integer(description='Members with a current active membership'),
    'expired_members': fields.Integer(description='Members with an expired membership'),
    'renewals_due_today': fields.Integer(description='Active memberships expiring today'),
    'renewals_due_this_week': fields.Integer(description='Active memberships expiring within 7 days'),
    'monthly_collection': fields.Fixed(decimals=2, description='Payments since the first of the month'),
    'total_outstanding': fields.Fixed(decimals=2, description='Amount owed on active memberships'),
})


@dashboard_ns.route('/stats')
class DashboardStatsResource(Resource):

    @dashboard_ns.doc('dashboard_stats')
    @dashboard_ns.marshal_with(stats_model)
    @jwt_required()
    def get(self):
        """Headline counts and money totals for the business"""
        return DashboardService().get_stats(current_business_id())
