"""
Routes for notifications.
"""
from flask import request
from flask_jwt_extended import jwt_required
from flask_restx import Resource, fields

from memberdesk.services.notification_service import NotificationService
from memberdesk.utils.auth import current_user_id
from memberdesk.utils.parsing import parse_bool

from . import notification_ns

notification_model = notification_ns.model('Notification', {
    'id': fields.Integer(description='Notification ID'),
    'type': fields.String(description='Notification type'),
    'title': fields.String(description='Title'),
    'message': fields.String(description='Message'),
    'is_read': fields.Boolean(description='Whether it has been read'),
    'read_at': fields.DateTime(description='When it was read'),
    'related_entity_type': fields.String(description='Related entity type'),
    'related_entity_id': fields.Integer(description='Related entity ID'),
    'extra_data': fields.Raw(attribute=lambda n: n.get_extra_data_dict(), description='Additional data'),
    'created_at': fields.DateTime(description='Creation date'),
})

mark_all_model = notification_ns.model('MarkAllRead', {
    'updated': fields.Integer(description='Number of notifications marked read'),
})


@notification_ns.route('/')
class NotificationList(Resource):

    @notification_ns.doc('list_notifications', params={
        'unread_only': {'type': 'boolean', 'default': 'false', 'description': 'Only unread notifications'}
    })
    @notification_ns.marshal_list_with(notification_model)
    @jwt_required()
    def get(self):
        """List notifications, newest first"""
        unread_only = parse_bool(request.args.get('unread_only'))
        return NotificationService().list_for_user(current_user_id(), unread_only=unread_only)


@notification_ns.route('/<int:id>/read')
@notification_ns.param('id', 'The notification identifier')
@notification_ns.response(404, 'Notification not found')
class NotificationRead(Resource):

    @notification_ns.doc('mark_notification_read')
    @notification_ns.marshal_with(notification_model)
    @jwt_required()
    def post(self, id):
        """Mark a notification as read"""
        return NotificationService().mark_as_read(id, current_user_id())


@notification_ns.route('/read-all')
class NotificationReadAll(Resource):

    @notification_ns.doc('mark_all_notifications_read')
    @notification_ns.marshal_with(mark_all_model)
    @jwt_required()
    def post(self):
        """Mark all notifications as read"""
        return {'updated': NotificationService().mark_all_as_read(current_user_id())}
