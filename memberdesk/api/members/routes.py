"""
Routes for member management.
"""
from flask import current_app, request
from flask_jwt_extended import jwt_required
from flask_restx import Resource, fields

from memberdesk.services.member_service import EDITABLE_FIELDS, MemberService
from memberdesk.utils.auth import current_business_id
from memberdesk.utils.parsing import page_args

from . import member_ns

member_model = member_ns.model('Member', {
    'id': fields.Integer(description='Member ID'),
    'first_name': fields.String(description='First name'),
    'last_name': fields.String(description='Last name'),
    'email': fields.String(description='Email'),
    'phone': fields.String(description='Phone'),
    'address': fields.String(description='Address'),
    'date_of_birth': fields.Date(description='Date of birth'),
    'is_active': fields.Boolean(description='Whether the member is active'),
    'notes': fields.String(description='Notes'),
    'created_at': fields.DateTime(description='Creation date'),
    'updated_at': fields.DateTime(description='Last update date'),
})

member_input_model = member_ns.model('MemberInput', {
    'first_name': fields.String(required=True, description='First name'),
    'last_name': fields.String(required=True, description='Last name'),
    'email': fields.String(description='Email'),
    'phone': fields.String(description='Phone'),
    'address': fields.String(description='Address'),
    'date_of_birth': fields.Date(description='Date of birth (YYYY-MM-DD)'),
    'notes': fields.String(description='Notes'),
})

member_list_model = member_ns.model('MemberList', {
    'members': fields.List(fields.Nested(member_model), attribute='items'),
    'total': fields.Integer(description='Total number of members'),
    'page': fields.Integer(description='Current page number'),
    'per_page': fields.Integer(description='Items per page'),
    'pages': fields.Integer(description='Total number of pages'),
})


def _member_fields(data):
    return {key: data[key] for key in EDITABLE_FIELDS if key in data}


@member_ns.route('/')
class MemberList(Resource):
    """Resource for listing and creating members"""

    @member_ns.doc('list_members', params={
        'page': {'type': 'integer', 'default': 1, 'description': 'Page number'},
        'per_page': {'type': 'integer', 'default': 10, 'description': 'Items per page'},
        'search': {'type': 'string', 'description': 'Search name, email or phone'},
    })
    @member_ns.marshal_with(member_list_model)
    @jwt_required()
    def get(self):
        """List members of the business"""
        page, per_page = page_args(
            request.args,
            current_app.config.get('DEFAULT_PAGE_SIZE', 10),
            current_app.config.get('MAX_PAGE_SIZE', 100),
        )
        return MemberService().search_members(
            current_business_id(), page=page, per_page=per_page,
            search=request.args.get('search')
        )

    @member_ns.doc('create_member')
    @member_ns.expect(member_input_model)
    @member_ns.response(400, 'Validation error')
    @member_ns.marshal_with(member_model, code=201)
    @jwt_required()
    def post(self):
        """Add a member"""
        data = request.get_json(silent=True) or {}
        member = MemberService().create_member(current_business_id(), **_member_fields(data))
        return member, 201


@member_ns.route('/<int:id>')
@member_ns.param('id', 'The member identifier')
@member_ns.response(404, 'Member not found')
class MemberResource(Resource):

    @member_ns.doc('get_member')
    @member_ns.marshal_with(member_model)
    @jwt_required()
    def get(self, id):
        """Get a member"""
        return MemberService().get_member(current_business_id(), id)

    @member_ns.doc('update_member')
    @member_ns.expect(member_input_model)
    @member_ns.marshal_with(member_model)
    @jwt_required()
    def put(self, id):
        """Update a member"""
        data = request.get_json(silent=True) or {}
        changes = _member_fields(data)
        if 'is_active' in data:
            changes['is_active'] = data['is_active']
        return MemberService().update_member(current_business_id(), id, **changes)

    @member_ns.doc('deactivate_member')
    @member_ns.marshal_with(member_model)
    @jwt_required()
    def delete(self, id):
        """Deactivate a member. Members are never hard deleted."""
        return MemberService().deactivate_member(current_business_id(), id)
