from flask import request, jsonify
from flasgger import swag_from
from app import store
from app.errors import ValidationError
from . import users_bp

@users_bp.route('/user', methods=['GET'])
@swag_from({
    'tags': ['Users'],
    'description': 'Get all users with the ids of their health logs',
    'responses': {
        '200': {
            'description': 'List of users',
            'schema': {
                'type': 'array',
                'items': {'$ref': '#/definitions/User'}
            }
        }
    }
})
def get_users():
    """Get all users."""
    return jsonify([user.to_dict() for user in store.find_users()])

@users_bp.route('/user', methods=['POST'])
@swag_from({
    'tags': ['Users'],
    'description': 'Create a user',
    'parameters': [{
        'name': 'body',
        'in': 'body',
        'required': True,
        'schema': {
            'type': 'object',
            'properties': {
                'firstname': {'type': 'string', 'example': 'John'},
                'lastname': {'type': 'string', 'example': 'Doe'},
                'username': {'type': 'string', 'example': 'myusername'},
                'password': {'type': 'string', 'example': 'mypassword'},
                'email': {'type': 'string', 'example': 'myemail@gmail.com'}
            },
            'required': ['username']
        }
    }],
    'responses': {
        '201': {
            'description': 'User created',
            'schema': {'$ref': '#/definitions/User'}
        },
        '400': {'description': 'Username missing', 'schema': {'$ref': '#/definitions/Error'}},
        '409': {'description': 'Username already exists', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def create_user():
    """Create a user; usernames are unique."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError('Expected a JSON object')
    user = store.create_user(data)
    return jsonify(user.to_dict()), 201

@users_bp.route('/user/<int:user_id>', methods=['GET'])
@swag_from({
    'tags': ['Users'],
    'description': 'Get a single user',
    'parameters': [{
        'name': 'user_id',
        'in': 'path',
        'type': 'integer',
        'required': True
    }],
    'responses': {
        '200': {'description': 'User', 'schema': {'$ref': '#/definitions/User'}},
        '404': {'description': 'User not found', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def get_user(user_id):
    return jsonify(store.find_user(user_id).to_dict())

@users_bp.route('/user/<int:user_id>/healthlogs', methods=['GET'])
@swag_from({
    'tags': ['Health Logs'],
    'description': 'Get the health logs of a user in the order they were added',
    'parameters': [{
        'name': 'user_id',
        'in': 'path',
        'type': 'integer',
        'required': True
    }],
    'responses': {
        '200': {
            'description': 'List of health logs',
            'schema': {
                'type': 'array',
                'items': {'$ref': '#/definitions/HealthLog'}
            }
        },
        '404': {'description': 'User not found', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def get_user_health_logs(user_id):
    return jsonify(store.health_log_dicts(store.find_health_logs(user_id)))

@users_bp.route('/populateduser', methods=['GET'])
@swag_from({
    'tags': ['Users'],
    'description': 'Get all users with their health logs embedded',
    'responses': {
        '200': {
            'description': 'List of populated users',
            'schema': {
                'type': 'array',
                'items': {'$ref': '#/definitions/PopulatedUser'}
            }
        }
    }
})
def get_populated_users():
    """Get all users and populate them with their health logs."""
    return jsonify(store.find_populated_users())
