from flask import jsonify
from flasgger import swag_from
from app import store
from healthlogs.utils import read_submission
from . import healthlogs_bp

@healthlogs_bp.route('/submit', methods=['POST'])
@swag_from({
    'tags': ['Health Logs'],
    'description': 'Save a new health log and attach it to a user',
    'consumes': ['application/json', 'application/x-www-form-urlencoded'],
    'parameters': [
        {
            'name': 'body',
            'in': 'body',
            'required': True,
            'schema': {
                'type': 'object',
                'properties': {
                    'user_id': {'type': 'integer', 'example': 1},
                    'prescriptionName': {'type': 'string', 'example': 'Aspirin'},
                    'doctorprescribed': {'type': 'string', 'example': 'Dr. Smith'},
                    'dateprescribed': {'type': 'string', 'example': '2020-01-01'},
                    'amount': {'type': 'string', 'example': '30'},
                    'generalinstructions': {'type': 'string', 'example': 'Take twice daily'}
                }
            }
        },
        {
            'name': 'user_id',
            'in': 'query',
            'type': 'integer',
            'required': False,
            'description': 'User to attach the log to; defaults to the first user'
        }
    ],
    'responses': {
        '200': {
            'description': 'The updated user',
            'schema': {'$ref': '#/definitions/User'}
        },
        '400': {'description': 'Invalid user_id', 'schema': {'$ref': '#/definitions/Error'}},
        '404': {'description': 'User not found', 'schema': {'$ref': '#/definitions/Error'}}
    }
})
def submit_health_log():
    """Create a health log and push its id onto the user's list."""
    data, user_id = read_submission()
    user = store.submit_health_log(data, user_id=user_id)
    return jsonify(user.to_dict())
