SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": 'apispec',
            "route": '/apispec.json',
            "rule_filter": lambda rule: True,  # all in
            "model_filter": lambda tag: True,  # all in
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/"
}

HEALTH_LOG_PROPERTIES = {
    '_id': {'type': 'integer', 'format': 'int64'},
    'prescriptionName': {'type': 'string', 'example': 'Aspirin'},
    'doctorprescribed': {'type': 'string', 'example': 'Dr. Smith'},
    'dateprescribed': {'type': 'string', 'example': '2020-01-01'},
    'amount': {'type': 'string', 'example': '30'},
    'generalinstructions': {'type': 'string', 'example': 'Take twice daily'},
    'user_id': {'type': 'integer', 'format': 'int64'},
    'created_at': {'type': 'string', 'format': 'date-time'}
}

USER_PROPERTIES = {
    '_id': {'type': 'integer', 'format': 'int64'},
    'firstname': {'type': 'string'},
    'lastname': {'type': 'string'},
    'username': {'type': 'string'},
    'email': {'type': 'string', 'format': 'email'},
    'created_at': {'type': 'string', 'format': 'date-time'}
}

SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Health Log API",
        "description": "API for personal prescription and health log tracking",
        "version": "1.0.0"
    },
    "schemes": ["http", "https"],
    "consumes": ["application/json", "application/x-www-form-urlencoded"],
    "produces": ["application/json"],
    "tags": [
        {
            "name": "Users",
            "description": "User records and their health logs"
        },
        {
            "name": "Health Logs",
            "description": "Prescription entries"
        }
    ],
    "definitions": {
        'User': {
            'type': 'object',
            'properties': dict(USER_PROPERTIES, healthLog={
                'type': 'array',
                'items': {'type': 'integer', 'format': 'int64'}
            })
        },
        'PopulatedUser': {
            'type': 'object',
            'properties': dict(USER_PROPERTIES, healthLog={
                'type': 'array',
                'items': {'$ref': '#/definitions/HealthLog'}
            })
        },
        'HealthLog': {
            'type': 'object',
            'properties': HEALTH_LOG_PROPERTIES
        },
        'Error': {
            'type': 'object',
            'properties': {
                'error': {'type': 'string', 'description': 'Error message'}
            }
        }
    }
}
