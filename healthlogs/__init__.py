from flask import Blueprint

# Create blueprint
healthlogs_bp = Blueprint('healthlogs', __name__)

# Import routes after creating the blueprint to avoid circular imports
from . import routes  # noqa
