from flask_sqlalchemy import SQLAlchemy
from flasgger import Swagger
from docs.swagger_config import SWAGGER_CONFIG, SWAGGER_TEMPLATE

# Initialize extensions
db = SQLAlchemy()
swagger = Swagger(template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

def init_app(app):
    """Initialize all extensions with the app."""
    db.init_app(app)
    swagger.init_app(app)
