import os
import time
from flask import Flask, g, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException
from app.config import Config


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    from app.extensions import init_app, db
    init_app(app)

    register_request_logging(app)
    register_error_handlers(app)

    # Register blueprints
    from users import users_bp
    from healthlogs import healthlogs_bp
    from prescriptions import prescriptions_bp

    app.register_blueprint(users_bp)
    app.register_blueprint(healthlogs_bp)
    app.register_blueprint(prescriptions_bp)

    # Send every other GET to the client app; API routes are defined above
    register_client_shell(app)

    # Create tables and the startup user
    with app.app_context():
        db.create_all()
        if app.config.get('SEED_DEFAULT_USER'):
            from app.store import seed_default_user
            seed_default_user(app.config['SEED_USER'])

    return app


def register_request_logging(app):
    """Log one line per request: method, path, status and elapsed time."""

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop('request_started', None)
        elapsed = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        app.logger.info('%s %s %s %.3f ms', request.method, request.path, response.status_code, elapsed)
        return response


def register_error_handlers(app):
    from app.errors import StoreError

    @app.errorhandler(StoreError)
    def handle_store_error(e):
        if e.status_code >= 500:
            app.logger.error(f'Store error on {request.path}: {e.message}')
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception(f'Unhandled error on {request.path}: {str(e)}')
        return jsonify({'error': 'Internal server error'}), 500


def register_client_shell(app):
    """Serve the single page app's index.html for client side routes."""

    @app.route('/', defaults={'path': ''}, methods=['GET'])
    @app.route('/<path:path>', methods=['GET'])
    def client_shell(path):
        build_dir = app.config['CLIENT_BUILD_DIR']
        if not os.path.isfile(os.path.join(build_dir, 'index.html')):
            return jsonify({'error': 'Client build not found'}), 404
        return send_from_directory(build_dir, 'index.html')
