import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def create_app(config_name=None):
    """Flask application factory"""
    app = Flask(__name__)

    # Load configuration
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    from config import config
    app.config.from_object(config.get(config_name, config['default']))

    logging.basicConfig(level=app.config['LOG_LEVEL'], format=LOG_FORMAT)
    logging.getLogger('freshclean').setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    from freshclean.extensions import limiter
    db.init_app(app)
    limiter.init_app(app)
    CORS(app, origins=app.config['CORS_ORIGINS'], supports_credentials=True)

    from freshclean.middleware import RequestIdMiddleware
    app.wsgi_app = RequestIdMiddleware(app.wsgi_app)

    from freshclean.errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints
    from freshclean.routes.auth import auth_bp
    from freshclean.routes.users import users_bp
    from freshclean.routes.orders import orders_bp
    from freshclean.routes.feedback import feedback_bp

    api_prefix = app.config['API_PREFIX']
    app.register_blueprint(auth_bp, url_prefix=f'{api_prefix}/auth')
    app.register_blueprint(users_bp, url_prefix=f'{api_prefix}/users')
    app.register_blueprint(orders_bp, url_prefix=f'{api_prefix}/orders')
    app.register_blueprint(feedback_bp, url_prefix=f'{api_prefix}/feedback')

    # Health check endpoint
    @app.route(f'{api_prefix}/health')
    @limiter.exempt
    def health():
        return jsonify({'status': 'OK', 'message': 'FreshClean API is running'}), 200

    # Tables live for the lifetime of the application's engine
    with app.app_context():
        from freshclean import models  # noqa: F401
        db.create_all()

    return app
