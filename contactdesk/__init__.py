"""Flask application factory."""

import os

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import config
from .extensions import db, cors
from .log import configure_logging
from .store import ContactStore


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('CONTACTDESK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    logger = configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    cors.init_app(app, origins=app.config['FRONTEND_URL'])

    # Contact store owns the contacts table
    store = ContactStore(db)
    app.extensions['contact_store'] = store
    with app.app_context():
        store.bootstrap()

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # Error handlers
    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'success': False, 'error': error.description}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        db.session.rollback()
        logger.exception(f'Unhandled error: {error}')
        return jsonify({'success': False, 'error': 'Internal server error'}), 500

    logger.info(f'Config: {config_name}, debug mode: {app.debug}')
    return app
