"""
API error taxonomy and the Flask error handlers that render it.

Route handlers raise these instead of building error responses inline, so
every endpoint reports the same failure with the same body.
"""
import logging
import time

from flask import jsonify
from werkzeug.exceptions import HTTPException

from freshclean.extensions import limiter

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors reported to the client"""
    status_code = 400
    message = 'Bad request'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {'message': self.message}


class ValidationError(APIError):
    """Missing or out-of-range request fields (400)

    With ``errors`` the body carries one entry per offending field instead
    of a single message.
    """
    status_code = 400
    message = 'Validation failed'

    def __init__(self, message=None, errors=None):
        super().__init__(message)
        self.errors = errors

    def to_dict(self):
        if self.errors:
            return {'errors': self.errors}
        return super().to_dict()


class AuthError(APIError):
    """Missing/invalid/expired token or bad credentials (401)"""
    status_code = 401
    message = 'Invalid token'


class InsufficientFundsError(APIError):
    """Wallet balance below the amount being charged (400)"""
    status_code = 400
    message = 'Insufficient wallet balance'

    def __init__(self, required, available):
        super().__init__()
        self.required = required
        self.available = available

    def to_dict(self):
        return {
            'message': self.message,
            'required': self.required,
            'available': self.available,
        }


class NotFoundError(APIError):
    """No matching resource (404)"""
    status_code = 404
    message = 'Not found'


def register_error_handlers(app):
    """Attach JSON error handlers for the taxonomy, HTTP errors and the catch-all"""
    from freshclean import db

    @app.errorhandler(APIError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(429)
    def ratelimit_handler(e):
        # Seconds until the breached window resets
        current = limiter.current_limit
        if current is not None:
            retry_after_seconds = max(int(current.reset_at - time.time()), 1)
        else:
            retry_after_seconds = 60
        return jsonify({
            'message': 'Too many requests. Please try again later.',
            'retry_after': retry_after_seconds,
        }), 429

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'message': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        logger.exception('Unhandled error: %s', e)
        return jsonify({'message': 'Server error'}), 500
