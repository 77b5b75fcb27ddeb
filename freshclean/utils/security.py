"""
Password hashing, token issuing and the authentication gate
"""
import logging
from datetime import datetime, timezone
from functools import wraps
from typing import NamedTuple

import bcrypt
import jwt
from flask import request, current_app

from freshclean.errors import AuthError

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash"""
    return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))


def generate_token(user_id: str) -> str:
    """Generate JWT token bound to the user id"""
    now = datetime.now(timezone.utc)
    payload = {
        'user_id': user_id,
        'iat': now,
        'exp': now + current_app.config['JWT_ACCESS_TOKEN_EXPIRES'],
    }
    return jwt.encode(
        payload,
        current_app.config['JWT_SECRET_KEY'],
        algorithm=current_app.config['JWT_ALGORITHM']
    )


def decode_token(token: str) -> dict:
    """Decode and verify JWT token"""
    try:
        return jwt.decode(
            token,
            current_app.config['JWT_SECRET_KEY'],
            algorithms=[current_app.config['JWT_ALGORITHM']]
        )
    except jwt.ExpiredSignatureError:
        raise ValueError('Token has expired')
    except jwt.InvalidTokenError:
        raise ValueError('Invalid token')


class AuthContext(NamedTuple):
    """The authenticated caller, handed to protected route handlers"""
    user: object
    token: str


def authenticate(token):
    """
    Resolve a bearer token to its user

    Raises:
        AuthError: token absent, malformed, expired, or user gone
    """
    from freshclean import db
    from freshclean.models import User

    if not token:
        raise AuthError('No token provided')

    try:
        payload = decode_token(token)
    except ValueError as e:
        logger.warning('Rejected token: %s', e)
        raise AuthError('Invalid token')

    user_id = payload.get('user_id')
    user = db.session.get(User, user_id) if isinstance(user_id, str) else None
    if user is None:
        raise AuthError('User not found')

    return AuthContext(user=user, token=token)


def require_auth(f):
    """Decorator to require authentication; passes ``auth`` to the view"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = request.headers.get('Authorization', '').replace('Bearer ', '').strip()
        return f(*args, auth=authenticate(token), **kwargs)

    return decorated_function
