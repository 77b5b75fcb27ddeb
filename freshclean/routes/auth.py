import logging

from flask import Blueprint, jsonify, current_app
from sqlalchemy.exc import IntegrityError

from freshclean import db
from freshclean.errors import AuthError, ValidationError
from freshclean.extensions import limiter
from freshclean.models import User
from freshclean.utils import generate_token, get_json_body, missing_fields

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


def _auth_rate_limit():
    return current_app.config['AUTH_RATE_LIMIT']


def _normalize_email(email):
    return str(email).lower().strip()


@auth_bp.route('/signup', methods=['POST'])
@limiter.limit(_auth_rate_limit)
def signup():
    """
    Register a new user
    POST /api/auth/signup
    Body: {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "phone": "9876543210",
        "address": "12 MG Road, Bengaluru",
        "password": "password123"
    }
    """
    data = get_json_body()

    if missing_fields(data, ['name', 'email', 'phone', 'address', 'password']):
        raise ValidationError('All fields are required')

    email = _normalize_email(data['email'])
    if User.query.filter_by(email=email).first():
        raise ValidationError('Email already registered')

    user = User(
        name=data['name'],
        email=email,
        phone=data['phone'],
        address=data['address'],
        wallet_balance=current_app.config['WALLET_STARTING_BALANCE'],
    )
    user.set_password(str(data['password']))

    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email
        db.session.rollback()
        raise ValidationError('Email already registered')

    logger.info('User %s signed up', user.id)

    return jsonify({
        'message': 'User created successfully',
        'token': generate_token(user.id),
        'user': user.to_dict()
    }), 201


@auth_bp.route('/login', methods=['POST'])
@limiter.limit(_auth_rate_limit)
def login():
    """
    Login user
    POST /api/auth/login
    Body: {
        "email": "asha@example.com",
        "password": "password123"
    }
    """
    data = get_json_body()

    if not data.get('email') or not data.get('password'):
        raise ValidationError('Email and password required')

    user = User.query.filter_by(email=_normalize_email(data['email'])).first()

    # Same message for unknown email and wrong password
    if not user or not user.check_password(str(data['password'])):
        logger.warning('Failed login attempt')
        raise AuthError('Invalid credentials')

    logger.info('User %s logged in', user.id)

    return jsonify({
        'message': 'Login successful',
        'token': generate_token(user.id),
        'user': user.to_dict()
    }), 200
