import logging

from flask import Blueprint, jsonify, current_app

from freshclean import db, wallet
from freshclean.errors import ValidationError
from freshclean.models import Transaction
from freshclean.utils import get_json_body, require_auth, safe_float

logger = logging.getLogger(__name__)

users_bp = Blueprint('users', __name__)


@users_bp.route('/profile', methods=['GET'])
@require_auth
def get_profile(auth):
    """Get the authenticated user's profile"""
    return jsonify(auth.user.to_dict()), 200


@users_bp.route('/profile', methods=['PUT'])
@require_auth
def update_profile(auth):
    """
    Update profile fields; absent or empty fields are left unchanged
    PUT /api/users/profile
    Body: {
        "name": "Asha Rao",
        "phone": "9876543210",
        "address": "14 MG Road, Bengaluru",
        "password": "new-password"
    }
    """
    data = get_json_body()
    user = auth.user

    if data.get('name'):
        user.name = data['name']
    if data.get('phone'):
        user.phone = data['phone']
    if data.get('address'):
        user.address = data['address']
    if data.get('password'):
        user.set_password(str(data['password']))

    db.session.commit()

    return jsonify({
        'message': 'Profile updated successfully',
        'user': user.to_dict()
    }), 200


@users_bp.route('/add-money', methods=['POST'])
@require_auth
def add_money(auth):
    """
    Top up the wallet
    POST /api/users/add-money
    Body: {"amount": 500, "paymentMethod": "upi"}
    """
    data = get_json_body()
    config = current_app.config

    amount = safe_float(data.get('amount')) if data.get('amount') else None
    if amount is None or not (config['WALLET_TOPUP_MIN'] <= amount <= config['WALLET_TOPUP_MAX']):
        raise ValidationError('Amount must be between ₹100 and ₹10,000')

    user = auth.user
    wallet.credit(user, amount, payment_method=data.get('paymentMethod'))
    db.session.commit()

    logger.info('User %s added %s to wallet', user.id, amount)

    return jsonify({
        'message': 'Money added successfully',
        'newBalance': user.wallet_balance
    }), 200


@users_bp.route('/transactions', methods=['GET'])
@require_auth
def list_transactions(auth):
    """Most recent wallet transactions, newest first"""
    transactions = (
        Transaction.for_user(auth.user.id)
        .limit(current_app.config['TRANSACTIONS_LIMIT'])
        .all()
    )
    return jsonify([t.to_dict() for t in transactions]), 200
