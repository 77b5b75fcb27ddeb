import logging

from flask import Blueprint, jsonify

from freshclean import db, wallet
from freshclean.errors import ValidationError
from freshclean.models import Order
from freshclean.utils import get_json_body, missing_fields, parse_datetime, require_auth, safe_float

logger = logging.getLogger(__name__)

orders_bp = Blueprint('orders', __name__)

REQUIRED_ORDER_FIELDS = [
    'name', 'phone', 'address', 'pickupDate', 'pickupTime',
    'serviceType', 'weight', 'totalAmount', 'paymentMethod',
]


def _parse_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'on')
    return bool(value)


@orders_bp.route('', methods=['POST'])
@require_auth
def create_order(auth):
    """
    Book a laundry pickup
    POST /api/orders
    Body: {
        "name": "Asha Rao",
        "phone": "9876543210",
        "address": "12 MG Road, Bengaluru",
        "pickupDate": "2024-05-01",
        "pickupTime": "10:00 AM - 12:00 PM",
        "serviceType": "wash-fold",
        "weight": 5,
        "express": false,
        "totalAmount": 450,
        "paymentMethod": "wallet"
    }

    Paying by wallet debits the balance and logs a debit transaction in the
    same database transaction as the order itself.
    """
    data = get_json_body()

    # Falsy values count as missing, so weight=0 is rejected here
    missing = missing_fields(data, REQUIRED_ORDER_FIELDS)
    if missing:
        logger.info('Order rejected, missing fields: %s', ', '.join(missing))
        raise ValidationError('All fields are required')

    pickup_date = parse_datetime(data['pickupDate'])
    if pickup_date is None:
        raise ValidationError('Invalid pickup date')

    weight = safe_float(data['weight'])
    total_amount = safe_float(data['totalAmount'])
    if weight is None or total_amount is None:
        raise ValidationError('Weight and total amount must be numbers')

    user = auth.user

    if data['paymentMethod'] == 'wallet':
        wallet.debit(user, total_amount)

    order = Order(
        user_id=user.id,
        name=data['name'],
        phone=data['phone'],
        address=data['address'],
        pickup_date=pickup_date,
        pickup_time=data['pickupTime'],
        service_type=data['serviceType'],
        weight=weight,
        express=_parse_bool(data.get('express') or False),
        total_amount=total_amount,
        payment_method=data['paymentMethod'],
        status='scheduled'
    )

    db.session.add(order)
    db.session.commit()

    logger.info('Order %s created for user %s (%s, %s)',
                order.id, user.id, order.payment_method, order.total_amount)

    return jsonify({
        'message': 'Order created successfully',
        'order': order.to_dict(),
        'newBalance': user.wallet_balance
    }), 201


@orders_bp.route('', methods=['GET'])
@require_auth
def list_orders(auth):
    """All of the user's orders, newest first"""
    orders = Order.for_user(auth.user.id).all()
    return jsonify([order.to_dict() for order in orders]), 200
