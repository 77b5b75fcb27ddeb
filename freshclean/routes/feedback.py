import logging

from flask import Blueprint, jsonify, current_app

from freshclean import db
from freshclean.errors import NotFoundError, ValidationError
from freshclean.models import Feedback, Order
from freshclean.models.feedback import GENERAL_FEEDBACK, RECOMMEND_CHOICES
from freshclean.utils import field_error, format_currency, get_json_body, require_auth, to_int_in_range

logger = logging.getLogger(__name__)

feedback_bp = Blueprint('feedback', __name__)


def _validate_feedback(data):
    """Field-level checks; returns the list of field errors"""
    errors = []

    if to_int_in_range(data.get('rating'), 1, 5) is None:
        errors.append(field_error('rating', data.get('rating'), 'Rating must be between 1 and 5'))

    # Optional fields are skipped only when the key is absent; null is checked
    service_quality = data.get('serviceQuality')
    if 'serviceQuality' in data and to_int_in_range(service_quality, 1, 5) is None:
        errors.append(field_error('serviceQuality', service_quality,
                                  'Service quality must be between 1 and 5'))

    recommend = data.get('recommend')
    if 'recommend' in data and recommend not in RECOMMEND_CHOICES:
        errors.append(field_error('recommend', recommend, 'Invalid recommendation value'))

    return errors


def describe_order(order):
    """Text snapshot of an order, e.g. 'Order #a1b2c3 - Dry Cleaning - ₹450'"""
    return f'Order #{order.short_id} - {order.service_name} - {format_currency(order.total_amount)}'


@feedback_bp.route('', methods=['POST'])
@require_auth
def submit_feedback(auth):
    """
    Submit feedback, optionally about one of the user's orders
    POST /api/feedback
    Body: {
        "orderId": "uuid",
        "rating": 5,
        "comments": "Crisp and on time",
        "serviceQuality": 4,
        "recommend": "yes"
    }
    """
    data = get_json_body()

    errors = _validate_feedback(data)
    if errors:
        raise ValidationError(errors=errors)

    user = auth.user
    order_id = str(data['orderId']) if data.get('orderId') else None

    order_details = GENERAL_FEEDBACK
    if order_id:
        # Another user's order reads as not found
        order = Order.query.filter_by(id=order_id, user_id=user.id).first()
        if order:
            order_details = describe_order(order)

    service_quality = data.get('serviceQuality')

    feedback = Feedback(
        user_id=user.id,
        order_id=order_id,
        order_details=order_details,
        rating=to_int_in_range(data['rating'], 1, 5),
        comments=data.get('comments') or '',
        service_quality=to_int_in_range(service_quality, 1, 5) if service_quality else None,
        recommend=data.get('recommend') or 'yes'
    )

    db.session.add(feedback)
    db.session.commit()

    logger.info('Feedback %s submitted by user %s (%s/5)', feedback.id, user.id, feedback.rating)

    return jsonify({
        'message': 'Feedback submitted successfully',
        'feedback': feedback.to_dict()
    }), 201


@feedback_bp.route('', methods=['GET'])
@require_auth
def list_feedback(auth):
    """The user's most recent feedback, newest first"""
    feedback = (
        Feedback.for_user(auth.user.id)
        .limit(current_app.config['FEEDBACK_LIMIT'])
        .all()
    )
    return jsonify([f.to_dict() for f in feedback]), 200


@feedback_bp.route('/order/<order_id>', methods=['GET'])
@require_auth
def get_order_feedback(auth, order_id):
    """The user's feedback for one order"""
    feedback = Feedback.for_user(auth.user.id).filter_by(order_id=order_id).first()

    if not feedback:
        raise NotFoundError('No feedback found for this order')

    return jsonify(feedback.to_dict()), 200
