"""
Pytest configuration and fixtures for FreshClean backend tests
"""
import pytest
import os
from datetime import datetime, timedelta, timezone
from freshclean import create_app, db
from freshclean.models import User, Order, Transaction, Feedback
import jwt


TEST_PASSWORD = 'TestPass123!'


@pytest.fixture(scope='function')
def app():
    """Create application instance with a fresh in-memory database"""
    os.environ['FLASK_ENV'] = 'testing'
    app = create_app('testing')

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def test_user(app):
    """Create a test customer with the default starting balance"""
    user = User(
        name='Asha Rao',
        email='asha@example.com',
        phone='9876543210',
        address='12 MG Road, Bengaluru',
        wallet_balance=500,
    )
    user.set_password(TEST_PASSWORD)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def other_user(app):
    """A second customer, for ownership checks"""
    user = User(
        name='Ravi Kumar',
        email='ravi@example.com',
        phone='9123456780',
        address='7 Park Street, Kolkata',
        wallet_balance=500,
    )
    user.set_password('OtherPass123!')
    db.session.add(user)
    db.session.commit()
    return user


def sign_token(app, user_id, expires_in=timedelta(hours=1)):
    """Sign a JWT the way the API does"""
    now = datetime.now(timezone.utc)
    return jwt.encode({
        'user_id': user_id,
        'iat': now,
        'exp': now + expires_in
    }, app.config['JWT_SECRET_KEY'], algorithm='HS256')


@pytest.fixture
def auth_headers(app, test_user):
    """Generate auth headers with JWT token for the test user"""
    return {
        'Authorization': f'Bearer {sign_token(app, test_user.id)}',
        'Content-Type': 'application/json'
    }


@pytest.fixture
def other_headers(app, other_user):
    """Generate auth headers with JWT token for the second user"""
    return {
        'Authorization': f'Bearer {sign_token(app, other_user.id)}',
        'Content-Type': 'application/json'
    }


@pytest.fixture
def order_payload():
    """A complete, valid booking request body"""
    return {
        'name': 'Asha Rao',
        'phone': '9876543210',
        'address': '12 MG Road, Bengaluru',
        'pickupDate': '2024-05-01',
        'pickupTime': '10:00 AM - 12:00 PM',
        'serviceType': 'wash-fold',
        'weight': 5,
        'express': False,
        'totalAmount': 450,
        'paymentMethod': 'cash'
    }


@pytest.fixture
def order_factory(app, test_user):
    """Factory for creating orders directly in the database"""
    def _create_order(**kwargs):
        defaults = {
            'user_id': test_user.id,
            'name': test_user.name,
            'phone': test_user.phone,
            'address': test_user.address,
            'pickup_date': datetime(2024, 5, 1),
            'pickup_time': '10:00 AM - 12:00 PM',
            'service_type': 'wash-fold',
            'weight': 5,
            'total_amount': 450,
            'payment_method': 'cash',
        }
        defaults.update(kwargs)

        order = Order(**defaults)
        db.session.add(order)
        db.session.commit()
        return order

    return _create_order


@pytest.fixture
def transaction_factory(app, test_user):
    """Factory for creating wallet transactions directly in the database"""
    def _create_transaction(**kwargs):
        defaults = {
            'user_id': test_user.id,
            'type': 'credit',
            'amount': 100,
            'description': 'Wallet Top-up',
            'payment_method': 'upi',
        }
        defaults.update(kwargs)

        transaction = Transaction(**defaults)
        db.session.add(transaction)
        db.session.commit()
        return transaction

    return _create_transaction


@pytest.fixture
def feedback_factory(app, test_user):
    """Factory for creating feedback directly in the database"""
    def _create_feedback(**kwargs):
        defaults = {
            'user_id': test_user.id,
            'order_details': 'General Feedback',
            'rating': 4,
            'comments': '',
            'recommend': 'yes',
        }
        defaults.update(kwargs)

        feedback = Feedback(**defaults)
        db.session.add(feedback)
        db.session.commit()
        return feedback

    return _create_feedback


@pytest.fixture
def make_token(app):
    """Sign tokens for arbitrary user ids and lifetimes"""
    def _make_token(user_id, expires_in=timedelta(hours=1)):
        return sign_token(app, user_id, expires_in)

    return _make_token
