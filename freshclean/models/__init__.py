"""SQLAlchemy models package"""
from .user import User
from .order import Order
from .transaction import Transaction
from .feedback import Feedback

__all__ = [
    'User',
    'Order',
    'Transaction',
    'Feedback',
]
