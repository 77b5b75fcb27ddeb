"""Order model"""
from freshclean import db
from .base import BaseModel


class Order(BaseModel):
    """
    A booked laundry pickup

    Snapshot of the contact details, schedule, service and price taken
    at booking time.
    """
    __tablename__ = 'orders'

    user_id = db.Column(db.String(36), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50), nullable=False)
    address = db.Column(db.Text, nullable=False)
    pickup_date = db.Column(db.DateTime, nullable=False)
    pickup_time = db.Column(db.String(50), nullable=False)
    service_type = db.Column(db.String(50), nullable=False)  # wash-fold, dry-clean, ...
    weight = db.Column(db.Float, nullable=False)
    express = db.Column(db.Boolean, nullable=False, default=False)
    total_amount = db.Column(db.Float, nullable=False)
    payment_method = db.Column(db.String(50), nullable=False)  # wallet, cash, upi, ...
    status = db.Column(db.String(50), nullable=False, default='scheduled')

    def __repr__(self):
        return f'<Order {self.id} ({self.status})>'

    @property
    def short_id(self):
        """Last six characters of the id, as shown to customers"""
        return self.id[-6:]

    @property
    def service_name(self):
        """Display name of the service type"""
        return 'Dry Cleaning' if self.service_type == 'dry-clean' else 'Wash & Fold'
