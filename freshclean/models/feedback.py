"""Feedback model"""
from freshclean import db
from .base import BaseModel

RECOMMEND_CHOICES = ('yes', 'no', 'maybe')
GENERAL_FEEDBACK = 'General Feedback'


class Feedback(BaseModel):
    """
    Customer rating, optionally tied to one order

    ``order_details`` is a denormalized text snapshot of the order so the
    feedback stays readable on its own.
    """
    __tablename__ = 'feedback'

    user_id = db.Column(db.String(36), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    # Stored as given; it need not reference an existing order
    order_id = db.Column(db.String(255), nullable=True, index=True)
    order_details = db.Column(db.String(255), default=GENERAL_FEEDBACK)
    rating = db.Column(db.Integer, nullable=False)
    comments = db.Column(db.Text, default='')
    service_quality = db.Column(db.Integer, nullable=True)
    recommend = db.Column(db.String(10), nullable=False, default='yes')

    __table_args__ = (
        db.CheckConstraint('rating BETWEEN 1 AND 5', name='ck_feedback_rating'),
        db.CheckConstraint(
            'service_quality IS NULL OR service_quality BETWEEN 1 AND 5',
            name='ck_feedback_service_quality'
        ),
    )

    def __repr__(self):
        return f'<Feedback {self.rating}/5 order={self.order_id}>'
