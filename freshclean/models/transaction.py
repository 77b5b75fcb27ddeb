"""Wallet transaction model"""
from freshclean import db
from .base import BaseModel


class Transaction(BaseModel):
    """Immutable wallet ledger entry"""
    __tablename__ = 'transactions'

    CREDIT = 'credit'
    DEBIT = 'debit'

    user_id = db.Column(db.String(36), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    type = db.Column(db.String(10), nullable=False)  # credit, debit
    amount = db.Column(db.Float, nullable=False)
    description = db.Column(db.String(255), nullable=False)
    payment_method = db.Column(db.String(50))

    __table_args__ = (
        db.CheckConstraint("type IN ('credit', 'debit')", name='ck_transactions_type'),
    )

    def __repr__(self):
        return f'<Transaction {self.type} {self.amount}>'
