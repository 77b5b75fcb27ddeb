"""
Wallet balance changes and their ledger entries

Both helpers stage their changes on the current session and leave the
commit to the caller, so a balance change and whatever it pays for land in
one database transaction.
"""
import logging

from freshclean import db
from freshclean.errors import InsufficientFundsError
from freshclean.models import Transaction

logger = logging.getLogger(__name__)

TOPUP_DESCRIPTION = 'Wallet Top-up'
ORDER_PAYMENT_DESCRIPTION = 'Laundry Service Payment'


def credit(user, amount, description=TOPUP_DESCRIPTION, payment_method=None):
    """Add ``amount`` to the user's balance and log a credit transaction"""
    user.wallet_balance = (user.wallet_balance or 0) + amount

    transaction = Transaction(
        user_id=user.id,
        type=Transaction.CREDIT,
        amount=amount,
        description=description,
        payment_method=payment_method,
    )
    db.session.add(transaction)
    return transaction


def debit(user, amount, description=ORDER_PAYMENT_DESCRIPTION, payment_method='wallet'):
    """
    Take ``amount`` from the user's balance and log a debit transaction

    Raises:
        InsufficientFundsError: balance is below amount; nothing is staged
    """
    balance = user.wallet_balance or 0
    if balance < amount:
        logger.info('Insufficient balance for user %s: required %s, available %s',
                    user.id, amount, balance)
        raise InsufficientFundsError(required=amount, available=balance)

    user.wallet_balance = balance - amount

    transaction = Transaction(
        user_id=user.id,
        type=Transaction.DEBIT,
        amount=amount,
        description=description,
        payment_method=payment_method,
    )
    db.session.add(transaction)
    return transaction
