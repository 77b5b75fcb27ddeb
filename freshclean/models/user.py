"""User model"""
from freshclean import db
from freshclean.utils.security import hash_password, verify_password
from .base import BaseModel


class User(BaseModel):
    """
    Customer account with an embedded wallet balance
    """
    __tablename__ = 'users'

    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    phone = db.Column(db.String(50), nullable=False)
    address = db.Column(db.Text, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    wallet_balance = db.Column(db.Float, nullable=False, default=500)

    def __repr__(self):
        return f'<User {self.email}>'

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = hash_password(password)

    def check_password(self, password):
        """Verify password against hash"""
        if not self.password_hash:
            return False
        return verify_password(password, self.password_hash)

    def to_dict(self):
        """Convert to dictionary, never including the password hash"""
        return super().to_dict(exclude=['password_hash'])
