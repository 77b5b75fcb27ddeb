"""
Base model with common fields and methods
"""
from datetime import datetime, timezone
import uuid

from freshclean import db
from freshclean.utils.helpers import camel_case


def generate_uuid():
    """Generate UUID for primary keys"""
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)


class BaseModel(db.Model):
    """Abstract base model with common fields"""
    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    def to_dict(self, exclude=None):
        """
        Convert model to its JSON wire shape

        Column names become camelCase keys and the primary key is exposed
        as ``_id``.

        Args:
            exclude (list): List of column names to exclude

        Returns:
            dict: Model as dictionary
        """
        exclude = exclude or []
        data = {}

        for column in self.__table__.columns:
            if column.name in exclude:
                continue

            value = getattr(self, column.key)
            if isinstance(value, datetime):
                # Stored values are UTC; SQLite hands them back naive
                if value.tzinfo is None:
                    value = value.replace(tzinfo=timezone.utc)
                value = value.isoformat()

            key = '_id' if column.name == 'id' else camel_case(column.name)
            data[key] = value

        return data

    @classmethod
    def for_user(cls, user_id):
        """Query records owned by a user, newest first"""
        return cls.query.filter_by(user_id=user_id).order_by(cls.created_at.desc())
