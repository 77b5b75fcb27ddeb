"""Utilities package"""
from .validators import missing_fields, to_int_in_range, field_error
from .helpers import camel_case, get_json_body, format_currency, parse_datetime, safe_float
from .security import hash_password, verify_password, generate_token, require_auth, AuthContext

__all__ = [
    'missing_fields',
    'to_int_in_range',
    'field_error',
    'camel_case',
    'get_json_body',
    'format_currency',
    'parse_datetime',
    'safe_float',
    'hash_password',
    'verify_password',
    'generate_token',
    'require_auth',
    'AuthContext',
]
