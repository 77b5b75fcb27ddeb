"""
Helper utilities
"""
import math
import re
from datetime import datetime, timezone

from flask import request


def camel_case(name):
    """
    Convert a snake_case column name to its camelCase wire name

    Args:
        name (str): snake_case name

    Returns:
        str: camelCase name
    """
    return re.sub(r'_([a-z])', lambda m: m.group(1).upper(), name)


def get_json_body():
    """Request JSON body as a dict; missing or malformed bodies read as empty"""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def format_amount(amount):
    """Render an amount the way it is shown to customers: 450, 450.5"""
    amount = float(amount)
    if amount.is_integer():
        return str(int(amount))
    return str(amount)


def format_currency(amount, currency='INR'):
    """
    Format amount as currency

    Args:
        amount: Numeric amount
        currency (str): Currency code

    Returns:
        str: Formatted currency string
    """
    if currency == 'INR':
        return f'₹{format_amount(amount)}'
    return f'{format_amount(amount)} {currency}'


def parse_datetime(value):
    """
    Parse an ISO-8601 date or datetime string

    Args:
        value (str): e.g. "2024-05-01" or "2024-05-01T10:00:00Z"

    Returns:
        datetime: Naive UTC value or None if invalid. Values with an offset
        are converted to UTC; values without one are taken as UTC.
    """
    if not isinstance(value, str):
        return None
    raw = value.strip()
    if raw.endswith('Z'):
        raw = raw[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def safe_float(value, default=None):
    """
    Safely convert value to a finite float

    Args:
        value: Value to convert
        default: Default value if conversion fails

    Returns:
        float: Converted value, or default for NaN, infinities and non-numbers
    """
    if isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (ValueError, TypeError):
        return default
    return number if math.isfinite(number) else default
