"""
Validation utilities
"""
import re

_INT_PATTERN = re.compile(r'^[-+]?(?:0|[1-9][0-9]*)$')


def missing_fields(data, fields):
    """
    Names of required fields that are absent or falsy

    A falsy value such as 0 or "" counts as missing.

    Args:
        data (dict): Request body
        fields (list): Required field names

    Returns:
        list: Missing field names, in the order given
    """
    return [field for field in fields if not data.get(field)]


def to_int_in_range(value, minimum, maximum):
    """
    Interpret value as an integer within [minimum, maximum]

    Accepts JSON integers, whole floats and integer strings. Booleans and
    fractional numbers are rejected.

    Returns:
        int: The integer, or None if value does not qualify
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and _INT_PATTERN.match(value):
        number = int(value)
    else:
        return None

    if minimum <= number <= maximum:
        return number
    return None


def field_error(path, value, msg):
    """Field-level validation error entry"""
    return {
        'type': 'field',
        'value': value,
        'msg': msg,
        'path': path,
        'location': 'body',
    }
