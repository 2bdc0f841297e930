"""
Record selection by numeric ID
"""
import re

from utils.errors import ClientInputError

# Optional sign followed by ASCII digits only
ID_PATTERN = re.compile(r'([+-]?)([0-9]+)', re.ASCII)

# IDs are signed 64-bit integers
MIN_ID = -2 ** 63
MAX_ID = 2 ** 63 - 1
MAX_ID_DIGITS = len(str(MAX_ID))


def parse_id(raw_id):
    """Parse the ``id`` query value as a base-10 integer"""
    match = ID_PATTERN.fullmatch(raw_id) if raw_id is not None else None
    if match is None:
        raise ClientInputError('Invalid artist ID')

    sign, digits = match.groups()
    # Leading zeros are allowed at any length; significant digits are not
    digits = digits.lstrip('0') or '0'
    if len(digits) > MAX_ID_DIGITS:
        raise ClientInputError('Invalid artist ID')

    value = int(sign + digits)
    if not MIN_ID <= value <= MAX_ID:
        raise ClientInputError('Invalid artist ID')
    return value


def select(collection, record_id):
    """Return ``(record, True)`` for the first record with ``record_id``, else ``(None, False)``"""
    for record in collection:
        if record.id == record_id:
            return record, True
    return None, False
