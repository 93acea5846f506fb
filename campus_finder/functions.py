import re
from campus_finder.constants import EMAIL_PATTERN

_email_re = re.compile(EMAIL_PATTERN)


def is_email(value):
    """True when value looks like local@domain.tld once surrounding whitespace is removed"""
    if not value or not isinstance(value, str):
        return False
    return _email_re.match(value.strip()) is not None
