"""
Reusable field predicates.

Each function returns a plain bool so callers decide how to report a
failure.  Where Django ships a validator for the format it is used
rather than a local regular expression.
"""
from __future__ import annotations

import re

from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator, URLValidator, validate_ipv46_address

PHONE_RE = re.compile(r'^\+?\d{7,15}$')
IDENTITY_RE = re.compile(r'^\d{6,12}$')
CARD_RE = re.compile(r'^\d{13,19}$')

_email = EmailValidator()
_url = URLValidator(schemes=['http', 'https'])


def _digits(value) -> str:
    return re.sub(r'[\s\-()]', '', str(value if value is not None else '')).strip()


def is_valid_phone_number(value) -> bool:
    return bool(PHONE_RE.match(_digits(value)))


def is_valid_email(value) -> bool:
    try:
        _email(value or '')
    except ValidationError:
        return False
    return True


def is_strong_password(password) -> bool:
    """Django's configured validators plus one character of each class."""
    if not password:
        return False
    try:
        validate_password(password)
    except ValidationError:
        return False
    return all((
        re.search(r'[a-z]', password),
        re.search(r'[A-Z]', password),
        re.search(r'\d', password),
        re.search(r'[^\w\s]', password),
    ))


def is_valid_url(value) -> bool:
    try:
        _url(value or '')
    except ValidationError:
        return False
    return True


def is_valid_ip(value) -> bool:
    try:
        validate_ipv46_address(value or '')
    except ValidationError:
        return False
    return True


def is_valid_credit_card(value) -> bool:
    number = _digits(value)
    if not CARD_RE.match(number):
        return False
    # Luhn checksum
    total = 0
    for i, ch in enumerate(reversed(number)):
        d = int(ch)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0


def is_valid_identity_number(value) -> bool:
    return bool(IDENTITY_RE.match(_digits(value)))
