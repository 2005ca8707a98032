"""Comparison keys for client contact details.

Display values are stored untouched; these helpers only produce the keys the
client lookups compare against.
"""

import re
from typing import Optional

_NON_DIGITS = re.compile(r"\D")


def normalize_name(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def normalize_email(email: Optional[str]) -> Optional[str]:
    if email is None:
        return None
    cleaned = email.strip().lower()
    return cleaned or None


def phone_digits(phone: Optional[str]) -> Optional[str]:
    if phone is None:
        return None
    digits = _NON_DIGITS.sub("", phone)
    return digits or None
