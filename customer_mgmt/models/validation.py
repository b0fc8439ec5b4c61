"""
Validation predicates for callers to run before handing data to a repository.

Nothing here is enforced by the entities or the repositories.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

NAME_MAX_LENGTH = 50


def is_valid_name(value: str | None) -> bool:
    return bool(value and value.strip()) and len(value) <= NAME_MAX_LENGTH


def is_valid_email(value: str | None) -> bool:
    return bool(value) and EMAIL_PATTERN.match(value) is not None


def is_valid_amount(value) -> bool:
    if value is None:
        return False
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return False
    return amount.is_finite() and amount >= 0


def customer_validation_errors(
    first_name: str | None,
    last_name: str | None,
    email: str | None,
) -> list[str]:
    errors = []
    if not is_valid_name(first_name):
        errors.append("first_name is required (max 50 characters).")
    if not is_valid_name(last_name):
        errors.append("last_name is required (max 50 characters).")
    if not is_valid_email(email):
        errors.append("email must look like name@domain.tld.")
    return errors
