"""Validation of free-text record fields.

Records are persisted as single-space separated tokens, so a field value may
not be empty and may not contain whitespace. The token ``-`` is reserved for
an empty value in the data files and is refused as well.
"""

import re

from compustore.domain.errors import ValidationError

EMPTY_FIELD = "-"

_WHITESPACE = re.compile(r"\s")


def require_token(value: str, field_name: str) -> str:
    """Return ``value`` stripped, or raise if it is not a single token.

    Raises:
        ValidationError: If the value is empty, is the reserved ``-`` token
            or contains whitespace
    """
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{field_name} cannot be empty")
    if value == EMPTY_FIELD:
        raise ValidationError(f"{field_name} cannot be '{EMPTY_FIELD}'")
    if _WHITESPACE.search(value):
        raise ValidationError(
            f"{field_name} cannot contain spaces (got '{value}'); use '_' instead"
        )
    return value
