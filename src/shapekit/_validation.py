"""Validation of numeric constructor arguments."""

from __future__ import annotations

import math
import numbers
from typing import Any

from ._errors import InvalidParameterError


def validate_number(value: Any, field_name: str) -> None:
    """Check that a shape parameter is a strictly positive real number.

    Args:
        value: The candidate parameter value.
        field_name: Name reported in the error message.

    Raises:
        InvalidParameterError: If value is not a real number (bools count as
            non-numeric), is NaN or infinite, does not fit in a float, or is
            not greater than 0.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(field_name, value)
    try:
        as_float = float(value)
    except OverflowError:
        raise InvalidParameterError(field_name, value) from None
    if not math.isfinite(as_float) or as_float <= 0:
        raise InvalidParameterError(field_name, value)
