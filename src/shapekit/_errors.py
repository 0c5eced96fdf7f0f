"""Exceptions raised by shapekit."""

from __future__ import annotations

from typing import Any


class ShapeError(Exception):
    """Base class for recoverable shapekit errors."""


class InvalidParameterError(ShapeError, ValueError):
    """A constructor argument is not a positive, finite real number."""

    def __init__(self, field_name: str, value: Any):
        self.field_name = field_name
        self.value = value
        super().__init__(
            f'Parameter "{field_name}" must be a number greater than 0, got {value!r}'
        )


class UnknownKindError(ShapeError, ValueError):
    """The factory was asked for a shape kind it does not know."""

    def __init__(self, kind: Any, known: tuple[str, ...] = ()):
        self.kind = kind
        self.known = known
        msg = f"Unknown shape kind: {kind!r}"
        if known:
            msg += f" (expected one of: {', '.join(known)})"
        super().__init__(msg)
