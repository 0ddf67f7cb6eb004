"""Violation exceptions raised by the guard functions.

Two failure kinds:
- NullViolation: a required value is None.
- ArgumentViolation: a present value fails a format, range, or membership rule.

NullViolation subclasses ArgumentViolation, so ``except ArgumentViolation``
catches both.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from validate_helper.result import Violation


def parameter_path(param_name: str, field: str | None = None) -> str:
    """Return ``param_name`` or ``param_name.field`` when *field* is given."""
    if field is None:
        return param_name
    return f"{param_name}.{field}"


class ArgumentViolation(ValueError):
    """A present argument failed a validation rule.

    Attributes:
        message: Human-readable description of the broken rule.
        param_name: Parameter path of the offending argument.
    """

    kind = "argument"

    def __init__(self, message: str, param_name: str) -> None:
        super().__init__(message, param_name)
        self.message = message
        self.param_name = param_name

    def __str__(self) -> str:
        return f"{self.message} (Parameter '{self.param_name}')"

    def to_violation(self) -> Violation:
        """Snapshot this failure as a frozen, serializable model."""
        from validate_helper.result import Violation

        return Violation(kind=self.kind, message=self.message, param=self.param_name)


class NullViolation(ArgumentViolation):
    """A required argument was None."""

    kind = "null"

    def __init__(self, param_name: str, message: str = "Value cannot be null.") -> None:
        super().__init__(message, param_name)
