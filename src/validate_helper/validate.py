"""Guard clauses for function and method preconditions.

Every guard returns None when its precondition holds and raises
:class:`~validate_helper.errors.NullViolation` or
:class:`~validate_helper.errors.ArgumentViolation` otherwise. The raised
error carries the parameter path: ``param_name``, or ``param_name.field``
when validating a member of a composite argument.

Typical use::

    from validate_helper import validate

    def register(user: User) -> None:
        validate.not_null(user, "user")
        validate.username(user.name, "user", "name")
        validate.password(user.password, "user", "password")

Guards hold no state and may be called from any thread.
"""

from __future__ import annotations

import unicodedata
import uuid
from collections.abc import Iterable, Sized
from typing import Any

from validate_helper.errors import ArgumentViolation, NullViolation, parameter_path
from validate_helper.patterns import is_complex_password, is_email, is_username

MIN_USERNAME_LENGTH = 5
DEFAULT_MIN_PASSWORD_LENGTH = 10
EMPTY_UUID = uuid.UUID(int=0)


# Space separators plus the C0/C1 layout controls. str.isspace() also counts
# the information separators \x1c-\x1f, which are not blank here.
_WHITESPACE_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})
_CONTROL_WHITESPACE = frozenset("\t\n\v\f\r\x85")


def _is_whitespace(value: str) -> bool:
    return all(
        ch in _CONTROL_WHITESPACE or unicodedata.category(ch) in _WHITESPACE_CATEGORIES
        for ch in value
    )


def _is_blank(value: str | None) -> bool:
    return value is None or _is_whitespace(value)


def _format_bound(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# --- Presence ---


def not_null(value: Any, param_name: str, field: str | None = None) -> None:
    if value is None:
        raise NullViolation(parameter_path(param_name, field))


def must_be_null(value: Any, param_name: str, field: str | None = None) -> None:
    if value is not None:
        raise ArgumentViolation("Parameter must be null", parameter_path(param_name, field))


def not_null_or_empty_or_whitespace(
    value: str | None, param_name: str, field: str | None = None
) -> None:
    if value is None:
        raise NullViolation(parameter_path(param_name, field))
    if _is_whitespace(value):
        raise ArgumentViolation(
            "Parameter can't be an empty or whitespace string",
            parameter_path(param_name, field),
        )


def not_empty(identifier: uuid.UUID, param_name: str, field: str | None = None) -> None:
    """Reject the nil UUID (``00000000-0000-0000-0000-000000000000``)."""
    if identifier == EMPTY_UUID:
        raise ArgumentViolation("Parameter can't be empty", parameter_path(param_name, field))


# --- Collections ---


def not_null_or_empty_array(
    values: Sized | None, param_name: str, field: str | None = None
) -> None:
    if values is None:
        raise NullViolation(parameter_path(param_name, field))
    if len(values) == 0:
        raise ArgumentViolation(
            "Parameter can't be an empty array", parameter_path(param_name, field)
        )


def not_null_or_containing_null_array(
    values: Iterable[Any] | None, param_name: str, field: str | None = None
) -> None:
    if values is None:
        raise NullViolation(parameter_path(param_name, field))
    if any(item is None for item in values):
        raise ArgumentViolation(
            "Parameter cannot contain Null values", parameter_path(param_name, field)
        )


def not_containing_null_array(
    values: Iterable[Any], param_name: str, field: str | None = None
) -> None:
    """Reject a collection holding None items.

    *values* itself is not null-checked: passing None raises ``TypeError``.
    Use :func:`not_null_or_containing_null_array` when the collection may be absent.
    """
    if any(item is None for item in values):
        raise ArgumentViolation(
            "Parameter cannot contain Null values", parameter_path(param_name, field)
        )


def not_containing_null_or_whitespace_string_array(
    values: Iterable[str | None], param_name: str, field: str | None = None
) -> None:
    if any(_is_blank(item) for item in values):
        raise ArgumentViolation(
            "Parameter cannot contain null or empty strings", parameter_path(param_name, field)
        )


def any_of(validations: Iterable[bool], param_name: str, field: str | None = None) -> None:
    """Pass when at least one of *validations* is true."""
    if not any(validations):
        raise ArgumentViolation("Parameter is not valid", parameter_path(param_name, field))


def all_of(validations: Iterable[bool], param_name: str, field: str | None = None) -> None:
    """Pass when every one of *validations* is true (including when there are none)."""
    if not all(validations):
        raise ArgumentViolation("Parameter is not valid", parameter_path(param_name, field))


# --- Numbers ---


def positive(value: int, param_name: str, field: str | None = None) -> None:
    if value <= 0:
        raise ArgumentViolation(
            "Parameter must be greater than 0", parameter_path(param_name, field)
        )


def positive_or_zero(value: int, param_name: str, field: str | None = None) -> None:
    if value < 0:
        raise ArgumentViolation(
            "Parameter must be greater than or equal to 0", parameter_path(param_name, field)
        )


def between(
    value: float,
    min_value: float,
    max_value: float,
    param_name: str,
    field: str | None = None,
) -> None:
    """Require ``min_value <= value <= max_value`` (inclusive on both ends)."""
    if value < min_value or value > max_value:
        raise ArgumentViolation(
            f"Parameter must be greater than or equal to {_format_bound(min_value)} "
            f"and less than or equal to {_format_bound(max_value)}",
            parameter_path(param_name, field),
        )


# --- Formats ---


def username(value: str | None, param_name: str, field: str | None = None) -> None:
    """Validate a username, or an email address used as a username.

    Checks run in order and the first failure wins: blank, shorter than
    :data:`MIN_USERNAME_LENGTH`, then format.
    """
    path = parameter_path(param_name, field)
    if _is_blank(value):
        raise ArgumentViolation("Username can't be an empty or whitespace string", path)
    if len(value) < MIN_USERNAME_LENGTH:
        raise ArgumentViolation(
            f"Username must be at least {MIN_USERNAME_LENGTH} characters", path
        )
    if not is_username(value):
        raise ArgumentViolation("Username contains invalid characters", path)


def password(
    value: str | None,
    param_name: str,
    field: str | None = None,
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
) -> None:
    """Validate password strength.

    Checks run in order and the first failure wins: blank, contains a
    space, shorter than *min_password_length*, then complexity. The
    complexity pattern has its own 10-character floor, so a lower
    *min_password_length* does not admit shorter passwords.
    """
    path = parameter_path(param_name, field)
    if _is_blank(value):
        raise ArgumentViolation("Password can't be an empty or whitespace string", path)
    if " " in value:
        raise ArgumentViolation("Password must not contains spaces", path)
    if len(value) < min_password_length:
        raise ArgumentViolation(
            f"Password must be at least {min_password_length} characters", path
        )
    if not is_complex_password(value):
        raise ArgumentViolation(
            "Password must contains at least one uppercase letter, one lowercase letter, "
            "one number and one special character",
            path,
        )


def email(value: str | None, param_name: str, field: str | None = None) -> None:
    path = parameter_path(param_name, field)
    if _is_blank(value):
        raise ArgumentViolation("Email can't be an empty or whitespace string", path)
    if " " in value:
        raise ArgumentViolation("Email must not contains spaces", path)
    if not is_email(value):
        raise ArgumentViolation("Email contains invalid characters", path)
