"""Format patterns for usernames, passwords, and email addresses.

Compiled once at import and shared by every guard call.

INVARIANT: The pattern constants are never reassigned after import.
"""

from __future__ import annotations

import re

USERNAME_PATTERN: re.Pattern[str] = re.compile(
    r"\A(?=[a-zA-Z])[-\w.]{0,23}(?:[a-zA-Z\d]|(?<![-.])_)\Z"
)

PASSWORD_PATTERN: re.Pattern[str] = re.compile(
    r"\A(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[#$^+=!*()@%&]).{10,}\Z"
)

EMAIL_PATTERN: re.Pattern[str] = re.compile(
    r"\A(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?)\Z",
    re.IGNORECASE,
)

FORMAT_PATTERNS: dict[str, re.Pattern[str]] = {
    "username": USERNAME_PATTERN,
    "password": PASSWORD_PATTERN,
    "email": EMAIL_PATTERN,
}


def matches_format(value: str, kind: str) -> bool:
    """Check whether *value* matches the pattern registered for *kind*."""
    pattern = FORMAT_PATTERNS.get(kind)
    if pattern is None:
        return False
    return pattern.match(value) is not None


def is_email(value: str) -> bool:
    return EMAIL_PATTERN.match(value) is not None


def is_username(value: str) -> bool:
    """Usernames may also be email addresses."""
    return USERNAME_PATTERN.match(value) is not None or is_email(value)


def is_complex_password(value: str) -> bool:
    return PASSWORD_PATTERN.match(value) is not None
