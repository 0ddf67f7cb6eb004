"""Violation and CheckResult: structured outcomes of a guard check.

The CLI and any other caller that needs a value instead of an exception
consume these types (see :mod:`validate_helper.checks`).
"""

from __future__ import annotations

from pydantic import BaseModel


class Violation(BaseModel):
    """Structured failure payload within a CheckResult."""

    model_config = {"frozen": True}

    kind: str
    message: str
    param: str


class CheckResult(BaseModel):
    """Outcome of running one guard.

    Attributes:
        ok: Whether the guard passed.
        check: Name of the check (e.g. ``"email"``).
        param: Parameter path the guard was run against.
        violation: The failure if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    check: str
    param: str
    violation: Violation | None = None
