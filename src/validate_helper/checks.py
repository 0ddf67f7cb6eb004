"""run_check: turn a raising guard into a CheckResult.

Guards in :mod:`validate_helper.validate` raise on failure. Callers that
report outcomes (the CLI) use :func:`run_check` instead, which catches
violations and nothing else.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from validate_helper.errors import ArgumentViolation, parameter_path
from validate_helper.result import CheckResult

logger = logging.getLogger(__name__)


def run_check(
    check: str,
    guard: Callable[..., None],
    *args: Any,
    param_name: str,
    field: str | None = None,
    **kwargs: Any,
) -> CheckResult:
    """Run *guard* and report the outcome.

    Args:
        check: Name of the check, echoed in the result.
        guard: A guard function from :mod:`validate_helper.validate`.
        *args: Leading positional arguments for the guard (the value, bounds).
        param_name: Parameter name passed to the guard.
        field: Optional sub-field passed to the guard.
        **kwargs: Extra keyword arguments (e.g. ``min_password_length``).
    """
    path = parameter_path(param_name, field)
    try:
        guard(*args, param_name, field, **kwargs)
    except ArgumentViolation as exc:
        logger.debug("Check failed: %s %s (%s)", check, path, exc.kind)
        return CheckResult(ok=False, check=check, param=path, violation=exc.to_violation())
    logger.debug("Check passed: %s %s", check, path)
    return CheckResult(ok=True, check=check, param=path)
