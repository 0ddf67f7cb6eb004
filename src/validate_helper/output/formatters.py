"""Human/JSON output helpers.

The CLI renders CheckResult for humans or machines (--json).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from validate_helper.result import CheckResult


def format_result(result: CheckResult, *, json_output: bool = False) -> str:
    """Format a CheckResult for display.

    Args:
        result: The check result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        return f"OK: {result.check}"
    message = result.violation.message if result.violation else "Unknown error"
    return f"ERROR: {result.check} - {message} (param: {result.param})"
