"""Tests for CheckResult formatting."""

import json

from validate_helper.output.formatters import format_result
from validate_helper.result import CheckResult, Violation


def _failed() -> CheckResult:
    return CheckResult(
        ok=False,
        check="email",
        param="user.email",
        violation=Violation(kind="argument", message="Email contains invalid characters", param="user.email"),
    )


class TestFormatResult:
    def test_human_success(self) -> None:
        assert format_result(CheckResult(ok=True, check="email", param="e")) == "OK: email"

    def test_human_failure(self) -> None:
        assert format_result(_failed()) == (
            "ERROR: email - Email contains invalid characters (param: user.email)"
        )

    def test_json(self) -> None:
        parsed = json.loads(format_result(_failed(), json_output=True))
        assert parsed["ok"] is False
        assert parsed["violation"]["message"] == "Email contains invalid characters"
