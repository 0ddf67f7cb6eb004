"""Tests for CheckResult and Violation."""

import json

import pytest

from validate_helper.result import CheckResult, Violation


class TestCheckResult:
    def test_success_construction(self) -> None:
        result = CheckResult(ok=True, check="email", param="user.email")
        assert result.ok is True
        assert result.violation is None

    def test_failure_construction(self) -> None:
        violation = Violation(kind="argument", message="Email contains invalid characters", param="e")
        result = CheckResult(ok=False, check="email", param="e", violation=violation)
        assert result.violation is not None
        assert result.violation.message == "Email contains invalid characters"

    def test_json_serialization(self) -> None:
        result = CheckResult(
            ok=False,
            check="positive",
            param="qty",
            violation=Violation(kind="argument", message="Parameter must be greater than 0", param="qty"),
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["check"] == "positive"
        assert parsed["violation"]["kind"] == "argument"

    def test_frozen(self) -> None:
        result = CheckResult(ok=True, check="email", param="e")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
