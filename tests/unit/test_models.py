"""Unit tests for validation models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from flexval.models import MISSING, RuleKind, ValidationError, ValidationReport, is_absent


class TestRuleKind:
    def test_parse_known_kind(self) -> None:
        assert RuleKind.parse("pattern") is RuleKind.PATTERN

    def test_parse_unknown_kind(self) -> None:
        assert RuleKind.parse("email") is None


class TestMissing:
    def test_missing_is_falsy_singleton(self) -> None:
        assert not MISSING
        assert repr(MISSING) == "MISSING"
        assert type(MISSING)() is MISSING

    def test_is_absent(self) -> None:
        assert is_absent(MISSING)
        assert is_absent(None)
        assert not is_absent(0)


class TestValidationError:
    def test_string_msg_for_single_message_rules(self) -> None:
        err = ValidationError(attr="age", rule=RuleKind.MIN, messages=["age must be greater than or equal to 18"])
        assert err.to_dict() == {
            "attr": "age",
            "valid": False,
            "msg": "age must be greater than or equal to 18",
        }

    def test_list_msg_for_pattern(self) -> None:
        err = ValidationError(attr="code", rule="pattern", messages=["code must match regex of x"])
        assert err.msg == ["code must match regex of x"]

    def test_requires_at_least_one_message(self) -> None:
        with pytest.raises(PydanticValidationError):
            ValidationError(attr="age", rule="min", messages=[])


class TestValidationReport:
    def test_empty_report_passes(self) -> None:
        report = ValidationReport.build([])
        assert report.passed
        assert report.error_count == 0
        assert report.to_legacy() == []

    def test_report_with_errors_fails(self) -> None:
        err = ValidationError(attr="name", rule="required", messages=["name is required"])
        report = ValidationReport.build([err], attributes_checked=1, rules_evaluated=1)
        assert not report.passed
        assert report.error_count == 1
        assert report.to_legacy() == [{"attr": "name", "valid": False, "msg": "name is required"}]
