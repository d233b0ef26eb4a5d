"""Unit tests for the min and max rules."""

from flexval.models import MISSING, RuleKind
from flexval.rules import MaxRule, MinRule, evaluate


class TestMinRule:
    def test_value_at_bound_passes(self) -> None:
        assert MinRule().check(18, "age", 18) == []

    def test_value_below_bound_fails(self) -> None:
        assert MinRule().check(18, "age", 17) == ["age must be greater than or equal to 18"]

    def test_missing_value_passes(self) -> None:
        assert MinRule().check(18, "age", MISSING) == []

    def test_none_value_passes(self) -> None:
        assert MinRule().check(18, "age", None) == []

    def test_integral_float_bound_prints_as_integer(self) -> None:
        assert MinRule().check(18.0, "age", 2) == ["age must be greater than or equal to 18"]

    def test_fractional_bound_keeps_fraction(self) -> None:
        assert MinRule().check(1.5, "ratio", 1) == ["ratio must be greater than or equal to 1.5"]

    def test_unorderable_value_passes(self) -> None:
        assert MinRule().check(18, "age", "old") == []
        assert MinRule().check(18, "age", [1, 2]) == []

    def test_numeric_string_compared_as_number(self) -> None:
        rule = MinRule()
        assert rule.check(18, "age", "20") == []
        assert rule.check(18, "age", "17.5") == ["age must be greater than or equal to 18"]

    def test_string_bound_compares_as_strings(self) -> None:
        assert MinRule().check("b", "grade", "a") == ["grade must be greater than or equal to b"]


class TestMaxRule:
    def test_value_at_bound_passes(self) -> None:
        assert MaxRule().check(120, "age", 120) == []

    def test_value_above_bound_fails(self) -> None:
        assert MaxRule().check(120, "age", 121) == ["age must be less than or equal to 120"]

    def test_numeric_string_above_bound_fails(self) -> None:
        assert MaxRule().check(120, "age", "121") == ["age must be less than or equal to 120"]

    def test_nan_passes(self) -> None:
        assert MaxRule().check(120, "age", float("nan")) == []

    def test_missing_value_passes(self) -> None:
        assert MaxRule().check(120, "age", MISSING) == []


class TestEvaluateBounds:
    def test_passing_verdict(self) -> None:
        verdict = evaluate(18, "min", "age", 30)
        assert verdict.valid is True
        assert verdict.attr is None

    def test_failing_verdict_carries_attr_and_string_msg(self) -> None:
        verdict = evaluate(10, RuleKind.MAX, "qty", 11)
        assert verdict.valid is False
        assert verdict.attr == "qty"
        assert verdict.rule == "max"
        assert verdict.msg == "qty must be less than or equal to 10"
