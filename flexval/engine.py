"""Validation Engine — walks a spec, evaluates every rule, collects every failure.

This is the main entry point for object validation. Every declared attribute
and every declared rule is evaluated, with no short-circuiting, and the
failures come back in declaration order.

Usage:
    engine = ValidationEngine()
    errors = engine.validate({"age": {"min": 18}}, {"age": 17})
    if errors:
        # errors[0].msg == "age must be greater than or equal to 18"
"""

import time
from collections.abc import Mapping
from typing import Any, Optional, Union

import structlog

from flexval.exceptions import ContractError
from flexval.models import MISSING, RuleKind, ValidationError, ValidationReport
from flexval.rules import BaseRule, default_rules
from flexval.spec import ValidationSpec

logger = structlog.get_logger()

SpecLike = Union[ValidationSpec, Mapping]


class ValidationEngine:
    """Evaluates a ValidationSpec against target objects.

    Design principles:
        - Deterministic: same spec and object → same errors, same order
        - Stateless: nothing about a spec or object is kept between runs
        - Extensible: add rule kinds without modifying the engine
        - Observable: logs every validation run with timing
    """

    def __init__(self, rules: Optional[dict[RuleKind, BaseRule]] = None):
        """Initialize with the built-in rules or a custom registry.

        Args:
            rules: Optional mapping of kind to rule. If None, uses all defaults.
        """
        self.rules = rules if rules is not None else default_rules()

    def validate(self, spec: SpecLike, obj: Mapping) -> list[ValidationError]:
        """Validate an object and return every failed constraint.

        Args:
            spec: ValidationSpec, or a raw ``{attr: {kind: expected}}`` mapping
            obj: Mapping of attribute name to value

        Returns:
            Ordered list of ValidationError (empty if the object satisfies the spec)

        Raises:
            ContractError: If spec or obj is missing or not a mapping
        """
        return self.report(spec, obj).errors

    def report(self, spec: SpecLike, obj: Mapping) -> ValidationReport:
        """Validate an object and wrap the errors in a ValidationReport."""
        self._check_contract(spec, obj)
        if not isinstance(spec, ValidationSpec):
            spec = ValidationSpec.from_mapping(spec)

        start_time = time.perf_counter()

        errors: list[ValidationError] = []
        rules_evaluated = 0

        for attr in spec.attributes:
            actual = obj.get(attr.name, MISSING)
            for rule_spec in attr.rules:
                rule = self.rules.get(rule_spec.kind)
                if rule is None:
                    continue
                rules_evaluated += 1
                verdict = rule.evaluate(rule_spec.expected, attr.name, actual)
                if not verdict.valid:
                    errors.append(ValidationError.from_verdict(verdict))

        report = ValidationReport.build(
            errors,
            attributes_checked=len(spec.attributes),
            rules_evaluated=rules_evaluated,
        )

        logger.debug(
            "validation_complete",
            passed=report.passed,
            attributes_checked=report.attributes_checked,
            rules_evaluated=rules_evaluated,
            total_errors=report.error_count,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return report

    def add_rule(self, rule: BaseRule) -> None:
        """Register a rule, replacing any existing rule of the same kind."""
        self.rules[rule.kind] = rule

    def remove_rule(self, kind: Union[RuleKind, str]) -> None:
        """Unregister a rule kind; specs declaring it are then ignored for it."""
        self.rules.pop(RuleKind(kind), None)

    @staticmethod
    def _check_contract(spec: Any, obj: Any) -> None:
        if not isinstance(spec, (ValidationSpec, Mapping)) or not isinstance(obj, Mapping):
            raise ContractError("do_validation requires two mapping arguments")


# Module-level singleton
validation_engine = ValidationEngine()


def do_validation(spec: SpecLike, obj: Mapping) -> list[ValidationError]:
    """Validate ``obj`` against ``spec`` with the default engine."""
    return validation_engine.validate(spec, obj)
