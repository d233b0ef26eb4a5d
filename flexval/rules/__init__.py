"""Rule evaluator — one class per rule kind, dispatched through a registry.

Usage:
    from flexval.rules import evaluate

    verdict = evaluate(18, "min", "age", 17)
    if not verdict.valid:
        print(verdict.msg)
"""

from typing import Any, Optional

from flexval.config import get_settings
from flexval.models import RuleKind, RuleVerdict
from flexval.rules.base import MESSAGE_TEMPLATES, BaseRule
from flexval.rules.bounds import MaxRule, MinRule
from flexval.rules.pattern import PatternRule
from flexval.rules.required import RequiredRule


def default_rules() -> dict[RuleKind, BaseRule]:
    """Create one instance of every built-in rule, keyed by kind."""
    rules: list[BaseRule] = [
        MinRule(),
        MaxRule(),
        PatternRule(cache_size=get_settings().PATTERN_CACHE_SIZE),
        RequiredRule(),
    ]
    return {rule.kind: rule for rule in rules}


_registry: Optional[dict[RuleKind, BaseRule]] = None


def get_rule(kind: Any) -> Optional[BaseRule]:
    """Look up the rule for a kind; None when the kind is not recognized."""
    global _registry
    if _registry is None:
        _registry = default_rules()
    parsed = RuleKind.parse(kind)
    if parsed is None:
        return None
    return _registry[parsed]


def evaluate(expected: Any, rule_kind: Any, attr_name: str, actual: Any) -> Optional[RuleVerdict]:
    """Evaluate one declared rule against one attribute value.

    Returns None for an unrecognized rule kind; no verdict is produced.
    """
    rule = get_rule(rule_kind)
    if rule is None:
        return None
    return rule.evaluate(expected, attr_name, actual)


__all__ = [
    "BaseRule",
    "MESSAGE_TEMPLATES",
    "MaxRule",
    "MinRule",
    "PatternRule",
    "RequiredRule",
    "default_rules",
    "evaluate",
    "get_rule",
]
