"""Bound rules — numeric lower and upper limits.

An absent value satisfies both rules; presence is enforced only by ``required``.
A value is reported only when it is known to lie past the bound: numeric
strings are compared as numbers, and a pair that cannot be ordered passes.
"""

import operator
from numbers import Number
from typing import Any, Callable

from flexval.models import RuleKind
from flexval.rules.base import BaseRule


def _comparable(actual: Any, expected: Any) -> Any:
    """Read a numeric string as a number when the bound is numeric."""
    if isinstance(actual, str) and isinstance(expected, Number) and not isinstance(expected, bool):
        try:
            return float(actual)
        except ValueError:
            return None
    return actual


class _BoundRule(BaseRule):
    # Predicate that holds when actual lies past the bound.
    _violates: Callable[[Any, Any], bool]

    def check(self, expected: Any, attr_name: str, actual: Any) -> list[str]:
        if self._is_absent(actual):
            return []
        value = _comparable(actual, expected)
        if value is None:
            return []
        try:
            violated = self._violates(value, expected)
        except TypeError:
            violated = False
        if not violated:
            return []
        return [self._message(attr_name, self._format_operand(expected))]


class MinRule(_BoundRule):
    """Value must be greater than or equal to the bound."""

    _violates = staticmethod(operator.lt)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MIN


class MaxRule(_BoundRule):
    """Value must be less than or equal to the bound."""

    _violates = staticmethod(operator.gt)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MAX
