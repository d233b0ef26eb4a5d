"""Base rule — abstract class implementing the Strategy Pattern.

Each rule kind is a standalone, independently testable unit.
New rule kinds are added to the registry without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Any

from flexval.models import RuleKind, RuleVerdict, is_absent

# Message templates, attribute name first and expected value second.
MESSAGE_TEMPLATES = {
    RuleKind.MIN: "%s must be greater than or equal to %s",
    RuleKind.MAX: "%s must be less than or equal to %s",
    RuleKind.PATTERN: "%s must match regex of %s",
    RuleKind.REQUIRED: "%s is required",
}


class BaseRule(ABC):
    """Abstract base for all rule kinds.

    Contract:
        - check() is deterministic: same input → same output
        - check() returns the failure messages (empty = rule satisfied)
        - check() never raises for a failing or malformed value
    """

    @property
    @abstractmethod
    def kind(self) -> RuleKind:
        ...

    @abstractmethod
    def check(self, expected: Any, attr_name: str, actual: Any) -> list[str]:
        """Check one attribute value against the expected operand.

        Args:
            expected: Operand declared in the spec (bound, patterns, or unused)
            attr_name: Attribute name, used in messages
            actual: Attribute value, or MISSING when absent

        Returns:
            List of failure messages (empty if the value satisfies the rule)
        """
        ...

    def evaluate(self, expected: Any, attr_name: str, actual: Any) -> RuleVerdict:
        messages = self.check(expected, attr_name, actual)
        if not messages:
            return RuleVerdict.ok()
        return RuleVerdict.failed(attr_name, self.kind, messages)

    # ── Helper Methods ──

    def _message(self, *args: Any) -> str:
        return MESSAGE_TEMPLATES[self.kind] % args

    def _is_absent(self, value: Any) -> bool:
        return is_absent(value)

    def _format_operand(self, value: Any) -> str:
        """Render a bound the way an integer placeholder would: 18.0 -> '18'."""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
