"""Required rule — presence check."""

from typing import Any

from flexval.models import RuleKind
from flexval.rules.base import BaseRule


class RequiredRule(BaseRule):
    """Value must be present and not None. The expected operand is unused."""

    @property
    def kind(self) -> RuleKind:
        return RuleKind.REQUIRED

    def check(self, expected: Any, attr_name: str, actual: Any) -> list[str]:
        if self._is_absent(actual):
            return [self._message(attr_name)]
        return []
