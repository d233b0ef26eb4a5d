"""Pattern rule — every declared regular expression must match.

One message is produced per failing pattern, in declaration order. A pattern
that does not compile counts as a failing pattern.
"""

import re
from functools import lru_cache
from typing import Any, Optional

import structlog

from flexval.models import RuleKind
from flexval.rules.base import BaseRule

logger = structlog.get_logger()


def as_pattern_list(expected: Any) -> list:
    """Normalize the expected operand to a list of pattern sources."""
    if expected is None:
        return []
    if isinstance(expected, (str, re.Pattern)):
        return [expected]
    if isinstance(expected, (list, tuple)):
        return list(expected)
    return [expected]


def as_text(value: Any) -> str:
    """Render a value the way a JSON payload spells it: True -> 'true', 1.0 -> '1'.

    None never reaches here; it is treated as absent and fails every pattern.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class PatternRule(BaseRule):
    """Value, as text, must be matched by every pattern (search semantics)."""

    def __init__(self, cache_size: int = 256):
        self._compile = lru_cache(maxsize=cache_size)(self._compile_uncached)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.PATTERN

    def check(self, expected: Any, attr_name: str, actual: Any) -> list[str]:
        failures = []
        for pattern in as_pattern_list(expected):
            source = pattern.pattern if isinstance(pattern, re.Pattern) else str(pattern)
            if not self._matches(source, actual):
                failures.append(self._message(attr_name, source))
        return failures

    def _matches(self, source: str, actual: Any) -> bool:
        if self._is_absent(actual):
            return False
        regex = self._compile(source)
        if regex is None:
            return False
        return regex.search(as_text(actual)) is not None

    @staticmethod
    def _compile_uncached(source: str) -> Optional[re.Pattern]:
        try:
            return re.compile(source)
        except re.error as e:
            logger.warning("invalid_pattern", pattern=source, error=str(e))
            return None
