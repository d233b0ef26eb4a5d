"""Validation models — rule kinds, verdicts, errors and report structure.

Every error carries an ordered list of messages. The legacy shape, where only
``pattern`` errors carry a list and every other rule carries a single string,
is available through ``ValidationError.msg`` and ``ValidationError.to_dict()``.
"""

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class RuleKind(str, Enum):
    """The closed set of rule kinds a RuleSet may declare."""

    MIN = "min"
    MAX = "max"
    PATTERN = "pattern"
    REQUIRED = "required"

    @classmethod
    def parse(cls, value: Any) -> Optional["RuleKind"]:
        """Return the matching kind, or None for an unrecognized one."""
        try:
            return cls(value)
        except ValueError:
            return None


class _Missing:
    """Sentinel for an attribute absent from the target object."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def is_absent(value: Any) -> bool:
    """True for a missing attribute or an explicit None.

    None is never read as text, so a ``pattern`` rule fails it like a missing value.
    """
    return value is MISSING or value is None


def _legacy_msg(rule: Optional[str], messages: list[str]) -> Union[str, list[str], None]:
    if rule == RuleKind.PATTERN:
        return list(messages)
    return messages[0] if messages else None


class RuleVerdict(BaseModel):
    """Outcome of evaluating one rule against one attribute value."""

    valid: bool
    attr: Optional[str] = None
    rule: Optional[RuleKind] = None
    messages: list[str] = Field(default_factory=list)

    model_config = {"use_enum_values": True}

    @classmethod
    def ok(cls) -> "RuleVerdict":
        return cls(valid=True)

    @classmethod
    def failed(cls, attr: str, rule: RuleKind, messages: list[str]) -> "RuleVerdict":
        return cls(valid=False, attr=attr, rule=rule, messages=messages)

    @property
    def msg(self) -> Union[str, list[str], None]:
        return _legacy_msg(self.rule, self.messages)


class ValidationError(BaseModel):
    """A single failed constraint."""

    attr: str
    rule: RuleKind
    messages: list[str] = Field(min_length=1)
    valid: Literal[False] = False

    model_config = {"use_enum_values": True}

    @classmethod
    def from_verdict(cls, verdict: RuleVerdict) -> "ValidationError":
        return cls(attr=verdict.attr, rule=verdict.rule, messages=verdict.messages)

    @property
    def msg(self) -> Union[str, list[str]]:
        """Legacy message: a list for ``pattern``, a single string otherwise."""
        return _legacy_msg(self.rule, self.messages)

    def to_dict(self) -> dict:
        """Legacy dict shape: ``{"attr", "valid", "msg"}``."""
        return {"attr": self.attr, "valid": False, "msg": self.msg}


class ValidationReport(BaseModel):
    """Complete result of one validation run."""

    errors: list[ValidationError] = Field(default_factory=list)
    attributes_checked: int = 0
    rules_evaluated: int = 0

    @property
    def passed(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @classmethod
    def build(
        cls,
        errors: list[ValidationError],
        attributes_checked: int = 0,
        rules_evaluated: int = 0,
    ) -> "ValidationReport":
        """Build a report, keeping errors in encounter order."""
        return cls(
            errors=list(errors),
            attributes_checked=attributes_checked,
            rules_evaluated=rules_evaluated,
        )

    def to_legacy(self) -> list[dict]:
        return [err.to_dict() for err in self.errors]
