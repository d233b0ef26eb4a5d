"""Spec loader — turns raw rule mappings into a typed ValidationSpec.

A raw spec maps attribute names to RuleSets, and each RuleSet maps a rule
kind to its expected operand:

    {"age": {"required": True, "min": 18}, "code": {"pattern": ["^[A-Z]{3}$"]}}

Unknown rule kinds are dropped unless strict loading is requested.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

import structlog
from pydantic import BaseModel, Field

from flexval.config import get_settings
from flexval.exceptions import SpecError
from flexval.models import RuleKind
from flexval.rules.pattern import as_pattern_list

logger = structlog.get_logger()


class RuleSpec(BaseModel):
    """One declared rule: its kind and expected operand."""

    kind: RuleKind
    expected: Any = None


class AttributeSpec(BaseModel):
    """The rules declared for one attribute, in declaration order."""

    name: str
    rules: list[RuleSpec] = Field(default_factory=list)


class ValidationSpec(BaseModel):
    """Per-attribute validation rules, in declaration order."""

    attributes: list[AttributeSpec] = Field(default_factory=list)

    @property
    def rule_count(self) -> int:
        return sum(len(attr.rules) for attr in self.attributes)

    @classmethod
    def from_mapping(cls, data: Mapping, strict: bool = False) -> "ValidationSpec":
        """Build a spec from ``{attr: {kind: expected}}``.

        Args:
            data: Raw spec mapping
            strict: Raise SpecError on unknown rule kinds and non-mapping RuleSets
                instead of dropping them

        Raises:
            SpecError: If data is not a mapping, or (strict) a RuleSet is malformed
        """
        if not isinstance(data, Mapping):
            raise SpecError(f"Spec must be a mapping, got {type(data).__name__}")

        attributes: list[AttributeSpec] = []
        for attr_name, rule_set in data.items():
            if not isinstance(rule_set, Mapping):
                if strict:
                    raise SpecError(
                        f"Rules for '{attr_name}' must be a mapping, got {type(rule_set).__name__}"
                    )
                logger.debug("rule_set_not_mapping", attr=str(attr_name), type=type(rule_set).__name__)
                rule_set = {}

            rules: list[RuleSpec] = []
            for raw_kind, expected in rule_set.items():
                kind = RuleKind.parse(raw_kind)
                if kind is None:
                    if strict:
                        raise SpecError(f"Unknown rule kind '{raw_kind}' for attribute '{attr_name}'")
                    logger.debug("unknown_rule_kind", attr=str(attr_name), kind=str(raw_kind))
                    continue
                if kind == RuleKind.PATTERN:
                    expected = as_pattern_list(expected)
                rules.append(RuleSpec(kind=kind, expected=expected))

            attributes.append(AttributeSpec(name=str(attr_name), rules=rules))

        return cls(attributes=attributes)


def load_spec(source: Union[Mapping, str, Path], strict: Optional[bool] = None) -> ValidationSpec:
    """Load a spec from a mapping, a JSON string, or a JSON file.

    Args:
        source: Raw mapping, JSON text, or path to a JSON file
        strict: Reject unknown rule kinds. None defers to UNKNOWN_RULE_POLICY.

    Returns:
        Typed ValidationSpec
    """
    if strict is None:
        strict = get_settings().UNKNOWN_RULE_POLICY == "reject"

    if isinstance(source, Path):
        try:
            source = source.read_text(encoding="utf-8")
        except OSError as e:
            raise SpecError(f"Cannot read spec file: {e}") from e

    if isinstance(source, str):
        try:
            source = json.loads(source)
        except json.JSONDecodeError as e:
            raise SpecError(f"Cannot parse spec JSON: {e}") from e

    return ValidationSpec.from_mapping(source, strict=strict)
