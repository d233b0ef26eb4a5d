"""flexval — declarative per-attribute validation.

Usage:
    from flexval import do_validation

    errors = do_validation({"name": {"required": True}}, payload)
    if errors:
        # Report [e.to_dict() for e in errors] back to the caller
"""

from flexval.engine import ValidationEngine, do_validation, validation_engine
from flexval.exceptions import ContractError, FlexvalError, SpecError
from flexval.models import MISSING, RuleKind, RuleVerdict, ValidationError, ValidationReport
from flexval.rules import evaluate
from flexval.spec import AttributeSpec, RuleSpec, ValidationSpec, load_spec

__version__ = "1.0.0"

__all__ = [
    "MISSING",
    "AttributeSpec",
    "ContractError",
    "FlexvalError",
    "RuleKind",
    "RuleSpec",
    "RuleVerdict",
    "SpecError",
    "ValidationEngine",
    "ValidationError",
    "ValidationReport",
    "ValidationSpec",
    "do_validation",
    "evaluate",
    "load_spec",
    "validation_engine",
]
