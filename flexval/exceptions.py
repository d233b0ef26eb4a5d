"""Exception hierarchy.

Constraint violations are never raised; they are returned as data.
Only caller mistakes surface as exceptions.
"""


class FlexvalError(Exception):
    """Base class for all flexval exceptions."""


class ContractError(FlexvalError, TypeError):
    """Raised when do_validation is called with something other than two mappings."""


class SpecError(FlexvalError, ValueError):
    """Raised when a validation spec cannot be loaded."""
