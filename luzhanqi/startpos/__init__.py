"""Starting positions - legality validation and seeded generation."""

from .validation import (
    validate_start,
    is_legal_start,
    assert_legal_start,
    ValidationResult,
    StartValidationError,
)
from .generator import random_start, generate_start, PlacementInvariantError

__all__ = [
    "validate_start",
    "is_legal_start",
    "assert_legal_start",
    "ValidationResult",
    "StartValidationError",
    "random_start",
    "generate_start",
    "PlacementInvariantError",
]
