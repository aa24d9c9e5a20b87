"""
Validation module for linechart

Walks the raw JSON payload of a chart request through a fixed chain of
gates and stops at the first violation with a caller-facing diagnostic.
"""

from .models import FailureKind, ValidationFailure, ValidationResult
from .validator import ChartRequestValidator, is_double

__all__ = [
    "FailureKind",
    "ValidationFailure",
    "ValidationResult",
    "ChartRequestValidator",
    "is_double",
]
