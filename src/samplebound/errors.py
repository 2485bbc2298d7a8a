"""Structured errors for sampling-fraction estimation and planning.

The core bound functions in :mod:`samplebound.statistic` never raise these;
they are used by the validating layers (estimator, planner, frame helpers).
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Categories of sampling errors."""

    VALIDATION = "validation"  # Invalid bound or population size
    CAPACITY = "capacity"      # Request larger than a single sample can hold
    DATA = "data"              # Unsupported input data


# =============================================================================
# Exception Hierarchy
# =============================================================================


class SampleBoundError(Exception):
    """Base exception for all samplebound errors."""

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.VALIDATION,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
            "context": self.context,
        }

    def __str__(self) -> str:
        parts = [f"[{self.category.value.upper()}] {self.message}"]
        for key, value in self.context.items():
            parts.append(f"{key}={value}")
        return " | ".join(parts)


class InvalidBoundError(SampleBoundError, ValueError):
    """Requested sample size is negative or not a finite number."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, category=ErrorCategory.VALIDATION, **kwargs)


class InvalidPopulationError(SampleBoundError, ValueError):
    """Population size is not a positive finite number."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, category=ErrorCategory.VALIDATION, **kwargs)


class SampleSizeTooLargeError(SampleBoundError, ValueError):
    """Requested sample cannot be guaranteed within the maximum sample count."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, category=ErrorCategory.CAPACITY, **kwargs)


class UnsupportedDataError(SampleBoundError, TypeError):
    """Input data type cannot be sized."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(message, category=ErrorCategory.DATA, **kwargs)
