"""Configuration for fraction estimation.

Dataclass-based configuration with presets for the two sampling models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SamplingMode(str, Enum):
    """Statistical model used to pick the fraction."""

    WITH_REPLACEMENT = "with_replacement"        # Poisson rate
    WITHOUT_REPLACEMENT = "without_replacement"  # Binomial tail

    @classmethod
    def from_flag(cls, with_replacement: bool) -> "SamplingMode":
        return cls.WITH_REPLACEMENT if with_replacement else cls.WITHOUT_REPLACEMENT

    @property
    def with_replacement(self) -> bool:
        return self is SamplingMode.WITH_REPLACEMENT


@dataclass(frozen=True)
class FractionConfig:
    """Configuration for :class:`samplebound.estimator.FractionEstimator`.

    Attributes:
        mode: Sampling model (with or without replacement).
        validate_inputs: Check preconditions before computing. When False,
            invalid inputs fail the way raw arithmetic does.
    """

    mode: SamplingMode = SamplingMode.WITHOUT_REPLACEMENT
    validate_inputs: bool = True

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.mode, SamplingMode):
            try:
                mode = SamplingMode(self.mode)
            except ValueError:
                raise ValueError(
                    f"mode must be one of {[m.value for m in SamplingMode]}, "
                    f"got {self.mode!r}"
                ) from None
            object.__setattr__(self, "mode", mode)

    @property
    def with_replacement(self) -> bool:
        return self.mode.with_replacement

    @classmethod
    def with_replacement_mode(cls) -> "FractionConfig":
        """Poisson-rate config for sampling with replacement."""
        return cls(mode=SamplingMode.WITH_REPLACEMENT)

    @classmethod
    def without_replacement_mode(cls) -> "FractionConfig":
        """Binomial-tail config for sampling without replacement."""
        return cls(mode=SamplingMode.WITHOUT_REPLACEMENT)

    @classmethod
    def unchecked(cls, with_replacement: bool = False) -> "FractionConfig":
        """Config that skips precondition checks."""
        return cls(
            mode=SamplingMode.from_flag(with_replacement),
            validate_inputs=False,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "mode": self.mode.value,
            "validate_inputs": self.validate_inputs,
        }


DEFAULT_FRACTION_CONFIG = FractionConfig()
