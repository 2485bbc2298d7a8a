"""Object interface over the sampling-fraction bounds.

Example:
    from samplebound import FractionConfig, FractionEstimator

    estimator = FractionEstimator(FractionConfig.with_replacement_mode())
    estimate = estimator.estimate(lower_bound=100, total=10_000)
    print(estimate.fraction, estimate.oversampling_factor)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

from samplebound.config import DEFAULT_FRACTION_CONFIG, FractionConfig, SamplingMode
from samplebound.statistic import compute_fraction
from samplebound.validation import check_preconditions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FractionEstimate:
    """Result of a fraction estimation.

    Attributes:
        lower_bound: Requested minimum sample size
        total: Population size
        mode: Sampling model used
        fraction: Inclusion probability (Poisson rate with replacement)
        naive_fraction: lower_bound / total, before tail correction
    """

    lower_bound: float
    total: float
    mode: SamplingMode
    fraction: float
    naive_fraction: float

    @property
    def expected_sample_size(self) -> float:
        """Expected number of drawn elements."""
        return self.fraction * self.total

    @property
    def oversampling_factor(self) -> float:
        """How much the tail correction inflates the naive fraction."""
        if self.naive_fraction == 0:
            return math.inf
        return self.fraction / self.naive_fraction

    @property
    def is_full_scan(self) -> bool:
        """Check if every element is included."""
        return self.fraction >= 1.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "lower_bound": self.lower_bound,
            "total": self.total,
            "mode": self.mode.value,
            "fraction": self.fraction,
            "naive_fraction": self.naive_fraction,
            "expected_sample_size": self.expected_sample_size,
            "is_full_scan": self.is_full_scan,
        }


class FractionEstimator:
    """Computes sampling fractions according to a :class:`FractionConfig`.

    Stateless apart from its immutable config, so one instance can be
    shared across threads.
    """

    def __init__(self, config: FractionConfig | None = None):
        self.config = config or DEFAULT_FRACTION_CONFIG

    def estimate(self, lower_bound: float, total: float) -> FractionEstimate:
        """Estimate the fraction for ``lower_bound`` out of ``total`` elements."""
        if self.config.validate_inputs:
            check_preconditions(lower_bound, total)

        lower_bound = float(lower_bound)
        fraction = compute_fraction(lower_bound, total, self.config.with_replacement)

        logger.debug(
            "Sampling fraction %.6g for lower_bound=%s total=%s mode=%s",
            fraction,
            lower_bound,
            total,
            self.config.mode.value,
        )

        return FractionEstimate(
            lower_bound=lower_bound,
            total=total,
            mode=self.config.mode,
            fraction=fraction,
            naive_fraction=lower_bound / total,
        )

    def fraction(self, lower_bound: float, total: float) -> float:
        """Shortcut for ``estimate(...).fraction``."""
        return self.estimate(lower_bound, total).fraction


def estimate_fraction(
    lower_bound: float,
    total: float,
    with_replacement: bool = False,
    *,
    validate: bool = True,
) -> FractionEstimate:
    """Estimate a sampling fraction.

    Args:
        lower_bound: Minimum acceptable sample size
        total: Population size
        with_replacement: Use the Poisson model
        validate: Check preconditions first

    Returns:
        FractionEstimate
    """
    config = FractionConfig(
        mode=SamplingMode.from_flag(with_replacement),
        validate_inputs=validate,
    )
    return FractionEstimator(config).estimate(lower_bound, total)
