"""Pre-flight planning for fixed-size sample requests.

A ``take_sample(num)`` style request on a distributed dataset first decides
whether sampling is needed at all, then which fraction to hand to the
per-partition sampling pass. This module makes that decision; it never
draws the sample itself.

Example:
    from samplebound.planner import SamplePlanner, PlanAction

    plan = SamplePlanner().plan(num=500, total=1_000_000)
    if plan.action is PlanAction.SAMPLE:
        dataset.sample(fraction=plan.fraction)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from samplebound.config import FractionConfig, SamplingMode
from samplebound.errors import (
    InvalidBoundError,
    InvalidPopulationError,
    SampleSizeTooLargeError,
)
from samplebound.estimator import FractionEstimate, FractionEstimator

logger = logging.getLogger(__name__)

# Largest sample a single collected result may hold.
MAX_SAMPLE_COUNT = 2**31 - 1

DEFAULT_MAX_STD = 10.0


class PlanAction(str, Enum):
    """What the sampling pass should do."""

    EMPTY = "empty"        # Nothing to draw
    TAKE_ALL = "take_all"  # Whole population, shuffled
    SAMPLE = "sample"      # Bernoulli/Poisson pass with the planned fraction


@dataclass(frozen=True)
class SamplePlan:
    """Outcome of planning a sample request.

    Attributes:
        num: Requested sample size
        total: Population size
        mode: Sampling model
        action: Chosen action
        fraction: Fraction for the sampling pass (0 for EMPTY, 1 for TAKE_ALL)
        estimate: Fraction estimate, set only for SAMPLE
    """

    num: int
    total: int
    mode: SamplingMode
    action: PlanAction
    fraction: float
    estimate: FractionEstimate | None = None

    @property
    def requires_shuffle(self) -> bool:
        """Whether the caller must shuffle the full population."""
        return self.action is PlanAction.TAKE_ALL

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "num": self.num,
            "total": self.total,
            "mode": self.mode.value,
            "action": self.action.value,
            "fraction": self.fraction,
            "requires_shuffle": self.requires_shuffle,
            "estimate": self.estimate.to_dict() if self.estimate else None,
        }


class SamplePlanner:
    """Plans fixed-size sample requests.

    Args:
        config: Fraction configuration, selects the sampling model
        max_std: Standard deviations of headroom kept below
            ``MAX_SAMPLE_COUNT`` when rejecting oversized requests
    """

    def __init__(
        self,
        config: FractionConfig | None = None,
        max_std: float = DEFAULT_MAX_STD,
    ):
        if max_std < 0:
            raise ValueError(f"max_std must be non-negative, got {max_std}")
        self.config = config or FractionConfig()
        self.max_std = max_std
        self._estimator = FractionEstimator(self.config)

    @property
    def max_sample_size(self) -> int:
        """Largest ``num`` that can still be met with high probability."""
        return MAX_SAMPLE_COUNT - int(self.max_std * math.sqrt(MAX_SAMPLE_COUNT))

    def plan(self, num: int, total: int) -> SamplePlan:
        """Plan a request for ``num`` elements out of ``total``.

        Raises:
            InvalidBoundError: If ``num`` is negative.
            InvalidPopulationError: If ``total`` is negative.
            SampleSizeTooLargeError: If ``num`` exceeds ``max_sample_size``.
        """
        mode = self.config.mode

        if num < 0:
            raise InvalidBoundError(
                "requested sample size must be non-negative",
                context={"num": num},
            )
        if total < 0:
            raise InvalidPopulationError(
                "population size must be non-negative",
                context={"total": total},
            )

        if num == 0 or total == 0:
            logger.debug("Empty sample plan for num=%s total=%s", num, total)
            return SamplePlan(num, total, mode, PlanAction.EMPTY, 0.0)

        if num > self.max_sample_size:
            raise SampleSizeTooLargeError(
                "cannot guarantee a sample this large",
                context={"num": num, "max_sample_size": self.max_sample_size},
            )

        if not mode.with_replacement and num >= total:
            logger.warning(
                "Requested %s of %s elements without replacement; taking all",
                num,
                total,
            )
            return SamplePlan(num, total, mode, PlanAction.TAKE_ALL, 1.0)

        estimate = self._estimator.estimate(num, total)
        logger.debug(
            "Sample plan for num=%s total=%s: fraction=%.6g",
            num,
            total,
            estimate.fraction,
        )
        return SamplePlan(
            num,
            total,
            mode,
            PlanAction.SAMPLE,
            estimate.fraction,
            estimate=estimate,
        )


def plan_sample(num: int, total: int, with_replacement: bool = False) -> SamplePlan:
    """Plan a sample request with the default planner settings."""
    config = FractionConfig(mode=SamplingMode.from_flag(with_replacement))
    return SamplePlanner(config).plan(num, total)
