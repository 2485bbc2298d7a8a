"""Opt-in precondition checks for fraction estimation."""

from __future__ import annotations

import math

from samplebound.errors import InvalidBoundError, InvalidPopulationError


def check_preconditions(lower_bound: float, total: float) -> None:
    """Validate inputs before calling :func:`samplebound.statistic.compute_fraction`.

    Raises:
        InvalidBoundError: If ``lower_bound`` is negative or not finite.
        InvalidPopulationError: If ``total`` is not a positive finite number.
    """
    total = float(total)
    if not math.isfinite(total) or total <= 0:
        raise InvalidPopulationError(
            "population size must be a positive finite number",
            context={"total": total},
        )

    lower_bound = float(lower_bound)
    if not math.isfinite(lower_bound) or lower_bound < 0:
        raise InvalidBoundError(
            "lower bound must be a non-negative finite number",
            context={"lower_bound": lower_bound},
        )
