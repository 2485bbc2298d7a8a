"""Sampling-fraction bounds for distributed Bernoulli/Poisson sampling.

Converts a desired minimum sample size into a per-element inclusion
probability. Each partition can apply the fraction independently and the
combined sample holds at least ``lower_bound`` elements 99.99% of the time.

How the fraction is chosen:
    Let p = lower_bound / total. We look for q > p such that

    - with replacement, each element is drawn Poisson(q) times and
      Pr[sum < lower_bound] < 0.0001. A normal approximation to the Poisson
      tail with an empirically tuned number of standard deviations gives
      the rate, and the rate over ``total`` gives q.
    - without replacement, each element is drawn with probability q, so
      the sample size is Binomial(total, q). A Chernoff-style inversion
      picks q so the failure rate stays below ``delta``.

Preconditions:
    ``total`` must be positive. Nothing here validates it, and a zero
    total raises ``ZeroDivisionError``. Use
    :func:`samplebound.validation.check_preconditions` for a friendlier
    failure mode.

Example:
    from samplebound.statistic import compute_fraction

    compute_fraction(100, 10_000, with_replacement=True)   # 0.016
    compute_fraction(100, 10_000, with_replacement=False)  # ~0.016087
"""

from __future__ import annotations

import math


# =============================================================================
# Constants
# =============================================================================


TARGET_SUCCESS_PROBABILITY = 0.9999

# Failure rate for the without-replacement path of compute_fraction.
DEFAULT_DELTA = 0.00001

# Keeps a zero lower bound from producing a zero inclusion rate.
MIN_POISSON_RATE = 1e-10

# (exclusive upper bound, num_std) ordered by threshold. The normal
# approximation is looser for small rates, so they get more deviations.
POISSON_STD_TIERS: tuple[tuple[float, float], ...] = (
    (6.0, 12.0),
    (16.0, 9.0),
    (math.inf, 6.0),
)


# =============================================================================
# Bounds
# =============================================================================


def poisson_std_multiplier(bound: float) -> float:
    """Number of standard deviations used for a Poisson bound of ``bound``."""
    for threshold, num_std in POISSON_STD_TIERS:
        if bound < threshold:
            return num_std
    return POISSON_STD_TIERS[-1][1]


def upper_poisson_bound(bound: float) -> float:
    """Upper bound on the rate λ such that Pr[Poisson(λ) >= bound] >= 0.9999.

    Args:
        bound: Desired lower bound on the drawn count (>= 0).

    Returns:
        The Poisson rate, never smaller than ``MIN_POISSON_RATE``.
    """
    num_std = poisson_std_multiplier(bound)
    return max(bound + num_std * math.sqrt(bound), MIN_POISSON_RATE)


def upper_binomial_bound(delta: float, total: float, fraction: float) -> float:
    """Inflate ``fraction`` so Binomial(total, q) >= fraction * total w.p. 1 - delta.

    Args:
        delta: Acceptable failure probability, in (0, 1).
        total: Population size (> 0).
        fraction: Naive sampling fraction, lower_bound / total.

    Returns:
        The adjusted fraction, clamped to 1.
    """
    gamma = -math.log(delta) / total
    return min(1.0, fraction + gamma + math.sqrt(gamma * gamma + 2 * gamma * fraction))


def compute_fraction(
    lower_bound: float,
    total: float,
    with_replacement: bool,
) -> float:
    """Return a sampling fraction that yields >= ``lower_bound`` elements 99.99% of the time.

    Args:
        lower_bound: Minimum acceptable sample size.
        total: Number of elements in the population. Must be positive.
        with_replacement: Use the Poisson model instead of the binomial one.

    Returns:
        Per-element inclusion probability (a Poisson rate when sampling
        with replacement).
    """
    lower_bound = float(lower_bound)

    if with_replacement:
        return upper_poisson_bound(lower_bound) / total

    fraction = lower_bound / total
    return upper_binomial_bound(DEFAULT_DELTA, total, fraction)
