"""samplebound - sampling fractions that meet a minimum sample size with high probability.

Example:
    from samplebound import compute_fraction, plan_sample

    fraction = compute_fraction(100, 10_000, with_replacement=False)
    plan = plan_sample(num=100, total=10_000)
"""

from samplebound.config import DEFAULT_FRACTION_CONFIG, FractionConfig, SamplingMode
from samplebound.errors import (
    ErrorCategory,
    InvalidBoundError,
    InvalidPopulationError,
    SampleBoundError,
    SampleSizeTooLargeError,
    UnsupportedDataError,
)
from samplebound.estimator import FractionEstimate, FractionEstimator, estimate_fraction
from samplebound.frames import count_rows, estimate_for_frame, plan_for_frame
from samplebound.planner import (
    MAX_SAMPLE_COUNT,
    PlanAction,
    SamplePlan,
    SamplePlanner,
    plan_sample,
)
from samplebound.statistic import (
    DEFAULT_DELTA,
    MIN_POISSON_RATE,
    TARGET_SUCCESS_PROBABILITY,
    compute_fraction,
    upper_binomial_bound,
    upper_poisson_bound,
)
from samplebound.validation import check_preconditions

__version__ = "0.1.0"

__all__ = [
    # Core bounds
    "compute_fraction",
    "upper_poisson_bound",
    "upper_binomial_bound",
    "DEFAULT_DELTA",
    "MIN_POISSON_RATE",
    "TARGET_SUCCESS_PROBABILITY",
    # Configuration
    "FractionConfig",
    "SamplingMode",
    "DEFAULT_FRACTION_CONFIG",
    # Estimation
    "FractionEstimate",
    "FractionEstimator",
    "estimate_fraction",
    "check_preconditions",
    # Planning
    "PlanAction",
    "SamplePlan",
    "SamplePlanner",
    "plan_sample",
    "MAX_SAMPLE_COUNT",
    # Polars
    "count_rows",
    "estimate_for_frame",
    "plan_for_frame",
    # Errors
    "ErrorCategory",
    "SampleBoundError",
    "InvalidBoundError",
    "InvalidPopulationError",
    "SampleSizeTooLargeError",
    "UnsupportedDataError",
]
