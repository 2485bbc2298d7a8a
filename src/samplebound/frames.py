"""Polars helpers that size a frame and estimate its sampling fraction.

These only count rows; applying the fraction is left to the caller, e.g.
``df.sample(fraction=estimate.fraction)``.
"""

from __future__ import annotations

import polars as pl

from samplebound.config import FractionConfig, SamplingMode
from samplebound.errors import UnsupportedDataError
from samplebound.estimator import FractionEstimate, FractionEstimator
from samplebound.planner import SamplePlan, SamplePlanner


def count_rows(data: pl.LazyFrame | pl.DataFrame) -> int:
    """Exact row count of a polars frame.

    A LazyFrame is counted with a ``len()`` query rather than collected.
    """
    if isinstance(data, pl.LazyFrame):
        return data.select(pl.len()).collect().item()
    if isinstance(data, pl.DataFrame):
        return data.height
    raise UnsupportedDataError(
        "expected a polars LazyFrame or DataFrame",
        context={"type": type(data).__name__},
    )


def estimate_for_frame(
    data: pl.LazyFrame | pl.DataFrame,
    lower_bound: float,
    with_replacement: bool = False,
) -> FractionEstimate:
    """Estimate the fraction that draws at least ``lower_bound`` rows from ``data``."""
    config = FractionConfig(mode=SamplingMode.from_flag(with_replacement))
    return FractionEstimator(config).estimate(lower_bound, count_rows(data))


def plan_for_frame(
    data: pl.LazyFrame | pl.DataFrame,
    num: int,
    with_replacement: bool = False,
) -> SamplePlan:
    """Plan a request for ``num`` rows of ``data``."""
    config = FractionConfig(mode=SamplingMode.from_flag(with_replacement))
    return SamplePlanner(config).plan(num, count_rows(data))
