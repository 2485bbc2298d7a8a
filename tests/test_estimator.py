"""Tests for FractionConfig, FractionEstimator and precondition checks."""

import logging
import math

import pytest

from samplebound.config import DEFAULT_FRACTION_CONFIG, FractionConfig, SamplingMode
from samplebound.errors import (
    ErrorCategory,
    InvalidBoundError,
    InvalidPopulationError,
    SampleBoundError,
)
from samplebound.estimator import FractionEstimate, FractionEstimator, estimate_fraction
from samplebound.statistic import compute_fraction
from samplebound.validation import check_preconditions


# =============================================================================
# FractionConfig Tests
# =============================================================================


class TestFractionConfig:
    """Tests for FractionConfig."""

    def test_defaults(self):
        config = FractionConfig()
        assert config.mode == SamplingMode.WITHOUT_REPLACEMENT
        assert config.validate_inputs is True
        assert config.with_replacement is False
        assert DEFAULT_FRACTION_CONFIG == config

    def test_string_mode_is_coerced(self):
        config = FractionConfig(mode="with_replacement")
        assert config.mode is SamplingMode.WITH_REPLACEMENT
        assert config.with_replacement is True

    def test_invalid_mode(self):
        with pytest.raises(ValueError, match="mode must be one of"):
            FractionConfig(mode="bootstrap")

    def test_presets(self):
        assert FractionConfig.with_replacement_mode().with_replacement is True
        assert FractionConfig.without_replacement_mode().with_replacement is False

        unchecked = FractionConfig.unchecked(with_replacement=True)
        assert unchecked.validate_inputs is False
        assert unchecked.with_replacement is True

    def test_frozen(self):
        config = FractionConfig()
        with pytest.raises(AttributeError):
            config.validate_inputs = False

    def test_to_dict(self):
        assert FractionConfig.with_replacement_mode().to_dict() == {
            "mode": "with_replacement",
            "validate_inputs": True,
        }

    def test_mode_from_flag(self):
        assert SamplingMode.from_flag(True) is SamplingMode.WITH_REPLACEMENT
        assert SamplingMode.from_flag(False) is SamplingMode.WITHOUT_REPLACEMENT


# =============================================================================
# Precondition Tests
# =============================================================================


class TestCheckPreconditions:
    """Tests for check_preconditions."""

    def test_valid_inputs(self):
        check_preconditions(0, 1)
        check_preconditions(100, 10_000)
        check_preconditions(5.5, 1e12)

    @pytest.mark.parametrize("total", [0, -1, -0.5, math.inf, math.nan])
    def test_invalid_population(self, total):
        with pytest.raises(InvalidPopulationError) as exc_info:
            check_preconditions(10, total)
        assert exc_info.value.category == ErrorCategory.VALIDATION
        assert "total" in exc_info.value.context

    @pytest.mark.parametrize("lower_bound", [-1, -0.001, math.inf, math.nan])
    def test_invalid_bound(self, lower_bound):
        with pytest.raises(InvalidBoundError):
            check_preconditions(lower_bound, 100)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            check_preconditions(10, 0)


# =============================================================================
# FractionEstimator Tests
# =============================================================================


class TestFractionEstimator:
    """Tests for FractionEstimator."""

    def test_default_config(self):
        assert FractionEstimator().config is DEFAULT_FRACTION_CONFIG

    def test_matches_core_without_replacement(self):
        estimate = FractionEstimator().estimate(100, 10_000)

        assert isinstance(estimate, FractionEstimate)
        assert estimate.fraction == compute_fraction(100, 10_000, False)
        assert estimate.naive_fraction == pytest.approx(0.01)
        assert estimate.mode is SamplingMode.WITHOUT_REPLACEMENT

    def test_matches_core_with_replacement(self):
        estimator = FractionEstimator(FractionConfig.with_replacement_mode())
        assert estimator.fraction(100, 10_000) == pytest.approx(0.016)

    def test_estimate_properties(self):
        estimate = FractionEstimator(FractionConfig.with_replacement_mode()).estimate(
            100, 10_000
        )
        assert estimate.expected_sample_size == pytest.approx(160.0)
        assert estimate.oversampling_factor == pytest.approx(1.6)
        assert estimate.is_full_scan is False

    def test_zero_bound_oversampling_is_infinite(self):
        estimate = FractionEstimator().estimate(0, 10_000)
        assert estimate.naive_fraction == 0
        assert estimate.oversampling_factor == math.inf

    def test_full_scan(self):
        estimate = FractionEstimator().estimate(10, 10)
        assert estimate.fraction == 1.0
        assert estimate.is_full_scan is True

    def test_validation_enabled(self):
        with pytest.raises(InvalidPopulationError):
            FractionEstimator().estimate(10, 0)

    def test_validation_disabled_propagates_arithmetic_error(self):
        estimator = FractionEstimator(FractionConfig.unchecked())
        with pytest.raises(ZeroDivisionError):
            estimator.estimate(10, 0)

    def test_to_dict(self):
        data = FractionEstimator().estimate(100, 10_000).to_dict()
        assert data["mode"] == "without_replacement"
        assert data["lower_bound"] == 100.0
        assert data["total"] == 10_000
        assert data["is_full_scan"] is False
        assert set(data) >= {"fraction", "naive_fraction", "expected_sample_size"}

    def test_logs_fraction(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="samplebound.estimator"):
            FractionEstimator().estimate(100, 10_000)
        assert "Sampling fraction" in caplog.text


class TestEstimateFraction:
    """Tests for the estimate_fraction convenience function."""

    def test_without_replacement(self):
        estimate = estimate_fraction(100, 10_000)
        assert estimate.fraction == compute_fraction(100, 10_000, False)

    def test_with_replacement(self):
        estimate = estimate_fraction(100, 10_000, with_replacement=True)
        assert estimate.mode is SamplingMode.WITH_REPLACEMENT
        assert estimate.fraction == pytest.approx(0.016)

    def test_validate_flag(self):
        with pytest.raises(SampleBoundError):
            estimate_fraction(-5, 100)
        with pytest.raises(ZeroDivisionError):
            estimate_fraction(5, 0, validate=False)
