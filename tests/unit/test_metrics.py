"""Tests for metric helper functions."""

import dataclasses

import pytest

from sfxlambda.core.metrics import counter, cumulative_counter, gauge
from sfxlambda.core.models import MetricKind, MetricPoint

pytestmark = [pytest.mark.core, pytest.mark.tier(0)]


class TestCounter:
    """Tests for counter() helper function."""

    def test_counter_creates_metric_point_with_name(self) -> None:
        """Counter creates a MetricPoint with the given name."""
        point = counter("function.invocations")
        assert isinstance(point, MetricPoint)
        assert point.name == "function.invocations"

    def test_counter_defaults_to_value_one(self) -> None:
        """Counter defaults to incrementing by 1."""
        assert counter("function.invocations").value == 1

    def test_counter_kind(self) -> None:
        assert counter("function.errors").kind is MetricKind.COUNTER

    def test_counter_leaves_timestamp_unset(self) -> None:
        """Counter leaves the timestamp for the dispatcher to fill in."""
        assert counter("function.invocations").timestamp is None

    def test_counter_accepts_dimensions_and_timestamp(self) -> None:
        point = counter(
            "orders", value=3, dimensions={"tier": "gold"}, timestamp=1702300000.0
        )
        assert point.value == 3
        assert point.dimensions == {"tier": "gold"}
        assert point.timestamp == 1702300000.0

    def test_counter_defaults_to_empty_dimensions(self) -> None:
        assert counter("function.invocations").dimensions == {}


class TestGauge:
    """Tests for gauge() helper function."""

    def test_gauge_creates_metric_point(self) -> None:
        point = gauge("function.duration", 0.25)
        assert point.name == "function.duration"
        assert point.value == 0.25
        assert point.kind is MetricKind.GAUGE

    def test_gauge_with_zero_value(self) -> None:
        assert gauge("queue.depth", 0.0).value == 0.0


class TestCumulativeCounter:
    """Tests for cumulative_counter() helper function."""

    def test_cumulative_counter_kind(self) -> None:
        point = cumulative_counter("bytes.total", 4096)
        assert point.kind is MetricKind.CUMULATIVE_COUNTER
        assert point.value == 4096


class TestMetricPoint:
    """Tests for MetricPoint immutability."""

    def test_metric_point_is_frozen(self) -> None:
        point = counter("function.invocations")
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.value = 2  # type: ignore[misc]


class TestPackageExports:
    """Tests for package-level exports."""

    def test_helpers_importable_from_package(self) -> None:
        """Helper functions are importable from sfxlambda package."""
        from sfxlambda import counter, cumulative_counter, gauge

        assert callable(counter)
        assert callable(gauge)
        assert callable(cumulative_counter)


class TestDimensionsCopy:
    """Tests that points do not share the caller's dimension dict."""

    @pytest.mark.parametrize(
        "factory",
        [
            lambda d: counter("a", dimensions=d),
            lambda d: gauge("a", 1.0, dimensions=d),
            lambda d: cumulative_counter("a", 1, dimensions=d),
        ],
    )
    def test_later_caller_mutation_does_not_change_point(self, factory) -> None:
        dimensions = {"tier": "gold"}
        point = factory(dimensions)

        dimensions["tier"] = "silver"
        dimensions["extra"] = "x"

        assert point.dimensions == {"tier": "gold"}
