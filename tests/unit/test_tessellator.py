"""Tests for quadratic curve sampling."""

import pytest

from glyphpath.core.tessellator import quadratic_point, sample_quadratic


class TestQuadraticPoint:
    """Tests for single-point evaluation."""

    def test_endpoints(self) -> None:
        """Test t=0 and t=1 hit the start and end points."""
        p0, p1, p2 = (0.0, 0.0), (50.0, 100.0), (100.0, 0.0)
        assert quadratic_point(p0, p1, p2, 0.0) == p0
        assert quadratic_point(p0, p1, p2, 1.0) == p2

    def test_midpoint(self) -> None:
        """Test t=0.5 weights the control point by one half."""
        x, y = quadratic_point((0, 0), (50, 100), (100, 0), 0.5)
        assert x == pytest.approx(50.0)
        assert y == pytest.approx(50.0)


class TestSampleQuadratic:
    """Tests for curve sampling."""

    def test_default_step_gives_ten_samples(self) -> None:
        """Test the default step samples t = 0.0 .. 0.9."""
        samples = list(sample_quadratic((0, 0), (10, 0), (20, 0)))
        assert len(samples) == 10

    def test_starts_at_start_and_excludes_end(self) -> None:
        """Test the first sample is p0 and p2 is never reached."""
        samples = list(sample_quadratic((0, 0), (10, 10), (20, 0)))
        assert samples[0] == (0, 0)
        assert (20, 0) not in samples

    def test_increasing_parameter_order(self) -> None:
        """Test samples along a straight arc move monotonically."""
        xs = [x for x, _ in sample_quadratic((0, 0), (10, 0), (20, 0))]
        assert xs == sorted(xs)
        assert xs[-1] == pytest.approx(18.0)

    def test_matches_formula(self) -> None:
        """Test samples follow the Bernstein form."""
        p0, p1, p2 = (3.0, -7.0), (40.0, 12.0), (-5.0, 30.0)
        for i, (x, y) in enumerate(sample_quadratic(p0, p1, p2, 0.2)):
            t = i * 0.2
            assert x == pytest.approx((1 - t) ** 2 * p0[0] + 2 * (1 - t) * t * p1[0] + t**2 * p2[0])
            assert y == pytest.approx((1 - t) ** 2 * p0[1] + 2 * (1 - t) * t * p1[1] + t**2 * p2[1])

    @pytest.mark.parametrize(
        ("step", "expected"),
        [(0.5, 2), (0.25, 4), (0.3, 4), (1.0, 1), (0.01, 100)],
    )
    def test_sample_count(self, step: float, expected: int) -> None:
        """Test the number of samples for various steps."""
        assert len(list(sample_quadratic((0, 0), (1, 1), (2, 0), step))) == expected

    def test_non_positive_step_is_empty(self) -> None:
        """Test a step of zero or below yields nothing."""
        assert list(sample_quadratic((0, 0), (1, 1), (2, 0), 0)) == []
        assert list(sample_quadratic((0, 0), (1, 1), (2, 0), -0.1)) == []

    def test_restartable(self) -> None:
        """Test calling again yields the same samples."""
        args = ((0, 0), (5, 9), (10, 0))
        assert list(sample_quadratic(*args)) == list(sample_quadratic(*args))
