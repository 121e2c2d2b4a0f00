"""Tests for cubic Bezier segment functions."""

import pytest
import torch

from torchbezier import (
    cubic_bezier_basis,
    cubic_bezier_evaluate,
    cubic_bezier_invert,
    cubic_bezier_is_monotonic,
    cubic_bezier_split,
    point,
)


@pytest.fixture
def arch():
    return [point(0, 0), point(1, 2), point(2, 3), point(3, 0)]


class TestCubicBezierBasis:
    """Tests for cubic_bezier_basis."""

    def test_shape(self):
        t = torch.linspace(0, 1, 5)
        assert cubic_bezier_basis(t).shape == (5, 4)

    def test_endpoints(self):
        assert cubic_bezier_basis(0.0).tolist() == [1.0, 0.0, 0.0, 0.0]
        assert cubic_bezier_basis(1.0).tolist() == [0.0, 0.0, 0.0, 1.0]

    def test_partition_of_unity(self):
        """Weights sum to one for any t, including extrapolation."""
        t = torch.linspace(-1, 2, 31, dtype=torch.float64)
        total = cubic_bezier_basis(t).sum(dim=-1)
        torch.testing.assert_close(total, torch.ones_like(t))

    def test_midpoint_weights(self):
        torch.testing.assert_close(
            cubic_bezier_basis(0.5),
            torch.tensor([0.125, 0.375, 0.375, 0.125]),
        )


class TestCubicBezierEvaluate:
    """Tests for cubic_bezier_evaluate."""

    def test_start_is_first_control_point(self, arch):
        p = cubic_bezier_evaluate(0, *arch)
        assert torch.equal(p.x, arch[0].x)
        assert torch.equal(p.y, arch[0].y)

    def test_end_is_last_control_point(self, arch):
        p = cubic_bezier_evaluate(1, *arch)
        assert torch.equal(p.x, arch[3].x)
        assert torch.equal(p.y, arch[3].y)

    def test_endpoints_random_control_points(self):
        torch.manual_seed(0)
        c = [point(torch.randn(16), torch.randn(16)) for _ in range(4)]

        start = cubic_bezier_evaluate(0.0, *c)
        end = cubic_bezier_evaluate(1.0, *c)

        assert torch.equal(start.x, c[0].x)
        assert torch.equal(start.y, c[0].y)
        assert torch.equal(end.x, c[3].x)
        assert torch.equal(end.y, c[3].y)

    def test_midpoint(self, arch):
        p = cubic_bezier_evaluate(0.5, *arch)
        assert abs(float(p.x) - 1.5) < 1e-3
        assert abs(float(p.y) - 1.875) < 1e-3

    def test_extrapolation(self, arch):
        """Parameters outside [0, 1] are evaluated, not rejected."""
        p = cubic_bezier_evaluate(2.0, *arch)
        torch.testing.assert_close(p.x, torch.tensor(6.0))
        torch.testing.assert_close(p.y, torch.tensor(-24.0))

    def test_batched_parameter(self, arch):
        t = torch.tensor([0.0, 0.5, 1.0])
        p = cubic_bezier_evaluate(t, *arch)
        assert p.batch_size == torch.Size([3])
        torch.testing.assert_close(p.x, torch.tensor([0.0, 1.5, 3.0]))
        torch.testing.assert_close(p.y, torch.tensor([0.0, 1.875, 0.0]))

    def test_float64_parameter_not_rounded(self):
        arch64 = [
            point(torch.tensor(x, dtype=torch.float64), y)
            for x, y in [(0.0, 0.0), (1.0, 2.0), (2.0, 3.0), (3.0, 0.0)]
        ]
        p = cubic_bezier_evaluate(0.1, *arch64)
        assert p.x.dtype == torch.float64
        torch.testing.assert_close(
            p.x, torch.tensor(0.3, dtype=torch.float64), atol=1e-12, rtol=0
        )


class TestCubicBezierSplit:
    """Tests for cubic_bezier_split."""

    def test_shared_point_is_curve_midpoint(self, arch):
        left, right = cubic_bezier_split(*arch)
        mid = cubic_bezier_evaluate(0.5, *arch)

        torch.testing.assert_close(left[3].x, mid.x)
        torch.testing.assert_close(left[3].y, mid.y)
        assert left[3] is right[0]

    def test_outer_points_kept(self, arch):
        left, right = cubic_bezier_split(*arch)
        assert left[0] is arch[0]
        assert right[3] is arch[3]

    def test_halves_trace_same_curve(self, arch):
        """Left half at s matches the segment at s/2, right half at (1+s)/2."""
        left, right = cubic_bezier_split(*arch)
        s = torch.linspace(0, 1, 11)

        for half, t in ((left, s / 2), (right, (1 + s) / 2)):
            actual = cubic_bezier_evaluate(s, *half)
            expected = cubic_bezier_evaluate(t, *arch)
            torch.testing.assert_close(actual.x, expected.x)
            torch.testing.assert_close(actual.y, expected.y)


class TestCubicBezierInvert:
    """Tests for cubic_bezier_invert."""

    def test_linear_segment(self):
        p = [point(0, 0), point(1, 1), point(2, 2), point(3, 3)]
        x = torch.tensor([0.1, 0.75, 1.5, 2.2, 2.95])
        y = cubic_bezier_invert(x, *p)
        torch.testing.assert_close(y, x, atol=1e-3, rtol=0)

    def test_endpoint_match(self):
        p = [point(0, 5), point(1, 6), point(2, 7), point(3, 8)]
        assert float(cubic_bezier_invert(0.0, *p)) == 5.0
        assert float(cubic_bezier_invert(3.0, *p)) == 8.0

    def test_depth_exhausted_returns_split_point(self):
        """With no depth left the first curve midpoint is returned."""
        p = [point(0, 0), point(1, 1), point(2, 2), point(3, 3)]
        y = cubic_bezier_invert(0.2, *p, max_depth=0)
        assert float(y) == 1.5

    def test_starting_depth_counts_toward_limit(self):
        p = [point(0, 0), point(1, 1), point(2, 2), point(3, 3)]
        y = cubic_bezier_invert(0.2, *p, 250)
        assert float(y) == 1.5

    def test_precision_controls_accuracy(self):
        p = [point(0, 0), point(1, 1), point(2, 2), point(3, 3)]
        coarse = cubic_bezier_invert(1.1, *p, precision=0.5)
        fine = cubic_bezier_invert(1.1, *p, precision=1e-6)
        assert abs(float(fine) - 1.1) < 1e-5
        assert abs(float(coarse) - 1.1) < 0.5

    def test_broadcast_points_and_targets(self):
        p = [
            point(0, torch.tensor([0.0, 10.0])),
            point(1, torch.tensor([1.0, 11.0])),
            point(2, torch.tensor([2.0, 12.0])),
            point(3, torch.tensor([3.0, 13.0])),
        ]
        y = cubic_bezier_invert(torch.tensor([[0.5], [2.5]]), *p)
        assert y.shape == (2, 2)
        expected = torch.tensor([[0.5, 10.5], [2.5, 12.5]])
        torch.testing.assert_close(y, expected, atol=1e-3, rtol=0)

    def test_float64(self):
        p = [
            point(torch.tensor(0.0, dtype=torch.float64), 0.0),
            point(1, 1),
            point(2, 2),
            point(3, 3),
        ]
        y = cubic_bezier_invert(1.0, *p)
        assert y.dtype == torch.float64

    def test_float64_target_not_rounded(self):
        p = [
            point(torch.tensor(v, dtype=torch.float64), v)
            for v in (0.0, 1.0, 2.0, 3.0)
        ]
        y = cubic_bezier_invert(0.1, *p, precision=1e-12)
        assert abs(y.item() - 0.1) < 1e-11

    def test_folded_segment_does_not_raise(self):
        """A segment that is not monotonic in x still yields a finite value."""
        p = [point(0, 0), point(5, 1), point(-2, 2), point(3, 3)]
        y = cubic_bezier_invert(torch.linspace(0, 3, 13), *p)
        assert torch.isfinite(y).all()

    def test_nan_target_does_not_raise(self):
        p = [point(0, 0), point(1, 1), point(2, 2), point(3, 3)]
        y = cubic_bezier_invert(float("nan"), *p)
        assert torch.isfinite(y)


class TestCubicBezierIsMonotonic:
    """Tests for cubic_bezier_is_monotonic."""

    def test_ordered(self):
        p = [point(0, 0), point(1, 5), point(1, -5), point(3, 0)]
        assert bool(cubic_bezier_is_monotonic(*p))

    def test_unordered(self):
        p = [point(0, 0), point(5, 1), point(-2, 2), point(3, 3)]
        assert not bool(cubic_bezier_is_monotonic(*p))

    def test_batched(self):
        p2 = point(torch.tensor([1.0, 4.0]), 0.0)
        p = [point(0, 0), p2, point(2, 0), point(3, 0)]
        assert cubic_bezier_is_monotonic(*p).tolist() == [True, False]
