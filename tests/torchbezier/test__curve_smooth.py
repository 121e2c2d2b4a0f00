"""Tests for curve_smooth."""

import pytest
import torch

from torchbezier import (
    CurveError,
    cubic_bezier_is_monotonic,
    curve_lookup,
    curve_smooth,
    point,
)


def _segment_corners(curve, k):
    return [point(curve.x[4 * k + j], curve.y[4 * k + j]) for j in range(4)]


class TestCurveSmooth:
    """Tests for curve_smooth."""

    def test_shape(self):
        anchors = torch.tensor([[0.0, 0.0], [1.0, 2.0], [3.0, 1.0], [4.0, 4.0]])
        curve = curve_smooth(anchors)
        assert curve.batch_size == torch.Size([12])

    def test_passes_through_anchors(self):
        anchors = torch.tensor([[0.0, 0.0], [1.0, 2.0], [3.0, 1.0], [4.0, 4.0]])
        curve = curve_smooth(anchors)
        y = curve_lookup(anchors[:, 0], curve)
        torch.testing.assert_close(y, anchors[:, 1])

    def test_segments_ordered_in_x(self):
        torch.manual_seed(0)
        x = torch.cumsum(torch.rand(10) + 0.1, dim=0)
        y = torch.randn(10)
        curve = curve_smooth(point(x, y))
        for k in range(9):
            assert bool(cubic_bezier_is_monotonic(*_segment_corners(curve, k)))

    def test_tangent_continuous_at_anchors(self):
        torch.manual_seed(1)
        x = torch.cumsum(torch.rand(6, dtype=torch.float64) + 0.1, dim=0)
        y = torch.randn(6, dtype=torch.float64)
        curve = curve_smooth(point(x, y), smoothness=0.3)
        for k in range(1, 5):
            _, _, c3, c4 = _segment_corners(curve, k - 1)
            d1, d2, _, _ = _segment_corners(curve, k)
            incoming = (c4.y - c3.y) / (c4.x - c3.x)
            outgoing = (d2.y - d1.y) / (d2.x - d1.x)
            torch.testing.assert_close(incoming, outgoing)

    def test_collinear_anchors_give_a_line(self):
        anchors = [point(0, 0), point(1, 2), point(3, 6)]
        curve = curve_smooth(anchors)
        x = torch.linspace(0, 3, 13)
        y = curve_lookup(x, curve, precision=1e-6)
        torch.testing.assert_close(y, 2 * x, atol=1e-4, rtol=0)

    def test_zero_smoothness_is_piecewise_linear(self):
        anchors = [point(0, 0), point(2, 4), point(4, 0)]
        curve = curve_smooth(anchors, smoothness=0.0)
        y = curve_lookup(torch.tensor([1.0, 3.0]), curve, precision=1e-6)
        torch.testing.assert_close(y, torch.tensor([2.0, 2.0]), atol=1e-4, rtol=0)

    def test_end_tangents_are_one_sided(self):
        anchors = [point(0, 0), point(1, 1), point(2, 0)]
        curve = curve_smooth(anchors, smoothness=0.5)
        assert curve.x[:4].tolist() == [0.0, 0.5, 0.5, 1.0]
        assert curve.y[:4].tolist() == [0.0, 0.5, 1.0, 1.0]

    def test_same_x_neighbours_give_flat_tangent(self):
        curve = curve_smooth([point(1, 0), point(1, 5)])
        assert torch.isfinite(curve.y).all()
        assert curve.y.tolist() == [0.0, 0.0, 5.0, 5.0]

    def test_float64(self):
        anchors = torch.tensor([[0.0, 0.0], [1.0, 1.0]], dtype=torch.float64)
        assert curve_smooth(anchors).x.dtype == torch.float64

    @pytest.mark.parametrize("anchors", [None, [], [point(0, 0)]])
    def test_too_few_anchors(self, anchors):
        with pytest.raises(CurveError, match="two anchor points"):
            curve_smooth(anchors)
