"""
piecewise 模块单元测试
"""

import numpy as np
import pytest
from scipy.interpolate import BPoly

from tension_spline.core.closed_spline import ClosedSpline
from tension_spline.core.open_spline import OpenSpline
from tension_spline.core.piecewise import segment_coefficients, to_bpoly
from tension_spline.datasets import closed_square, open_zigzag_curve


@pytest.fixture
def open_spline():
    coords, params = open_zigzag_curve()
    return OpenSpline(coords, params.tension)


@pytest.fixture
def closed_spline():
    coords, params = closed_square()
    return ClosedSpline(coords, params.tension)


class TestSegmentCoefficients:
    """Bernstein 系数测试"""

    def test_shape(self, open_spline):
        coeffs = segment_coefficients(open_spline)
        assert coeffs.shape == (4, open_spline.segment_count, 2)

    def test_endpoints_are_knots(self, open_spline):
        """测试每段首末系数为节点"""
        coeffs = segment_coefficients(open_spline)
        for k in range(open_spline.segment_count):
            np.testing.assert_allclose(coeffs[0, k], open_spline.knots[k].as_array())
            np.testing.assert_allclose(coeffs[3, k], open_spline.knots[k + 1].as_array())


class TestToBPoly:
    """BPoly 转换测试"""

    def test_type_and_breakpoints(self, closed_spline):
        bp = to_bpoly(closed_spline)
        assert isinstance(bp, BPoly)
        np.testing.assert_allclose(bp.x, np.arange(closed_spline.segment_count + 1))

    @pytest.mark.parametrize("fixture_name", ["open_spline", "closed_spline"])
    def test_matches_evaluate(self, request, fixture_name):
        """测试 bp(k + s) 与 evaluate(k, s) 一致（含升阶后的二次段）"""
        spline = request.getfixturevalue(fixture_name)
        bp = to_bpoly(spline)
        for k in range(spline.segment_count):
            for s in (0.0, 0.25, 0.5, 0.75):
                np.testing.assert_allclose(bp(k + s), spline.evaluate(k, s).as_array(), atol=1e-9)

    def test_tangent_direction_continuous(self, open_spline):
        """测试内部节点两侧切向方向一致（大小可因张力分配不同）"""
        bp = to_bpoly(open_spline)
        d1 = bp.derivative()
        eps = 1e-9
        for k in range(1, open_spline.segment_count):
            left = d1(k - eps)
            right = d1(k + eps)
            cross = left[0] * right[1] - left[1] * right[0]
            assert abs(cross) <= 1e-6 * np.linalg.norm(left) * np.linalg.norm(right)
            assert np.dot(left, right) > 0

    def test_vectorized_evaluation(self, closed_spline):
        u = np.linspace(0, closed_spline.segment_count, 41)
        values = to_bpoly(closed_spline)(u)
        assert values.shape == (41, 2)
        np.testing.assert_allclose(values[0], values[-1], atol=1e-9)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
