"""
bezier 模块单元测试
"""

import numpy as np
import pytest

from tension_spline.core.bezier import (
    bezier,
    check_parameter,
    cubic_bezier,
    cubic_bezier_array,
    elevate_quadratic,
    quadratic_bezier,
    quadratic_bezier_array,
)
from tension_spline.core.errors import ParameterOutOfRangeError
from tension_spline.core.point import Point


@pytest.fixture
def cubic_polygon():
    return Point(0.0, 0.0), Point(1.0, 2.0), Point(3.0, 2.0), Point(4.0, 0.0)


@pytest.fixture
def quadratic_polygon():
    return Point(0.0, 0.0), Point(1.0, 2.0), Point(2.0, 0.0)


class TestCubicBezier:
    """三次 Bezier 测试"""

    def test_endpoints(self, cubic_polygon):
        """测试 s=0 与 s=1 精确返回端点"""
        p0, cp_a, cp_b, p1 = cubic_polygon
        assert cubic_bezier(p0, cp_a, cp_b, p1, 0.0) == p0
        assert cubic_bezier(p0, cp_a, cp_b, p1, 1.0) == p1

    def test_midpoint(self, cubic_polygon):
        """测试 s=0.5: (p0 + 3cpA + 3cpB + p1) / 8"""
        result = cubic_bezier(*cubic_polygon, 0.5)
        assert np.isclose(result.x, 2.0)
        assert np.isclose(result.y, 1.5)

    def test_straight_line(self):
        """测试控制点均匀分布在直线上时为线性插值"""
        p = cubic_bezier(Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3), 0.25)
        assert np.isclose(p.x, 0.75)
        assert np.isclose(p.y, 0.75)

    def test_batch_matches_scalar(self, cubic_polygon):
        """测试批量求值与逐点求值一致"""
        s = np.linspace(0, 1, 11)
        batch = cubic_bezier_array(*cubic_polygon, s)
        assert batch.shape == (11, 2)
        for i, si in enumerate(s):
            np.testing.assert_allclose(batch[i], cubic_bezier(*cubic_polygon, si).as_array(), atol=1e-12)


class TestQuadraticBezier:
    """二次 Bezier 测试"""

    def test_endpoints(self, quadratic_polygon):
        p0, cp, p1 = quadratic_polygon
        assert quadratic_bezier(p0, cp, p1, 0.0) == p0
        assert quadratic_bezier(p0, cp, p1, 1.0) == p1

    def test_midpoint(self, quadratic_polygon):
        """测试 s=0.5: (p0 + 2cp + p1) / 4"""
        result = quadratic_bezier(*quadratic_polygon, 0.5)
        assert np.isclose(result.x, 1.0)
        assert np.isclose(result.y, 1.0)

    def test_batch_matches_scalar(self, quadratic_polygon):
        s = np.array([0.0, 0.3, 0.7, 1.0])
        batch = quadratic_bezier_array(*quadratic_polygon, s)
        for i, si in enumerate(s):
            np.testing.assert_allclose(batch[i], quadratic_bezier(*quadratic_polygon, si).as_array(), atol=1e-12)

    def test_elevation_preserves_curve(self, quadratic_polygon):
        """测试升阶后的三次曲线与原二次曲线重合"""
        cubic = elevate_quadratic(*quadratic_polygon)
        assert cubic[0] == quadratic_polygon[0]
        assert cubic[3] == quadratic_polygon[2]
        s = np.linspace(0, 1, 9)
        np.testing.assert_allclose(
            cubic_bezier_array(*cubic, s),
            quadratic_bezier_array(*quadratic_polygon, s),
            atol=1e-12,
        )


class TestParameterRange:
    """参数范围校验测试"""

    @pytest.mark.parametrize("s", [-0.1, 1.0001, float("nan"), float("inf")])
    def test_out_of_range_rejected(self, cubic_polygon, quadratic_polygon, s):
        with pytest.raises(ParameterOutOfRangeError):
            cubic_bezier(*cubic_polygon, s)
        with pytest.raises(ParameterOutOfRangeError):
            quadratic_bezier(*quadratic_polygon, s)

    def test_batch_out_of_range_rejected(self, cubic_polygon):
        with pytest.raises(ParameterOutOfRangeError):
            cubic_bezier_array(*cubic_polygon, [0.0, 0.5, 1.5])

    def test_error_is_value_error(self):
        """测试越界异常同时是 ValueError"""
        with pytest.raises(ValueError):
            check_parameter(2.0)

    @pytest.mark.parametrize("s", ["0.5", True, False, None, [0.5]])
    def test_non_real_rejected(self, cubic_polygon, s):
        """测试字符串、bool 等非实数参数被拒绝"""
        with pytest.raises(TypeError):
            check_parameter(s)
        with pytest.raises(TypeError):
            cubic_bezier(*cubic_polygon, s)

    @pytest.mark.parametrize("s_values", [["0.5", "1.0"], [True, False]])
    def test_batch_non_real_rejected(self, cubic_polygon, s_values):
        with pytest.raises(TypeError):
            cubic_bezier_array(*cubic_polygon, s_values)

    def test_numpy_scalars_accepted(self):
        assert check_parameter(np.float64(0.25)) == 0.25
        assert check_parameter(np.float32(0.5)) == 0.5
        assert check_parameter(np.int64(1)) == 1.0

    def test_bounds_accepted(self):
        assert check_parameter(0) == 0.0
        assert check_parameter(1) == 1.0


class TestDispatch:
    """按控制多边形长度分派测试"""

    def test_dispatch(self, cubic_polygon, quadratic_polygon):
        assert bezier(cubic_polygon, 0.3) == cubic_bezier(*cubic_polygon, 0.3)
        assert bezier(quadratic_polygon, 0.3) == quadratic_bezier(*quadratic_polygon, 0.3)

    def test_unsupported_polygon(self):
        with pytest.raises(ValueError):
            bezier((Point(0, 0), Point(1, 1)), 0.5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
