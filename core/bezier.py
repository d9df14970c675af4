"""
bezier - 三次/二次 Bezier 曲线求值

提供两类纯函数:
1. 单参数求值 (cubic_bezier, quadratic_bezier)，返回 Point
2. 批量求值 (cubic_bezier_array, quadratic_bezier_array)，返回 (M, 2) 数组

参数 s 必须位于 [0, 1]，越界时抛出 ParameterOutOfRangeError，不做外推。
"""

import numbers

import numpy as np

from .errors import ParameterOutOfRangeError
from .point import Point


def check_parameter(s: float) -> float:
    """
    校验 Bezier 参数。

    Args:
        s: 参数值

    Returns:
        float(s)

    Raises:
        TypeError: s 不是实数（bool 与字符串同样拒绝）
        ParameterOutOfRangeError: s 不在 [0, 1] 内（含 NaN）
    """
    if isinstance(s, (bool, np.bool_)) or not isinstance(s, numbers.Real):
        raise TypeError(f"Bezier parameter must be a real number, got {type(s).__name__}")
    s = float(s)
    if not 0.0 <= s <= 1.0:
        raise ParameterOutOfRangeError(f"Bezier parameter {s} out of range [0, 1]")
    return s


def check_parameters(s_values) -> np.ndarray:
    """批量校验 Bezier 参数，返回一维 float 数组"""
    raw = np.atleast_1d(np.asarray(s_values))
    if raw.dtype.kind not in "iuf":
        raise TypeError(f"Bezier parameters must be real numbers, got dtype {raw.dtype}")
    s = raw.astype(float)
    if s.ndim != 1:
        raise ValueError(f"Expected 1D parameter array, got shape {s.shape}")
    # NaN 比较结果为 False，同样判为越界
    if not np.all((s >= 0.0) & (s <= 1.0)):
        bad = s[~((s >= 0.0) & (s <= 1.0))]
        raise ParameterOutOfRangeError(f"Bezier parameters {bad.tolist()} out of range [0, 1]")
    return s


def cubic_bezier(p0: Point, cp_a: Point, cp_b: Point, p1: Point, s: float) -> Point:
    """
    三次 Bezier 求值。

    B(s) = p0(1-s)³ + cp_a·3(1-s)²s + cp_b·3(1-s)s² + p1·s³

    Args:
        p0: 起点
        cp_a: 起点侧控制点
        cp_b: 终点侧控制点
        p1: 终点
        s: 参数 [0, 1]

    Returns:
        曲线上的点
    """
    s = check_parameter(s)
    one_m_s = 1.0 - s
    a = one_m_s * one_m_s * one_m_s
    b = one_m_s * one_m_s * s * 3.0
    c = one_m_s * s * s * 3.0
    d = s * s * s
    return Point(
        p0.x * a + cp_a.x * b + cp_b.x * c + p1.x * d,
        p0.y * a + cp_a.y * b + cp_b.y * c + p1.y * d,
    )


def quadratic_bezier(p0: Point, cp: Point, p1: Point, s: float) -> Point:
    """
    二次 Bezier 求值。

    B(s) = p0(1-s)² + cp·2(1-s)s + p1·s²
    """
    s = check_parameter(s)
    one_m_s = 1.0 - s
    a = one_m_s * one_m_s
    b = 2.0 * one_m_s * s
    c = s * s
    return Point(
        p0.x * a + cp.x * b + p1.x * c,
        p0.y * a + cp.y * b + p1.y * c,
    )


def bezier(points: tuple[Point, ...], s: float) -> Point:
    """按控制多边形长度分派到二次 (3 点) 或三次 (4 点) 求值"""
    if len(points) == 4:
        return cubic_bezier(*points, s)
    if len(points) == 3:
        return quadratic_bezier(*points, s)
    raise ValueError(f"Unsupported Bezier control polygon of {len(points)} points")


def _stack(points) -> np.ndarray:
    return np.array([[p.x, p.y] for p in points])


def cubic_bezier_array(p0: Point, cp_a: Point, cp_b: Point, p1: Point, s_values) -> np.ndarray:
    """
    三次 Bezier 批量求值（向量化版本）。

    Args:
        s_values: (M,) 参数数组

    Returns:
        (M, 2) 曲线点数组
    """
    s = check_parameters(s_values)[:, np.newaxis]
    one_m_s = 1.0 - s
    weights = np.hstack([one_m_s**3, 3.0 * one_m_s**2 * s, 3.0 * one_m_s * s**2, s**3])
    return weights @ _stack((p0, cp_a, cp_b, p1))


def quadratic_bezier_array(p0: Point, cp: Point, p1: Point, s_values) -> np.ndarray:
    """二次 Bezier 批量求值，返回 (M, 2) 数组"""
    s = check_parameters(s_values)[:, np.newaxis]
    one_m_s = 1.0 - s
    weights = np.hstack([one_m_s**2, 2.0 * one_m_s * s, s**2])
    return weights @ _stack((p0, cp, p1))


def bezier_array(points: tuple[Point, ...], s_values) -> np.ndarray:
    if len(points) == 4:
        return cubic_bezier_array(*points, s_values)
    if len(points) == 3:
        return quadratic_bezier_array(*points, s_values)
    raise ValueError(f"Unsupported Bezier control polygon of {len(points)} points")


def elevate_quadratic(p0: Point, cp: Point, p1: Point) -> tuple[Point, Point, Point, Point]:
    """
    二次 Bezier 升阶为等价的三次 Bezier。

    新控制点: q1 = p0/3 + 2cp/3, q2 = 2cp/3 + p1/3
    """
    q1 = Point(p0.x / 3.0 + 2.0 * cp.x / 3.0, p0.y / 3.0 + 2.0 * cp.y / 3.0)
    q2 = Point(2.0 * cp.x / 3.0 + p1.x / 3.0, 2.0 * cp.y / 3.0 + p1.y / 3.0)
    return p0, q1, q2, p1
