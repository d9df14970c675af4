"""
core - 核心算法模块

包含:
- point: 二维点值类型
- bezier: 三次/二次 Bezier 求值
- control_points: 张力控制点求解
- open_spline: 开放样条
- closed_spline: 闭合样条
- piecewise: 转换为 scipy BPoly
"""

from .errors import (
    SplineError,
    InvalidKnotsError,
    DegenerateKnotsError,
    ParameterOutOfRangeError,
    SegmentIndexError,
)
from .point import Point, almost_equal
from .bezier import cubic_bezier, quadratic_bezier
from .control_points import get_control_points, solve_control_points
from .open_spline import OpenSpline
from .closed_spline import ClosedSpline
from .piecewise import to_bpoly

__all__ = [
    "SplineError",
    "InvalidKnotsError",
    "DegenerateKnotsError",
    "ParameterOutOfRangeError",
    "SegmentIndexError",
    "Point",
    "almost_equal",
    "cubic_bezier",
    "quadratic_bezier",
    "get_control_points",
    "solve_control_points",
    "OpenSpline",
    "ClosedSpline",
    "to_bpoly",
]
