"""
tension_spline - 张力控制的二维 Bezier 样条库

以 Catmull-Rom 方式由相邻节点求取每个节点的一对 Bezier 控制点，
张力按相邻段长比例分配，支持开放与闭合两种拓扑。
"""

from .algorithm import build_spline, build_spline_from_config, sample_spline
from .config import SplineConfig
from .core import ClosedSpline, OpenSpline, Point

__version__ = "0.1.0"
__all__ = [
    "build_spline",
    "build_spline_from_config",
    "sample_spline",
    "SplineConfig",
    "ClosedSpline",
    "OpenSpline",
    "Point",
]
