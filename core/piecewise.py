"""
piecewise - 样条转换为分段 Bernstein 多项式

将整条样条表示为 scipy.interpolate.BPoly，全局参数 u = k + s，
断点为 0, 1, ..., segment_count。开放样条首末段的二次 Bezier 先升阶为三次，
以便所有段使用统一的 (4, m, 2) 系数数组。

BPoly 提供整条曲线的向量化求值与任意阶导数（切向量）。
"""

import numpy as np
from scipy.interpolate import BPoly

from .bezier import elevate_quadratic


def segment_coefficients(spline) -> np.ndarray:
    """
    收集各段的三次 Bernstein 系数。

    Args:
        spline: OpenSpline 或 ClosedSpline

    Returns:
        (4, segment_count, 2) 系数数组
    """
    coeffs = np.zeros((4, spline.segment_count, 2))
    for k in range(spline.segment_count):
        points = spline.segment_points(k)
        if len(points) == 3:
            points = elevate_quadratic(*points)
        coeffs[:, k, :] = [[p.x, p.y] for p in points]
    return coeffs


def to_bpoly(spline) -> BPoly:
    """
    将样条转换为 BPoly。

    Returns:
        BPoly 对象，bp(u) 返回 (2,) 或 (M, 2) 位置
    """
    breakpoints = np.arange(spline.segment_count + 1, dtype=float)
    return BPoly(segment_coefficients(spline), breakpoints, extrapolate=False)


if __name__ == "__main__":
    from tension_spline.core import OpenSpline
    from tension_spline.datasets import open_zigzag_curve

    coords, params = open_zigzag_curve()
    spline = OpenSpline(coords, params.tension)
    bp = to_bpoly(spline)

    u = np.linspace(0, spline.segment_count, 8)
    print("=== 分段多项式测试 ===")
    print(f"段数: {spline.segment_count}")
    print(f"节点处位置:\n{bp(u)}")
    print(f"节点处切向:\n{bp.derivative()(u)}")
