"""
control_points - Bezier 控制点求解

对每个内部节点 p1，利用相邻节点 (p0, p2) 与张力 t 求出一对控制点:
- cp1: p1 的后向控制点（结束于 p1 的段使用）
- cp2: p1 的前向控制点（起始于 p1 的段使用）

两点均位于过 p1 且平行于弦 p0→p2 的直线上，保证 p1 处切向连续；
张力按相邻段长度比例分配，补偿不等间距节点的曲率跳变。
"""

import logging
import math
from typing import Sequence

from .errors import DegenerateKnotsError
from .point import Point, distance

logger = logging.getLogger(__name__)


def get_control_points(p0: Point, p1: Point, p2: Point, tension: float) -> tuple[Point, Point]:
    """
    求解节点 p1 的一对控制点。

    d01 = |p0 p1|, d12 = |p1 p2|
    fa = t * d01 / (d01 + d12), fb = t - fa
    cp1 = p1 + fa * (p0 - p2)
    cp2 = p1 - fb * (p0 - p2)

    Args:
        p0: 前一个节点
        p1: 当前节点
        p2: 后一个节点
        tension: 张力

    Returns:
        (cp1, cp2)

    Raises:
        DegenerateKnotsError: 三个节点重合 (d01 + d12 == 0)，或距离/控制点溢出为非有限值
    """
    d01 = distance(p0, p1)
    d12 = distance(p1, p2)
    total = d01 + d12
    if total == 0.0:
        raise DegenerateKnotsError(f"Coincident knots around {p1!r}: tension split undefined")
    if not math.isfinite(total):
        raise DegenerateKnotsError(f"Knot distances around {p1!r} overflow: tension split undefined")

    tension = float(tension)
    fa = tension * d01 / total
    fb = tension - fa
    chord = p0 - p2
    cp1, cp2 = p1 + fa * chord, p1 - fb * chord
    if not all(map(math.isfinite, (cp1.x, cp1.y, cp2.x, cp2.y))):
        raise DegenerateKnotsError(f"Non-finite control points around {p1!r}")
    return cp1, cp2


def solve_control_points(knots: Sequence[Point], tension: float) -> list[Point]:
    """
    对节点序列的每个连续三元组求解控制点。

    Args:
        knots: (N,) 节点序列，N >= 3
        tension: 张力

    Returns:
        长度 2(N-2) 的控制点列表，按 [后向, 前向] 交替排列
    """
    controls = []
    for k in range(len(knots) - 2):
        cp1, cp2 = get_control_points(knots[k], knots[k + 1], knots[k + 2], tension)
        controls.append(cp1)
        controls.append(cp2)

    logger.debug("Solved %d control points from %d knots (tension=%s)", len(controls), len(knots), tension)
    return controls
