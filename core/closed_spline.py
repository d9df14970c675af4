"""
closed_spline - 闭合 Bezier 样条

首尾相接的环形样条，段数 = 输入节点数，每段均为三次 Bezier。

节点扩展为 n+3 个:
    [k(n-1), k0, k1, ..., k(n-1), k0, k1]
使得每个原始节点在求解控制点时都有前驱与后继。
控制点共 2n+1 个，最后一个复制第一个，使环在首节点处闭合。
"""

import logging

import numpy as np

from .bezier import bezier, bezier_array
from .control_points import solve_control_points
from .knots import as_points, check_segment_index, require_knots
from .point import Point

logger = logging.getLogger(__name__)


class ClosedSpline:
    """
    闭合样条（环）。

    Attributes:
        knots: (n+3,) 扩展后的节点
        controls: (2n+1,) 控制点，controls[-1] == controls[0]
        tension: 张力
        segment_count: 段数 n
    """

    closed = True

    def __init__(self, points, tension: float):
        """
        Args:
            points: 交错坐标序列、Point 序列或 (N, 2) 数组，N >= 3
            tension: 张力

        Raises:
            InvalidKnotsError: 节点数少于 3
            DegenerateKnotsError: 存在三个连续重合节点（按环计）
        """
        points = as_points(points)
        require_knots(points, 3, "closed")

        self._tension = float(tension)
        self._segment_count = len(points)
        self._knots = (points[-1],) + points + (points[0], points[1])

        # 前 n 个窗口分别以 n 个原始节点为中心
        controls = solve_control_points(self._knots[: self._segment_count + 2], self._tension)
        controls.append(controls[0])
        self._controls = tuple(controls)

        logger.debug(
            "Built closed spline: %d knots, %d segments, tension=%s",
            len(points),
            self._segment_count,
            self._tension,
        )

    @property
    def knots(self) -> tuple[Point, ...]:
        return self._knots

    @property
    def controls(self) -> tuple[Point, ...]:
        return self._controls

    @property
    def tension(self) -> float:
        return self._tension

    @property
    def segment_count(self) -> int:
        return self._segment_count

    def __len__(self) -> int:
        return self._segment_count

    def segment_points(self, k: int) -> tuple[Point, Point, Point, Point]:
        """第 k 段的三次 Bezier 控制多边形"""
        k = check_segment_index(k, self._segment_count)
        # 首节点被前置复制，索引整体右移一位
        kk = k + 1
        return self._knots[kk], self._controls[2 * kk - 1], self._controls[2 * kk], self._knots[kk + 1]

    def is_quadratic(self, k: int) -> bool:
        check_segment_index(k, self._segment_count)
        return False

    def evaluate(self, k: int, s: float) -> Point:
        """
        在第 k 段参数 s 处求值。

        Args:
            k: 段索引 [0, segment_count)
            s: 段内参数 [0, 1]
        """
        return bezier(self.segment_points(k), s)

    def evaluate_batch(self, k: int, s_values: np.ndarray) -> np.ndarray:
        """批量在第 k 段求值，返回 (M, 2) 数组"""
        return bezier_array(self.segment_points(k), s_values)

    def __repr__(self) -> str:
        return f"ClosedSpline(knots={self._segment_count}, segments={self._segment_count}, tension={self._tension})"
