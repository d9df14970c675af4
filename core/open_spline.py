"""
open_spline - 开放 Bezier 样条

节点原样保存，段数 = 节点数 - 1。
首末两段只有一侧的切向有定义，退化为二次 Bezier；中间段为三次 Bezier。
"""

import logging

import numpy as np

from .bezier import bezier, bezier_array
from .control_points import solve_control_points
from .knots import as_points, check_segment_index, require_knots
from .point import Point

logger = logging.getLogger(__name__)


class OpenSpline:
    """
    开放样条（起点与终点不同的路径）。

    构造时一次性求解控制点并缓存，之后只读。

    Attributes:
        knots: (N,) 节点
        controls: (2(N-2),) 控制点，按 [后向, 前向] 交替排列
        tension: 张力
        segment_count: 段数 N-1
    """

    closed = False

    def __init__(self, points, tension: float):
        """
        Args:
            points: 交错坐标序列、Point 序列或 (N, 2) 数组，N >= 3
            tension: 张力

        Raises:
            InvalidKnotsError: 节点数少于 3（少于 2 段）
            DegenerateKnotsError: 存在三个连续重合节点
        """
        knots = as_points(points)
        require_knots(knots, 3, "open")

        self._tension = float(tension)
        self._knots = knots
        self._segment_count = len(knots) - 1
        self._controls = tuple(solve_control_points(knots, self._tension))

        logger.debug(
            "Built open spline: %d knots, %d segments, tension=%s",
            len(self._knots),
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

    def segment_points(self, k: int) -> tuple[Point, ...]:
        """
        第 k 段的 Bezier 控制多边形。

        Returns:
            首末段为 (起点, 控制点, 终点)；中间段为 (起点, 控制点A, 控制点B, 终点)
        """
        k = check_segment_index(k, self._segment_count)

        # 第一段只能用二次曲线
        if k == 0:
            return self._knots[0], self._controls[0], self._knots[1]

        # 最后一段同样只能用二次曲线
        if k == self._segment_count - 1:
            return self._knots[k], self._controls[-1], self._knots[k + 1]

        return self._knots[k], self._controls[2 * k - 1], self._controls[2 * k], self._knots[k + 1]

    def is_quadratic(self, k: int) -> bool:
        """第 k 段是否为二次 Bezier"""
        return len(self.segment_points(k)) == 3

    def evaluate(self, k: int, s: float) -> Point:
        """
        在第 k 段参数 s 处求值。

        Args:
            k: 段索引 [0, segment_count)
            s: 段内参数 [0, 1]

        Returns:
            曲线上的点
        """
        return bezier(self.segment_points(k), s)

    def evaluate_batch(self, k: int, s_values: np.ndarray) -> np.ndarray:
        """
        批量在第 k 段求值（向量化版本）。

        Returns:
            (M, 2) 位置数组
        """
        return bezier_array(self.segment_points(k), s_values)

    def __repr__(self) -> str:
        return f"OpenSpline(knots={len(self._knots)}, segments={self._segment_count}, tension={self._tension})"
