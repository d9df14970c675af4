"""
knots - 节点输入解析

支持以下输入形式:
1. 交错坐标序列 [x0, y0, x1, y1, ...]
2. Point 序列
3. (x, y) 序列或 (N, 2) 数组
4. Point 与 (x, y) 混合序列
"""

import numpy as np

from .errors import InvalidKnotsError, SegmentIndexError
from .point import Point


def as_points(points) -> tuple[Point, ...]:
    """
    将输入统一转换为 Point 元组。

    Args:
        points: 交错坐标序列、Point 序列或 (N, 2) 数组

    Returns:
        (N,) Point 元组

    Raises:
        InvalidKnotsError: 坐标个数为奇数、形状非法或坐标非有限值
    """
    if isinstance(points, np.ndarray):
        items = points
    else:
        items = list(points)

    if len(items) and all(isinstance(p, Point) for p in items):
        knots = tuple(items)
    else:
        # Point 与 (x, y) 混合输入时，先将 Point 展开为坐标对
        items = [(p.x, p.y) if isinstance(p, Point) else p for p in items]
        try:
            coords = np.asarray(items, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidKnotsError(f"Cannot interpret knots: {exc}") from exc

        if coords.ndim == 1:
            if len(coords) % 2 != 0:
                raise InvalidKnotsError(f"Odd number of interleaved coordinates: {len(coords)}")
            coords = coords.reshape(-1, 2)
        elif coords.ndim != 2 or coords.shape[1] != 2:
            raise InvalidKnotsError(f"Expected (N, 2) knots, got shape {coords.shape}")
        knots = tuple(Point(x, y) for x, y in coords)

    if not all(np.isfinite(p.x) and np.isfinite(p.y) for p in knots):
        raise InvalidKnotsError("Knot coordinates must be finite")
    return knots


def require_knots(knots: tuple[Point, ...], minimum: int, kind: str):
    """节点数不足 minimum 时抛出 InvalidKnotsError"""
    if len(knots) < minimum:
        raise InvalidKnotsError(
            f"Not enough points to construct {kind} spline: got {len(knots)}, need at least {minimum}"
        )


def check_segment_index(k: int, segment_count: int) -> int:
    """校验段索引 0 <= k < segment_count，不支持负索引回绕"""
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise TypeError(f"Segment index must be an integer, got {type(k).__name__}")
    if not 0 <= k < segment_count:
        raise SegmentIndexError(f"Segment index {k} out of range [0, {segment_count})")
    return int(k)
