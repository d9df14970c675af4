"""
algorithm - 样条构造与采样

整合开放/闭合样条的构造、逐段采样和文本输出。
作为模块运行时打印三组演示数据的采样点:

    python -m tension_spline.algorithm
"""

import logging

import numpy as np

from .config import DEFAULT_SAMPLE_POSITIONS, SplineConfig
from .core.closed_spline import ClosedSpline
from .core.open_spline import OpenSpline

logger = logging.getLogger(__name__)


def build_spline(points, tension: float, closed: bool = False) -> OpenSpline | ClosedSpline:
    """
    构造样条。

    Args:
        points: 交错坐标序列、Point 序列或 (N, 2) 数组
        tension: 张力
        closed: True 构造闭合样条，否则构造开放样条

    Returns:
        OpenSpline 或 ClosedSpline
    """
    cls = ClosedSpline if closed else OpenSpline
    return cls(points, tension)


def build_spline_from_config(points, config: SplineConfig) -> OpenSpline | ClosedSpline:
    """按 SplineConfig 构造样条"""
    return build_spline(points, config.tension, config.closed)


def sample_spline(spline: OpenSpline | ClosedSpline, s_values=DEFAULT_SAMPLE_POSITIONS) -> np.ndarray:
    """
    逐段在相同的段内参数处采样。

    Args:
        spline: 样条对象
        s_values: (M,) 段内参数，默认 {0.0, 0.1, ..., 0.9}

    Returns:
        (segment_count * M, 2) 采样点，按段顺序排列
    """
    s_values = np.asarray(s_values, dtype=float)
    samples = [spline.evaluate_batch(k, s_values) for k in range(spline.segment_count)]
    logger.debug("Sampled %d segments x %d positions", spline.segment_count, len(s_values))
    return np.vstack(samples)


def format_samples(samples: np.ndarray) -> str:
    """将 (M, 2) 采样点格式化为每行 "   x   y" 的文本"""
    return "\n".join(f"   {x:g}   {y:g}" for x, y in np.asarray(samples))


if __name__ == "__main__":
    from tension_spline.datasets import closed_square, closed_triangle, open_zigzag_curve
    from tension_spline.logging_config import setup_logging

    setup_logging(logging.INFO)

    for name, loader in [
        ("closed triangle", closed_triangle),
        ("closed square", closed_square),
        ("open zig-zag curve", open_zigzag_curve),
    ]:
        coords, params = loader()
        spline = build_spline(coords, params.tension, params.closed)
        logger.info("%s: %r", name, spline)
        print(format_samples(sample_spline(spline, params.sample_positions)))
        print("")
