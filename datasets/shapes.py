"""
shapes - 演示用节点数据

包含三组节点:
- 闭合三角形: 3 个节点，张力 0.5
- 闭合正方形: 4 个节点，张力 0.5
- 开放折线: 8 个节点的锯齿形曲线，张力 2.0

坐标以交错序列 [x0, y0, x1, y1, ...] 给出。
"""

from dataclasses import dataclass

import numpy as np

from ..config import DEFAULT_SAMPLE_POSITIONS


@dataclass
class DemoParameters:
    """演示参数"""

    tension: float = 0.5  # 样条张力
    closed: bool = False  # 是否闭合
    sample_positions: tuple = DEFAULT_SAMPLE_POSITIONS  # 每段采样参数


_TRIANGLE = np.array([260.0, 240.0, 360.0, 240.0, 310.0, 340.0], dtype=np.float64)

_SQUARE = np.array([50.0, 200.0, 150.0, 200.0, 150.0, 300.0, 50.0, 300.0], dtype=np.float64)

_ZIGZAG = np.array(
    [
        20.0, 50.0,
        100.0, 100.0,
        150.0, 50.0,
        200.0, 150.0,
        250.0, 50.0,
        300.0, 70.0,
        310.0, 130.0,
        380.0, 30.0,
    ],
    dtype=np.float64,
)


def closed_triangle() -> tuple[np.ndarray, DemoParameters]:
    """
    获取闭合三角形节点。

    Returns:
        coords: (6,) 交错坐标
        params: 演示参数
    """
    return _TRIANGLE.copy(), DemoParameters(tension=0.5, closed=True)


def closed_square() -> tuple[np.ndarray, DemoParameters]:
    """获取闭合正方形节点"""
    return _SQUARE.copy(), DemoParameters(tension=0.5, closed=True)


def open_zigzag_curve() -> tuple[np.ndarray, DemoParameters]:
    """
    获取开放锯齿形曲线节点。

    Returns:
        coords: (16,) 交错坐标，共 8 个节点
        params: 演示参数
    """
    return _ZIGZAG.copy(), DemoParameters(tension=2.0, closed=False)


if __name__ == "__main__":
    for name, loader in [
        ("闭合三角形", closed_triangle),
        ("闭合正方形", closed_square),
        ("开放锯齿曲线", open_zigzag_curve),
    ]:
        coords, params = loader()
        points = coords.reshape(-1, 2)
        print(f"=== {name} ===")
        print(f"节点数: {len(points)}, 张力: {params.tension}, 闭合: {params.closed}")
        print(f"范围: X[{points[:, 0].min():.1f}, {points[:, 0].max():.1f}]")
        print(f"      Y[{points[:, 1].min():.1f}, {points[:, 1].max():.1f}]")
