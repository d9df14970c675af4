"""
geometry - 通用数值工具函数

提供平方、距离、截断、取整、质心、球面插值以及平面/体数据复制等基础操作。
样条核心只依赖其中的 square 与 distance。
"""

import numpy as np


def square(x: float) -> float:
    """返回 x 的平方"""
    return x * x


def cubed(x: float) -> float:
    """返回 x 的立方"""
    return x * x * x


def distance(a, b) -> float:
    """
    计算两点之间的欧氏距离。

    Args:
        a: 任意维度的点坐标
        b: 与 a 同维度的点坐标

    Returns:
        欧氏距离
    """
    diff = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    return float(np.sqrt(np.sum(diff * diff)))


def clamp(val, lo, hi):
    """
    将 val 截断到 [lo, hi] 区间。

    Raises:
        ValueError: 当 hi <= lo 时
    """
    if not hi > lo:
        raise ValueError(f"Invalid clamp range [{lo}, {hi}]")
    if val < lo:
        return lo
    if val > hi:
        return hi
    return val


def in_range(val: float, lo: float, hi: float) -> bool:
    """判断 val 是否在闭区间 [lo, hi] 内"""
    return lo <= val <= hi


def round_half_away(x: float) -> int:
    """四舍五入到整数，.5 远离零方向取整（与 Python 内置的银行家舍入不同）"""
    if x > 0.0:
        return int(x + 0.5)
    if x < 0.0:
        return int(x - 0.5)
    return 0


def center_of_mass(contour) -> np.ndarray:
    """
    计算轮廓点的质心。

    Args:
        contour: 交错坐标序列 [x0, y0, x1, y1, ...] 或 (N, 2) 点数组

    Returns:
        (2,) numpy 质心坐标。返回数组而非 Point：core.point 依赖本模块，
        此处不能反向导入；需要 Point 时用 Point.from_array 转换。
    """
    points = np.asarray(contour, dtype=float)
    if points.ndim == 1:
        points = points.reshape(-1, 2)
    if len(points) == 0:
        raise ValueError("Empty contour")
    return points.mean(axis=0)


def slerp(a: np.ndarray, b: np.ndarray, t: float, theta: float) -> np.ndarray:
    """
    球面线性插值。

    Args:
        a: (3,) 起始向量
        b: (3,) 终止向量
        t: 插值参数 [0, 1]
        theta: a 与 b 之间的夹角 (rad)

    Returns:
        (3,) 插值向量

    Note:
        sin(θ) = 0 时退化为线性插值。
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    norm = np.sin(theta)
    weight_a = 1.0 - t
    weight_b = t
    if norm != 0.0:
        weight_a = np.sin(weight_a * theta) / norm
        weight_b = np.sin(weight_b * theta) / norm
    return weight_a * a + weight_b * b


def copy_plane(src: np.ndarray) -> np.ndarray:
    """复制二维数据平面"""
    src = np.asarray(src)
    if src.ndim != 2:
        raise ValueError(f"Expected 2D plane, got shape {src.shape}")
    return src.copy()


def copy_volume(src) -> list[np.ndarray]:
    """逐平面复制体数据（二维平面列表）"""
    return [copy_plane(plane) for plane in src]


def make_bit_image(bm: np.ndarray | None) -> np.ndarray | None:
    """
    由标记图生成二值图像：负值像素为 True。

    Args:
        bm: (nr, nc) 标记图，可为 None

    Returns:
        (nr, nc) 布尔图像；输入为 None 或不含负值像素时返回 None
    """
    if bm is None:
        return None
    image = np.asarray(bm) < 0
    if not np.any(image):
        return None
    return image
