"""
datasets - 演示数据集

包含:
- shapes: 闭合三角形、闭合正方形、开放锯齿曲线
"""

from .shapes import closed_triangle, closed_square, open_zigzag_curve, DemoParameters

__all__ = [
    "closed_triangle",
    "closed_square",
    "open_zigzag_curve",
    "DemoParameters",
]
