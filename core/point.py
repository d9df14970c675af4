"""
point - 二维点值类型

不可变的 (x, y) 浮点坐标对，支持加减、数乘、点积、范数与距离计算。
== 为精确浮点比较；容差比较使用 almost_equal (ε = 0.001)。
"""

import math
from dataclasses import dataclass

import numpy as np

from ..utils.geometry import square

EPS = 0.001


@dataclass(frozen=True)
class Point:
    """二维点"""

    x: float
    y: float

    def __post_init__(self):
        # frozen dataclass 只能通过 object.__setattr__ 归一化坐标类型
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_array(cls, values) -> "Point":
        """由长度为 2 的序列构造点"""
        x, y = values
        return cls(x, y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Point":
        if isinstance(factor, Point):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def dot(self, other: "Point") -> float:
        return dot(self, other)

    def cross(self, other: "Point") -> float:
        return cross(self, other)

    def norm2(self) -> float:
        return norm2(self)

    def norm(self) -> float:
        return norm(self)

    def distance2(self, other: "Point") -> float:
        return distance2(self, other)

    def distance(self, other: "Point") -> float:
        return distance(self, other)

    def almost_equal(self, other: "Point", eps: float = EPS) -> bool:
        return almost_equal(self, other, eps)

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


def dot(a: Point, b: Point) -> float:
    """点积 a·b"""
    return a.x * b.x + a.y * b.y


def cross(a: Point, b: Point) -> float:
    """二维叉积的 z 分量，共线时为 0"""
    return a.x * b.y - a.y * b.x


def norm2(a: Point) -> float:
    """范数平方"""
    return square(a.x) + square(a.y)


def norm(a: Point) -> float:
    # hypot 内部缩放，避免极大/极小坐标平方后上溢或下溢
    return math.hypot(a.x, a.y)


def distance2(a: Point, b: Point) -> float:
    """距离平方"""
    return square(a.x - b.x) + square(a.y - b.y)


def distance(a: Point, b: Point) -> float:
    """欧氏距离 sqrt((ax-bx)² + (ay-by)²)"""
    return math.hypot(a.x - b.x, a.y - b.y)


def almost_equal(a: Point, b: Point, eps: float = EPS) -> bool:
    """两坐标差的绝对值均小于 eps 时视为相等"""
    return abs(a.x - b.x) < eps and abs(a.y - b.y) < eps
