"""
utils - 工具函数模块

包含:
- geometry: 通用数值工具
"""

from .geometry import (
    square,
    cubed,
    distance,
    clamp,
    in_range,
    round_half_away,
    center_of_mass,
    slerp,
    copy_plane,
    copy_volume,
    make_bit_image,
)

__all__ = [
    "square",
    "cubed",
    "distance",
    "clamp",
    "in_range",
    "round_half_away",
    "center_of_mass",
    "slerp",
    "copy_plane",
    "copy_volume",
    "make_bit_image",
]
