"""
config - 样条构造与采样配置
"""

from dataclasses import dataclass

import numpy as np

# 演示驱动默认的段内采样参数 {0.0, 0.1, ..., 0.9}
DEFAULT_SAMPLE_POSITIONS = (0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9)


@dataclass
class SplineConfig:
    """样条配置"""

    tension: float = 0.5  # 张力
    closed: bool = False  # True 为闭合样条
    samples_per_segment: int = 10  # 每段采样点数
    include_endpoint: bool = False  # 是否包含 s = 1.0

    def sample_positions(self) -> np.ndarray:
        """
        生成段内采样参数。

        Returns:
            (samples_per_segment,) 参数数组，include_endpoint 为 False 时步长为 1/samples_per_segment
        """
        if self.samples_per_segment < 1:
            raise ValueError(f"samples_per_segment must be positive, got {self.samples_per_segment}")
        return np.linspace(0.0, 1.0, self.samples_per_segment, endpoint=self.include_endpoint)
