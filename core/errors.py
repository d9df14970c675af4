"""
errors - 样条相关异常
"""


class SplineError(Exception):
    pass


class InvalidKnotsError(SplineError, ValueError):
    """节点数量不足或节点数据非法，样条无法构造。"""


class DegenerateKnotsError(InvalidKnotsError):
    """相邻节点重合，控制点的张力分配比无定义 (d01 + d12 == 0)。"""


class ParameterOutOfRangeError(SplineError, ValueError):
    """Bezier 参数 s 超出 [0, 1]。"""


class SegmentIndexError(SplineError, IndexError):
    pass
