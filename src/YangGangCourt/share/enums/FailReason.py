from enum import IntEnum


class FailReason(IntEnum):
    """投票失败的触发原因"""

    REJECTED = 0  # 反对票达到门槛
    EXPIRED = 1  # 超过投票时限
    TIE_BREAK = 2  # 第三票为反对，平局判负
