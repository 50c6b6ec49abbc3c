from enum import IntEnum


class VoteDuration(IntEnum):
    """
    投票持续时间（以小时为单位）。
    """

    DEFAULT = 8
