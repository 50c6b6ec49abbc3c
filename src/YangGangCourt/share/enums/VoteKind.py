from enum import Enum


class VoteKind(str, Enum):
    """提名投票的种类，值与数据库及命令中使用的字符串一致。"""

    BAILAN = "bailan"  # 白爛
    WARNING = "warning"  # 醜一
    PARDON = "pardon"  # 赦免
