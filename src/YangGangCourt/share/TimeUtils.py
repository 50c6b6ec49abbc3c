from datetime import datetime
from zoneinfo import ZoneInfo


class TimeUtils:
    """
    时间相关的工具方法。投票的计时统一使用带时区的 UTC 时间。
    """

    @staticmethod
    def utcnow() -> datetime:
        """返回当前带时区信息的 UTC 时间。"""
        return datetime.now(ZoneInfo("UTC"))

    @staticmethod
    def hours_between(start: datetime, end: datetime) -> float:
        """
        计算两个时间点之间相隔的小时数。

        Args:
            start: 起始时间。
            end: 结束时间。

        Returns:
            相隔的小时数，end 早于 start 时为负数。
        """
        return (end - start).total_seconds() / 3600
