from typing import Iterable, Optional

from YangGangCourt.dto.UserRecordDto import UserRecordDto
from YangGangCourt.share.Roster import Roster


class RecordFormatter:
    """
    将用户纪录格式化为群组消息。
    """

    NO_RECORD = "無紀錄"

    @staticmethod
    def format_user_record(record: Optional[UserRecordDto]) -> str:
        """
        例如：白爛 3 次且有一次待转换的醜一 -> '3 + 醜一'
        """
        if not record:
            return RecordFormatter.NO_RECORD
        text = str(record.bailan_count or 0)
        if (record.warning_count or 0) > 0:
            text += " + 醜一"
        return text

    @staticmethod
    def format_single(display_name: str, record: UserRecordDto) -> str:
        return f"{display_name} 的紀錄:\n{RecordFormatter.format_user_record(record)}"

    @staticmethod
    def format_all(records: Iterable[UserRecordDto], roster: Roster) -> str:
        lines = [
            f"{roster.nickname_of(record.user_id)} {RecordFormatter.format_user_record(record)}"
            for record in records
        ]
        return "\n".join(lines)
