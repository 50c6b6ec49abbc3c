from datetime import datetime
from typing import Optional

from YangGangCourt.share.BaseDto import BaseDto


class UserRecordDto(BaseDto):
    """
    用户白爛纪录的数据传输对象。
    """

    user_id: str
    bailan_count: int = 0
    warning_count: int = 0
    updated_at: Optional[datetime] = None
