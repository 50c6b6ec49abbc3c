from typing import Optional, Protocol

from YangGangCourt.dto.UserRecordDto import UserRecordDto
from YangGangCourt.share.enums.VoteKind import VoteKind


class RecordStore(Protocol):
    """
    投票引擎读写用户纪录所依赖的最小接口。
    醜一转换白爛的规则由实现方负责。
    """

    async def get_user_record(self, user_id: str) -> Optional[UserRecordDto]:
        ...

    async def save_user_record(self, user_id: str, kind: VoteKind) -> None:
        ...
