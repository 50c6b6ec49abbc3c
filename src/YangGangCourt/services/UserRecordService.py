import logging
from typing import List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from YangGangCourt.dto.UserRecordDto import UserRecordDto
from YangGangCourt.models.UserRecord import UserRecord
from YangGangCourt.share.enums.VoteKind import VoteKind
from YangGangCourt.share.TimeUtils import TimeUtils

logger = logging.getLogger(__name__)


class UserRecordService:
    """
    提供处理用户白爛纪录表 (`UserRecord`) 相关数据库操作。
    醜一累计两次转换为一次白爛的规则在这里实现。
    """

    WARNINGS_PER_BAILAN = 2

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_orm(self, user_id: str) -> Optional[UserRecord]:
        statement = select(UserRecord).where(UserRecord.user_id == user_id)
        result = await self.session.exec(statement)
        return result.one_or_none()

    async def get_user_record(self, user_id: str) -> Optional[UserRecordDto]:
        """
        获取用户的纪录，不存在时返回 None。
        """
        record = await self._get_orm(user_id)
        if not record:
            return None
        return UserRecordDto.model_validate(record)

    async def save_user_record(self, user_id: str, kind: VoteKind) -> UserRecordDto:
        """
        按投票种类更新用户纪录。如果纪录不存在，则会创建一条。

        Args:
            user_id: 名单中的用户名。
            kind: 通过的投票种类。

        Returns:
            更新后的纪录。
        """
        record = await self._get_orm(user_id)
        if record is None:
            record = UserRecord(user_id=user_id, bailan_count=0, warning_count=0)

        if kind == VoteKind.BAILAN:
            record.bailan_count += 1
        elif kind == VoteKind.WARNING:
            new_warning_count = record.warning_count + 1
            if new_warning_count >= self.WARNINGS_PER_BAILAN:
                logger.info(f"用户 {user_id} 醜二，转换为白爛一次。")
                record.warning_count = 0
                record.bailan_count += 1
            else:
                record.warning_count = new_warning_count
        elif kind == VoteKind.PARDON:
            # 赦免不会让白爛次数变为负数
            record.bailan_count = max(0, record.bailan_count - 1)
        else:
            raise ValueError(f"未知的投票种类: {kind}")

        record.updated_at = TimeUtils.utcnow()
        self.session.add(record)
        await self.session.flush()
        return UserRecordDto.model_validate(record)

    async def get_all_user_records(self) -> List[UserRecordDto]:
        """
        获取所有纪录，按最后更新时间倒序。
        """
        statement = select(UserRecord).order_by(col(UserRecord.updated_at).desc())
        result = await self.session.exec(statement)
        return [UserRecordDto.model_validate(record) for record in result.all()]
