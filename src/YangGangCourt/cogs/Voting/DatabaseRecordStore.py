import logging
from typing import List, Optional

from YangGangCourt.dto.UserRecordDto import UserRecordDto
from YangGangCourt.share.DatabaseHandler import DatabaseHandler
from YangGangCourt.share.enums.VoteKind import VoteKind
from YangGangCourt.share.UnitOfWork import UnitOfWork

logger = logging.getLogger(__name__)


class DatabaseRecordStore:
    """
    基于数据库的纪录存储，每次调用使用独立的 UnitOfWork。
    """

    def __init__(self, db_handler: DatabaseHandler):
        self.db_handler = db_handler

    async def get_user_record(self, user_id: str) -> Optional[UserRecordDto]:
        async with UnitOfWork(self.db_handler) as uow:
            return await uow.user_records.get_user_record(user_id)

    async def save_user_record(self, user_id: str, kind: VoteKind) -> None:
        try:
            async with UnitOfWork(self.db_handler) as uow:
                record = await uow.user_records.save_user_record(user_id, kind)
                await uow.commit()
        except Exception:
            logger.exception(f"保存用户 {user_id} 的纪录 ({kind.value}) 时出错")
            raise
        logger.info(
            f"用户 {user_id} 纪录已更新: 白爛 {record.bailan_count}, 醜一 {record.warning_count}"
        )

    async def get_all_user_records(self) -> List[UserRecordDto]:
        async with UnitOfWork(self.db_handler) as uow:
            return await uow.user_records.get_all_user_records()
