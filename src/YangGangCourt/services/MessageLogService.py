import logging

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from YangGangCourt.models.MessageLog import MessageLog

logger = logging.getLogger(__name__)


class MessageLogService:
    """
    提供处理消息日志表 (`MessageLog`) 相关数据库操作的服务。
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save_message(self, chat_id: int, user_id: str, message_text: str) -> None:
        self.session.add(MessageLog(chat_id=chat_id, user_id=user_id, message_text=message_text))
        await self.session.flush()

    async def get_user_message_count(self, user_id: str) -> int:
        """
        获取用户的累计发言数
        """
        result = await self.session.exec(
            select(func.count(MessageLog.id)).where(MessageLog.user_id == user_id)  # type: ignore
        )
        count = result.one_or_none()
        return count if count is not None else 0
