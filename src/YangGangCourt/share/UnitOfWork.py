from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

if TYPE_CHECKING:
    from YangGangCourt.services.MessageLogService import MessageLogService
    from YangGangCourt.services.UserRecordService import UserRecordService
    from YangGangCourt.share.DatabaseHandler import DatabaseHandler


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    实现工作单元模式的异步上下文管理器。

    它封装了数据库会话和事务管理，并提供对各个服务的访问，
    保证一次业务操作中的所有数据库更改要么一起提交，要么一起回滚。

    用法:<br>
    async with UnitOfWork(db_handler) as uow:<br>
        await uow.user_records.save_user_record(...)<br>
        await uow.commit()<br>
    """

    def __init__(self, db_handler: Optional["DatabaseHandler"]):
        self._db_handler = db_handler
        self._session: Optional[AsyncSession] = None
        self._committed = False

    async def __aenter__(self) -> "UnitOfWork":
        if self._db_handler is None:
            raise RuntimeError(
                "UnitOfWork 在没有有效 DatabaseHandler 的情况下被使用。"
                "请确保 bot.db_handler 已在 setup_hook 中正确初始化。"
            )
        self._session = self._db_handler.get_session()
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, traceback):
        """
        退出时根据是否发生异常提交或回滚，并关闭会话。
        """
        if not self._session:
            return

        try:
            if exc_type:
                if not self._committed:
                    logger.warning(
                        f"UnitOfWork 检测到异常，正在回滚事务: {exc_type.__name__}: {exc_val}"
                    )
                    await self.rollback()
            else:
                if not self._committed:
                    await self.commit()
        finally:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("会话尚未初始化。请在 'async with' 块中使用 UnitOfWork。")
        return self._session

    async def commit(self):
        await self.session.commit()
        self._committed = True

    async def rollback(self):
        await self.session.rollback()
        self._committed = True

    # --- 服务访问属性 ---

    @property
    def user_records(self) -> "UserRecordService":
        """获取用户白烂纪录服务实例。"""
        if not hasattr(self, "_user_record_service"):
            from YangGangCourt.services.UserRecordService import UserRecordService

            self._user_record_service = UserRecordService(self.session)
        return self._user_record_service

    @property
    def message_logs(self) -> "MessageLogService":
        """获取消息日志服务实例。"""
        if not hasattr(self, "_message_log_service"):
            from YangGangCourt.services.MessageLogService import MessageLogService

            self._message_log_service = MessageLogService(self.session)
        return self._message_log_service
