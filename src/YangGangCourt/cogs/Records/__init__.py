import asyncio
import logging

from YangGangCourt.cogs.Voting.DatabaseRecordStore import DatabaseRecordStore
from YangGangCourt.share.CourtBot import CourtBot

from .Cog import Records
from .listeners.MessageLogListener import MessageLogListener
from .RecordFormatter import RecordFormatter

__all__ = [
    "Records",
    "MessageLogListener",
    "RecordFormatter",
]

logger = logging.getLogger(__name__)


async def setup(bot: CourtBot):
    """
    加载纪录查询和消息日志相关的 Cogs。
    """
    cogs_to_load = [
        Records(bot, DatabaseRecordStore(bot.db_handler)),
        MessageLogListener(bot),
    ]

    await asyncio.gather(*[bot.add_cog(cog) for cog in cogs_to_load])
    logger.info(f"成功为 Records 模块加载了 {len(cogs_to_load)} 个 Cogs。")
