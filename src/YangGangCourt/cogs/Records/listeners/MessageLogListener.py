import logging

import discord
from discord.ext import commands

from YangGangCourt.share.CourtBot import CourtBot
from YangGangCourt.share.StringUtils import StringUtils
from YangGangCourt.share.UnitOfWork import UnitOfWork

logger = logging.getLogger(__name__)


class MessageLogListener(commands.Cog):
    """
    将群组中的普通发言写入消息日志。
    """

    def __init__(self, bot: CourtBot):
        self.bot = bot

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        content = message.content.strip()
        if message.author.bot or not content:
            return
        if content.startswith(self.bot.command_prefix):  # type: ignore[arg-type]
            return

        # 日志写入失败不影响其他功能
        try:
            async with UnitOfWork(self.bot.db_handler) as uow:
                await uow.message_logs.save_message(
                    chat_id=message.channel.id,
                    user_id=StringUtils.normalize_username(message.author.name),
                    message_text=content,
                )
                await uow.commit()
        except Exception as e:
            logger.error(f"保存消息 {message.id} 到日志时出错: {e}", exc_info=True)
