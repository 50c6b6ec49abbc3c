import logging
from typing import Optional

import discord

from YangGangCourt.share.CourtBot import CourtBot

logger = logging.getLogger(__name__)


class DiscordNotifier:
    """
    通过 Discord 频道发送和删除消息的 Notifier 实现。
    """

    def __init__(self, bot: CourtBot):
        self.bot = bot

    async def _get_channel(self, chat_id: int) -> Optional[discord.abc.Messageable]:
        channel = self.bot.get_channel(chat_id)
        if channel is None:
            try:
                channel = await self.bot.fetch_channel(chat_id)
            except (discord.NotFound, discord.Forbidden):
                logger.warning(f"无法获取ID为 {chat_id} 的频道。")
                return None
        if not isinstance(channel, discord.abc.Messageable):
            logger.warning(f"ID 为 {chat_id} 的频道无法发送消息。")
            return None
        return channel

    async def send(self, chat_id: int, text: str) -> Optional[discord.Message]:
        channel = await self._get_channel(chat_id)
        if channel is None:
            return None
        return await channel.send(text)

    async def delete(self, chat_id: int, message_id: int) -> None:
        channel = await self._get_channel(chat_id)
        if channel is None or not hasattr(channel, "get_partial_message"):
            return
        try:
            await channel.get_partial_message(message_id).delete()  # type: ignore[attr-defined]
        except discord.Forbidden:
            logger.warning(f"没有权限删除频道 {chat_id} 中的消息 {message_id}。")
        except discord.HTTPException as e:
            logger.warning(f"删除频道 {chat_id} 中的消息 {message_id} 失败: {e}")
