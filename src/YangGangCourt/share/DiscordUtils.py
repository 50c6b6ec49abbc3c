import logging
from typing import Optional, Sequence

import discord
import regex as re

from YangGangCourt.dto.IncomingMessageDto import IncomingMessageDto

logger = logging.getLogger(__name__)

MENTION_PATTERN = re.compile(r"<@!?(\d+)>")


class DiscordUtils:
    """
    提供 Discord API 相关的静态工具方法。
    """

    @staticmethod
    def replace_mentions(text: str, mentions: Sequence[discord.abc.User]) -> str:
        """
        将文本中的提及标记替换为 '@用户名'，以便和名单比对。<br>
        例如：'!vote <@123>' -> '!vote @amao62626'

        Args:
            text: 原始消息文本。
            mentions: 消息中被提及的用户。

        Returns:
            替换后的文本；找不到对应用户的标记保持原样。
        """
        names = {user.id: user.name for user in mentions}

        def _replace(match) -> str:
            name = names.get(int(match.group(1)))
            return f"@{name}" if name else match.group(0)

        return MENTION_PATTERN.sub(_replace, text)

    @staticmethod
    async def resolve_reply_author(message: discord.Message) -> Optional[str]:
        """
        获取被回复消息的作者用户名，优先使用缓存。

        Args:
            message: 可能是回复的消息。

        Returns:
            被回复者的用户名；消息不是回复或原消息已无法获取时返回 None。
        """
        reference = message.reference
        if reference is None or reference.message_id is None:
            return None

        resolved = reference.resolved
        if isinstance(resolved, discord.Message):
            return resolved.author.name

        try:
            replied = await message.channel.fetch_message(reference.message_id)
        except (discord.NotFound, discord.Forbidden) as e:
            logger.debug(f"无法获取被回复的消息 {reference.message_id}: {e}")
            return None
        return replied.author.name

    @staticmethod
    async def to_incoming_message(message: discord.Message) -> IncomingMessageDto:
        """
        将 Discord 消息转换为投票引擎使用的 IncomingMessageDto。
        """
        return IncomingMessageDto(
            chat_id=message.channel.id,
            message_id=message.id,
            author_id=message.author.id,
            author_name=message.author.name,
            text=DiscordUtils.replace_mentions(message.content, message.mentions),
            reply_to_author_name=await DiscordUtils.resolve_reply_author(message),
        )
