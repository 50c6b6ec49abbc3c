import logging

import discord
from discord.ext import commands

from YangGangCourt.cogs.Voting.Cog import Voting
from YangGangCourt.cogs.Voting.VoteManager import VoteManager
from YangGangCourt.share.CourtBot import CourtBot
from YangGangCourt.share.DiscordUtils import DiscordUtils

logger = logging.getLogger(__name__)


class ReplyNominationListener(commands.Cog):
    """
    监听回复消息，文本含有触发词时以被回复者为对象发起投票。
    """

    def __init__(self, bot: CourtBot, voting_cog: Voting):
        self.bot = bot
        self.voting_cog = voting_cog

    def _is_candidate(self, message: discord.Message) -> bool:
        """只处理真人发出的、非命令的回复消息。"""
        if message.author.bot or message.reference is None:
            return False
        content = message.content.strip()
        if not content or content.startswith(self.bot.command_prefix):  # type: ignore[arg-type]
            return False
        return VoteManager.match_reply_trigger(content) is not None

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        if not self._is_candidate(message):
            return

        try:
            incoming = await DiscordUtils.to_incoming_message(message)
            async with self.voting_cog.lock:
                await self.voting_cog.manager.handle_reply_nomination(incoming)
        except Exception as e:
            logger.error(f"处理回复提名 (消息ID: {message.id}) 时出错: {e}", exc_info=True)
