import asyncio
import logging

from discord.ext import commands

from YangGangCourt.cogs.Voting.VoteManager import VoteManager
from YangGangCourt.share.CourtBot import CourtBot
from YangGangCourt.share.DiscordUtils import DiscordUtils
from YangGangCourt.share.enums.VoteKind import VoteKind

logger = logging.getLogger(__name__)


class Voting(commands.Cog):
    """
    处理所有与提名投票相关的命令。
    """

    def __init__(self, bot: CourtBot, manager: VoteManager):
        self.bot = bot
        self.manager = manager
        # 投票管理器要求逐条处理消息，命令和回复监听器共用这把锁
        self.lock = asyncio.Lock()

    async def cog_command_error(self, ctx: commands.Context, error: commands.CommandError):
        """
        这个 Cog 的局部错误处理器。
        """
        original_error = getattr(error, "original", error)
        logger.error(f"在 Voting Cog 中发生未处理的错误: {original_error}", exc_info=error)
        await ctx.send("發生未知錯誤，請聯絡管理員")

    async def _new_vote(self, ctx: commands.Context, kind: VoteKind):
        incoming = await DiscordUtils.to_incoming_message(ctx.message)
        async with self.lock:
            await self.manager.handle_new_vote(incoming, kind)

    @commands.command(name="vote", help="投票是否白爛")
    async def vote(self, ctx: commands.Context):
        await self._new_vote(ctx, VoteKind.BAILAN)

    @commands.command(name="warn", help="投票是否醜一")
    async def warn(self, ctx: commands.Context):
        await self._new_vote(ctx, VoteKind.WARNING)

    @commands.command(name="pardon", help="投票是否赦免")
    async def pardon(self, ctx: commands.Context):
        await self._new_vote(ctx, VoteKind.PARDON)

    @commands.command(name="agree", help="同意目前投票")
    async def agree(self, ctx: commands.Context):
        incoming = await DiscordUtils.to_incoming_message(ctx.message)
        async with self.lock:
            await self.manager.cast_ballot(incoming, True)

    @commands.command(name="reject", help="反對目前投票")
    async def reject(self, ctx: commands.Context):
        incoming = await DiscordUtils.to_incoming_message(ctx.message)
        async with self.lock:
            await self.manager.cast_ballot(incoming, False)

    @commands.command(name="status", help="顯示目前投票狀態")
    async def status(self, ctx: commands.Context):
        incoming = await DiscordUtils.to_incoming_message(ctx.message)
        async with self.lock:
            await self.manager.get_status(incoming)
