import asyncio
import logging

from YangGangCourt.share.CourtBot import CourtBot

from .Cog import Voting
from .DatabaseRecordStore import DatabaseRecordStore
from .DiscordNotifier import DiscordNotifier
from .listeners.ReplyNominationListener import ReplyNominationListener
from .Vote import Vote
from .VoteManager import VoteManager

__all__ = [
    "Voting",
    "DatabaseRecordStore",
    "DiscordNotifier",
    "ReplyNominationListener",
    "Vote",
    "VoteManager",
]

logger = logging.getLogger(__name__)


async def setup(bot: CourtBot):
    """
    组装投票管理器并加载所有与投票相关的 Cogs。
    """
    bot.vote_manager = VoteManager(
        notifier=DiscordNotifier(bot),
        record_store=DatabaseRecordStore(bot.db_handler),
        roster=bot.roster,
    )

    voting_cog = Voting(bot, bot.vote_manager)
    cogs_to_load = [
        voting_cog,
        ReplyNominationListener(bot, voting_cog),
    ]

    await asyncio.gather(*[bot.add_cog(cog) for cog in cogs_to_load])
    logger.info(f"成功为 Voting 模块加载了 {len(cogs_to_load)} 个 Cogs。")
