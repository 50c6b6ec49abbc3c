from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from discord.ext import commands

from YangGangCourt.share.DatabaseHandler import DatabaseHandler
from YangGangCourt.share.Roster import Roster

if TYPE_CHECKING:
    from YangGangCourt.cogs.Voting.VoteManager import VoteManager


class CourtBot(commands.Bot):
    """
    自定义 Bot 基类。
    为项目中挂在 bot 上的共享对象（数据库句柄、名单、投票管理器）
    提供集中的定义，以便在整个项目中获得准确的类型提示。
    """

    db_handler: DatabaseHandler
    config: Dict[str, Any]
    roster: Roster
    vote_manager: "VoteManager"
