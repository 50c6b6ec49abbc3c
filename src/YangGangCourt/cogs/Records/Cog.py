import logging
from typing import Optional

from discord.ext import commands

from YangGangCourt.cogs.Records.RecordFormatter import RecordFormatter
from YangGangCourt.cogs.Voting.DatabaseRecordStore import DatabaseRecordStore
from YangGangCourt.share.CourtBot import CourtBot
from YangGangCourt.share.DiscordUtils import DiscordUtils
from YangGangCourt.share.StringUtils import StringUtils

logger = logging.getLogger(__name__)


class Records(commands.Cog):
    """
    纪录查询与说明类命令。
    """

    def __init__(self, bot: CourtBot, record_store: DatabaseRecordStore):
        self.bot = bot
        self.record_store = record_store

    @commands.command(name="help", help="顯示說明文字")
    async def show_help(self, ctx: commands.Context):
        await ctx.send(self.bot.config.get("help_message", ""))

    @commands.command(name="rules", help="顯示群組規則")
    async def show_rules(self, ctx: commands.Context):
        await ctx.send(self.bot.config.get("rules_message", ""))

    @commands.command(name="records", help="顯示白爛紀錄")
    async def records(self, ctx: commands.Context, username: Optional[str] = None):
        """
        指定用户时显示该用户的纪录，否则显示所有人的纪录。
        """
        if username:
            username = DiscordUtils.replace_mentions(username, ctx.message.mentions)
        try:
            await ctx.send(await self.build_records_reply(username))
        except Exception as e:
            logger.error(f"查询纪录时出错: {e}", exc_info=True)
            await ctx.send("查詢紀錄時發生錯誤")

    async def build_records_reply(self, username: Optional[str]) -> str:
        roster = self.bot.roster
        if username:
            if not roster.contains(username):
                return "無此用戶"
            user_id = StringUtils.normalize_username(username)
            display_name = roster.nickname_of(user_id)
            record = await self.record_store.get_user_record(user_id)
            if record is None:
                return f"找不到用戶{display_name}的紀錄"
            return RecordFormatter.format_single(display_name, record)

        all_records = await self.record_store.get_all_user_records()
        if not all_records:
            return "目前沒有任何紀錄"
        return RecordFormatter.format_all(all_records, roster)
