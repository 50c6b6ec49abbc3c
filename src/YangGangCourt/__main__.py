import asyncio
import json
import logging
import os
import sys

import aiorun
import discord
from dotenv import load_dotenv

from YangGangCourt.share.CourtBot import CourtBot
from YangGangCourt.share.DatabaseHandler import get_db_handler, initialize_db_handler
from YangGangCourt.share.LoggingConfigurator import LoggingConfigurator
from YangGangCourt.share.Roster import Roster

# --- .env 和 日志配置 ---
load_dotenv()
log_level = os.getenv("LOG_LEVEL", "INFO")
configurator = LoggingConfigurator(rootLogLevel=log_level)
configurator.configure()

logger = logging.getLogger("YangGangCourt")
# --- 日志配置结束 ---


if sys.platform != "win32":
    try:
        import uvloop

        uvloop.install()
        logger.info("已成功启用 uvloop 作为 asyncio 事件循环")
    except ImportError:
        logger.warning("尝试启用 uvloop 失败，将使用默认事件循环")


bot = None
db_handler = None


async def shutdown(loop):
    """专门用于清理资源的关闭回调函数"""
    global bot, db_handler
    logger.info("收到关闭信号，正在关闭 Bot 资源...")
    if bot:
        await bot.close()

    if db_handler:
        await db_handler.close()

    logger.info("所有资源已清理，程序退出。")


def load_config(path: str = "config.json") -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


async def main_async():
    """主函数，设置并运行 Bot"""
    global bot, db_handler
    intents = discord.Intents.default()
    intents.message_content = True

    config = load_config(os.getenv("CONFIG_PATH", "config.json"))

    proxy = config.get("proxy") or None
    bot = CourtBot(
        command_prefix=os.getenv("COMMAND_PREFIX", "!"),
        intents=intents,
        proxy=proxy,
        help_command=None,
    )
    bot.config = config
    bot.roster = Roster(config.get("roster", {}))

    @bot.event
    async def setup_hook():
        global db_handler
        assert bot is not None

        initialize_db_handler()
        db_handler = get_db_handler()
        bot.db_handler = db_handler

        logger.info("正在检查数据库表...")
        try:
            await bot.db_handler.init_db()
            logger.info("数据库表处理成功。")
        except Exception as e:
            logger.exception(f"数据库表处理失败: {e}")
            raise

        logger.info("开始加载所有 Cogs 模块...")
        from YangGangCourt.cogs import Records, Voting

        module_setups = [
            Voting.setup(bot),
            Records.setup(bot),
        ]
        try:
            await asyncio.gather(*module_setups)
            logger.info("所有 Cogs 模块加载完成。")
        except Exception as e:
            logger.exception(f"加载 Cogs 模块时发生错误: {e}")

    @bot.event
    async def on_ready():
        assert bot is not None
        logger.info(f"以 {bot.user} 的身份登录，名单共 {len(bot.roster)} 人")
        logger.info("------ Bot 已准备就绪 ------")

    token = os.getenv("DISCORD_TOKEN")
    if not token or token == "YOUR_BOT_TOKEN_HERE":
        logger.error("错误: 未找到或未配置 DISCORD_TOKEN。")
        return

    await bot.start(token)


def main():
    """主入口函数"""
    aiorun.run(main_async(), shutdown_callback=shutdown, stop_on_unhandled_errors=True)


if __name__ == "__main__":
    main()
