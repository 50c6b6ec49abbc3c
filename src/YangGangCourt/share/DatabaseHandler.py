import logging
import os
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

load_dotenv()
logger = logging.getLogger(__name__)


class DatabaseHandler:
    """
    数据库处理程序
    负责数据库引擎的创建、建表和会话管理。
    进程内通过 initialize_db_handler / get_db_handler 当作单例使用，
    测试可以直接实例化并传入独立的数据库文件。
    """

    def __init__(self, db_name: Optional[str] = None):
        self._db_name = db_name
        self._async_engine: Optional[AsyncEngine] = None
        self._initialized = False

    def initialize(self):
        """
        设置数据库引擎，只应调用一次。
        """
        if self._initialized:
            logger.warning("DatabaseHandler 已经初始化，跳过重复初始化。")
            return

        db_name = self._db_name or os.getenv("DATABASE_NAME", "data/database.db")
        db_dir = os.path.dirname(db_name)
        if db_dir and not os.path.exists(db_dir):
            logger.info(f"数据库目录 '{db_dir}' 不存在，正在创建...")
            os.makedirs(db_dir)

        sqlite_url = f"sqlite+aiosqlite:///{db_name}"
        sql_echo = os.getenv("SQL_ECHO", "False").lower() in ("true", "1", "t")

        self._async_engine = create_async_engine(
            sqlite_url, echo=sql_echo, connect_args={"timeout": 15}
        )

        @event.listens_for(self._async_engine.sync_engine, "connect")
        def _enable_wal(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute("PRAGMA journal_mode=WAL;")
            finally:
                cursor.close()

        self._initialized = True
        logger.info(f"DatabaseHandler 初始化完成，数据库文件: {db_name}")

    async def init_db(self):
        """
        创建所有已注册的表。
        """
        if not self._initialized or not self._async_engine:
            raise RuntimeError("DatabaseHandler 尚未初始化。请先调用 initialize()。")

        import YangGangCourt.models  # noqa: F401

        async with self._async_engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    def get_session(self) -> AsyncSession:
        if not self._initialized or not self._async_engine:
            raise RuntimeError("DatabaseHandler 尚未初始化。请先调用 initialize()。")
        return AsyncSession(self._async_engine, expire_on_commit=False)

    async def close(self):
        """释放连接池。"""
        if self._async_engine:
            await self._async_engine.dispose()
            logger.info("数据库连接已关闭。")


# --- 单例管理 ---

_db_handler_instance: Optional[DatabaseHandler] = None


def initialize_db_handler() -> DatabaseHandler:
    """
    创建并初始化 DatabaseHandler 的单例实例。
    """
    global _db_handler_instance
    if _db_handler_instance is None:
        _db_handler_instance = DatabaseHandler()
        _db_handler_instance.initialize()
    return _db_handler_instance


def get_db_handler() -> DatabaseHandler:
    """
    获取 DatabaseHandler 的单例实例，尚未初始化时抛出 RuntimeError。
    """
    if _db_handler_instance is None:
        raise RuntimeError(
            "DatabaseHandler 实例尚未创建。请确保在程序启动时调用了 initialize_db_handler。"
        )
    return _db_handler_instance
