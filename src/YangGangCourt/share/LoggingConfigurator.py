import logging
import os


class LoggingConfigurator:
    """
    集中配置项目日志记录器的类。
    """

    def __init__(self, rootLogLevel: str = "INFO"):
        """
        初始化配置器。
        :param rootLogLevel: 从 .env 文件读取的根日志级别字符串。
        """
        self.logLevel = getattr(logging, rootLogLevel.upper(), logging.INFO)
        self.formatter = logging.Formatter("%(asctime)s:%(levelname)s:%(name)s: %(message)s")
        self.streamHandler = logging.StreamHandler()
        self.streamHandler.setFormatter(self.formatter)

    def configure(self):
        """
        应用所有日志配置。
        """
        self._configurePackageLogger()
        self._configureSqlAlchemyLogger()
        self._configureDiscordLogger()
        logging.getLogger("YangGangCourt").info("日志记录器配置完成。")

    def _configurePackageLogger(self):
        """配置项目包级别的 logger，所有模块的 logger 都挂在它下面。"""
        logger = logging.getLogger("YangGangCourt")
        logger.setLevel(self.logLevel)
        if not logger.handlers:
            logger.addHandler(self.streamHandler)
        logger.propagate = False

    def _configureSqlAlchemyLogger(self):
        """SQLAlchemy 的日志级别由 SQLALCHEMY_LOG_LEVEL 决定，默认为 WARNING。"""
        log_level_str = os.getenv("SQLALCHEMY_LOG_LEVEL", "WARNING").upper()
        log_level = getattr(logging, log_level_str, logging.WARNING)

        sql_logger = logging.getLogger("sqlalchemy.engine")
        sql_logger.setLevel(log_level)
        if not sql_logger.handlers:
            sql_logger.addHandler(self.streamHandler)
        sql_logger.propagate = False

    def _configureDiscordLogger(self):
        """捕获 discord.py 的内部日志，网关心跳之类的噪音只保留 INFO 以上。"""
        discord_logger = logging.getLogger("discord")
        discord_logger.setLevel(logging.INFO)
        if not discord_logger.handlers:
            discord_logger.addHandler(self.streamHandler)
        discord_logger.propagate = False
