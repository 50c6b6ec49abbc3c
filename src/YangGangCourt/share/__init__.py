from .BaseDto import BaseDto
from .CourtBot import CourtBot
from .DatabaseHandler import DatabaseHandler
from .LoggingConfigurator import LoggingConfigurator
from .Roster import Roster
from .StringUtils import StringUtils
from .TimeUtils import TimeUtils
from .UnitOfWork import UnitOfWork

__all__ = [
    "BaseDto",
    "CourtBot",
    "DatabaseHandler",
    "LoggingConfigurator",
    "Roster",
    "StringUtils",
    "TimeUtils",
    "UnitOfWork",
]
