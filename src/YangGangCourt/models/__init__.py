from .BaseModel import BaseModel
from .MessageLog import MessageLog
from .UserRecord import UserRecord

__all__ = [
    "BaseModel",
    "MessageLog",
    "UserRecord",
]
