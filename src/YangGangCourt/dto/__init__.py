from .IncomingMessageDto import IncomingMessageDto
from .UserRecordDto import UserRecordDto

__all__ = [
    "IncomingMessageDto",
    "UserRecordDto",
]
