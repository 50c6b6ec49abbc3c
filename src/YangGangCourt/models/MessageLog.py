from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, text

from YangGangCourt.models.BaseModel import BaseModel
from YangGangCourt.share.TimeUtils import TimeUtils


class MessageLog(BaseModel, table=True):
    """
    群组消息日志表模型
    """

    __tablename__ = "message_log"  # type: ignore

    chat_id: int = Field(index=True, description="消息所在频道的ID")
    user_id: str = Field(index=True, description="发言用户的用户名")
    message_text: str = Field(description="消息内容")
    created_at: datetime = Field(
        default_factory=TimeUtils.utcnow,
        sa_type=DateTime(timezone=True),  # type: ignore
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
        description="记录时间",
    )
