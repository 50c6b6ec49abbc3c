from typing import Optional

from pydantic import Field

from YangGangCourt.share.BaseDto import BaseDto


class IncomingMessageDto(BaseDto):
    """
    与传输层无关的入站消息。
    投票引擎只依赖这些字段，由各平台的适配层从原始消息转换而来。
    """

    chat_id: int = Field(..., description="消息所在频道的ID")
    message_id: int = Field(..., description="消息ID，用于删除命令消息")
    author_id: int = Field(..., description="发送者ID，作为投票者标识")
    author_name: str = Field(..., description="发送者用户名")
    text: str = Field(default="", description="消息文本")
    reply_to_author_name: Optional[str] = Field(
        default=None, description="被回复消息的作者用户名，非回复时为空"
    )
