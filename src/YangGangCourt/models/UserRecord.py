from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, text

from YangGangCourt.models.BaseModel import BaseModel
from YangGangCourt.share.TimeUtils import TimeUtils


class UserRecord(BaseModel, table=True):
    """
    用户白爛纪录表模型
    """

    __tablename__ = "user_record"  # type: ignore

    user_id: str = Field(unique=True, index=True, description="名单中的用户名，如 @amao62626")
    bailan_count: int = Field(default=0, description="累计白爛次数")
    warning_count: int = Field(default=0, description="未转换的醜一次数: 0 或 1")
    created_at: datetime = Field(
        default_factory=TimeUtils.utcnow,
        sa_type=DateTime(timezone=True),  # type: ignore
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
        description="创建时间",
    )
    updated_at: datetime = Field(
        default_factory=TimeUtils.utcnow,
        sa_type=DateTime(timezone=True),  # type: ignore
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
        description="最后更新时间",
    )
