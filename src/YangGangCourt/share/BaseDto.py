from pydantic import BaseModel, ConfigDict


class BaseDto(BaseModel):
    """
    所有 DTO 的基类，允许直接从 ORM 对象校验。
    """

    model_config = ConfigDict(from_attributes=True)
