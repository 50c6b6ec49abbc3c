from typing import Any, Protocol


class Notifier(Protocol):
    """
    投票引擎向群组发消息所依赖的最小接口。
    """

    async def send(self, chat_id: int, text: str) -> Any:
        ...

    async def delete(self, chat_id: int, message_id: int) -> None:
        """删除消息。权限不足等错误由实现方记录后吞掉，不会向上抛出。"""
        ...
