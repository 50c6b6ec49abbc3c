import logging
from typing import Dict, Optional

from YangGangCourt.share.StringUtils import StringUtils

logger = logging.getLogger(__name__)


class Roster:
    """
    固定的群组名单：用户名到显示昵称的映射。
    名单成员资格是成为投票对象的唯一授权依据。
    """

    UNKNOWN_USER = "Unknown User"

    def __init__(self, nicknames: Dict[str, str]):
        self._nicknames = {
            StringUtils.normalize_username(username): nickname
            for username, nickname in nicknames.items()
        }
        logger.debug(f"名单已加载，共 {len(self._nicknames)} 位成员。")

    def __len__(self) -> int:
        return len(self._nicknames)

    def __contains__(self, username: object) -> bool:
        return isinstance(username, str) and self.contains(username)

    def contains(self, username: Optional[str]) -> bool:
        if not username:
            return False
        return StringUtils.normalize_username(username) in self._nicknames

    def nickname_of(self, username: Optional[str]) -> str:
        """
        返回用户的显示昵称。不在名单内时返回带 '@' 的用户名。
        """
        if not username:
            return self.UNKNOWN_USER
        normalized = StringUtils.normalize_username(username)
        return self._nicknames.get(normalized, normalized)
