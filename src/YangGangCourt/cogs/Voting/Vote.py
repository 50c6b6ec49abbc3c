from datetime import datetime
from typing import Callable, Dict, Hashable, Optional

from YangGangCourt.share.enums.VoteDuration import VoteDuration
from YangGangCourt.share.enums.VoteKind import VoteKind
from YangGangCourt.share.exceptions.VoteExpiredError import VoteExpiredError
from YangGangCourt.share.TimeUtils import TimeUtils


class Vote:
    """
    一次进行中的提名投票。

    名单固定为 3 人：2 票同意即通过，2 票反对或超时即失败。
    每位投票者只保留一张选票，重复投票会覆盖之前的选择。
    """

    PASS_THRESHOLD = 2
    FAIL_THRESHOLD = 2
    ROSTER_SIZE = 3

    def __init__(
        self,
        kind: VoteKind,
        target_user: str,
        initiator: Hashable,
        clock: Callable[[], datetime] = TimeUtils.utcnow,
        duration_hours: int = VoteDuration.DEFAULT,
    ):
        self._kind = kind
        self._target_user = target_user
        self._initiator = initiator
        self._clock = clock
        self._duration_hours = duration_hours
        self._start_time = clock()
        self.ballots: Dict[Hashable, bool] = {}
        self._chat_id: Optional[int] = None

    @property
    def chat_id(self) -> Optional[int]:
        return self._chat_id

    @chat_id.setter
    def chat_id(self, value: int):
        if self._chat_id is not None:
            raise RuntimeError("投票所在频道只能设置一次。")
        self._chat_id = value

    @property
    def kind(self) -> VoteKind:
        return self._kind

    @property
    def target_user(self) -> str:
        return self._target_user

    @property
    def initiator(self) -> Hashable:
        return self._initiator

    @property
    def start_time(self) -> datetime:
        return self._start_time

    def cast(self, voter_id: Hashable, agree: bool):
        """
        记录或覆盖投票者的选票。

        Raises:
            VoteExpiredError: 投票已超过时限。
        """
        if self.is_expired():
            raise VoteExpiredError()
        self.ballots[voter_id] = agree

    def agree_count(self) -> int:
        return sum(1 for agree in self.ballots.values() if agree)

    def reject_count(self) -> int:
        return sum(1 for agree in self.ballots.values() if not agree)

    def _elapsed_hours(self) -> float:
        return TimeUtils.hours_between(self._start_time, self._clock())

    def is_expired(self) -> bool:
        return self._elapsed_hours() >= self._duration_hours

    def should_pass(self) -> bool:
        return self.agree_count() >= self.PASS_THRESHOLD

    def should_fail(self) -> bool:
        return self.reject_count() >= self.FAIL_THRESHOLD or self.is_expired()

    def is_complete(self) -> bool:
        """全部名单成员都已投票。"""
        return len(self.ballots) == self.ROSTER_SIZE

    def time_remaining(self) -> float:
        """剩余小时数，最小为 0。"""
        return max(0.0, self._duration_hours - self._elapsed_hours())
