import logging
from datetime import datetime
from typing import Callable, Dict, Optional

from YangGangCourt.cogs.Voting.Notifier import Notifier
from YangGangCourt.cogs.Voting.RecordStore import RecordStore
from YangGangCourt.cogs.Voting.Vote import Vote
from YangGangCourt.cogs.Voting.VoteMessageBuilder import VoteMessageBuilder
from YangGangCourt.dto.IncomingMessageDto import IncomingMessageDto
from YangGangCourt.share.enums.FailReason import FailReason
from YangGangCourt.share.enums.VoteKind import VoteKind
from YangGangCourt.share.exceptions.VoteExpiredError import VoteExpiredError
from YangGangCourt.share.Roster import Roster
from YangGangCourt.share.StringUtils import StringUtils
from YangGangCourt.share.TimeUtils import TimeUtils

logger = logging.getLogger(__name__)


class VoteManager:
    """
    持有唯一一个进行中的投票，负责创建、投票、结算以及结算后的写入与公告。

    同一时间最多只有一个投票（不区分频道）。管理器本身不加锁，
    调用方必须保证消息是逐条串行交给它处理的。
    所有面向用户的失败（找不到用户、已有投票、没有投票、投票过期）都只回复消息，不抛出异常。
    """

    # 回复触发词（去除空白后做子串匹配），按顺序优先匹配
    REPLY_TRIGGERS: Dict[str, VoteKind] = {
        "白爛+1": VoteKind.BAILAN,
        "醜一": VoteKind.WARNING,
    }

    def __init__(
        self,
        notifier: Notifier,
        record_store: RecordStore,
        roster: Roster,
        clock: Callable[[], datetime] = TimeUtils.utcnow,
    ):
        self._notifier = notifier
        self._record_store = record_store
        self._roster = roster
        self._clock = clock
        self.active: Optional[Vote] = None

    # --- 内部辅助 ---

    async def _respond(self, message: IncomingMessageDto, text: str, delete_command: bool = False):
        """回复到消息所在频道，需要时删除触发的命令消息。"""
        await self._notifier.send(message.chat_id, text)
        if delete_command:
            await self._notifier.delete(message.chat_id, message.message_id)

    async def _clear_if_expired(self, message: IncomingMessageDto) -> bool:
        """
        如果当前投票已过期，清除它并发送过期通知。

        Returns:
            是否清除了过期投票。
        """
        if self.active is None or not self.active.is_expired():
            return False
        await self._expire(message)
        return True

    async def _expire(self, message: IncomingMessageDto):
        """清除当前投票并发送过期通知。"""
        if self.active is not None:
            logger.info(
                f"投票已过期，自动失效: {self.active.kind.value} -> {self.active.target_user}"
            )
        self.active = None
        await self._respond(message, VoteMessageBuilder.VOTE_EXPIRED)

    async def _check_valid(self, message: IncomingMessageDto) -> Optional[Vote]:
        """
        返回仍然有效的当前投票；没有投票或投票已过期时回复对应消息并返回 None。
        """
        if await self._clear_if_expired(message):
            return None
        if self.active is None:
            await self._respond(message, VoteMessageBuilder.NO_ACTIVE_VOTE)
            return None
        return self.active

    # --- 投票流程 ---

    async def initiate(
        self,
        message: IncomingMessageDto,
        target: Optional[str],
        kind: VoteKind,
        delete_command: bool = False,
    ):
        """
        发起一次新的提名投票，发起人自动投同意票。
        """
        if not target or not self._roster.contains(target):
            await self._respond(message, VoteMessageBuilder.user_not_found(target))
            return

        await self._clear_if_expired(message)
        if self.active is not None:
            await self._respond(message, VoteMessageBuilder.VOTE_IN_PROGRESS)
            return

        target = StringUtils.normalize_username(target)
        vote = Vote(kind, target, message.author_id, clock=self._clock)
        vote.chat_id = message.chat_id
        vote.cast(message.author_id, True)
        self.active = vote
        logger.info(
            f"用户 {message.author_name} 在频道 {message.chat_id} 发起投票: "
            f"{kind.value} -> {target}"
        )

        display_name = self._roster.nickname_of(target)
        await self._respond(
            message, VoteMessageBuilder.started(kind, display_name), delete_command=delete_command
        )

    async def handle_new_vote(self, message: IncomingMessageDto, kind: VoteKind):
        """
        处理 `!vote <username>` 形式的命令，参数中的第一个词作为投票对象。
        """
        _, args = StringUtils.split_command(message.text)
        target = args[0].strip() if args else None
        await self.initiate(message, target, kind, delete_command=True)

    async def cast_ballot(self, message: IncomingMessageDto, agree: bool):
        """
        为消息发送者投票，公布最新票数，并在满足条件时结算。
        """
        vote = await self._check_valid(message)
        if vote is None:
            return

        try:
            vote.cast(message.author_id, agree)
        except VoteExpiredError:
            # 检查之后恰好跨过时限
            await self._expire(message)
            return
        logger.info(
            f"用户 {message.author_name} 投票: {'同意' if agree else '反对'} "
            f"({vote.kind.value} -> {vote.target_user})"
        )

        display_name = self._roster.nickname_of(vote.target_user)
        await self._respond(
            message,
            VoteMessageBuilder.tally(
                vote.kind, display_name, vote.agree_count(), vote.reject_count()
            ),
        )

        if vote.should_pass():
            await self.resolve_pass()
        elif vote.should_fail():
            reason = FailReason.EXPIRED if vote.is_expired() else FailReason.REJECTED
            await self.resolve_fail(reason)
        elif vote.is_complete():
            # 三人都已投票却未达门槛时，由最后一票决定结果
            if agree:
                await self.resolve_pass()
            else:
                await self.resolve_fail(FailReason.TIE_BREAK)

    async def resolve_pass(self):
        """
        投票通过：先读取写入前的纪录以决定醜一的措辞，再写入纪录并公告。
        写入失败时投票同样结束，改为公告写入失败。
        """
        vote = self.active
        if vote is None:
            return
        self.active = None

        display_name = self._roster.nickname_of(vote.target_user)
        try:
            prior_record = await self._record_store.get_user_record(vote.target_user)
            await self._record_store.save_user_record(vote.target_user, vote.kind)
        except Exception:
            logger.exception(f"投票通过但写入纪录失败: {vote.kind.value} -> {vote.target_user}")
            text = VoteMessageBuilder.record_failed(vote.kind, display_name)
        else:
            text = VoteMessageBuilder.passed(vote.kind, display_name, prior_record)
            logger.info(f"投票通过: {vote.kind.value} -> {vote.target_user}")

        if vote.chat_id is not None:
            await self._notifier.send(vote.chat_id, text)

    async def resolve_fail(self, reason: FailReason):
        """
        投票失败：只公告，不写入纪录。
        """
        vote = self.active
        if vote is None:
            return

        display_name = self._roster.nickname_of(vote.target_user)
        text = VoteMessageBuilder.failed(vote.kind, display_name, reason)
        logger.info(f"投票失败 ({reason.name}): {vote.kind.value} -> {vote.target_user}")

        if vote.chat_id is not None:
            await self._notifier.send(vote.chat_id, text)
        self.active = None

    async def get_status(self, message: IncomingMessageDto):
        """
        回复当前投票的票数和剩余时间，不改变状态（过期清理除外）。
        """
        vote = await self._check_valid(message)
        if vote is None:
            return

        display_name = self._roster.nickname_of(vote.target_user)
        await self._respond(
            message,
            VoteMessageBuilder.status(
                vote.kind,
                display_name,
                vote.agree_count(),
                vote.reject_count(),
                vote.time_remaining(),
            ),
        )

    @classmethod
    def match_reply_trigger(cls, text: str) -> Optional[VoteKind]:
        """
        在去除空白的文本中查找回复触发词，找不到时返回 None。
        """
        normalized = StringUtils.strip_whitespace(text)
        for phrase, kind in cls.REPLY_TRIGGERS.items():
            if phrase in normalized:
                return kind
        return None

    async def handle_reply_nomination(self, message: IncomingMessageDto):
        """
        回复某人的消息并输入触发词时，以被回复者为对象发起投票。
        """
        if not message.reply_to_author_name:
            return

        kind = self.match_reply_trigger(message.text)
        if kind is None:
            return

        target = StringUtils.normalize_username(message.reply_to_author_name)
        logger.debug(f"回复触发投票: {kind.value} -> {target}")
        await self.initiate(message, target, kind)
