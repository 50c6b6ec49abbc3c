from typing import Optional

from YangGangCourt.dto.UserRecordDto import UserRecordDto
from YangGangCourt.share.enums.FailReason import FailReason
from YangGangCourt.share.enums.VoteKind import VoteKind


class VoteMessageBuilder:
    """
    构建投票流程中发送到群组的各种文字消息。
    """

    KIND_TEXT = {
        VoteKind.BAILAN: "白爛",
        VoteKind.WARNING: "醜一",
    }

    FAIL_REASON_TEXT = {
        FailReason.REJECTED: "反對票達 2 票",
        FailReason.EXPIRED: "投票超過 8 小時",
        FailReason.TIE_BREAK: "最後一票反對",
    }

    NO_ACTIVE_VOTE = "目前沒有進行中的投票"
    VOTE_EXPIRED = "投票時間超過8小時，自動失效"
    VOTE_IN_PROGRESS = "已有進行中的投票"

    @staticmethod
    def topic(kind: VoteKind, display_name: str) -> str:
        """
        投票议题。<br>
        例如：'生毛 484 白爛'、'是否赦免生毛'
        """
        if kind == VoteKind.PARDON:
            return f"是否赦免{display_name}"
        return f"{display_name} 484 {VoteMessageBuilder.KIND_TEXT[kind]}"

    @staticmethod
    def user_not_found(target: Optional[str]) -> str:
        return f"找不到用戶 {target or ''}，請確認用戶名稱是否正確"

    @staticmethod
    def started(kind: VoteKind, display_name: str) -> str:
        return f"開始投票: {VoteMessageBuilder.topic(kind, display_name)}？"

    @staticmethod
    def tally(kind: VoteKind, display_name: str, agree: int, reject: int) -> str:
        topic = VoteMessageBuilder.topic(kind, display_name)
        return f"投票更新: {topic}？ 同意 {agree} / 反對 {reject}"

    @staticmethod
    def status(
        kind: VoteKind, display_name: str, agree: int, reject: int, hours_left: float
    ) -> str:
        topic = VoteMessageBuilder.topic(kind, display_name)
        return f"{topic}？ 同意 {agree} / 反對 {reject} \n剩餘時間: {hours_left:.1f} 小時"

    @staticmethod
    def passed(
        kind: VoteKind, display_name: str, prior_record: Optional[UserRecordDto]
    ) -> str:
        """
        投票通过的公告。醜一的措辞取决于写入前的纪录：
        之前已有一次醜一时，这次会被转换为白爛。
        """
        if kind == VoteKind.BAILAN:
            result = f"{display_name} 白爛 +1"
        elif kind == VoteKind.WARNING:
            if prior_record and prior_record.warning_count == 1:
                result = f"{display_name} 醜二，白爛 +1"
            else:
                result = f"{display_name} 醜一"
        else:
            result = f"赦免 {display_name}，白爛 -1"
        return f"投票結束: {result}"

    @staticmethod
    def record_failed(kind: VoteKind, display_name: str) -> str:
        topic = VoteMessageBuilder.topic(kind, display_name)
        return f"投票通過: {topic}，但紀錄寫入失敗，請聯絡管理員"

    @staticmethod
    def failed(kind: VoteKind, display_name: str, reason: FailReason) -> str:
        if kind == VoteKind.PARDON:
            result = f"赦免{display_name}失敗"
        else:
            result = f"{display_name}不算{VoteMessageBuilder.KIND_TEXT[kind]}"
        return f"投票結束：{result}（{VoteMessageBuilder.FAIL_REASON_TEXT[reason]}）"
