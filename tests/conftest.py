# tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone
from itertools import count
from typing import Optional

import pytest
import pytest_asyncio

from YangGangCourt.cogs.Voting.DatabaseRecordStore import DatabaseRecordStore
from YangGangCourt.cogs.Voting.VoteManager import VoteManager
from YangGangCourt.dto.IncomingMessageDto import IncomingMessageDto
from YangGangCourt.dto.UserRecordDto import UserRecordDto
from YangGangCourt.share.DatabaseHandler import DatabaseHandler
from YangGangCourt.share.enums.VoteKind import VoteKind
from YangGangCourt.share.Roster import Roster

CHAT_ID = -100
ALICE, BOB, CAROL = 1, 2, 3

_MESSAGE_IDS = count(1000)


class FakeClock:
    def __init__(self, start: Optional[datetime] = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, hours: float) -> None:
        self.now += timedelta(hours=hours)


class FakeNotifier:
    def __init__(self) -> None:
        self.sent: list[tuple[int, str]] = []
        self.deleted: list[tuple[int, int]] = []

    async def send(self, chat_id: int, text: str) -> None:
        self.sent.append((chat_id, text))

    async def delete(self, chat_id: int, message_id: int) -> None:
        self.deleted.append((chat_id, message_id))

    @property
    def texts(self) -> list[str]:
        return [text for _, text in self.sent]


class InMemoryRecordStore:
    """不经过数据库、与 UserRecordService 换算规则一致的纪录存储。"""

    def __init__(self) -> None:
        self.records: dict[str, UserRecordDto] = {}
        self.writes: list[tuple[str, VoteKind]] = []

    async def get_user_record(self, user_id: str) -> Optional[UserRecordDto]:
        record = self.records.get(user_id)
        return record.model_copy() if record else None

    async def save_user_record(self, user_id: str, kind: VoteKind) -> None:
        self.writes.append((user_id, kind))
        record = self.records.setdefault(user_id, UserRecordDto(user_id=user_id))
        if kind == VoteKind.BAILAN:
            record.bailan_count += 1
        elif kind == VoteKind.WARNING:
            if record.warning_count + 1 >= 2:
                record.warning_count = 0
                record.bailan_count += 1
            else:
                record.warning_count += 1
        else:
            record.bailan_count = max(0, record.bailan_count - 1)

    async def get_all_user_records(self) -> list[UserRecordDto]:
        return [record.model_copy() for record in self.records.values()]


def make_message(
    author_id: int = ALICE,
    text: str = "",
    reply_to: Optional[str] = None,
    chat_id: int = CHAT_ID,
) -> IncomingMessageDto:
    names = {ALICE: "alice", BOB: "bob", CAROL: "carol"}
    return IncomingMessageDto(
        chat_id=chat_id,
        message_id=next(_MESSAGE_IDS),
        author_id=author_id,
        author_name=names.get(author_id, f"user{author_id}"),
        text=text,
        reply_to_author_name=reply_to,
    )


@pytest.fixture()
def roster() -> Roster:
    return Roster({"@alice": "Alice", "@bob": "Bob", "carol": "Carol"})


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def record_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture()
def manager(
    notifier: FakeNotifier,
    record_store: InMemoryRecordStore,
    roster: Roster,
    clock: FakeClock,
) -> VoteManager:
    return VoteManager(notifier=notifier, record_store=record_store, roster=roster, clock=clock)


@pytest_asyncio.fixture()
async def db_handler(tmp_path) -> AsyncIterator[DatabaseHandler]:
    handler = DatabaseHandler(db_name=str(tmp_path / "court.db"))
    handler.initialize()
    await handler.init_db()
    try:
        yield handler
    finally:
        await handler.close()


@pytest.fixture()
def db_record_store(db_handler: DatabaseHandler) -> DatabaseRecordStore:
    return DatabaseRecordStore(db_handler)
