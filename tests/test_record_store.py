import pytest

from tests.conftest import ALICE, BOB, FakeClock, FakeNotifier, make_message
from YangGangCourt.cogs.Voting.DatabaseRecordStore import DatabaseRecordStore
from YangGangCourt.cogs.Voting.VoteManager import VoteManager
from YangGangCourt.share.DatabaseHandler import DatabaseHandler
from YangGangCourt.share.enums.VoteKind import VoteKind
from YangGangCourt.share.Roster import Roster
from YangGangCourt.share.UnitOfWork import UnitOfWork


@pytest.mark.asyncio
async def test_missing_user_has_no_record(db_record_store: DatabaseRecordStore) -> None:
    assert await db_record_store.get_user_record("@carol") is None


@pytest.mark.asyncio
async def test_bailan_increments(db_record_store: DatabaseRecordStore) -> None:
    await db_record_store.save_user_record("@carol", VoteKind.BAILAN)
    await db_record_store.save_user_record("@carol", VoteKind.BAILAN)

    record = await db_record_store.get_user_record("@carol")
    assert record is not None
    assert record.bailan_count == 2
    assert record.warning_count == 0


@pytest.mark.asyncio
async def test_two_warnings_convert_to_one_bailan(db_record_store: DatabaseRecordStore) -> None:
    await db_record_store.save_user_record("@carol", VoteKind.WARNING)

    record = await db_record_store.get_user_record("@carol")
    assert record is not None
    assert (record.bailan_count, record.warning_count) == (0, 1)

    await db_record_store.save_user_record("@carol", VoteKind.WARNING)

    record = await db_record_store.get_user_record("@carol")
    assert record is not None
    assert (record.bailan_count, record.warning_count) == (1, 0)


@pytest.mark.asyncio
async def test_pardon_decrements_and_clamps_at_zero(
    db_record_store: DatabaseRecordStore,
) -> None:
    await db_record_store.save_user_record("@carol", VoteKind.BAILAN)
    await db_record_store.save_user_record("@carol", VoteKind.PARDON)
    await db_record_store.save_user_record("@carol", VoteKind.PARDON)

    record = await db_record_store.get_user_record("@carol")
    assert record is not None
    assert record.bailan_count == 0


@pytest.mark.asyncio
async def test_first_pardon_creates_empty_record(db_record_store: DatabaseRecordStore) -> None:
    await db_record_store.save_user_record("@bob", VoteKind.PARDON)

    record = await db_record_store.get_user_record("@bob")
    assert record is not None
    assert (record.bailan_count, record.warning_count) == (0, 0)


@pytest.mark.asyncio
async def test_all_records_most_recent_first(db_record_store: DatabaseRecordStore) -> None:
    await db_record_store.save_user_record("@alice", VoteKind.BAILAN)
    await db_record_store.save_user_record("@bob", VoteKind.WARNING)
    await db_record_store.save_user_record("@alice", VoteKind.BAILAN)

    records = await db_record_store.get_all_user_records()

    assert [r.user_id for r in records] == ["@alice", "@bob"]
    assert records[0].bailan_count == 2


@pytest.mark.asyncio
async def test_message_log_counts_per_user(db_handler: DatabaseHandler) -> None:
    async with UnitOfWork(db_handler) as uow:
        await uow.message_logs.save_message(1, "@alice", "早安")
        await uow.message_logs.save_message(1, "@alice", "午安")
        await uow.message_logs.save_message(1, "@bob", "晚安")
        await uow.commit()

    async with UnitOfWork(db_handler) as uow:
        assert await uow.message_logs.get_user_message_count("@alice") == 2
        assert await uow.message_logs.get_user_message_count("@bob") == 1
        assert await uow.message_logs.get_user_message_count("@carol") == 0


@pytest.mark.asyncio
async def test_unit_of_work_rolls_back_on_error(db_handler: DatabaseHandler) -> None:
    with pytest.raises(RuntimeError):
        async with UnitOfWork(db_handler) as uow:
            await uow.user_records.save_user_record("@carol", VoteKind.BAILAN)
            raise RuntimeError("boom")

    async with UnitOfWork(db_handler) as uow:
        assert await uow.user_records.get_user_record("@carol") is None


@pytest.mark.asyncio
async def test_passed_vote_is_persisted(
    db_record_store: DatabaseRecordStore, roster: Roster, clock: FakeClock
) -> None:
    notifier = FakeNotifier()
    manager = VoteManager(notifier, db_record_store, roster, clock=clock)
    await manager.initiate(make_message(ALICE), "@carol", VoteKind.BAILAN)

    await manager.cast_ballot(make_message(BOB), True)

    assert manager.active is None
    assert notifier.texts[-1] == "投票結束: Carol 白爛 +1"
    record = await db_record_store.get_user_record("@carol")
    assert record is not None
    assert record.bailan_count == 1
    assert record.updated_at is not None
