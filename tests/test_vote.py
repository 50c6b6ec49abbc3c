import pytest

from tests.conftest import ALICE, BOB, CAROL, FakeClock
from YangGangCourt.cogs.Voting.Vote import Vote
from YangGangCourt.share.enums.VoteKind import VoteKind
from YangGangCourt.share.exceptions.VoteExpiredError import VoteExpiredError


def _vote(clock: FakeClock) -> Vote:
    return Vote(VoteKind.BAILAN, "@carol", ALICE, clock=clock)


def test_switching_ballot_moves_it_between_counts(clock: FakeClock) -> None:
    vote = _vote(clock)
    vote.cast(BOB, True)
    vote.cast(BOB, False)

    assert vote.agree_count() == 0
    assert vote.reject_count() == 1
    assert len(vote.ballots) == 1


def test_should_pass_only_on_second_distinct_agree(clock: FakeClock) -> None:
    vote = _vote(clock)
    vote.cast(ALICE, True)
    vote.cast(ALICE, True)
    assert not vote.should_pass()

    vote.cast(BOB, True)
    assert vote.should_pass()
    assert not vote.should_fail()


def test_should_fail_on_second_distinct_reject(clock: FakeClock) -> None:
    vote = _vote(clock)
    vote.cast(ALICE, True)
    vote.cast(BOB, False)
    assert not vote.should_fail()

    vote.cast(CAROL, False)
    assert vote.should_fail()


def test_should_fail_when_time_runs_out(clock: FakeClock) -> None:
    vote = _vote(clock)
    vote.cast(ALICE, True)

    clock.advance(7.99)
    assert not vote.is_expired()
    assert not vote.should_fail()

    clock.advance(0.01)
    assert vote.is_expired()
    assert vote.should_fail()


def test_time_remaining_is_floored_at_zero(clock: FakeClock) -> None:
    vote = _vote(clock)
    assert vote.time_remaining() == pytest.approx(8.0)

    clock.advance(2.5)
    assert vote.time_remaining() == pytest.approx(5.5)

    clock.advance(10)
    assert vote.time_remaining() == 0.0


def test_is_complete_after_three_distinct_voters(clock: FakeClock) -> None:
    vote = _vote(clock)
    vote.cast(ALICE, True)
    vote.cast(BOB, False)
    vote.cast(BOB, True)
    assert not vote.is_complete()

    vote.cast(CAROL, False)
    assert vote.is_complete()


def test_cast_on_expired_vote_raises(clock: FakeClock) -> None:
    vote = _vote(clock)
    clock.advance(8)

    with pytest.raises(VoteExpiredError):
        vote.cast(BOB, True)
    assert vote.ballots == {}


def test_chat_id_can_only_be_set_once(clock: FakeClock) -> None:
    vote = _vote(clock)
    vote.chat_id = 42

    with pytest.raises(RuntimeError):
        vote.chat_id = 43
    assert vote.chat_id == 42
