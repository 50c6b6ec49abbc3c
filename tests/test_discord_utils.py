from types import SimpleNamespace

import pytest

from tests.conftest import ALICE, CAROL, CHAT_ID, FakeNotifier
from YangGangCourt.cogs.Voting.VoteManager import VoteManager
from YangGangCourt.share.DiscordUtils import DiscordUtils
from YangGangCourt.share.enums.VoteKind import VoteKind

CAROL_USER = SimpleNamespace(id=CAROL, name="carol")


def test_replace_mentions_with_usernames() -> None:
    assert DiscordUtils.replace_mentions("!vote <@3>", [CAROL_USER]) == "!vote @carol"
    assert DiscordUtils.replace_mentions("!vote <@!3>", [CAROL_USER]) == "!vote @carol"
    assert DiscordUtils.replace_mentions("!vote <@99>", [CAROL_USER]) == "!vote <@99>"
    assert DiscordUtils.replace_mentions("!vote carol", []) == "!vote carol"


def make_discord_message(content: str, mentions: list) -> SimpleNamespace:
    return SimpleNamespace(
        id=42,
        content=content,
        mentions=mentions,
        reference=None,
        channel=SimpleNamespace(id=CHAT_ID),
        author=SimpleNamespace(id=ALICE, name="alice"),
    )


@pytest.mark.asyncio
async def test_mentioned_target_starts_vote(
    manager: VoteManager, notifier: FakeNotifier
) -> None:
    incoming = await DiscordUtils.to_incoming_message(
        make_discord_message("!vote <@3>", [CAROL_USER])  # type: ignore[arg-type]
    )

    assert incoming.text == "!vote @carol"
    assert incoming.reply_to_author_name is None

    await manager.handle_new_vote(incoming, VoteKind.BAILAN)

    assert manager.active is not None
    assert manager.active.target_user == "@carol"
    assert notifier.texts == ["開始投票: Carol 484 白爛？"]
    assert notifier.deleted == [(CHAT_ID, 42)]
