from __future__ import annotations

import pytest
from botbuilder.core import ConversationState, MemoryStorage
from botbuilder.core.adapters import TestAdapter

from festival_bot.bot import FestivalBot


@pytest.fixture()
def conversation_state() -> ConversationState:
    return ConversationState(MemoryStorage())


@pytest.fixture()
def bot(conversation_state: ConversationState) -> FestivalBot:
    return FestivalBot(conversation_state)


@pytest.fixture()
def adapter(bot: FestivalBot) -> TestAdapter:
    """Test adapter; the bot is `bot`, the user `User1`, the conversation `Convo1`."""
    return TestAdapter(bot.on_turn)
