# festival_bot/state.py
# Conversation state for the festival bot
from botbuilder.core import ConversationState, StatePropertyAccessor


class CounterState:
    """Number of message turns seen in one conversation."""

    def __init__(self, turn_count: int = 0):
        self.turn_count = turn_count


class FestivalBotAccessors:
    """Holds the conversation state and the property accessors the bot uses.

    The accessors are created once per bot instance; the state behind them is
    keyed by conversation, so each turn only sees its own counter.
    """

    COUNTER_STATE_NAME = "FestivalBotAccessors.CounterState"

    def __init__(self, conversation_state: ConversationState):
        if conversation_state is None:
            raise TypeError(
                "[FestivalBotAccessors]: Missing parameter. conversation_state is required but None was given"
            )

        self.conversation_state = conversation_state
        self.counter_state: StatePropertyAccessor = conversation_state.create_property(
            self.COUNTER_STATE_NAME
        )
