# festival_bot/bot.py
from pathlib import Path
from typing import List, Union

from botbuilder.core import ActivityHandler, ConversationState, MessageFactory, TurnContext
from botbuilder.schema import ActivityTypes, ChannelAccount
from loguru import logger

from festival_bot.cards import SUGGESTED_ACTIONS, WELCOME_CARD_PATH, create_adaptive_card_attachment, create_suggested_actions
from festival_bot.state import CounterState, FestivalBotAccessors

WELCOME_MESSAGE = "Hey there! I'm the ASH Music Festival Bot. I'm here to guide you around the fesival!"
INFO_MESSAGE = "How would you like to explore the event?"
INVALID_OPTION_MESSAGE = "Not a valid option"

VALID_OPTIONS = frozenset(label.lower() for label in SUGGESTED_ACTIONS)


class FestivalBot(ActivityHandler):
    """
    Festival guide bot.

    Counts the message turns of each conversation, echoes recognised menu
    options, and greets new members with a card and the option menu.
    """

    def __init__(self, conversation_state: ConversationState, card_path: Union[str, Path] = WELCOME_CARD_PATH):
        if conversation_state is None:
            raise TypeError(
                "[FestivalBot]: Missing parameter. conversation_state is required but None was given"
            )

        self.accessors = FestivalBotAccessors(conversation_state)
        self.card_path = card_path
        logger.trace("Turn start.")

    async def on_turn(self, turn_context: TurnContext):
        if turn_context is None:
            raise TypeError("FestivalBot.on_turn(): turn_context cannot be None.")

        activity_type = turn_context.activity.type
        if activity_type == ActivityTypes.message:
            await self.on_message_activity(turn_context)
        elif activity_type == ActivityTypes.conversation_update:
            await self.on_conversation_update_activity(turn_context)
        else:
            await self.on_unrecognized_activity_type(turn_context)

    async def on_message_activity(self, turn_context: TurnContext):
        state = await self.accessors.counter_state.get(turn_context, CounterState)
        state.turn_count += 1
        await self.accessors.counter_state.set(turn_context, state)
        await self.accessors.conversation_state.save_changes(turn_context)

        text = turn_context.activity.text or ""
        logger.debug(f"Turn {state.turn_count} in {turn_context.activity.conversation.id}: {text!r}")

        if text.strip().lower() in VALID_OPTIONS:
            await turn_context.send_activity(MessageFactory.text(f"Turn {state.turn_count}: You sent '{text}'"))
        else:
            await turn_context.send_activity(MessageFactory.text(INVALID_OPTION_MESSAGE))

        await self.send_suggested_actions(turn_context)

    async def on_members_added_activity(self, members_added: List[ChannelAccount], turn_context: TurnContext):
        # The bot is the recipient of channel events; skip its own join.
        for member in members_added:
            if member.id != turn_context.activity.recipient.id:
                logger.debug(f"Greeting {member.name} ({member.id})")
                await turn_context.send_activity(MessageFactory.text(f"Hi there - {member.name}. {WELCOME_MESSAGE}"))
                await turn_context.send_activity(MessageFactory.text(INFO_MESSAGE))

                welcome_card = create_adaptive_card_attachment(self.card_path)
                await turn_context.send_activity(MessageFactory.attachment(welcome_card))

                await self.send_suggested_actions(turn_context)

    async def on_unrecognized_activity_type(self, turn_context: TurnContext):
        logger.debug(f"Unhandled activity type: {turn_context.activity.type}")
        await turn_context.send_activity(MessageFactory.text(f"{turn_context.activity.type} event detected"))

    @staticmethod
    async def send_suggested_actions(turn_context: TurnContext):
        await turn_context.send_activity(create_suggested_actions())
