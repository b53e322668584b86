# festival_bot/cards.py
# Adaptive card and suggested-action builders for the festival bot
import json
from pathlib import Path
from typing import Any, List, Union

from botbuilder.core import CardFactory, MessageFactory
from botbuilder.schema import ActionTypes, Activity, Attachment, CardAction

# Shipped as package data alongside this module
WELCOME_CARD_PATH = Path(__file__).resolve().parent / "Dialogs" / "Welcome" / "Resources" / "weatherForecast.json"

SUGGESTED_ACTIONS_TEXT = "I can help you with these?"
SUGGESTED_ACTIONS = ["FAQ", "Band Search", "Navigate"]


def load_adaptive_card(path: Union[str, Path] = WELCOME_CARD_PATH) -> Any:
    """
    Read and parse the adaptive card JSON asset.

    Args:
      path (str | Path): Location of the card file.

    Returns:
      The parsed JSON value, passed through as-is.

    Raises:
      OSError: The file could not be read.
      json.JSONDecodeError: The file is not valid JSON.
    """
    # utf-8-sig also accepts files saved with a byte order mark
    with open(path, "r", encoding="utf-8-sig") as f:
        return json.load(f)


def create_adaptive_card_attachment(path: Union[str, Path] = WELCOME_CARD_PATH) -> Attachment:
    return Attachment(
        content_type=CardFactory.content_types.adaptive_card,
        content=load_adaptive_card(path),
    )


def create_suggested_actions() -> Activity:
    """Build the quick-reply prompt; tapping an action sends its label back."""
    actions: List[CardAction] = [
        CardAction(type=ActionTypes.im_back, title=label, value=label)
        for label in SUGGESTED_ACTIONS
    ]
    return MessageFactory.suggested_actions(actions, SUGGESTED_ACTIONS_TEXT)
