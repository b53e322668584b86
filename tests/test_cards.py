from __future__ import annotations

import json
from importlib.resources import files
from pathlib import Path

import pytest

from festival_bot.cards import (
    SUGGESTED_ACTIONS_TEXT,
    WELCOME_CARD_PATH,
    create_adaptive_card_attachment,
    create_suggested_actions,
    load_adaptive_card,
)


def test_welcome_card_asset_is_an_adaptive_card() -> None:
    card = load_adaptive_card()

    assert WELCOME_CARD_PATH.parts[-4:] == ("Dialogs", "Welcome", "Resources", "weatherForecast.json")
    assert card["type"] == "AdaptiveCard"
    assert card["body"]


def test_attachment_wraps_card_unchanged() -> None:
    attachment = create_adaptive_card_attachment()

    assert attachment.content_type == "application/vnd.microsoft.card.adaptive"
    assert attachment.content == json.loads(WELCOME_CARD_PATH.read_text(encoding="utf-8"))


def test_missing_asset_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_adaptive_card(tmp_path / "nope.json")


def test_malformed_asset_raises(tmp_path: Path) -> None:
    path = tmp_path / "card.json"
    path.write_text("{ not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        load_adaptive_card(path)


@pytest.mark.parametrize(
    "document",
    [
        {"$schema": "http://adaptivecards.io/schemas/adaptive-card.json", "body": []},
        {"type": "HeroCard"},
        [{"type": "TextBlock"}],
    ],
)
def test_card_payload_is_passed_through_unchecked(tmp_path: Path, document: object) -> None:
    path = tmp_path / "card.json"
    path.write_text(json.dumps(document), encoding="utf-8")

    attachment = create_adaptive_card_attachment(path)

    assert attachment.content_type == "application/vnd.microsoft.card.adaptive"
    assert attachment.content == document


def test_asset_with_byte_order_mark_is_read(tmp_path: Path) -> None:
    path = tmp_path / "card.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps({"type": "AdaptiveCard", "body": []}).encode("utf-8"))

    assert load_adaptive_card(path) == {"type": "AdaptiveCard", "body": []}


def test_welcome_card_ships_with_the_package() -> None:
    asset = files("festival_bot").joinpath("Dialogs").joinpath("Welcome").joinpath("Resources").joinpath("weatherForecast.json")

    assert asset.is_file()
    assert json.loads(asset.read_text(encoding="utf-8"))["type"] == "AdaptiveCard"


def test_suggested_actions_prompt() -> None:
    reply = create_suggested_actions()

    assert reply.text == SUGGESTED_ACTIONS_TEXT
    assert [(a.title, a.value) for a in reply.suggested_actions.actions] == [
        ("FAQ", "FAQ"),
        ("Band Search", "Band Search"),
        ("Navigate", "Navigate"),
    ]
