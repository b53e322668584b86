# festival_bot/app.py
# Entry point for the festival bot (Flask + Bot Framework SDK)
import asyncio
from datetime import datetime, timezone

from botbuilder.core import (
    BotFrameworkAdapter,
    BotFrameworkAdapterSettings,
    ConversationState,
    MemoryStorage,
    TurnContext,
)
from botbuilder.schema import Activity, ActivityTypes
from flask import Flask, Response, jsonify, request
from loguru import logger

from festival_bot.bot import FestivalBot
from festival_bot.config import DefaultConfig
from festival_bot.logging_cfg import setup_logging

CONFIG = DefaultConfig()
setup_logging(CONFIG.LOG_LEVEL)

app = Flask(__name__)

SETTINGS = BotFrameworkAdapterSettings(CONFIG.APP_ID, CONFIG.APP_PASSWORD)
ADAPTER = BotFrameworkAdapter(SETTINGS)

# In-memory state; counters are lost on restart
STORAGE = MemoryStorage()
CONVERSATION_STATE = ConversationState(STORAGE)

BOT = FestivalBot(CONVERSATION_STATE)


async def on_error(context: TurnContext, error: Exception):
    """Catch-all for errors raised while a turn is processed."""
    logger.opt(exception=error).error(f"[on_turn_error] unhandled error: {error}")

    try:
        await context.send_activity("The bot encountered an error or bug.")

        # The Emulator shows trace activities in its inspector
        if context.activity.channel_id == "emulator":
            trace_activity = Activity(
                label="TurnError",
                name="on_turn_error Trace",
                timestamp=datetime.now(timezone.utc),
                type=ActivityTypes.trace,
                value=f"{error}",
                value_type="https://www.botframework.com/schemas/error",
            )
            await context.send_activity(trace_activity)
    finally:
        # Drop the conversation's state so the next turn starts clean
        await CONVERSATION_STATE.load(context)
        await CONVERSATION_STATE.delete(context)


ADAPTER.on_turn_error = on_error


@app.route("/api/messages", methods=["POST"])
def messages():
    if "application/json" not in request.headers.get("Content-Type", ""):
        return Response(status=415)

    body = request.json
    logger.debug(f"Incoming activity: {body}")

    activity = Activity().deserialize(body)
    auth_header = request.headers.get("Authorization", "")

    try:
        # Run the async adapter call
        response = asyncio.run(ADAPTER.process_activity(activity, auth_header, BOT.on_turn))
    except Exception as e:
        logger.exception(f"Error processing activity: {e}")
        return Response(str(e), status=500)

    if response:
        return jsonify(response.body), response.status
    return Response(status=201)


if __name__ == "__main__":
    logger.info(f"Starting Flask bot on http://{CONFIG.HOST}:{CONFIG.PORT} ...")
    app.run(host=CONFIG.HOST, port=CONFIG.PORT)
