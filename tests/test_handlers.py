from __future__ import annotations

import json

from botRouter.bot import Bot
from botRouter.config import BotConfig
from botRouter.handlers import registerHandlers
from botRouter.handlers.start_handler import START_TEXT
from botRouter.models import Update
from botRouter.transport import HttpResponse


class RecordingClient:
    def __init__(self) -> None:
        self.sent: list[tuple[str, dict]] = []

    def do(self, request, timeout):
        method = request.full_url.rsplit("/", 1)[-1]
        self.sent.append((method, json.loads(request.data.decode("utf-8"))))
        return HttpResponse(200, b'{"ok":true,"result":{}}')


def _setup() -> tuple[Bot, RecordingClient]:
    client = RecordingClient()
    bot = Bot(BotConfig(token="XXX", username="foo_bot"), client)
    registerHandlers(bot)
    return bot, client


def _message(text: str, entities: list[dict] | None = None) -> Update:
    msg = {"message_id": 1, "chat": {"id": 77}, "text": text}
    if entities:
        msg["entities"] = entities
    return Update.fromDict({"update_id": 1, "message": msg})


def test_start_command_replies_with_greeting() -> None:
    bot, client = _setup()

    bot.processUpdate(_message("/start@foo_bot", [{"type": "bot_command", "offset": 0, "length": 14}]))

    assert client.sent == [("sendMessage", {"chat_id": 77, "text": START_TEXT})]


def test_command_for_other_bot_is_ignored() -> None:
    bot, client = _setup()

    bot.processUpdate(_message("/start@other_bot", [{"type": "bot_command", "offset": 0, "length": 16}]))

    assert client.sent == []


def test_plain_text_is_echoed() -> None:
    bot, client = _setup()

    bot.processUpdate(_message("ping"))

    assert client.sent == [("sendMessage", {"chat_id": 77, "text": "ping"})]


def test_callback_query_is_ignored() -> None:
    bot, client = _setup()

    bot.processUpdate(Update.fromDict({"update_id": 2, "callback_query": {"id": "1", "data": "x"}}))

    assert client.sent == []
