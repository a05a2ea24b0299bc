from __future__ import annotations

import json

from botRouter.errors import DecodeError, apiErrorFromEnvelope
from botRouter.transport import Transport


class TelegramClient:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def makeRequest(self, method: str, *, requestTimeout: float | None = None, **params):
        payload = {k: v for k, v in params.items() if v is not None}
        response = self._transport.rawRequest(method, payload, timeout=requestTimeout)

        try:
            envelope = json.loads(response.body.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise DecodeError(method, f"status {response.status}, {e}") from None

        if not isinstance(envelope, dict) or "ok" not in envelope:
            raise DecodeError(method, f"status {response.status}, unexpected body")

        if not envelope["ok"]:
            raise apiErrorFromEnvelope(method, envelope)

        return envelope.get("result")

    def getMe(self) -> dict:
        return self.makeRequest("getMe")

    def getUpdates(self, offset: int = 0, timeout: int = 0, limit: int = 100,
                   allowed_updates: list[str] | None = None, requestTimeout: float | None = None) -> list[dict]:
        return self.makeRequest(
            "getUpdates",
            requestTimeout=requestTimeout,
            offset=offset,
            timeout=timeout,
            limit=limit,
            allowed_updates=allowed_updates,
        ) or []

    def sendMessage(self, chat_id: int, text: str, reply_markup: dict | None = None,
                    parse_mode: str | None = None) -> dict:
        return self.makeRequest("sendMessage", chat_id=chat_id, text=text,
                                reply_markup=reply_markup, parse_mode=parse_mode)

    def editMessageText(self, chat_id: int, message_id: int, text: str, reply_markup: dict | None = None,
                        parse_mode: str | None = None) -> dict:
        return self.makeRequest("editMessageText", chat_id=chat_id, message_id=message_id, text=text,
                                reply_markup=reply_markup, parse_mode=parse_mode)

    def answerCallbackQuery(self, callback_query_id: str, **kwargs) -> bool:
        """
        https://core.telegram.org/bots/api#answercallbackquery
        """
        return self.makeRequest("answerCallbackQuery", callback_query_id=callback_query_id, **kwargs)

    def deleteMessage(self, chat_id: int, message_id: int) -> bool:
        """
        https://core.telegram.org/bots/api#deletemessage
        """
        return self.makeRequest("deleteMessage", chat_id=chat_id, message_id=message_id)

    def sendChatAction(self, chat_id: int, action: str = "typing") -> bool:
        return self.makeRequest("sendChatAction", chat_id=chat_id, action=action)
