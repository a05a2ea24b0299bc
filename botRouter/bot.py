from __future__ import annotations

import logging
import re

from botRouter.config import BotConfig
from botRouter.dispatcher import Dispatcher
from botRouter.handlers.handler import HandlerFunc, MatchFunc
from botRouter.models import Update
from botRouter.registry import HandlerRegistry
from botRouter.telegram_client import TelegramClient
from botRouter.transport import HttpClient, HttpResponse, Transport

logger = logging.getLogger(__name__)


class Bot:
    """
    One bot instance: its config, handler registry and connection to the platform.
    Handlers receive the bot itself, so they can call api methods from a callback:

        def start(bot: Bot, update: Update) -> None:
            bot.api.sendMessage(chat_id=update.message.chat.id, text="hi")

        bot.registerHandler(HandlerType.MESSAGE_TEXT, "start", MatchType.COMMAND_START_ONLY, start)
    """

    def __init__(self, config: BotConfig, client: HttpClient | None = None,
                 defaultHandler: HandlerFunc | None = None) -> None:
        self.config = config
        self.defaultHandler = defaultHandler
        self._registry = HandlerRegistry(config)
        self._dispatcher = Dispatcher(self._registry)
        self._transport = Transport(config, client)
        self.api = TelegramClient(self._transport)

    def __repr__(self) -> str:
        return f"Bot(username={self.config.username!r}, testEnvironment={self.config.testEnvironment})"

    @property
    def handlers(self) -> HandlerRegistry:
        return self._registry

    def registerHandler(self, handlerType: int, pattern: str | re.Pattern, matchType: int, callback: HandlerFunc | None) -> str:
        return self._registry.register(handlerType, pattern, matchType, callback)

    def registerHandlerMatchFunc(self, matchFunc: MatchFunc, callback: HandlerFunc | None) -> str:
        return self._registry.registerWithFunction(matchFunc, callback)

    def registerHandlerRegexp(self, handlerType: int, pattern: re.Pattern | str, callback: HandlerFunc | None) -> str:
        return self._registry.registerWithRegexp(handlerType, pattern, callback)

    def unregisterHandler(self, handlerId: str) -> None:
        self._registry.unregister(handlerId)

    def processUpdate(self, update: Update) -> None:
        matched = self._dispatcher.dispatch(self, update)
        if matched or self.defaultHandler is None:
            return
        try:
            self.defaultHandler(self, update)
        except Exception:
            logger.exception("default handler failed on update %s", update.update_id)

    def rawRequest(self, method: str, body: dict | None = None, timeout: float | None = None) -> HttpResponse:
        return self._transport.rawRequest(method, body, timeout)

    def fetchIdentity(self) -> str:
        """Fills config.username from getMe unless it was configured explicitly."""
        if not self.config.username:
            me = self.api.getMe() or {}
            self.config.username = me.get("username") or ""
            logger.info("running as @%s", self.config.username)
        return self.config.username
