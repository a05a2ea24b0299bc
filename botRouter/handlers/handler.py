from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Protocol

from botRouter.config import BotConfig
from botRouter.models import MESSAGE_ENTITY_TYPE_BOT_COMMAND, MessageEntity, Update, entityText

if TYPE_CHECKING:
    from botRouter.bot import Bot

HandlerFunc = Callable[["Bot", Update], Any]
MatchFunc = Callable[[Update], bool]


class HandlerType(IntEnum):
    MESSAGE_TEXT = 0
    PHOTO_CAPTION = 1
    CALLBACK_QUERY_DATA = 2
    CALLBACK_QUERY_GAME_SHORT_NAME = 3


class MatchType(IntEnum):
    EXACT = 0
    PREFIX = 1
    CONTAINS = 2
    REGEXP = 3
    COMMAND = 4
    COMMAND_START_ONLY = 5
    COMMAND_START_MAYBE_WITH_BOT_USERNAME_SUFFIX = 6


_COMMAND_MATCH_TYPES = (
    MatchType.COMMAND,
    MatchType.COMMAND_START_ONLY,
    MatchType.COMMAND_START_MAYBE_WITH_BOT_USERNAME_SUFFIX,
)


class Matcher(Protocol):
    def canHandle(self, update: Update) -> bool: ...


@dataclass(frozen=True)
class FuncMatcher:
    func: MatchFunc

    def canHandle(self, update: Update) -> bool:
        return self.func(update)


@dataclass(frozen=True)
class PatternMatcher:
    """
    Matches one field of the update against a literal, a compiled regexp
    or a bot command. handlerType and matchType are kept as given, so values
    outside the enums are stored as-is and simply never match.
    """
    handlerType: int
    matchType: int
    pattern: Any
    config: BotConfig | None = None

    def _field(self, update: Update) -> tuple[str, list[MessageEntity]] | None:
        if update is None:
            return None
        if self.handlerType in (HandlerType.MESSAGE_TEXT, HandlerType.PHOTO_CAPTION):
            msg = update.message
            if msg is None:
                return None
            if self.handlerType == HandlerType.MESSAGE_TEXT:
                return msg.text or "", msg.entities or []
            return msg.caption or "", msg.caption_entities or []
        if self.handlerType in (HandlerType.CALLBACK_QUERY_DATA, HandlerType.CALLBACK_QUERY_GAME_SHORT_NAME):
            cq = update.callback_query
            if cq is None:
                return None
            if self.handlerType == HandlerType.CALLBACK_QUERY_DATA:
                return cq.data or "", []
            return cq.game_short_name or "", []
        return None

    def canHandle(self, update: Update) -> bool:
        found = self._field(update)
        if found is None:
            return False
        value, entities = found

        if self.matchType == MatchType.REGEXP:
            return isinstance(self.pattern, re.Pattern) and self.pattern.search(value) is not None

        if not isinstance(self.pattern, str):
            return False

        if self.matchType == MatchType.EXACT:
            return value == self.pattern
        if self.matchType == MatchType.PREFIX:
            return value.startswith(self.pattern)
        if self.matchType == MatchType.CONTAINS:
            return self.pattern in value
        if self.matchType in _COMMAND_MATCH_TYPES:
            # callback data has no entities, so commands only ever hit message fields
            return self._matchCommand(value, entities)
        return False

    def _matchCommand(self, text: str, entities: list[MessageEntity]) -> bool:
        username = self.config.username if self.config else ""

        for entity in entities:
            if entity.type != MESSAGE_ENTITY_TYPE_BOT_COMMAND:
                continue
            command = entityText(text, entity)
            if not command or not command.startswith("/"):
                continue

            if self.matchType == MatchType.COMMAND:
                if command[1:] == self.pattern:
                    return True
                continue

            if entity.offset != 0:
                continue

            if self.matchType == MatchType.COMMAND_START_ONLY:
                if command[1:] == self.pattern:
                    return True
            elif self.matchType == MatchType.COMMAND_START_MAYBE_WITH_BOT_USERNAME_SUFFIX:
                if command == "/" + self.pattern:
                    return True
                if username and command == f"/{self.pattern}@{username}":
                    return True
        return False


@dataclass(frozen=True)
class Handler:
    id: str
    matcher: Matcher
    callback: HandlerFunc | None

    def canHandle(self, update: Update) -> bool:
        return self.matcher.canHandle(update)

    def handle(self, bot: "Bot", update: Update) -> Any:
        if self.callback is None:
            return None
        return self.callback(bot, update)
