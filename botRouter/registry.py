from __future__ import annotations

import re
import secrets

from botRouter.config import BotConfig
from botRouter.handlers.handler import (
    FuncMatcher,
    Handler,
    HandlerFunc,
    MatchFunc,
    MatchType,
    PatternMatcher,
)
from botRouter.rwlock import RWLock


def newHandlerId() -> str:
    return secrets.token_hex(8)


class HandlerRegistry:
    """
    Ordered, thread-safe list of handlers.
    Writers (register/unregister) hold the lock only for the list update;
    readers get a tuple snapshot that later mutations never touch.
    """

    def __init__(self, config: BotConfig | None = None) -> None:
        self._config = config
        self._handlers: list[Handler] = []
        self._lock = RWLock()

    def _add(self, handler: Handler) -> str:
        with self._lock.writing():
            self._handlers.append(handler)
        return handler.id

    def register(self, handlerType: int, pattern: str | re.Pattern, matchType: int, callback: HandlerFunc | None) -> str:
        if matchType == MatchType.REGEXP and isinstance(pattern, str):
            pattern = re.compile(pattern)
        matcher = PatternMatcher(handlerType, matchType, pattern, self._config)
        return self._add(Handler(newHandlerId(), matcher, callback))

    def registerWithFunction(self, matchFunc: MatchFunc, callback: HandlerFunc | None) -> str:
        return self._add(Handler(newHandlerId(), FuncMatcher(matchFunc), callback))

    def registerWithRegexp(self, handlerType: int, pattern: re.Pattern | str, callback: HandlerFunc | None) -> str:
        return self.register(handlerType, pattern, MatchType.REGEXP, callback)

    def unregister(self, handlerId: str) -> None:
        with self._lock.writing():
            for i, h in enumerate(self._handlers):
                if h.id == handlerId:
                    del self._handlers[i]
                    return

    def snapshot(self) -> tuple[Handler, ...]:
        with self._lock.reading():
            return tuple(self._handlers)

    def find(self, handlerId: str) -> Handler | None:
        with self._lock.reading():
            for h in self._handlers:
                if h.id == handlerId:
                    return h
        return None

    def __len__(self) -> int:
        with self._lock.reading():
            return len(self._handlers)
