from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from botRouter.models import Update
from botRouter.registry import HandlerRegistry

if TYPE_CHECKING:
    from botRouter.bot import Bot

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(self, registry: HandlerRegistry) -> None:
        self._registry = registry

    def dispatch(self, bot: "Bot", update: Update) -> int:
        """
        Runs every handler whose matcher accepts the update, in registration order.
        A failing matcher counts as no match and a failing callback is logged;
        neither stops the rest. Returns how many handlers matched.
        """
        matched = 0
        for handler in self._registry.snapshot():
            try:
                if not handler.canHandle(update):
                    continue
            except Exception:
                logger.exception("matcher of handler %s failed on update %s", handler.id, update.update_id)
                continue
            matched += 1
            try:
                handler.handle(bot, update)
            except Exception:
                logger.exception("handler %s failed on update %s", handler.id, update.update_id)

        if not matched:
            logger.debug("no handler matched update %s", update.update_id)
        return matched
