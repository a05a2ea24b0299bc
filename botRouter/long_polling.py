import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from botRouter.bot import Bot
from botRouter.errors import BotError
from botRouter.models import Update

logger = logging.getLogger(__name__)

RETRY_DELAY_S = 2
# updates allowed to wait for a free worker, per worker
PENDING_PER_WORKER = 2


def pollOnce(bot: Bot, offset: int) -> tuple[list[Update], int]:
    cfg = bot.config
    raw = bot.api.getUpdates(
        offset=offset,
        timeout=cfg.pollTimeout,
        limit=cfg.pollLimit,
        requestTimeout=cfg.pollTimeout + cfg.requestTimeout,
    )
    updates = []
    for upd in raw:
        try:
            update_id = int(upd["update_id"])
        except (KeyError, TypeError, ValueError):
            logger.warning("skipping update without update_id: %r", upd)
            continue
        offset = max(offset, update_id + 1)
        try:
            updates.append(Update.fromDict(upd))
        except Exception:
            # the offset already moved past it, so the platform won't send it again
            logger.exception("skipping undecodable update %s", update_id)
    return updates, offset


def _process(bot: Bot, update: Update, slots: threading.BoundedSemaphore) -> None:
    try:
        bot.processUpdate(update)
    except Exception:
        logger.exception("dispatch of update %s failed", update.update_id)
    finally:
        slots.release()


def startLongPolling(bot: Bot, stopEvent: threading.Event | None = None) -> None:
    """
    Polls getUpdates until stopEvent is set and hands updates to a worker pool.
    Only workers * PENDING_PER_WORKER updates may be in flight; when all slots
    are taken the loop waits instead of fetching (and acknowledging) more.
    Setting stopEvent takes effect after the current getUpdates returns,
    which can take up to pollTimeout seconds.
    """
    stopEvent = stopEvent or threading.Event()
    workers = max(1, bot.config.workers)
    slots = threading.BoundedSemaphore(workers * PENDING_PER_WORKER)
    next_offset = 0
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="dispatch") as pool:
        while not stopEvent.is_set():
            try:
                updates, next_offset = pollOnce(bot, next_offset)
            except BotError as e:
                logger.warning("getUpdates failed: %s", e)
                stopEvent.wait(RETRY_DELAY_S)
                continue
            for upd in updates:
                slots.acquire()
                pool.submit(_process, bot, upd, slots)
