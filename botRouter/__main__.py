import logging
import sys

from botRouter.bot import Bot
from botRouter.config import loadConfig
from botRouter.errors import BotError
from botRouter.handlers import registerHandlers
from botRouter.long_polling import startLongPolling


def main() -> int:
    try:
        config = loadConfig()
    except BotError as e:
        print(e, file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    bot = Bot(config)
    try:
        bot.fetchIdentity()
    except BotError as e:
        logging.error("getMe failed: %s", e)
        return 1

    registerHandlers(bot)
    try:
        startLongPolling(bot)
    except KeyboardInterrupt:
        print("\nbb")
    return 0


if __name__ == "__main__":
    sys.exit(main())
