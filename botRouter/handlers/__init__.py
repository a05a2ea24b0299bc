from botRouter.handlers.handler import Handler, HandlerType, MatchType
from botRouter.handlers.echo_handler import isPlainText, onText
from botRouter.handlers.start_handler import onStart


def registerHandlers(bot) -> list[str]:
    suffixed = MatchType.COMMAND_START_MAYBE_WITH_BOT_USERNAME_SUFFIX
    return [
        bot.registerHandler(HandlerType.MESSAGE_TEXT, "start", suffixed, onStart),
        bot.registerHandler(HandlerType.MESSAGE_TEXT, "help", suffixed, onStart),
        bot.registerHandlerMatchFunc(isPlainText, onText),
    ]
