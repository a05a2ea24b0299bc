from botRouter.models import Update

START_TEXT = (
    "Hi! Send me any text and I will repeat it.\n"
    "/start or /help shows this message again."
)


def onStart(bot, update: Update) -> None:
    bot.api.sendMessage(chat_id=update.message.chat.id, text=START_TEXT)
