from botRouter.models import MESSAGE_ENTITY_TYPE_BOT_COMMAND, Update


def isPlainText(update: Update) -> bool:
    msg = update.message
    if msg is None or not msg.text or msg.chat is None:
        return False
    return not any(e.type == MESSAGE_ENTITY_TYPE_BOT_COMMAND for e in msg.entities)


def onText(bot, update: Update) -> None:
    bot.api.sendMessage(chat_id=update.message.chat.id, text=update.message.text)
