from botRouter.bot import Bot
from botRouter.config import BotConfig, loadConfig
from botRouter.errors import (
    ApiError,
    BotError,
    ConfigError,
    DecodeError,
    RequestTimeoutError,
    TransportError,
)
from botRouter.handlers.handler import HandlerType, MatchType
from botRouter.models import CallbackQuery, Message, MessageEntity, Update
from botRouter.transport import HttpClient, HttpResponse

__all__ = [
    "ApiError",
    "Bot",
    "BotConfig",
    "BotError",
    "CallbackQuery",
    "ConfigError",
    "DecodeError",
    "HandlerType",
    "HttpClient",
    "HttpResponse",
    "MatchType",
    "Message",
    "MessageEntity",
    "RequestTimeoutError",
    "TransportError",
    "Update",
    "loadConfig",
]
