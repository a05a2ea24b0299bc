from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

MESSAGE_ENTITY_TYPE_BOT_COMMAND = "bot_command"


@dataclass
class User:
    id: int
    is_bot: bool = False
    first_name: str = ""
    username: str = ""

    @classmethod
    def fromDict(cls, d: dict | None) -> Optional["User"]:
        if not d:
            return None
        return cls(
            id=d.get("id", 0),
            is_bot=bool(d.get("is_bot", False)),
            first_name=d.get("first_name") or "",
            username=d.get("username") or "",
        )


@dataclass
class Chat:
    id: int
    type: str = ""

    @classmethod
    def fromDict(cls, d: dict | None) -> Optional["Chat"]:
        if not d:
            return None
        return cls(id=d.get("id", 0), type=d.get("type") or "")


@dataclass
class MessageEntity:
    type: str
    offset: int
    length: int

    @classmethod
    def fromDict(cls, d: dict) -> "MessageEntity":
        return cls(type=d.get("type") or "", offset=int(d.get("offset", 0)), length=int(d.get("length", 0)))


def _entities(raw: list | None) -> list[MessageEntity]:
    return [MessageEntity.fromDict(e) for e in (raw or []) if isinstance(e, dict)]


def entityText(text: str, entity: MessageEntity) -> str | None:
    """
    Substring covered by the entity. Offsets are UTF-16 code units,
    so anything outside the BMP counts twice. Returns None for spans
    that fall outside the text.
    """
    if entity.offset < 0 or entity.length < 0:
        return None
    raw = text.encode("utf-16-le")
    start = entity.offset * 2
    end = start + entity.length * 2
    if end > len(raw):
        return None
    try:
        return raw[start:end].decode("utf-16-le")
    except UnicodeDecodeError:
        # span cuts a surrogate pair
        return None


@dataclass
class Message:
    message_id: int = 0
    chat: Optional[Chat] = None
    from_user: Optional[User] = None
    text: str = ""
    caption: str = ""
    entities: list[MessageEntity] = field(default_factory=list)
    caption_entities: list[MessageEntity] = field(default_factory=list)

    @classmethod
    def fromDict(cls, d: dict | None) -> Optional["Message"]:
        if not d:
            return None
        return cls(
            message_id=d.get("message_id", 0),
            chat=Chat.fromDict(d.get("chat")),
            from_user=User.fromDict(d.get("from")),
            text=d.get("text") or "",
            caption=d.get("caption") or "",
            entities=_entities(d.get("entities")),
            caption_entities=_entities(d.get("caption_entities")),
        )


@dataclass
class CallbackQuery:
    id: str = ""
    from_user: Optional[User] = None
    message: Optional[Message] = None
    data: str = ""
    game_short_name: str = ""

    @classmethod
    def fromDict(cls, d: dict | None) -> Optional["CallbackQuery"]:
        if not d:
            return None
        return cls(
            id=d.get("id") or "",
            from_user=User.fromDict(d.get("from")),
            message=Message.fromDict(d.get("message")),
            data=d.get("data") or "",
            game_short_name=d.get("game_short_name") or "",
        )


@dataclass
class Update:
    update_id: int = 0
    message: Optional[Message] = None
    callback_query: Optional[CallbackQuery] = None
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def fromDict(cls, d: dict) -> "Update":
        return cls(
            update_id=d.get("update_id", 0),
            message=Message.fromDict(d.get("message")),
            callback_query=CallbackQuery.fromDict(d.get("callback_query")),
            raw=d,
        )
