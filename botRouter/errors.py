from __future__ import annotations


class BotError(RuntimeError):
    pass


class ConfigError(BotError):
    pass


class TransportError(BotError):
    """Request never produced an HTTP response (connection, DNS, TLS, timeout)."""

    def __init__(self, method: str, reason: str) -> None:
        super().__init__(f"error do request for method {method}: {reason}")
        self.method = method
        self.reason = reason


class RequestTimeoutError(TransportError):
    pass


class DecodeError(BotError):
    def __init__(self, method: str, reason: str) -> None:
        super().__init__(f"error decode response for method {method}: {reason}")
        self.method = method


class ApiError(BotError):
    """Platform answered with ok=false."""

    def __init__(self, method: str, errorCode: int, description: str) -> None:
        super().__init__(f"Telegram API error {method}: {errorCode} {description}")
        self.method = method
        self.errorCode = errorCode
        self.description = description


class BadRequestError(ApiError):
    pass


class UnauthorizedError(ApiError):
    pass


class ForbiddenError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class ConflictError(ApiError):
    pass


class TooManyRequestsError(ApiError):
    def __init__(self, method: str, errorCode: int, description: str, retryAfter: int) -> None:
        super().__init__(method, errorCode, description)
        self.retryAfter = retryAfter


class MigrateError(ApiError):
    def __init__(self, method: str, errorCode: int, description: str, migrateToChatId: int) -> None:
        super().__init__(method, errorCode, description)
        self.migrateToChatId = migrateToChatId


_BY_CODE: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


def apiErrorFromEnvelope(method: str, envelope: dict) -> ApiError:
    code = int(envelope.get("error_code") or 0)
    description = str(envelope.get("description") or "")
    params = envelope.get("parameters") or {}

    if params.get("migrate_to_chat_id"):
        return MigrateError(method, code, description, int(params["migrate_to_chat_id"]))
    if code == 429:
        return TooManyRequestsError(method, code, description, int(params.get("retry_after") or 0))

    cls = _BY_CODE.get(code, ApiError)
    return cls(method, code, description)
