from __future__ import annotations

import json
import logging
import socket
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Protocol

from botRouter.config import BotConfig
from botRouter.errors import RequestTimeoutError, TransportError

logger = logging.getLogger(__name__)

TOKEN_PLACEHOLDER = "<token>"


@dataclass
class HttpResponse:
    status: int
    body: bytes


class HttpClient(Protocol):
    def do(self, request: urllib.request.Request, timeout: float | None) -> HttpResponse: ...


class UrllibClient:
    """Default client. Non-2xx answers are still responses, not failures."""

    def do(self, request: urllib.request.Request, timeout: float | None) -> HttpResponse:
        try:
            with urllib.request.urlopen(request, timeout=timeout) as response:
                return HttpResponse(status=response.status, body=response.read())
        except urllib.error.HTTPError as e:
            return HttpResponse(status=e.code, body=e.read())


def _isTimeout(exc: BaseException) -> bool:
    if isinstance(exc, (TimeoutError, socket.timeout)):
        return True
    return isinstance(getattr(exc, "reason", None), (TimeoutError, socket.timeout))


class Transport:
    def __init__(self, config: BotConfig, client: HttpClient | None = None) -> None:
        self._config = config
        self._client = client or UrllibClient()

    def requestUrl(self, method: str) -> str:
        url = f"{self._config.serverUrl.rstrip('/')}/bot{self._config.token}/"
        if self._config.testEnvironment:
            url += "test/"
        return url + method

    def _sanitize(self, text: str) -> str:
        token = self._config.token
        if token:
            text = text.replace(token, TOKEN_PLACEHOLDER)
            text = text.replace(urllib.parse.quote(token), TOKEN_PLACEHOLDER)
        return text

    def rawRequest(self, method: str, body: dict | None = None, timeout: float | None = None) -> HttpResponse:
        """
        One POST to the platform. Returns whatever HTTP response came back;
        raises TransportError when there was none.
        """
        data = json.dumps(body or {}, ensure_ascii=False).encode("utf-8")
        request = urllib.request.Request(
            method="POST",
            url=self.requestUrl(method),
            data=data,
            headers={"Content-Type": "application/json"},
        )
        if timeout is None:
            timeout = self._config.requestTimeout

        if self._config.debug:
            logger.debug("request %s: %s", method, self._sanitize(data.decode("utf-8")))

        try:
            response = self._client.do(request, timeout)
        except Exception as e:
            # the client's own message usually carries the full URL, token included
            reason = self._sanitize(f"{request.full_url}: {str(e) or type(e).__name__}")
            if _isTimeout(e):
                raise RequestTimeoutError(method, reason) from None
            raise TransportError(method, reason) from None

        if self._config.debug:
            logger.debug("response %s: status %s", method, response.status)
        return response
