from __future__ import annotations

from datetime import UTC, datetime
from typing import Any
from urllib.parse import urlparse

import httpx
from loguru import logger

from journey_assistant.fallback import FallbackStrategy
from journey_assistant.logging_config import session_logger
from journey_assistant.session_identity import Session

_TIMEOUT_SECONDS = 30
DEFAULT_ACKNOWLEDGEMENT = "I'm here to help with your travel planning!"

_PLACEHOLDER_MARKERS = (
    "your-n8n-instance.com",
    "your-actual-n8n-instance.com",
)
_RESERVED_DOMAINS = ("example.com", "example.org")
_RESERVED_SUFFIXES = tuple("." + domain for domain in _RESERVED_DOMAINS)
_LOOPBACK_HOSTS = {"localhost", "127.0.0.1", "0.0.0.0", "::1"}

_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class MalformedReplyError(ValueError):
    pass


def is_placeholder_endpoint(url: str | None) -> bool:
    if url is None or not url.strip():
        return True
    lowered = url.strip().lower()
    if any(marker in lowered for marker in _PLACEHOLDER_MARKERS):
        return True
    host = urlparse(lowered).hostname
    if host is None:
        return False
    if host in _RESERVED_DOMAINS or host.endswith(_RESERVED_SUFFIXES):
        return True
    return host in _LOOPBACK_HOSTS


def extract_reply_text(data: Any) -> str:
    """Pull the reply text out of a webhook JSON body.

    Accepts a plain object or the array form n8n produces
    (``[{"output": {...}}]``). Raises MalformedReplyError for anything else.
    """
    if isinstance(data, list):
        if not data:
            raise MalformedReplyError("empty reply array")
        data = data[0]
        if isinstance(data, dict) and isinstance(data.get("output"), dict):
            data = data["output"]

    if not isinstance(data, dict):
        raise MalformedReplyError(f"expected a JSON object, got {type(data).__name__}")

    for field in ("response", "message"):
        value = data.get(field)
        if isinstance(value, str) and value:
            return value
    return DEFAULT_ACKNOWLEDGEMENT


class RemoteAssistantClient:
    def __init__(
        self,
        endpoint: str | None,
        fallback: FallbackStrategy,
        *,
        timeout_seconds: float = _TIMEOUT_SECONDS,
        user_id: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._fallback = fallback
        self._timeout_seconds = timeout_seconds
        self._user_id = user_id
        self._transport = transport
        self._configured = not is_placeholder_endpoint(endpoint)
        if not self._configured:
            logger.info("Webhook URL not configured. Using fallback responses only.")

    @property
    def is_configured(self) -> bool:
        return self._configured

    def build_payload(self, user_text: str, session: Session) -> dict[str, Any]:
        return {
            "message": user_text,
            "timestamp": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "sessionId": session.token,
            "userId": self._user_id,
        }

    async def send(self, user_text: str, session: Session) -> str:
        """Send one user turn to the webhook and return the reply text.

        Never raises for network or payload problems; those are logged and
        answered by the fallback strategy instead. No retries.
        """
        if not self._configured:
            return self._fallback.reply(user_text)

        payload = self.build_payload(user_text, session)
        log = session_logger(session.token)
        log.debug(f"Webhook request: chars={len(user_text)}")
        try:
            async with httpx.AsyncClient(
                headers=_HEADERS,
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(self._endpoint, json=payload)

            if not 200 <= response.status_code < 300:
                raise httpx.HTTPStatusError(
                    f"HTTP {response.status_code} from webhook",
                    request=response.request,
                    response=response,
                )

            reply = extract_reply_text(response.json())
        except httpx.TimeoutException:
            log.warning(
                f"Webhook timed out after {self._timeout_seconds}s, using fallback response"
            )
            return self._fallback.reply(user_text)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as ex:
            log.warning(f"Webhook not accessible, using fallback response: {type(ex).__name__}: {ex}")
            return self._fallback.reply(user_text)
        except Exception as ex:
            log.error(f"Unexpected webhook error, using fallback response: {type(ex).__name__}: {ex}")
            return self._fallback.reply(user_text)

        log.debug(f"Webhook response: status={response.status_code}, chars={len(reply)}")
        return reply
