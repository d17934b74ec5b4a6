from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from relay.errors import ApiError, DecodeError, TransportError
from relay.models import ChatRequest, ChatResult

logger = logging.getLogger(__name__)

API_BASE = "https://api.openai.com/v1"


class OpenAIConnector:
    """Single-shot client for the chat-completions endpoint.

    ``client`` is the host's HTTP capability. It is used as-is and never
    closed here; without one, a client with no timeout is opened for the
    duration of the call.
    """

    def __init__(
        self,
        api_key: str,
        client: httpx.Client | None = None,
        base_url: str = API_BASE,
    ) -> None:
        self.api_key = api_key
        self.client = client
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def complete(self, request: ChatRequest) -> ChatResult:
        """POST one request and decode the result. Non-200 raises ApiError."""
        if self.client is not None:
            response = self._post(self.client, request)
        else:
            with httpx.Client(timeout=None) as client:
                response = self._post(client, request)

        if response.status_code != 200:
            body = response.content.decode("utf-8", errors="replace")
            logger.error("API returned status %d", response.status_code)
            raise ApiError(response.status_code, body)

        logger.info("Request successful")
        try:
            return ChatResult.model_validate_json(response.content.decode("utf-8"))
        except (UnicodeDecodeError, ValidationError) as e:
            raise DecodeError(f"Could not decode completion response: {e}") from e

    def _post(self, client: httpx.Client, request: ChatRequest) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            return client.post(
                self.url,
                headers=headers,
                content=request.to_json().encode("utf-8"),
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self.url} failed: {e}") from e
