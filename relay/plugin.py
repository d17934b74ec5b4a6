"""Entry points the host invokes. Each returns one string or raises RelayError."""
from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

import relay.config as config_mod
import relay.registry as registry
from relay.config import Lookup
from relay.connectors import OpenAIConnector
from relay.errors import DecodeError, InputError
from relay.models import ChatResult, CompletionToolInput, Tool
from relay.request import build_request
from relay.translate import completion_text, tool_calls_json

logger = logging.getLogger(__name__)


def _default_lookup() -> Lookup:
    return config_mod.lookup(config_mod.load())


def _invoke(
    prompt: str,
    tools: list[Tool] | None,
    get: Lookup | None,
    client: httpx.Client | None,
) -> ChatResult:
    settings = config_mod.resolve_settings(get or _default_lookup())
    request = build_request(settings, prompt, tools)
    connector = OpenAIConnector(settings.api_key, client=client)
    return connector.complete(request)


def completion(
    prompt: str,
    get: Lookup | None = None,
    client: httpx.Client | None = None,
) -> str:
    """Plain completion: prompt in, assistant text out."""
    result = _invoke(prompt, None, get, client)
    return completion_text(result)


def completion_with_tools(
    payload: CompletionToolInput | dict[str, Any] | str | bytes,
    get: Lookup | None = None,
    client: httpx.Client | None = None,
) -> str:
    """Tool completion: returns the model's tool calls as pretty JSON.

    Only the first message's content is sent as the prompt; later messages are
    ignored.
    """
    tool_input = _parse_tool_input(payload)
    if not tool_input.messages:
        raise InputError("No messages supplied")
    if len(tool_input.messages) > 1:
        logger.info("Ignoring %d messages after the first", len(tool_input.messages) - 1)

    prompt = tool_input.messages[0].content
    result = _invoke(prompt, tool_input.tools, get, client)
    return tool_calls_json(result)


def models() -> str:
    """The model catalog as JSON. Touches neither configuration nor network."""
    return registry.to_json()


def _parse_tool_input(payload: CompletionToolInput | dict[str, Any] | str | bytes) -> CompletionToolInput:
    if isinstance(payload, CompletionToolInput):
        return payload
    try:
        if isinstance(payload, (str, bytes)):
            return CompletionToolInput.model_validate_json(payload)
        return CompletionToolInput.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Invalid tool completion input: {e}") from e
