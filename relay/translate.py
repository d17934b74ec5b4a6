from __future__ import annotations

import json
from typing import Any

from relay.errors import DecodeError, NoCompletionError, NoToolCallsError
from relay.models import ChatMessage, ChatResult


def _first_message(result: ChatResult) -> ChatMessage | None:
    if not result.choices:
        return None
    return result.choices[0].message


def completion_text(result: ChatResult) -> str:
    """Return the first choice's text content verbatim."""
    message = _first_message(result)
    if message is None or message.content is None:
        raise NoCompletionError("No completion returned")
    return message.content


def tool_calls_json(result: ChatResult) -> str:
    """Render the first choice's tool calls as a pretty JSON list of {name, input}."""
    message = _first_message(result)
    if message is None or message.tool_calls is None:
        raise NoToolCallsError("No tool calls found")

    formatted: list[dict[str, Any]] = []
    for call in message.tool_calls:
        entry: dict[str, Any] = {"name": call.function.name}
        if call.function.arguments is not None:
            try:
                entry["input"] = json.loads(call.function.arguments)
            except json.JSONDecodeError as e:
                raise DecodeError(
                    f"Invalid arguments for tool call '{call.function.name}': {e}"
                ) from e
        formatted.append(entry)

    return json.dumps(formatted, indent=2, ensure_ascii=False)
