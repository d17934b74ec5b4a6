from __future__ import annotations

import logging
from typing import Sequence

from relay.models import (
    ChatRequest,
    FunctionParameters,
    Message,
    Settings,
    Tool,
    ToolFunction,
    WrappedTool,
)

logger = logging.getLogger(__name__)


def wrap_tool(tool: Tool) -> WrappedTool:
    """Project a plugin Tool onto the provider's function-tool shape."""
    return WrappedTool(
        tool_type="function",
        function=ToolFunction(
            name=tool.name or "",
            description=tool.description or "",
            parameters=FunctionParameters(
                param_type=tool.input_schema.data_type,
                properties=tool.input_schema.properties,
                required=tool.input_schema.required,
            ),
        ),
    )


def build_request(
    settings: Settings,
    prompt: str,
    tools: Sequence[Tool] | None = None,
) -> ChatRequest:
    """Build the chat-completions body for one system + user exchange.

    The system message is always sent, with empty content when no role is set.
    """
    request = ChatRequest(
        model=settings.model.name,
        temperature=settings.temperature,
        messages=[
            Message(role="system", content=settings.role),
            Message(role="user", content=prompt),
        ],
    )
    if tools:
        logger.info("Tools found: %d", len(tools))
        request.tools = [wrap_tool(t) for t in tools]
        request.tool_choice = "required"
    else:
        logger.info("No tools found")
    return request
