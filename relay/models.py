from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Model(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    aliases: tuple[str, ...] = ()


class Settings(BaseModel):
    api_key: str
    model: Model
    temperature: float = 0.7
    role: str = ""  # system prompt content, sent even when empty


class Message(BaseModel):
    role: str
    content: str


class InputSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data_type: str = Field(alias="type")
    properties: dict[str, Any] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class Tool(BaseModel):
    name: str | None = None
    description: str | None = None
    input_schema: InputSchema
    type: str = "function"


class CompletionToolInput(BaseModel):
    tools: list[Tool]
    messages: list[Message]


# ---------------------------------------------------------------------------
# Request wire format
# ---------------------------------------------------------------------------

class FunctionParameters(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    param_type: str = Field(alias="type")
    properties: dict[str, Any]
    required: list[str]


class ToolFunction(BaseModel):
    name: str
    description: str
    parameters: FunctionParameters


class WrappedTool(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tool_type: str = Field(default="function", alias="type")
    function: ToolFunction


class ChatRequest(BaseModel):
    model: str
    temperature: float
    messages: list[Message]
    tools: list[WrappedTool] | None = None
    tool_choice: str | None = None

    def to_json(self) -> str:
        """Wire body. Unset tools/tool_choice are left out rather than sent as null."""
        body = self.model_dump(mode="json", by_alias=True)
        for key in ("tools", "tool_choice"):
            if body[key] is None:
                del body[key]
        return json.dumps(body, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Response wire format
# ---------------------------------------------------------------------------

class ToolFunctionResult(BaseModel):
    name: str
    arguments: str | None = None


class ToolResult(BaseModel):
    id: str
    type: str
    function: ToolFunctionResult


class Usage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatMessage(BaseModel):
    content: str | None = None
    role: str
    tool_calls: list[ToolResult] | None = None


class ChatChoice(BaseModel):
    message: ChatMessage
    finish_reason: str | None = None


class ChatResult(BaseModel):
    id: str | None = None
    model: str | None = None
    choices: list[ChatChoice]
    usage: Usage | None = None  # token accounting, not used by the translators
