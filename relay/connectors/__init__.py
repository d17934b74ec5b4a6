from __future__ import annotations

from relay.connectors.openai import API_BASE, OpenAIConnector

__all__ = ["API_BASE", "OpenAIConnector"]
