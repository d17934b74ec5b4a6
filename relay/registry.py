from __future__ import annotations

import logging

from pydantic import TypeAdapter

from relay.models import Model

logger = logging.getLogger(__name__)

# Order matters: the first entry is the default model.
MODELS: tuple[Model, ...] = (
    Model(name="gpt-4o", aliases=("4o",)),
    Model(name="gpt-4", aliases=("4",)),
    Model(name="gpt-4-1106-preview", aliases=("128k",)),
    Model(name="gpt-4-32k", aliases=("32k",)),
    Model(name="gpt-3.5-turbo", aliases=("35t",)),
    Model(name="gpt-3.5-turbo-1106", aliases=("35t-1106",)),
    Model(name="gpt-3.5-turbo-16k", aliases=("35t16k",)),
    Model(name="gpt-3.5", aliases=("35",)),
)

_CATALOG = TypeAdapter(tuple[Model, ...])


def find(identifier: str) -> Model | None:
    """Case-insensitive lookup by model name or alias."""
    wanted = identifier.lower()
    for model in MODELS:
        if model.name.lower() == wanted:
            return model
        if any(alias.lower() == wanted for alias in model.aliases):
            return model
    return None


def default() -> Model:
    return MODELS[0]


def to_json() -> str:
    """Compact JSON array of {name, aliases} in registry order."""
    logger.info("Returning models")
    return _CATALOG.dump_json(MODELS).decode("utf-8")
