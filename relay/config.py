from __future__ import annotations

import logging
import math
import os
import tomllib
from pathlib import Path
from typing import Any, Callable, Mapping

import relay.registry as registry
from relay.errors import ConfigError
from relay.models import Settings

logger = logging.getLogger(__name__)

CONFIG_DIR = Path("~/.relay").expanduser()
CONFIG_FILE = CONFIG_DIR / "config.toml"
SECTION = "plugin"

KEYS = ("api_key", "model", "temperature", "role")
DEFAULT_TEMPERATURE = 0.7

Lookup = Callable[[str], "str | None"]


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

def resolve_settings(get: Lookup) -> Settings:
    """Read the four plugin keys through ``get`` and validate them into Settings.

    Errors raised by ``get`` itself propagate unchanged.
    """
    api_key = get("api_key")
    model_input = get("model")
    temperature_input = get("temperature")
    role_input = get("role")

    if not api_key:
        logger.error("API key not found")
        raise ConfigError("API key not found")
    logger.info("API key found")

    if model_input is None:
        logger.info("Model not specified, using default")
        model = registry.default()
    else:
        found = registry.find(model_input)
        if found is None:
            logger.error("Model not found: %s", model_input)
            raise ConfigError("Model not found")
        logger.info("Model found: %s", found.name)
        model = found

    if temperature_input is None:
        logger.info("Temperature not specified, using default")
        temperature = DEFAULT_TEMPERATURE
    else:
        temperature = _parse_temperature(temperature_input)
        logger.info("Temperature: %s", temperature)

    role = role_input or ""
    if role:
        logger.info("Role: %s", role)
    else:
        logger.info("Role not specified")

    return Settings(api_key=api_key, model=model, temperature=temperature, role=role)


def _parse_temperature(raw: str) -> float:
    try:
        # float() also takes padding and digit separators; neither is a plain decimal
        if raw != raw.strip() or "_" in raw:
            raise ValueError(raw)
        value = float(raw)
    except ValueError:
        logger.error("Temperature must be a float")
        raise ConfigError("Temperature must be a float") from None
    if math.isnan(value) or value < 0.0 or value > 1.0:
        logger.error("Temperature must be between 0.0 and 1.0")
        raise ConfigError("Temperature out of range")
    return value


# ---------------------------------------------------------------------------
# Host store (~/.relay/config.toml)
# ---------------------------------------------------------------------------

def config_file() -> Path:
    override = os.environ.get("RELAY_CONFIG")
    return Path(override).expanduser() if override else CONFIG_FILE


def load(path: Path | None = None) -> dict[str, str]:
    """Load the [plugin] table. A missing file is an empty store."""
    path = path or config_file()
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            on_disk = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        logger.error("Invalid config file %s: %s", path, e)
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    table = on_disk.get(SECTION, {})
    return {k: _stringify(v) for k, v in table.items()}


def save(store: Mapping[str, str], path: Path | None = None) -> None:
    """Write the store back as a [plugin] table."""
    path = path or config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [f"[{SECTION}]"]
    for k, v in store.items():
        lines.append(f"{k} = {_toml_string(v)}")
    path.write_text("\n".join(lines) + "\n")


def lookup(store: Mapping[str, str]) -> Lookup:
    """Adapt a mapping into the key lookup the resolver expects.

    Empty strings count as missing.
    """
    def get(key: str) -> str | None:
        value = store.get(key)
        return value if value else None

    return get


_TOML_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r"}


def _stringify(v: Any) -> str:
    if isinstance(v, bool):
        return "true" if v else "false"
    return str(v)


def _toml_string(v: str) -> str:
    """Quote as a TOML basic string. Control characters other than tab are escaped."""
    out = []
    for ch in v:
        if ch in _TOML_ESCAPES:
            out.append(_TOML_ESCAPES[ch])
        elif ch != "\t" and (ord(ch) < 0x20 or ord(ch) == 0x7F):
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'
