"""Configuration loading utilities."""

import json
import os
from pathlib import Path
from typing import Any

from starkscript.config.schema import StarkscriptConfig

RPC_URL_ENV_VAR = "RPC_URL"


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".starkscript" / "config.json"


def load_config(config_path: Path | None = None) -> StarkscriptConfig:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
            cfg = StarkscriptConfig(**convert_keys(data))
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to regenerate defaults."
            ) from e
    else:
        cfg = StarkscriptConfig()

    _apply_rpc_url_env(cfg)
    return cfg


def save_config(config: StarkscriptConfig, config_path: Path | None = None) -> Path:
    """Save configuration to file (camelCase keys)."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    data = convert_to_camel(config.model_dump())
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def _apply_rpc_url_env(cfg: StarkscriptConfig) -> None:
    """Fill rpc.url from RPC_URL when neither the file nor STARKSCRIPT_RPC__URL set it."""
    if cfg.rpc.url:
        return
    env_url = os.environ.get(RPC_URL_ENV_VAR, "").strip()
    if env_url:
        cfg.rpc.url = env_url


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic.
    Keys under rpc.headers are preserved (they are HTTP header names)."""
    if isinstance(data, dict):
        result: dict[str, Any] = {}
        for k, v in data.items():
            new_k = camel_to_snake(k)
            if new_k == "headers" and isinstance(v, dict):
                result[new_k] = dict(v)
            else:
                result[new_k] = convert_keys(v)
        return result
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        result: dict[str, Any] = {}
        for k, v in data.items():
            new_k = snake_to_camel(k)
            result[new_k] = dict(v) if k == "headers" and isinstance(v, dict) else convert_to_camel(v)
        return result
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
