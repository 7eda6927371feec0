"""Configuration module for starkscript."""

from starkscript.config.loader import load_config, get_config_path, save_config
from starkscript.config.schema import StarkscriptConfig
from starkscript.config.access import get_config, clear_config_cache

__all__ = ["StarkscriptConfig", "load_config", "save_config", "get_config_path", "get_config", "clear_config_cache"]
