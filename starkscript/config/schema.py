"""Configuration schema using Pydantic.

Persisted to ~/.starkscript/config.json; every field can also be set from
the environment (``STARKSCRIPT_RPC__URL``, ``STARKSCRIPT_LOG__LEVEL``, ...).
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Node JSON-RPC spec version this client speaks
EXPECTED_RPC_VERSION = "0.7.0"


class RpcConfig(BaseModel):
    """Node connection settings."""
    url: str = ""  # Falls back to the RPC_URL env var when empty
    timeout_s: float = 20.0
    expected_version: str = EXPECTED_RPC_VERSION
    headers: dict[str, str] = Field(default_factory=dict)


class LogConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    file_enabled: bool = False
    file_name: str = "starkscript"


class StarkscriptConfig(BaseSettings):
    """Root configuration for starkscript."""
    rpc: RpcConfig = Field(default_factory=RpcConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    model_config = SettingsConfigDict(
        env_prefix="STARKSCRIPT_",
        env_nested_delimiter="__",
    )
