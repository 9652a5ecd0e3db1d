from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

DEFAULT_PORT = 3000


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="127.0.0.1")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)


class LoggingConfig(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(default="INFO")
    log_dir: str | None = Field(
        default=None,
        description="If set, logs are also written to a rotating app.log in this directory.",
    )
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")


class StaticConfig(BaseModel):
    public_dir: str = Field(
        default="public",
        description="Directory served as-is at the server root; relative to the CWD.",
    )


class AppConfig(BaseModel):
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    static: StaticConfig = Field(default_factory=StaticConfig)

    @property
    def public_path(self) -> Path:
        return Path(self.static.public_dir).expanduser()


def _env(env: Mapping[str, str], name: str) -> str | None:
    raw = (env.get(name) or "").strip()
    return raw or None


def load_app_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Build config from environment variables.

    - PORT (default 3000), HOST, LOG_LEVEL, LOG_DIR, PUBLIC_DIR.
    - Blank values count as unset.
    - Validation is performed by Pydantic.
    """

    env = os.environ if environ is None else environ

    network: dict[str, Any] = {}
    port = _env(env, "PORT")
    if port is not None:
        network["port"] = port
    host = _env(env, "HOST")
    if host is not None:
        network["bind_host"] = host

    logging_cfg: dict[str, Any] = {}
    level = _env(env, "LOG_LEVEL")
    if level is not None:
        logging_cfg["level"] = level.upper()
    log_dir = _env(env, "LOG_DIR")
    if log_dir is not None:
        logging_cfg["log_dir"] = log_dir

    static: dict[str, Any] = {}
    public_dir = _env(env, "PUBLIC_DIR")
    if public_dir is not None:
        static["public_dir"] = public_dir

    return AppConfig.model_validate(
        {"network": network, "logging": logging_cfg, "static": static}
    )
