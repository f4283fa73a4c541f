"""Configuration loading utilities for the DEK registry client."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class BasicAuthCredentials(BaseModel):
    credentials_source: str = Field(default="USER_INFO")
    user_info: Optional[str] = Field(default=None)


class ClientConfig(BaseModel):
    """Settings shared with the networked registry client.

    The in-memory client accepts one of these and hands it back untouched;
    it interprets none of the fields. Unknown keys are kept so configs
    written for the networked client load without loss.
    """

    model_config = ConfigDict(extra="allow")

    base_urls: List[str] = Field(default_factory=list)
    cache_capacity: int = Field(default=1000, ge=0)
    cache_latency_in_seconds: int = Field(default=300, ge=0)
    max_retries: int = Field(default=2, ge=0)
    basic_auth_credentials: Optional[BasicAuthCredentials] = Field(default=None)
    headers: Dict[str, str] = Field(default_factory=dict)
    log_level: Optional[str] = Field(default=None, description="Level for configure_logging")


DEFAULT_CONFIG = ClientConfig()


def load_config(path: Optional[Path] = None) -> ClientConfig:
    if path is not None and path.is_file():
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        try:
            return ClientConfig.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid configuration in {path}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_config(config: ClientConfig, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(config.model_dump(mode="json", exclude_none=True), handle, sort_keys=False)


__all__ = ["BasicAuthCredentials", "ClientConfig", "DEFAULT_CONFIG", "load_config", "dump_config"]
