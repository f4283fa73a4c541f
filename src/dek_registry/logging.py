"""Structured logging setup for the DEK registry client."""
from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Any, FrozenSet, MutableMapping, Optional

import structlog

from .constants import LOG_LEVEL_ENV

if TYPE_CHECKING:  # pragma: no cover
    from .config import ClientConfig

_DEFAULT_LEVEL = "INFO"
_COMPONENT = "dek_registry"
REDACTED = "[REDACTED]"

# Snake and camel spellings so wire payloads passed as context are covered too.
_KEY_MATERIAL_FIELDS: FrozenSet[str] = frozenset(
    {
        "key_material",
        "encrypted_key_material",
        "key_material_bytes",
        "encrypted_key_material_bytes",
        "keyMaterial",
        "encryptedKeyMaterial",
    }
)

EventDict = MutableMapping[str, Any]


def configure_logging(level: str | None = None, *, config: Optional["ClientConfig"] = None) -> None:
    """Route structlog events to stdout as JSON lines.

    The level is taken from ``level``, then ``config.log_level``, then the
    ``DEK_REGISTRY_LOG_LEVEL`` environment variable, defaulting to ``INFO``.
    Key material fields are masked before rendering, at the top level and
    one mapping deep.
    """

    numeric_level = resolve_level(level, config)
    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stdout)],
        format="%(message)s",
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _redact_key_material,
            _normalize_event,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def resolve_level(level: str | None = None, config: Optional["ClientConfig"] = None) -> int:
    name = level or (config.log_level if config is not None else None) or os.getenv(LOG_LEVEL_ENV)
    numeric = logging.getLevelName((name or _DEFAULT_LEVEL).upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def _redact_key_material(_logger: Any, _name: str, event_dict: EventDict) -> EventDict:
    for key, value in list(event_dict.items()):
        if key in _KEY_MATERIAL_FIELDS and value is not None:
            event_dict[key] = REDACTED
        elif isinstance(value, dict):
            event_dict[key] = {
                inner: REDACTED if inner in _KEY_MATERIAL_FIELDS and item is not None else item
                for inner, item in value.items()
            }
    return event_dict


def _normalize_event(logger: Any, _name: str, event_dict: EventDict) -> EventDict:
    # Emit ``msg`` instead of ``event`` and tag the originating component.
    event_dict.setdefault("component", getattr(logger, "name", None) or _COMPONENT)
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


__all__ = ["REDACTED", "configure_logging", "resolve_level"]
