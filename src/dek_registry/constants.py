"""Shared constants for the DEK registry client."""
from __future__ import annotations

from typing import Final

# 2024-01-01T00:00:00Z in milliseconds; every mock Dek carries it.
MOCK_TS: Final[int] = 1_704_067_200_000

LATEST_VERSION: Final[int] = -1
DEFAULT_DEK_VERSION: Final[int] = 1

NOT_FOUND_STATUS: Final[int] = 404
NOT_FOUND_CODE: Final[int] = 40400

LOG_LEVEL_ENV: Final[str] = "DEK_REGISTRY_LOG_LEVEL"
