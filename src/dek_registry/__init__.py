"""
dek_registry - KEK/DEK registry client for field-level encryption

Ships the client interface and an in-memory implementation that stands in
for the networked registry during tests.
"""

from .client import DekClient
from .config import BasicAuthCredentials, ClientConfig, load_config
from .constants import DEFAULT_DEK_VERSION, LATEST_VERSION, MOCK_TS
from .encoding import b64decode, b64encode
from .exceptions import (
    DekNotFoundError,
    DekRegistryError,
    KekNotFoundError,
    KeyMaterialDecodeError,
    NotFoundError,
    RestError,
)
from .logging import configure_logging
from .mock_client import MockDekRegistryClient
from .models import Dek, DekAlgorithm, DekId, Kek, KekId

__version__ = "0.1.0"

__all__ = [
    # Client
    "DekClient",
    "MockDekRegistryClient",
    # Models
    "Kek",
    "Dek",
    "KekId",
    "DekId",
    "DekAlgorithm",
    # Config
    "ClientConfig",
    "BasicAuthCredentials",
    "load_config",
    "configure_logging",
    # Encoding
    "b64encode",
    "b64decode",
    # Errors
    "DekRegistryError",
    "RestError",
    "NotFoundError",
    "KekNotFoundError",
    "DekNotFoundError",
    "KeyMaterialDecodeError",
    # Constants
    "MOCK_TS",
    "LATEST_VERSION",
    "DEFAULT_DEK_VERSION",
]
