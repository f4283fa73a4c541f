"""Central exception hierarchy"""
from __future__ import annotations

from .constants import NOT_FOUND_CODE, NOT_FOUND_STATUS


class DekRegistryError(Exception):
    """Base exception for all registry failures"""


class RestError(DekRegistryError):
    """Error shaped like a registry REST response (HTTP status + error code)"""

    def __init__(self, message: str, status: int, code: int) -> None:
        super().__init__(message)
        self.status = status
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, status={self.status}, code={self.code})"


class NotFoundError(RestError):
    """Raised when an entity is absent or hidden by the visibility rule"""

    def __init__(self, message: str) -> None:
        super().__init__(message, NOT_FOUND_STATUS, NOT_FOUND_CODE)


class KekNotFoundError(NotFoundError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Kek not found: {name}")
        self.name = name


class DekNotFoundError(NotFoundError):
    def __init__(self, subject: str) -> None:
        super().__init__(f"Dek not found: {subject}")
        self.subject = subject


class KeyMaterialDecodeError(DekRegistryError):
    """Raised when stored key material is not valid base64"""


__all__ = [
    "DekRegistryError",
    "RestError",
    "NotFoundError",
    "KekNotFoundError",
    "DekNotFoundError",
    "KeyMaterialDecodeError",
]
