"""Capability interface shared by the networked and in-memory registry clients."""
from __future__ import annotations

from typing import Dict, Optional

from .config import ClientConfig
from .constants import DEFAULT_DEK_VERSION
from .models import Dek, Kek


class DekClient:
    """Protocol-like base class for DEK registry clients.

    The encryption rule executors talk to the registry only through these
    methods, so a test can swap the networked client for the in-memory one.
    """

    def config(self) -> Optional[ClientConfig]:  # pragma: no cover - protocol
        raise NotImplementedError

    def register_kek(
        self,
        name: str,
        kms_type: str,
        kms_key_id: str,
        shared: bool,
        kms_props: Optional[Dict[str, str]] = None,
        doc: Optional[str] = None,
    ) -> Kek:  # pragma: no cover - protocol
        raise NotImplementedError

    def get_kek(self, name: str, deleted: bool = False) -> Kek:  # pragma: no cover - protocol
        raise NotImplementedError

    def register_dek(
        self,
        kek_name: str,
        subject: str,
        algorithm: str,
        version: int = DEFAULT_DEK_VERSION,
        encrypted_key_material: Optional[str] = None,
    ) -> Dek:  # pragma: no cover - protocol
        raise NotImplementedError

    def get_dek(
        self,
        kek_name: str,
        subject: str,
        algorithm: str,
        version: int = DEFAULT_DEK_VERSION,
        deleted: bool = False,
    ) -> Dek:  # pragma: no cover - protocol
        raise NotImplementedError

    def get_dek_encrypted_key_material_bytes(self, dek: Dek) -> Optional[bytes]:  # pragma: no cover - protocol
        raise NotImplementedError

    def get_dek_key_material_bytes(self, dek: Dek) -> Optional[bytes]:  # pragma: no cover - protocol
        raise NotImplementedError

    def set_dek_key_material(self, dek: Dek, key_material_bytes: Optional[bytes]) -> None:  # pragma: no cover - protocol
        raise NotImplementedError

    def close(self) -> None:  # pragma: no cover - protocol
        raise NotImplementedError

    def __enter__(self) -> "DekClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["DekClient"]
