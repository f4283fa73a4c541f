"""In-memory DEK registry used in place of the networked client in tests."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

import structlog

from .client import DekClient
from .config import ClientConfig
from .constants import DEFAULT_DEK_VERSION, LATEST_VERSION, MOCK_TS
from .encoding import b64decode, b64encode
from .exceptions import DekNotFoundError, KekNotFoundError
from .models import Dek, DekId, Kek, KekId

logger = structlog.get_logger(__name__)


def _algorithm_name(algorithm: str) -> str:
    # DekAlgorithm members and plain strings must map to the same cache key.
    if isinstance(algorithm, Enum):
        return str(algorithm.value)
    return algorithm


class MockDekRegistryClient(DekClient):
    """Transient KEK/DEK store keyed by entity identity plus a deleted flag.

    Registration is first-write-wins: registering an identity that already
    has a visible entry returns the stored record unchanged. Nothing is ever
    evicted. No locking is done; callers sharing an instance across threads
    must serialize access themselves.
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self._config = config
        self._kek_cache: Dict[KekId, Kek] = {}
        self._dek_cache: Dict[DekId, Dek] = {}

    def config(self) -> Optional[ClientConfig]:
        return self._config

    # ----- Keks -----
    def register_kek(
        self,
        name: str,
        kms_type: str,
        kms_key_id: str,
        shared: bool,
        kms_props: Optional[Dict[str, str]] = None,
        doc: Optional[str] = None,
    ) -> Kek:
        key = KekId(name=name, deleted=False)
        cached = self._kek_cache.get(key)
        if cached is not None:
            logger.debug("kek.register.existing", kek=name)
            return cached

        kek = Kek(
            name=name,
            kms_type=kms_type,
            kms_key_id=kms_key_id,
            shared=shared,
            kms_props=dict(kms_props) if kms_props is not None else None,
            doc=doc,
        )
        self._kek_cache[key] = kek
        logger.debug("kek.register.created", kek=name, kms_type=kms_type, shared=shared)
        return kek

    def get_kek(self, name: str, deleted: bool = False) -> Kek:
        # A deleted=True request accepts either state, so it also sees the live partition.
        partitions = (True, False) if deleted else (False,)
        for partition in partitions:
            cached = self._kek_cache.get(KekId(name=name, deleted=partition))
            if cached is not None and (not cached.deleted or deleted):
                return cached

        logger.debug("kek.not_found", kek=name, deleted=deleted)
        raise KekNotFoundError(name)

    # ----- Deks -----
    def register_dek(
        self,
        kek_name: str,
        subject: str,
        algorithm: str,
        version: int = DEFAULT_DEK_VERSION,
        encrypted_key_material: Optional[str] = None,
    ) -> Dek:
        if version < DEFAULT_DEK_VERSION:
            raise ValueError(f"Dek version must be a positive integer, got {version}")
        algorithm = _algorithm_name(algorithm)
        key = DekId(kek_name=kek_name, subject=subject, algorithm=algorithm, version=version)
        cached = self._dek_cache.get(key)
        if cached is not None:
            logger.debug("dek.register.existing", kek=kek_name, subject=subject, version=version)
            return cached

        dek = Dek(
            kek_name=kek_name,
            subject=subject,
            algorithm=algorithm,
            version=version,
            encrypted_key_material=encrypted_key_material,
            ts=MOCK_TS,
        )
        self._dek_cache[key] = dek
        logger.debug(
            "dek.register.created",
            kek=kek_name,
            subject=subject,
            algorithm=algorithm,
            version=version,
        )
        return dek

    def get_dek(
        self,
        kek_name: str,
        subject: str,
        algorithm: str,
        version: int = DEFAULT_DEK_VERSION,
        deleted: bool = False,
    ) -> Dek:
        algorithm = _algorithm_name(algorithm)
        if version == LATEST_VERSION:
            version = self._latest_version(kek_name, subject, algorithm, deleted)

        # The fetch always targets the live partition; ``deleted`` only
        # scopes the latest-version scan above.
        cached = self._dek_cache.get(
            DekId(kek_name=kek_name, subject=subject, algorithm=algorithm, version=version)
        )
        if cached is not None:
            return cached

        logger.debug("dek.not_found", kek=kek_name, subject=subject, version=version)
        raise DekNotFoundError(subject)

    def _latest_version(self, kek_name: str, subject: str, algorithm: str, deleted: bool) -> int:
        versions = [
            key.version
            for key in self._dek_cache
            if key.version >= DEFAULT_DEK_VERSION
            and key.same_lineage(kek_name, subject, algorithm, deleted)
        ]
        if not versions:
            logger.debug("dek.latest.not_found", kek=kek_name, subject=subject, algorithm=algorithm)
            raise DekNotFoundError(subject)

        latest = max(versions)
        logger.debug("dek.latest.resolved", kek=kek_name, subject=subject, version=latest)
        return latest

    # ----- Key material -----
    def get_dek_encrypted_key_material_bytes(self, dek: Dek) -> Optional[bytes]:
        if not dek.encrypted_key_material:
            return None
        if dek.encrypted_key_material_bytes is None:
            dek.encrypted_key_material_bytes = b64decode(dek.encrypted_key_material)
        return dek.encrypted_key_material_bytes

    def get_dek_key_material_bytes(self, dek: Dek) -> Optional[bytes]:
        if not dek.key_material:
            return None
        if dek.key_material_bytes is None:
            dek.key_material_bytes = b64decode(dek.key_material)
        return dek.key_material_bytes

    def set_dek_key_material(self, dek: Dek, key_material_bytes: Optional[bytes]) -> None:
        if key_material_bytes:
            dek.key_material = b64encode(key_material_bytes)

    def close(self) -> None:
        return None


__all__ = ["MockDekRegistryClient"]
