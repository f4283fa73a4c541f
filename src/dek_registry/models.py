"""Domain records for key encryption keys and data encryption keys."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .constants import DEFAULT_DEK_VERSION


class DekAlgorithm(str, Enum):
    AES128_GCM = "AES128_GCM"
    AES256_GCM = "AES256_GCM"
    AES256_SIV = "AES256_SIV"

    @property
    def key_size(self) -> int:
        """Raw key length in bytes"""
        return _KEY_SIZES[self]


_KEY_SIZES = {
    DekAlgorithm.AES128_GCM: 16,
    DekAlgorithm.AES256_GCM: 32,
    DekAlgorithm.AES256_SIV: 64,
}


@dataclass(frozen=True, slots=True)
class KekId:
    """Cache identity of a Kek: its name plus the deletion partition."""

    name: str
    deleted: bool = False


@dataclass(frozen=True, slots=True)
class DekId:
    """Cache identity of a Dek.

    ``version`` is always a concrete version here; the ``-1`` "latest"
    sentinel is resolved before a ``DekId`` is built.
    """

    kek_name: str
    subject: str
    algorithm: str
    version: int
    deleted: bool = False

    def same_lineage(self, kek_name: str, subject: str, algorithm: str, deleted: bool) -> bool:
        return (
            self.kek_name == kek_name
            and self.subject == subject
            and self.algorithm == algorithm
            and self.deleted == deleted
        )


@dataclass(slots=True)
class Kek:
    """Key encryption key metadata as held by the registry."""

    name: str
    kms_type: str
    kms_key_id: str
    shared: bool = False
    kms_props: Optional[Dict[str, str]] = None
    doc: Optional[str] = None
    deleted: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the registry's camelCase wire shape.

        ``kmsProps`` and ``doc`` are left out entirely when absent.
        """
        payload: Dict[str, Any] = {
            "name": self.name,
            "kmsType": self.kms_type,
            "kmsKeyId": self.kms_key_id,
        }
        if self.kms_props is not None:
            payload["kmsProps"] = dict(self.kms_props)
        if self.doc is not None:
            payload["doc"] = self.doc
        payload["shared"] = self.shared
        payload["deleted"] = self.deleted
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Kek":
        kms_props = data.get("kmsProps")
        return cls(
            name=data["name"],
            kms_type=data["kmsType"],
            kms_key_id=data["kmsKeyId"],
            shared=bool(data.get("shared", False)),
            kms_props=dict(kms_props) if kms_props is not None else None,
            doc=data.get("doc"),
            deleted=bool(data.get("deleted", False)),
        )


@dataclass(slots=True)
class Dek:
    """Data encryption key record.

    ``encrypted_key_material`` and ``key_material`` are base64 text. The
    ``*_bytes`` slots memoize their decoded form; they are filled by the
    client accessors, never serialized, and ignored by equality.
    """

    kek_name: str
    subject: str
    algorithm: str
    version: int = DEFAULT_DEK_VERSION
    encrypted_key_material: Optional[str] = None
    key_material: Optional[str] = None
    ts: Optional[int] = None
    deleted: bool = False
    encrypted_key_material_bytes: Optional[bytes] = field(
        default=None, init=False, repr=False, compare=False
    )
    key_material_bytes: Optional[bytes] = field(
        default=None, init=False, repr=False, compare=False
    )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "kekName": self.kek_name,
            "subject": self.subject,
            "version": self.version,
            "algorithm": self.algorithm,
        }
        if self.encrypted_key_material is not None:
            payload["encryptedKeyMaterial"] = self.encrypted_key_material
        if self.key_material is not None:
            payload["keyMaterial"] = self.key_material
        if self.ts is not None:
            payload["ts"] = self.ts
        payload["deleted"] = self.deleted
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Dek":
        return cls(
            kek_name=data["kekName"],
            subject=data["subject"],
            algorithm=data["algorithm"],
            version=int(data.get("version", DEFAULT_DEK_VERSION)),
            encrypted_key_material=data.get("encryptedKeyMaterial"),
            key_material=data.get("keyMaterial"),
            ts=data.get("ts"),
            deleted=bool(data.get("deleted", False)),
        )


__all__ = ["DekAlgorithm", "KekId", "DekId", "Kek", "Dek"]
