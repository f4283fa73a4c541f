from __future__ import annotations

import base64
import binascii

from .exceptions import KeyMaterialDecodeError


def b64encode(data: bytes) -> str:
    """Standard base64 encode with padding"""
    return base64.b64encode(data).decode("ascii")


def b64decode(value: str) -> bytes:
    """Strict standard base64 decode that tolerates missing padding"""
    try:
        pad = "=" * (-len(value) % 4)
        return base64.b64decode((value + pad).encode("ascii"), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise KeyMaterialDecodeError(f"Failed to decode base64 string: {exc}") from exc
    except Exception as exc:
        raise KeyMaterialDecodeError(f"Unknown error: {exc!r}") from exc


__all__ = ["b64encode", "b64decode"]
