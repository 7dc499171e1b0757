"""FNV-1a 64-bit hash used for content-addressed container ids."""

from __future__ import annotations

FNV1A_OFFSET: int = 14695981039346656037
FNV1A_PRIME: int = 1099511628211
_MASK64: int = 0xFFFFFFFFFFFFFFFF


def fnv1a_u64(data: bytes | str) -> int:
    """Compute FNV-1a 64-bit hash of raw bytes (strings are hashed as UTF-8)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    h = FNV1A_OFFSET
    for byte in data:
        h ^= byte
        h = (h * FNV1A_PRIME) & _MASK64
    return h
