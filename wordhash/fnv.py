"""FNV-1a hashes (32 and 64 bit) and xor-folding to narrower widths."""

from __future__ import annotations

FNV_PRIME_32 = 16777619
FNV_OFFSET_BASIS_32 = 2166136261
FNV_PRIME_64 = 1099511628211
FNV_OFFSET_BASIS_64 = 14695981039346656037

_MASK_32 = (1 << 32) - 1
_MASK_64 = (1 << 64) - 1


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", "surrogateescape")
    return bytes(data)


def _fnv1a(data: bytes, basis: int, prime: int, mask: int) -> int:
    h = basis
    for octet in data:
        h = ((h ^ octet) * prime) & mask
    return h


def fnv1a_32(data: bytes | bytearray | memoryview | str) -> int:
    """Return the 32-bit FNV-1a hash of ``data`` (text is hashed as UTF-8)."""
    return _fnv1a(_as_bytes(data), FNV_OFFSET_BASIS_32, FNV_PRIME_32, _MASK_32)


def fnv1a_64(data: bytes | bytearray | memoryview | str) -> int:
    """Return the 64-bit FNV-1a hash of ``data`` (text is hashed as UTF-8)."""
    return _fnv1a(_as_bytes(data), FNV_OFFSET_BASIS_64, FNV_PRIME_64, _MASK_64)


def xor_fold(value: int, bits: int) -> int:
    """Fold the bits of ``value`` above ``bits`` into the low ``bits`` bits.

    For a 32-bit hash folded to 24 bits this is
    ``(hash >> 24) ^ (hash & 0xffffff)``.
    """
    if bits <= 0:
        raise ValueError("bits must be positive")
    if value < 0:
        raise ValueError("value must not be negative")
    mask = (1 << bits) - 1
    return (value >> bits) ^ (value & mask)