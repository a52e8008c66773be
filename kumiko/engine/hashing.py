"""String → 32-bit seed hash. No engine imports."""

from __future__ import annotations

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193
_MASK32 = 0xFFFFFFFF


def hash_string(seed: str) -> int:
    """FNV-1a over the UTF-16 code units of ``seed``.

    UTF-16 units (not code points) keep the value stable for slugs containing
    astral characters, which count as two units.
    """
    data = seed.encode("utf-16-le")
    h = _FNV_OFFSET
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * _FNV_PRIME) & _MASK32
    return h
