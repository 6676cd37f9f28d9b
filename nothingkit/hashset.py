"""A fixed-bucket hash set of byte strings."""

from __future__ import annotations

FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
_MASK64 = (1 << 64) - 1


def fnv1(data: bytes) -> int:
    """64-bit FNV-1 hash; bytes are sign-extended as signed characters."""
    h = FNV_OFFSET_BASIS
    for byte in data:
        signed = byte - 256 if byte >= 0x80 else byte
        h = (h * FNV_PRIME) & _MASK64
        h ^= signed & _MASK64
    return h


class HashSet:
    """Set of byte strings of one size, spread over a fixed number of buckets."""

    def __init__(self, element_size: int, n: int) -> None:
        if n <= 0:
            raise ValueError("a hash set needs at least one bucket")
        if element_size <= 0:
            raise ValueError("element size must be positive")
        self.element_size = element_size
        self._buckets: list[list[bytes]] = [[] for _ in range(n)]
        self._count = 0

    def _key(self, element: bytes) -> bytes:
        key = bytes(element)
        if len(key) != self.element_size:
            raise ValueError(
                f"element has {len(key)} bytes, expected {self.element_size}")
        return key

    def _bucket(self, key: bytes) -> list[bytes]:
        return self._buckets[fnv1(key) % len(self._buckets)]

    def insert(self, element: bytes) -> None:
        """Add the element unless it is already present."""
        key = self._key(element)
        bucket = self._bucket(key)
        if key not in bucket:
            bucket.append(key)
            self._count += 1

    def __contains__(self, element: object) -> bool:
        if not isinstance(element, (bytes, bytearray, memoryview)):
            return False
        key = bytes(element)
        if len(key) != self.element_size:
            return False
        return key in self._bucket(key)

    def clear(self) -> None:
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def values(self) -> list[bytes]:
        """All elements, bucket by bucket, each bucket in insertion order."""
        return [key for bucket in self._buckets for key in bucket]