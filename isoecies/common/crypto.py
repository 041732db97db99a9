"""Common cryptographic utilities.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import constant_time

VALID_MASK = 0xFF
INVALID_MASK = 0x00


class CryptoUtils:
    """Utility class for handling derived key material."""

    @staticmethod
    def split_secret(secret: bytearray, dem_keylen: int) -> tuple[bytearray, bytearray]:
        """Split a derived secret into the DEM key and the MAC key."""
        return bytearray(secret[:dem_keylen]), bytearray(secret[dem_keylen:])

    @staticmethod
    def wipe(*buffers: bytearray | None) -> None:
        """Overwrite mutable buffers with zeros."""
        for buffer in buffers:
            if buffer is None:
                continue
            for i in range(len(buffer)):
                buffer[i] = 0

    @staticmethod
    def tag_mask(expected: bytes, received: bytes) -> int:
        """Constant time tag comparison, 0xFF when equal and 0x00 otherwise."""
        equal = constant_time.bytes_eq(bytes(expected), bytes(received))
        return VALID_MASK if equal else INVALID_MASK
