"""
Message authentication codes: HMAC and CMAC.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import cmac, hmac

from isoecies.primitives.algorithms import (
    AES_BLOCK_SIZE,
    block_cipher,
    block_cipher_key_length,
    hash_algorithm,
)
from isoecies.primitives.registry import MAC, registry


class Hmac:
    def __init__(self, hash_name: str) -> None:
        self.algorithm = hash_algorithm(hash_name)
        self.name = f"HMAC({hash_name})"
        self.output_length = self.algorithm.digest_size

    def valid_key_length(self, length: int) -> bool:
        return length > 0

    def compute(self, key: bytes, *chunks: bytes) -> bytes:
        """Tag over the concatenation of chunks."""
        h = hmac.HMAC(bytes(key), self.algorithm)
        for chunk in chunks:
            if chunk:
                h.update(bytes(chunk))
        return h.finalize()


class Cmac:
    def __init__(self, cipher_name: str) -> None:
        self.cipher_name = cipher_name.upper()
        self.key_length = block_cipher_key_length(self.cipher_name)
        self.name = f"CMAC({self.cipher_name})"
        self.output_length = AES_BLOCK_SIZE

    def valid_key_length(self, length: int) -> bool:
        return length == self.key_length

    def compute(self, key: bytes, *chunks: bytes) -> bytes:
        c = cmac.CMAC(block_cipher(self.cipher_name, key))
        for chunk in chunks:
            if chunk:
                c.update(bytes(chunk))
        return c.finalize()


registry.register(MAC, "HMAC")(Hmac)
registry.register(MAC, "CMAC")(Cmac)
