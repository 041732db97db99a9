"""
Name lookups for hash functions and block ciphers.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers import algorithms

from isoecies.common.exceptions import ConfigurationError, UnknownPrimitiveError

HASHES: dict[str, type[hashes.HashAlgorithm]] = {
    "SHA-1": hashes.SHA1,
    "SHA-160": hashes.SHA1,
    "SHA-224": hashes.SHA224,
    "SHA-256": hashes.SHA256,
    "SHA-384": hashes.SHA384,
    "SHA-512": hashes.SHA512,
}

# block cipher name -> key length in bytes
BLOCK_CIPHERS: dict[str, int] = {
    "AES-128": 16,
    "AES-192": 24,
    "AES-256": 32,
}

AES_BLOCK_SIZE = 16


def hash_algorithm(name: str) -> hashes.HashAlgorithm:
    try:
        return HASHES[name.upper()]()
    except KeyError as err:
        raise UnknownPrimitiveError("hash", name) from err


def block_cipher_key_length(name: str) -> int:
    try:
        return BLOCK_CIPHERS[name.upper()]
    except KeyError as err:
        raise UnknownPrimitiveError("block cipher", name) from err


def block_cipher(name: str, key: bytes) -> algorithms.AES:
    """Instantiate a keyed block cipher, checking the key length for the name."""
    expected = block_cipher_key_length(name)
    if len(key) != expected:
        msg = f"{name} requires a {expected} byte key, got {len(key)}"
        raise ConfigurationError(msg)
    return algorithms.AES(bytes(key))
