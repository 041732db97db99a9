"""
Key derivation functions: KDF1 (IEEE 1363a), KDF1-18033, KDF2 (X9.63) and HKDF.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives.kdf.x963kdf import X963KDF

from isoecies.common.exceptions import ConfigurationError
from isoecies.primitives.algorithms import hash_algorithm
from isoecies.primitives.registry import KDF, registry


def _counter_mode_hash(
    algorithm: hashes.HashAlgorithm, secret: bytes, length: int, start: int
) -> bytes:
    """Hash(secret || I2OSP(counter, 4)) blocks, counter starting at start."""
    output = bytearray()
    counter = start
    while len(output) < length:
        digest = hashes.Hash(algorithm)
        digest.update(secret)
        digest.update(counter.to_bytes(4, "big"))
        output += digest.finalize()
        counter += 1
    return bytes(output[:length])


class Kdf1:
    """IEEE 1363a KDF1: a single hash of the secret, truncated."""

    def __init__(self, hash_name: str) -> None:
        self.algorithm = hash_algorithm(hash_name)
        self.name = f"KDF1({hash_name})"

    def max_output_length(self) -> int:
        return self.algorithm.digest_size

    def derive(self, secret: bytes, length: int) -> bytes:
        if length > self.algorithm.digest_size:
            msg = f"{self.name} cannot produce {length} bytes"
            raise ConfigurationError(msg)
        digest = hashes.Hash(self.algorithm)
        digest.update(secret)
        return digest.finalize()[:length]


class Kdf1Iso18033:
    """ISO 18033-2 KDF1: counter mode hash starting at zero."""

    def __init__(self, hash_name: str) -> None:
        self.algorithm = hash_algorithm(hash_name)
        self.name = f"KDF1-18033({hash_name})"

    def max_output_length(self) -> int:
        return self.algorithm.digest_size * (2**32 - 1)

    def derive(self, secret: bytes, length: int) -> bytes:
        return _counter_mode_hash(self.algorithm, secret, length, 0)


class Kdf2:
    """KDF2 (ISO 18033-2, ANSI X9.63): counter mode hash starting at one."""

    def __init__(self, hash_name: str) -> None:
        self.algorithm = hash_algorithm(hash_name)
        self.name = f"KDF2({hash_name})"

    def max_output_length(self) -> int:
        return self.algorithm.digest_size * (2**32 - 1)

    def derive(self, secret: bytes, length: int) -> bytes:
        return X963KDF(algorithm=self.algorithm, length=length, sharedinfo=None).derive(
            bytes(secret)
        )


class Hkdf:
    """HKDF (RFC 5869) with empty salt and info."""

    def __init__(self, hash_name: str) -> None:
        self.algorithm = hash_algorithm(hash_name)
        self.name = f"HKDF({hash_name})"

    def max_output_length(self) -> int:
        return self.algorithm.digest_size * 255

    def derive(self, secret: bytes, length: int) -> bytes:
        return HKDF(
            algorithm=self.algorithm,
            length=length,
            salt=None,
            info=None,
        ).derive(bytes(secret))


registry.register(KDF, "KDF1")(Kdf1)
registry.register(KDF, "KDF1-18033")(Kdf1Iso18033)
registry.register(KDF, "KDF2", "X9.63")(Kdf2)
registry.register(KDF, "HKDF")(Hkdf)
