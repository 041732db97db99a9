"""
Elliptic curve private keys used for ECIES key agreement.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Callable

from ecdsa.util import randrange

from isoecies.common.exceptions import ConfigurationError
from isoecies.ec.group import EcGroup, PointCompression

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePrivateKey

    from isoecies.ec.group import EcPoint

logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]


class EcPrivateKey:
    """A private scalar in [1, n-1] together with its public point."""

    def __init__(self, group: EcGroup, value: int) -> None:
        if not 1 <= value < group.order:
            msg = "private value must be in [1, n-1]"
            raise ConfigurationError(msg)
        self.group = group
        self._value: int | None = value
        self.public_point: EcPoint = group.generator * value

    @classmethod
    def generate(cls, group: EcGroup, rng: RandomSource | None = None) -> EcPrivateKey:
        """Generate a fresh key on the group, drawing from rng (os.urandom by default)."""
        value = randrange(group.order, entropy=rng or os.urandom)
        logger.debug("Generated private key on %s", group.name)
        return cls(group, value)

    @classmethod
    def from_bytes(cls, group: EcGroup, data: bytes) -> EcPrivateKey:
        return cls(group, int.from_bytes(data, "big"))

    @classmethod
    def from_cryptography(cls, key: EllipticCurvePrivateKey) -> EcPrivateKey:
        """Import a private key created with the cryptography library."""
        group = EcGroup.from_name(key.curve.name)
        return cls(group, key.private_numbers().private_value)

    @property
    def private_value(self) -> int:
        if self._value is None:
            msg = "private key has been destroyed"
            raise ConfigurationError(msg)
        return self._value

    def to_bytes(self) -> bytes:
        """Private scalar as a fixed-width big endian integer."""
        size = (self.group.order.bit_length() + 7) // 8
        return self.private_value.to_bytes(size, "big")

    def public_bytes(
        self, compression: PointCompression = PointCompression.UNCOMPRESSED
    ) -> bytes:
        return self.group.encode_point(self.public_point, compression)

    def destroy(self) -> None:
        """Drop the private scalar; the key is unusable afterwards."""
        self._value = None

    def __repr__(self) -> str:
        return f"EcPrivateKey(group={self.group.name!r})"
