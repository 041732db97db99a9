"""
ECIES encryption.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from ecdsa.ellipticcurve import Point, PointJacobi

from isoecies.common.crypto import CryptoUtils
from isoecies.common.exceptions import (
    BadPointError,
    ConfigurationError,
    MissingPeerKeyError,
)
from isoecies.ec.group import EcGroup
from isoecies.ec.keys import EcPrivateKey
from isoecies.ecies.ka_operation import KaOperation

if TYPE_CHECKING:
    from types import TracebackType

    from isoecies.ec.group import EcPoint
    from isoecies.ec.keys import RandomSource
    from isoecies.ecies.params import SystemParams

logger = logging.getLogger(__name__)

PeerKey = Union[PointJacobi, Point, bytes, bytearray, ec.EllipticCurvePublicKey]


def to_label(label: bytes | str) -> bytes:
    if isinstance(label, str):
        return label.encode("utf-8")
    return bytes(label)


def peer_point(group: EcGroup, key: PeerKey) -> EcPoint:
    """
    Turn a point, an encoded point or a cryptography public key into a
    validated point on group.
    """
    if isinstance(key, ec.EllipticCurvePublicKey):
        if EcGroup.from_name(key.curve.name) != group:
            msg = f"public key is on {key.curve.name}, expected {group.name}"
            raise ConfigurationError(msg)
        key = key.public_bytes(
            serialization.Encoding.X962, serialization.PublicFormat.UncompressedPoint
        )
    if isinstance(key, (bytes, bytearray, memoryview)):
        return group.decode_point(bytes(key))
    if not group.is_on_curve(key):
        msg = "public point is not on the curve"
        raise BadPointError(msg)
    return key


class Encryptor:
    """
    ECIES encryptor bound to one ephemeral key.

    Every ciphertext produced by an instance carries the same ephemeral public
    key. An instance is not safe for concurrent use.

    close(), or leaving a ``with`` block, destroys the ephemeral private key,
    including one passed in by the caller. Garbage collection only destroys an
    ephemeral key the instance generated itself.
    """

    def __init__(
        self,
        params: SystemParams,
        private_key: EcPrivateKey | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self._owns_key = private_key is None
        if private_key is None:
            private_key = EcPrivateKey.generate(params.domain, rng)
        self.params = params
        self._private_key: EcPrivateKey | None = private_key
        self._ka: KaOperation | None = KaOperation(
            private_key, params.ka_params, for_encryption=True, rng=rng
        )
        self._eph_public_key_bin = params.domain.encode_point(
            private_key.public_point, params.compression
        )
        self._other_point: EcPoint | None = None
        self._iv = b""
        self._label = b""
        logger.debug(
            "Encryptor created on %s with %s", params.domain.name, params.dem_spec
        )

    @property
    def eph_public_key_bin(self) -> bytes:
        """Encoded ephemeral public key, the prefix of every ciphertext."""
        return self._eph_public_key_bin

    def set_other_key(self, key: PeerKey) -> None:
        """Set the recipient's public key."""
        self._other_point = peer_point(self.params.domain, key)

    def set_initialization_vector(self, iv: bytes) -> None:
        self._iv = bytes(iv)

    def set_label(self, label: bytes | str) -> None:
        self._label = to_label(label)

    def ciphertext_length(self, plaintext_length: int) -> int:
        return (
            len(self._eph_public_key_bin)
            + self.params.create_cipher().output_length(plaintext_length)
            + self.params.create_mac().output_length
        )

    def maximum_input_size(self) -> int:
        return sys.maxsize

    def encrypt(self, plaintext: bytes, rng: RandomSource | None = None) -> bytes:
        """
        Encrypt plaintext to the other party.

        The ephemeral key is fixed at construction, so rng is not consumed.

        Returns:
            eph_public_key_bin || DEM ciphertext || MAC tag

        Raises:
            MissingPeerKeyError: if set_other_key() has not been called
            ConfigurationError: if the DEM needs an IV that is missing or of the wrong size
        """
        if self._ka is None:
            msg = "encryptor has been closed"
            raise ConfigurationError(msg)
        if self._other_point is None:
            msg = "the other party's public key must be set before encrypting"
            raise MissingPeerKeyError(msg)

        cipher = self.params.create_cipher()
        mac = self.params.create_mac()
        secret = self._ka.derive_secret(self._eph_public_key_bin, self._other_point)
        dem_key, mac_key = CryptoUtils.split_secret(secret, self.params.dem_keylen)
        try:
            ciphertext = cipher.encrypt(dem_key, self._iv, plaintext)
            tag = mac.compute(mac_key, ciphertext, self._label)
        finally:
            CryptoUtils.wipe(secret, dem_key, mac_key)

        logger.debug(
            "Encrypted %d bytes into %d bytes",
            len(plaintext),
            len(self._eph_public_key_bin) + len(ciphertext) + len(tag),
        )
        return self._eph_public_key_bin + ciphertext + tag

    def close(self) -> None:
        """Destroy the ephemeral private key."""
        if self._ka is not None:
            self._ka.close()
            self._ka = None
        if self._private_key is not None:
            self._private_key.destroy()
            self._private_key = None

    def __del__(self) -> None:
        ka = getattr(self, "_ka", None)
        if ka is not None:
            ka.close()
        private_key = getattr(self, "_private_key", None)
        if private_key is not None and self._owns_key:
            private_key.destroy()

    def __enter__(self) -> Encryptor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
