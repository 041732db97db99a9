"""
ECIES decryption.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from isoecies.common.crypto import CryptoUtils
from isoecies.common.exceptions import (
    AuthenticationError,
    BadPointError,
    ConfigurationError,
    DemError,
    MalformedCiphertextError,
)
from isoecies.ecies.encryptor import to_label
from isoecies.ecies.ka_operation import KaOperation

if TYPE_CHECKING:
    from types import TracebackType

    from isoecies.ec.group import EcGroup
    from isoecies.ec.keys import EcPrivateKey, RandomSource
    from isoecies.ecies.params import SystemParams

logger = logging.getLogger(__name__)


def check_cofactor_order(group: EcGroup, check_mode: bool) -> None:
    """
    Without explicit point checks, the cofactor must be coprime to the order.

    Raises:
        ConfigurationError: if gcd(h, n) != 1 and check mode is off
    """
    if check_mode or group.cofactor == 1:
        return
    if math.gcd(group.cofactor, group.order) != 1:
        msg = "check mode is required when the cofactor and order are not coprime"
        raise ConfigurationError(msg)


class Decryptor:
    """
    ECIES decryptor for ciphertexts addressed to private_key.

    An instance is not safe for concurrent use. Callers must close() it, or use
    it as a context manager, to destroy the private key; garbage collection
    only releases the key agreement state and leaves the key usable.
    """

    def __init__(
        self,
        private_key: EcPrivateKey,
        params: SystemParams,
        rng: RandomSource | None = None,
    ) -> None:
        check_cofactor_order(params.domain, params.check_mode())
        self.params = params
        self._private_key: EcPrivateKey | None = private_key
        self._ka: KaOperation | None = KaOperation(
            private_key, params.ka_params, for_encryption=False, rng=rng
        )
        self._iv = b""
        self._label = b""
        logger.debug(
            "Decryptor created on %s with %s", params.domain.name, params.dem_spec
        )

    def set_initialization_vector(self, iv: bytes) -> None:
        self._iv = bytes(iv)

    def set_label(self, label: bytes | str) -> None:
        self._label = to_label(label)

    def decrypt(self, ciphertext: bytes) -> tuple[bytes, int]:
        """
        Decrypt and authenticate a ciphertext.

        The MAC is always checked and the DEM always run. When the tag does not
        verify the plaintext is all zeros.

        Returns:
            (plaintext, valid_mask) where valid_mask is 0xFF if the tag
            verified and 0x00 otherwise

        Raises:
            MalformedCiphertextError: if the input is shorter than point plus tag
            BadPointError: if the ephemeral public key is invalid
            KeyAgreementError: if the agreement is degenerate
            DemError: if the DEM rejects an authenticated ciphertext
        """
        if self._ka is None:
            msg = "decryptor has been closed"
            raise ConfigurationError(msg)
        data = bytes(ciphertext)
        group = self.params.domain
        cipher = self.params.create_cipher()
        mac = self.params.create_mac()

        point_size = group.point_size(self.params.compression)
        tag_size = mac.output_length
        if len(data) < point_size + tag_size:
            msg = f"ciphertext of {len(data)} bytes is too short"
            raise MalformedCiphertextError(msg)

        eph_pub_bin = data[:point_size]
        other_point = group.decode_point(eph_pub_bin)
        if self.params.check_mode() and (
            group.is_identity(other_point) or not group.is_on_curve(other_point)
        ):
            msg = "ephemeral public key failed the point check"
            raise BadPointError(msg)

        secret = self._ka.derive_secret(eph_pub_bin, other_point)
        dem_key, mac_key = CryptoUtils.split_secret(secret, self.params.dem_keylen)
        try:
            body = data[point_size : len(data) - tag_size]
            tag = data[len(data) - tag_size :]
            valid_mask = CryptoUtils.tag_mask(mac.compute(mac_key, body, self._label), tag)
            try:
                plaintext = cipher.decrypt(dem_key, self._iv, body)
            except DemError:
                if valid_mask:
                    raise
                plaintext = b""
        finally:
            CryptoUtils.wipe(secret, dem_key, mac_key)

        if not valid_mask:
            plaintext = bytes(len(plaintext))
            logger.debug("Message authentication failed")
        return plaintext, valid_mask

    def decrypt_or_raise(self, ciphertext: bytes) -> bytes:
        """
        Decrypt a ciphertext, raising instead of returning a mask.

        Raises:
            AuthenticationError: if the tag does not verify
        """
        plaintext, valid_mask = self.decrypt(ciphertext)
        if not valid_mask:
            msg = "message authentication failed"
            raise AuthenticationError(msg)
        return plaintext

    def close(self) -> None:
        """Destroy the private key."""
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

    def __enter__(self) -> Decryptor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
