"""
ECIES key agreement: ECDH followed by the KDF.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from isoecies.common.crypto import CryptoUtils
from isoecies.common.exceptions import ConfigurationError, KeyAgreementError
from isoecies.ec.ecdh import AgreementMode, RawKeyAgreement

if TYPE_CHECKING:
    from isoecies.ec.group import EcPoint
    from isoecies.ec.keys import EcPrivateKey, RandomSource
    from isoecies.ecies.params import KaParams

logger = logging.getLogger(__name__)


class KaOperation:
    """
    Derives the ECIES secret shared with the other party.

    Args:
        private_key: Own key, on the same curve as ``params.domain``
        params: Key agreement parameters
        for_encryption: True on the encrypting side, where cofactor mode is
            not applied
        rng: Random source; python-ecdsa multiplies without blinding, so it
            is not consumed
    """

    def __init__(
        self,
        private_key: EcPrivateKey,
        params: KaParams,
        for_encryption: bool,
        rng: RandomSource | None = None,
    ) -> None:
        if private_key.group != params.domain:
            msg = (
                f"key is on {private_key.group.name}, "
                f"parameters use {params.domain.name}"
            )
            raise ConfigurationError(msg)
        self.params = params
        self.for_encryption = for_encryption
        mode = AgreementMode.ORDINARY
        if params.cofactor_mode() and not for_encryption:
            mode = AgreementMode.COFACTOR
        self._agreement: RawKeyAgreement | None = RawKeyAgreement(private_key, mode)

    def derive_secret(self, eph_pub_bin: bytes, other_point: EcPoint) -> bytearray:
        """
        Derive ``secret_length`` bytes from the agreement with other_point.

        The caller owns the returned buffer and should wipe it after use.

        Raises:
            KeyAgreementError: if other_point or the agreed point is the identity
        """
        if self._agreement is None:
            msg = "key agreement has been closed"
            raise ConfigurationError(msg)
        group = self.params.domain
        if group.is_identity(other_point):
            msg = "other public point is the point at infinity"
            raise KeyAgreementError(msg)

        peer_point = other_point
        if self.params.old_cofactor_mode() and group.cofactor != 1:
            peer_point = peer_point * group.cofactor
            if group.is_identity(peer_point):
                msg = "other public point has small order"
                raise KeyAgreementError(msg)

        shared = bytearray(self._agreement.agree(peer_point))
        kdf_input = bytearray()
        try:
            if self.params.single_hash_mode():
                kdf_input += eph_pub_bin
            kdf_input += shared
            kdf = self.params.create_kdf()
            return bytearray(kdf.derive(bytes(kdf_input), self.params.secret_length))
        finally:
            CryptoUtils.wipe(shared, kdf_input)

    def close(self) -> None:
        self._agreement = None
