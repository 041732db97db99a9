"""
Raw ECDH key agreement without an internal KDF.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from isoecies.common.exceptions import KeyAgreementError

if TYPE_CHECKING:
    from isoecies.ec.group import EcPoint
    from isoecies.ec.keys import EcPrivateKey

logger = logging.getLogger(__name__)


class AgreementMode(str, Enum):
    ORDINARY = "ordinary"
    # ISO 18033-2 compatible cofactor mode: (h^-1 * d mod n) * (h * Q)
    COFACTOR = "cofactor"


class RawKeyAgreement:
    """ECDH over a private key, returning the shared X coordinate."""

    def __init__(
        self, private_key: EcPrivateKey, mode: AgreementMode = AgreementMode.ORDINARY
    ) -> None:
        self.group = private_key.group
        self.mode = mode
        if mode is AgreementMode.COFACTOR and self.group.cofactor != 1:
            order = self.group.order
            cofactor_inverse = pow(self.group.cofactor, -1, order)
            self._premultiplier = self.group.cofactor
            self._multiplier = cofactor_inverse * private_key.private_value % order
        else:
            self._premultiplier = 1
            self._multiplier = private_key.private_value

    def agree(self, peer_point: EcPoint) -> bytes:
        """
        Compute the shared field element with the peer point.

        Returns:
            X coordinate of the agreed point, fixed width big endian

        Raises:
            KeyAgreementError: if the peer point or the result is the identity
        """
        if self.group.is_identity(peer_point):
            msg = "peer public point is the point at infinity"
            raise KeyAgreementError(msg)
        point = peer_point
        if self._premultiplier != 1:
            point = point * self._premultiplier
            if self.group.is_identity(point):
                msg = "peer public point has small order"
                raise KeyAgreementError(msg)
        shared = point * self._multiplier
        if self.group.is_identity(shared):
            msg = "degenerate shared secret"
            raise KeyAgreementError(msg)
        return self.group.encode_x(shared)
