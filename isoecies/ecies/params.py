"""
ECIES parameter sets: key agreement parameters and full system parameters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from isoecies.common.exceptions import ConfigurationError
from isoecies.ec.group import EcGroup, PointCompression
from isoecies.ecies.flags import EciesFlags
from isoecies.primitives import DEM, KDF, MAC, resolve

if TYPE_CHECKING:
    from isoecies.common.interfaces import ICipherMode, IKdf, IMac

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KaParams:
    """
    Parameters of the key agreement half of ECIES.

    Attributes:
        domain: Curve on which both parties operate
        kdf_spec: KDF spec such as ``KDF2(SHA-256)``
        secret_length: Number of bytes the KDF derives
        compression: Encoding of the ephemeral public key
        flags: Variant flags
    """

    domain: EcGroup
    kdf_spec: str
    secret_length: int
    compression: PointCompression = PointCompression.UNCOMPRESSED
    flags: EciesFlags = EciesFlags.NONE

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "compression", PointCompression.from_name(self.compression)
        )
        object.__setattr__(self, "flags", EciesFlags(self.flags))

        if self.cofactor_mode() and self.old_cofactor_mode():
            msg = "cofactor and old cofactor mode cannot be combined"
            raise ConfigurationError(msg)
        if self.secret_length <= 0:
            msg = "secret length must be positive"
            raise ConfigurationError(msg)
        kdf = self.create_kdf()
        if self.secret_length > kdf.max_output_length():
            msg = f"{kdf.name} cannot derive {self.secret_length} bytes"
            raise ConfigurationError(msg)

    def single_hash_mode(self) -> bool:
        return EciesFlags.SINGLE_HASH_MODE in self.flags

    def cofactor_mode(self) -> bool:
        return EciesFlags.COFACTOR_MODE in self.flags

    def old_cofactor_mode(self) -> bool:
        return EciesFlags.OLD_COFACTOR_MODE in self.flags

    def check_mode(self) -> bool:
        return EciesFlags.CHECK_MODE in self.flags

    def create_kdf(self) -> IKdf:
        return resolve(KDF, self.kdf_spec)


@dataclass(frozen=True)
class SystemParams:
    """
    Key agreement parameters plus the DEM and MAC used on the derived secret.

    The first ``dem_keylen`` bytes of the secret key the DEM, the remaining
    ``mac_keylen`` bytes key the MAC.
    """

    ka_params: KaParams
    dem_spec: str
    dem_keylen: int
    mac_spec: str
    mac_keylen: int

    def __post_init__(self) -> None:
        if self.dem_keylen <= 0 or self.mac_keylen <= 0:
            msg = "DEM and MAC key lengths must be positive"
            raise ConfigurationError(msg)
        if self.ka_params.secret_length != self.dem_keylen + self.mac_keylen:
            msg = (
                f"secret length {self.ka_params.secret_length} does not match "
                f"DEM key length {self.dem_keylen} plus MAC key length {self.mac_keylen}"
            )
            raise ConfigurationError(msg)

        cipher = self.create_cipher()
        if not cipher.valid_key_length(self.dem_keylen):
            msg = f"{cipher.name} does not accept a {self.dem_keylen} byte key"
            raise ConfigurationError(msg)
        mac = self.create_mac()
        if not mac.valid_key_length(self.mac_keylen):
            msg = f"{mac.name} does not accept a {self.mac_keylen} byte key"
            raise ConfigurationError(msg)

        logger.debug(
            "ECIES parameters: %s, %s, %s, %s",
            self.domain.name,
            self.kdf_spec,
            cipher.name,
            mac.name,
        )

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        domain: EcGroup,
        kdf_spec: str,
        dem_spec: str,
        dem_keylen: int,
        mac_spec: str,
        mac_keylen: int,
        compression: PointCompression | str = PointCompression.UNCOMPRESSED,
        flags: EciesFlags = EciesFlags.NONE,
    ) -> SystemParams:
        """Build system parameters, deriving the secret length from both key lengths."""
        ka_params = KaParams(
            domain=domain,
            kdf_spec=kdf_spec,
            secret_length=dem_keylen + mac_keylen,
            compression=PointCompression.from_name(compression),
            flags=flags,
        )
        return cls(ka_params, dem_spec, dem_keylen, mac_spec, mac_keylen)

    @property
    def domain(self) -> EcGroup:
        return self.ka_params.domain

    @property
    def kdf_spec(self) -> str:
        return self.ka_params.kdf_spec

    @property
    def secret_length(self) -> int:
        return self.ka_params.secret_length

    @property
    def compression(self) -> PointCompression:
        return self.ka_params.compression

    @property
    def flags(self) -> EciesFlags:
        return self.ka_params.flags

    def single_hash_mode(self) -> bool:
        return self.ka_params.single_hash_mode()

    def cofactor_mode(self) -> bool:
        return self.ka_params.cofactor_mode()

    def old_cofactor_mode(self) -> bool:
        return self.ka_params.old_cofactor_mode()

    def check_mode(self) -> bool:
        return self.ka_params.check_mode()

    def create_kdf(self) -> IKdf:
        return self.ka_params.create_kdf()

    def create_cipher(self) -> ICipherMode:
        """New DEM instance exposing ``encrypt(key, iv, data)`` and ``decrypt(key, iv, data)``."""
        return resolve(DEM, self.dem_spec)

    def create_mac(self) -> IMac:
        return resolve(MAC, self.mac_spec)
