"""
Pydantic models describing ECIES suites by name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from isoecies.common.config import Config
    from isoecies.ecies.params import SystemParams


class SuiteConfig(BaseModel):
    curve: str
    kdf: str
    dem: str
    dem_keylen: int = Field(gt=0)
    mac: str
    mac_keylen: int = Field(gt=0)
    compression: str = "uncompressed"
    flags: list[str] = Field(default_factory=list)

    @classmethod
    def from_config(cls, config: Config) -> SuiteConfig:
        return cls(
            curve=config.CURVE,
            kdf=config.KDF,
            dem=config.DEM,
            dem_keylen=config.DEM_KEYLEN,
            mac=config.MAC,
            mac_keylen=config.MAC_KEYLEN,
            compression=config.COMPRESSION,
            flags=list(config.FLAGS),
        )

    def to_system_params(self) -> SystemParams:
        """Resolve the names into validated system parameters."""
        from isoecies.ec.group import EcGroup
        from isoecies.ecies.flags import EciesFlags
        from isoecies.ecies.params import SystemParams

        return SystemParams.create(
            domain=EcGroup.from_name(self.curve),
            kdf_spec=self.kdf,
            dem_spec=self.dem,
            dem_keylen=self.dem_keylen,
            mac_spec=self.mac,
            mac_keylen=self.mac_keylen,
            compression=self.compression,
            flags=EciesFlags.from_names(self.flags),
        )
