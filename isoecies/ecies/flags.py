"""
ECIES variant flags (ISO/IEC 18033-2).
"""

from __future__ import annotations

from enum import IntFlag
from typing import Iterable

from isoecies.common.exceptions import ConfigurationError


class EciesFlags(IntFlag):
    NONE = 0
    # KDF input is the encoded ephemeral public key followed by Z
    SINGLE_HASH_MODE = 1
    # Decryption only, (h^-1 * d mod n) * (h * Q)
    COFACTOR_MODE = 2
    # Both sides, h * d * Q
    OLD_COFACTOR_MODE = 4
    # Decryption only, explicit check of the received ephemeral point
    CHECK_MODE = 8

    @classmethod
    def from_names(cls, names: Iterable[str]) -> EciesFlags:
        """Combine flag names such as ``["SINGLE_HASH_MODE", "CHECK_MODE"]``."""
        flags = cls.NONE
        for name in names:
            key = name.strip().upper()
            if not key or key == "NONE":
                continue
            try:
                flags |= cls[key]
            except KeyError as err:
                msg = f"unknown ECIES flag: {name!r}"
                raise ConfigurationError(msg) from err
        return flags

    def names(self) -> list[str]:
        return [flag.name for flag in type(self) if flag.value and flag in self]
