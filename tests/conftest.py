from __future__ import annotations

import pytest

from isoecies.ec.group import EcGroup
from isoecies.ecies.flags import EciesFlags
from isoecies.ecies.params import SystemParams


@pytest.fixture
def p256() -> EcGroup:
    return EcGroup.from_name("secp256r1")


@pytest.fixture
def s1_params() -> SystemParams:
    return SystemParams.create(
        domain=EcGroup.from_name("secp521r1"),
        kdf_spec="KDF2(SHA-1)",
        dem_spec="AES-256/CBC/PKCS7",
        dem_keylen=32,
        mac_spec="HMAC(SHA-1)",
        mac_keylen=20,
        compression="uncompressed",
        flags=EciesFlags.SINGLE_HASH_MODE,
    )


@pytest.fixture
def p256_params(p256: EcGroup) -> SystemParams:
    return SystemParams.create(
        domain=p256,
        kdf_spec="KDF2(SHA-256)",
        dem_spec="AES-128/CBC/PKCS7",
        dem_keylen=16,
        mac_spec="HMAC(SHA-256)",
        mac_keylen=32,
        flags=EciesFlags.SINGLE_HASH_MODE,
    )
