# ISO/IEC 18033-2 ECIES

from isoecies.common.exceptions import (
    AuthenticationError,
    BadPointError,
    ConfigurationError,
    DemError,
    EciesError,
    KeyAgreementError,
    MalformedCiphertextError,
    MissingPeerKeyError,
)
from isoecies.common.models import SuiteConfig
from isoecies.ec import EcGroup, EcPrivateKey, PointCompression
from isoecies.ecies import (
    Decryptor,
    EciesFlags,
    Encryptor,
    KaOperation,
    KaParams,
    SystemParams,
)

__all__ = [
    "AuthenticationError",
    "BadPointError",
    "ConfigurationError",
    "Decryptor",
    "DemError",
    "EcGroup",
    "EcPrivateKey",
    "EciesError",
    "EciesFlags",
    "Encryptor",
    "KaOperation",
    "KaParams",
    "KeyAgreementError",
    "MalformedCiphertextError",
    "MissingPeerKeyError",
    "PointCompression",
    "SuiteConfig",
    "SystemParams",
]
