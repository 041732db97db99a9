# Elliptic curve groups, keys and raw ECDH
from isoecies.ec.ecdh import AgreementMode as AgreementMode
from isoecies.ec.ecdh import RawKeyAgreement as RawKeyAgreement
from isoecies.ec.group import EcGroup as EcGroup
from isoecies.ec.group import PointCompression as PointCompression
from isoecies.ec.keys import EcPrivateKey as EcPrivateKey

__all__ = [
    "AgreementMode",
    "EcGroup",
    "EcPrivateKey",
    "PointCompression",
    "RawKeyAgreement",
]
