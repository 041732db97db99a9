# ISO/IEC 18033-2 ECIES
from isoecies.ecies.decryptor import Decryptor as Decryptor
from isoecies.ecies.encryptor import Encryptor as Encryptor
from isoecies.ecies.flags import EciesFlags as EciesFlags
from isoecies.ecies.ka_operation import KaOperation as KaOperation
from isoecies.ecies.params import KaParams as KaParams
from isoecies.ecies.params import SystemParams as SystemParams

__all__ = [
    "Decryptor",
    "EciesFlags",
    "Encryptor",
    "KaOperation",
    "KaParams",
    "SystemParams",
]
