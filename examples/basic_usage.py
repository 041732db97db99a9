"""
Basic usage example of isoecies.

This example demonstrates how to build a parameter set, encrypt a message to
a recipient's public key and decrypt it again with the private key.
"""

import logging
import os
import sys
from pathlib import Path

# Add the project root to the path to import isoecies
sys.path.insert(0, str(Path(__file__).parent.parent))

from isoecies import (
    Decryptor,
    EcGroup,
    EciesError,
    EciesFlags,
    EcPrivateKey,
    Encryptor,
    SystemParams,
)


def main() -> None:
    # Configure logging
    logging.basicConfig(level=logging.DEBUG)
    logger = logging.getLogger(__name__)

    try:
        params = SystemParams.create(
            domain=EcGroup.from_name("secp521r1"),
            kdf_spec="KDF2(SHA-256)",
            dem_spec="AES-256/CBC/PKCS7",
            dem_keylen=32,
            mac_spec="HMAC(SHA-256)",
            mac_keylen=32,
            compression="compressed",
            flags=EciesFlags.SINGLE_HASH_MODE,
        )
        recipient = EcPrivateKey.generate(params.domain)
        iv = os.urandom(16)

        with Encryptor(params) as encryptor:
            encryptor.set_other_key(recipient.public_bytes())
            encryptor.set_initialization_vector(iv)
            encryptor.set_label("example")
            ciphertext = encryptor.encrypt(b"Hello, ECIES")
        logger.info("Ciphertext: %s", ciphertext.hex())

        with Decryptor(recipient, params) as decryptor:
            decryptor.set_initialization_vector(iv)
            decryptor.set_label("example")
            plaintext, valid = decryptor.decrypt(ciphertext)
        logger.info("Valid: %s, plaintext: %r", valid == 0xFF, plaintext)  # noqa: PLR2004
    except EciesError:
        logger.exception("Error")
        sys.exit(1)


if __name__ == "__main__":
    main()
