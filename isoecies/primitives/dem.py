"""
Data encapsulation mechanisms: block cipher modes, AEAD modes and ChaCha20-Poly1305.

A DEM is stateless; every call takes the key and IV explicitly so a fresh
context is created per message.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM, ChaCha20Poly1305

from isoecies.common.exceptions import ConfigurationError, DemError
from isoecies.primitives.algorithms import (
    AES_BLOCK_SIZE,
    block_cipher,
    block_cipher_key_length,
)
from isoecies.primitives.registry import DEM, registry

GCM_TAG_SIZE = 16
CHACHA_KEY_SIZE = 32
CHACHA_NONCE_SIZE = 12


class _StreamingMode:
    """Base for the cipher/mode combinations run through cryptography's Cipher."""

    mode_name = ""
    iv_length = AES_BLOCK_SIZE

    def __init__(self, cipher_name: str) -> None:
        self.cipher_name = cipher_name.upper()
        self.key_length = block_cipher_key_length(self.cipher_name)
        self.name = f"{self.cipher_name}/{self.mode_name}"

    def valid_key_length(self, length: int) -> bool:
        return length == self.key_length

    def valid_iv_length(self, length: int) -> bool:
        return length == self.iv_length

    def output_length(self, input_length: int) -> int:
        return input_length

    def _mode(self, iv: bytes) -> modes.Mode:
        raise NotImplementedError

    def _check_iv(self, iv: bytes) -> None:
        if not self.valid_iv_length(len(iv)):
            if not iv:
                msg = f"{self.name} requires an IV be set"
            else:
                msg = f"{self.name} does not accept a {len(iv)} byte IV"
            raise ConfigurationError(msg)

    def _cipher(self, key: bytes, iv: bytes) -> Cipher:
        self._check_iv(iv)
        return Cipher(block_cipher(self.cipher_name, key), self._mode(bytes(iv)))

    def encrypt(self, key: bytes, iv: bytes, data: bytes) -> bytes:
        encryptor = self._cipher(key, iv).encryptor()
        return encryptor.update(bytes(data)) + encryptor.finalize()

    def decrypt(self, key: bytes, iv: bytes, data: bytes) -> bytes:
        decryptor = self._cipher(key, iv).decryptor()
        return decryptor.update(bytes(data)) + decryptor.finalize()


class CbcMode(_StreamingMode):
    mode_name = "CBC"

    def __init__(self, cipher_name: str, padding_name: str = "PKCS7") -> None:
        super().__init__(cipher_name)
        self.padding_name = padding_name.upper()
        if self.padding_name not in ("PKCS7", "NOPADDING"):
            msg = f"unsupported CBC padding: {padding_name}"
            raise ValueError(msg)
        self.name = f"{self.cipher_name}/CBC/{padding_name}"

    def _mode(self, iv: bytes) -> modes.Mode:
        return modes.CBC(iv)

    def output_length(self, input_length: int) -> int:
        if self.padding_name == "NOPADDING":
            return input_length
        return (input_length // AES_BLOCK_SIZE + 1) * AES_BLOCK_SIZE

    def encrypt(self, key: bytes, iv: bytes, data: bytes) -> bytes:
        data = bytes(data)
        if self.padding_name == "PKCS7":
            padder = padding.PKCS7(AES_BLOCK_SIZE * 8).padder()
            data = padder.update(data) + padder.finalize()
        elif len(data) % AES_BLOCK_SIZE:
            msg = f"{self.name} input must be a multiple of the block size"
            raise DemError(msg)
        return super().encrypt(key, iv, data)

    def decrypt(self, key: bytes, iv: bytes, data: bytes) -> bytes:
        if len(data) % AES_BLOCK_SIZE or (self.padding_name == "PKCS7" and not data):
            msg = f"{self.name} ciphertext is not a multiple of the block size"
            raise DemError(msg)
        plaintext = super().decrypt(key, iv, data)
        if self.padding_name == "NOPADDING":
            return plaintext
        unpadder = padding.PKCS7(AES_BLOCK_SIZE * 8).unpadder()
        try:
            return unpadder.update(plaintext) + unpadder.finalize()
        except ValueError as err:
            msg = f"{self.name} invalid padding"
            raise DemError(msg) from err


class CtrMode(_StreamingMode):
    mode_name = "CTR"

    def _mode(self, iv: bytes) -> modes.Mode:
        return modes.CTR(iv)


class GcmMode:
    """AES-GCM; the 16 byte tag is appended to the ciphertext."""

    def __init__(self, cipher_name: str) -> None:
        self.cipher_name = cipher_name.upper()
        self.key_length = block_cipher_key_length(self.cipher_name)
        self.name = f"{self.cipher_name}/GCM"

    def valid_key_length(self, length: int) -> bool:
        return length == self.key_length

    def valid_iv_length(self, length: int) -> bool:
        return 8 <= length <= 128  # noqa: PLR2004

    def output_length(self, input_length: int) -> int:
        return input_length + GCM_TAG_SIZE

    def _aead(self, key: bytes, iv: bytes) -> AESGCM:
        if not self.valid_key_length(len(key)):
            msg = f"{self.name} requires a {self.key_length} byte key"
            raise ConfigurationError(msg)
        if not self.valid_iv_length(len(iv)):
            msg = f"{self.name} requires an IV be set"
            raise ConfigurationError(msg)
        return AESGCM(bytes(key))

    def encrypt(self, key: bytes, iv: bytes, data: bytes) -> bytes:
        return self._aead(key, iv).encrypt(bytes(iv), bytes(data), None)

    def decrypt(self, key: bytes, iv: bytes, data: bytes) -> bytes:
        aead = self._aead(key, iv)
        try:
            return aead.decrypt(bytes(iv), bytes(data), None)
        except InvalidTag as err:
            msg = f"{self.name} tag verification failed"
            raise DemError(msg) from err


class ChaCha20Poly1305Mode:
    """ChaCha20-Poly1305 with a 12 byte nonce taken from the IV."""

    name = "ChaCha20Poly1305"
    key_length = CHACHA_KEY_SIZE

    def valid_key_length(self, length: int) -> bool:
        return length == CHACHA_KEY_SIZE

    def valid_iv_length(self, length: int) -> bool:
        return length == CHACHA_NONCE_SIZE

    def output_length(self, input_length: int) -> int:
        return input_length + GCM_TAG_SIZE

    def _aead(self, key: bytes, iv: bytes) -> ChaCha20Poly1305:
        if not self.valid_key_length(len(key)):
            msg = f"{self.name} requires a {CHACHA_KEY_SIZE} byte key"
            raise ConfigurationError(msg)
        if not self.valid_iv_length(len(iv)):
            msg = f"{self.name} requires a {CHACHA_NONCE_SIZE} byte IV"
            raise ConfigurationError(msg)
        return ChaCha20Poly1305(bytes(key))

    def encrypt(self, key: bytes, iv: bytes, data: bytes) -> bytes:
        return self._aead(key, iv).encrypt(bytes(iv), bytes(data), None)

    def decrypt(self, key: bytes, iv: bytes, data: bytes) -> bytes:
        aead = self._aead(key, iv)
        try:
            return aead.decrypt(bytes(iv), bytes(data), None)
        except InvalidTag as err:
            msg = f"{self.name} tag verification failed"
            raise DemError(msg) from err


registry.register(DEM, "CBC")(CbcMode)
registry.register(DEM, "CTR")(CtrMode)
registry.register(DEM, "GCM")(GcmMode)
registry.register(DEM, "ChaCha20Poly1305")(ChaCha20Poly1305Mode)
