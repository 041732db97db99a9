import hashlib
import hmac as std_hmac

import pytest

from isoecies.common.exceptions import (
    ConfigurationError,
    DemError,
    UnknownPrimitiveError,
)
from isoecies.primitives import DEM, KDF, MAC, registry, resolve
from isoecies.primitives.registry import parse_spec

SECRET = bytes(range(40))


def test_parse_spec() -> None:
    assert parse_spec("KDF2(SHA-1)") == ("KDF2", ["SHA-1"])
    assert parse_spec(" HMAC( SHA-256 ) ") == ("HMAC", ["SHA-256"])
    assert parse_spec("AES-128/CBC/PKCS7") == ("CBC", ["AES-128", "PKCS7"])
    assert parse_spec("AES-256/GCM") == ("GCM", ["AES-256"])
    assert parse_spec("ChaCha20Poly1305") == ("ChaCha20Poly1305", [])


def test_registry_lists_primitives() -> None:
    assert {"KDF1", "KDF1-18033", "KDF2", "X9.63", "HKDF"} <= set(registry.available(KDF))
    assert {"CBC", "CTR", "GCM", "CHACHA20POLY1305"} <= set(registry.available(DEM))
    assert {"HMAC", "CMAC"} <= set(registry.available(MAC))


@pytest.mark.parametrize(
    ("kind", "spec"),
    [
        (KDF, "KDF3(SHA-256)"),
        (KDF, "KDF2(MD5)"),
        (KDF, "KDF2"),
        (DEM, "AES-128/XTS"),
        (DEM, "DES/CBC"),
        (DEM, "AES-128/CBC/ISO7816"),
        (MAC, "HMAC(SHA-3)"),
        (MAC, "CMAC(AES-512)"),
    ],
)
def test_unknown_specs(kind: str, spec: str) -> None:
    with pytest.raises(UnknownPrimitiveError) as excinfo:
        resolve(kind, spec)
    assert excinfo.value.kind == "configuration-error"
    assert excinfo.value.spec == spec


def test_kdf1_single_hash() -> None:
    kdf = resolve(KDF, "KDF1(SHA-256)")
    assert kdf.derive(SECRET, 20) == hashlib.sha256(SECRET).digest()[:20]
    with pytest.raises(ConfigurationError):
        kdf.derive(SECRET, 33)


def test_kdf2_counter_starts_at_one() -> None:
    kdf = resolve(KDF, "KDF2(SHA-1)")
    expected = (
        hashlib.sha1(SECRET + b"\x00\x00\x00\x01").digest()
        + hashlib.sha1(SECRET + b"\x00\x00\x00\x02").digest()
    )
    assert kdf.derive(SECRET, 36) == expected[:36]
    assert resolve(KDF, "X9.63(SHA-1)").derive(SECRET, 36) == expected[:36]


def test_kdf1_18033_counter_starts_at_zero() -> None:
    kdf1 = resolve(KDF, "KDF1-18033(SHA-256)")
    kdf2 = resolve(KDF, "KDF2(SHA-256)")
    output = kdf1.derive(SECRET, 64)
    assert output[:32] == hashlib.sha256(SECRET + bytes(4)).digest()
    assert output[32:] == kdf2.derive(SECRET, 32)


def test_hkdf_length() -> None:
    kdf = resolve(KDF, "HKDF(SHA-256)")
    assert len(kdf.derive(SECRET, 100)) == 100  # noqa: PLR2004
    assert kdf.max_output_length() == 255 * 32


def test_cbc_round_trip_and_length() -> None:
    cipher = resolve(DEM, "AES-128/CBC/PKCS7")
    key, iv = bytes(16), bytes(range(16))
    ciphertext = cipher.encrypt(key, iv, b"attack at dawn")
    assert len(ciphertext) == cipher.output_length(14) == 16  # noqa: PLR2004
    assert cipher.output_length(16) == 32  # noqa: PLR2004
    assert cipher.decrypt(key, iv, ciphertext) == b"attack at dawn"


def test_cbc_defaults_to_pkcs7() -> None:
    assert resolve(DEM, "AES-256/CBC").padding_name == "PKCS7"


def test_cbc_invalid_padding() -> None:
    key, iv = bytes(16), bytes(16)
    raw = resolve(DEM, "AES-128/CBC/NoPadding").encrypt(key, iv, bytes(16))
    with pytest.raises(DemError, match="invalid padding"):
        resolve(DEM, "AES-128/CBC/PKCS7").decrypt(key, iv, raw)


def test_cbc_truncated_ciphertext() -> None:
    with pytest.raises(DemError):
        resolve(DEM, "AES-128/CBC/PKCS7").decrypt(bytes(16), bytes(16), bytes(15))


def test_cbc_requires_iv() -> None:
    cipher = resolve(DEM, "AES-128/CBC/PKCS7")
    with pytest.raises(ConfigurationError, match="requires an IV"):
        cipher.encrypt(bytes(16), b"", b"data")
    with pytest.raises(ConfigurationError, match="8 byte IV"):
        cipher.encrypt(bytes(16), bytes(8), b"data")


def test_block_cipher_key_length() -> None:
    cipher = resolve(DEM, "AES-256/CTR")
    assert cipher.valid_key_length(32)
    assert not cipher.valid_key_length(16)
    with pytest.raises(ConfigurationError):
        cipher.encrypt(bytes(16), bytes(16), b"data")


def test_ctr_keeps_length() -> None:
    cipher = resolve(DEM, "AES-128/CTR")
    ciphertext = cipher.encrypt(bytes(16), bytes(16), b"abc")
    assert len(ciphertext) == 3  # noqa: PLR2004
    assert cipher.decrypt(bytes(16), bytes(16), ciphertext) == b"abc"


@pytest.mark.parametrize(
    ("spec", "key_length", "iv_length"),
    [("AES-256/GCM", 32, 12), ("ChaCha20Poly1305", 32, 12)],
)
def test_aead_modes(spec: str, key_length: int, iv_length: int) -> None:
    cipher = resolve(DEM, spec)
    key, iv = bytes(key_length), bytes(iv_length)
    ciphertext = bytearray(cipher.encrypt(key, iv, b"payload"))
    assert len(ciphertext) == cipher.output_length(7)
    assert cipher.decrypt(key, iv, bytes(ciphertext)) == b"payload"
    ciphertext[0] ^= 0x01
    with pytest.raises(DemError, match="tag verification failed"):
        cipher.decrypt(key, iv, bytes(ciphertext))


def test_hmac_over_chunks() -> None:
    mac = resolve(MAC, "HMAC(SHA-256)")
    key = b"k" * 32
    expected = std_hmac.new(key, b"ciphertextlabel", hashlib.sha256).digest()
    assert mac.compute(key, b"ciphertext", b"label") == expected
    assert mac.compute(key, b"ciphertext", b"") == mac.compute(key, b"ciphertext")
    assert mac.output_length == 32  # noqa: PLR2004


def test_cmac() -> None:
    mac = resolve(MAC, "CMAC(AES-128)")
    assert mac.output_length == 16  # noqa: PLR2004
    assert mac.valid_key_length(16)
    assert not mac.valid_key_length(32)
    tag = mac.compute(bytes(16), b"message")
    assert len(tag) == 16  # noqa: PLR2004
    assert tag != mac.compute(bytes(16), b"messagf")
