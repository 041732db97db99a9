import pytest
from cryptography.hazmat.primitives.asymmetric import ec
from ecdsa.ellipticcurve import INFINITY

from isoecies.common.exceptions import ConfigurationError, KeyAgreementError
from isoecies.ec.ecdh import AgreementMode, RawKeyAgreement
from isoecies.ec.group import EcGroup
from isoecies.ec.keys import EcPrivateKey


def test_private_key_range(p256: EcGroup) -> None:
    with pytest.raises(ConfigurationError):
        EcPrivateKey(p256, 0)
    with pytest.raises(ConfigurationError):
        EcPrivateKey(p256, p256.order)
    key = EcPrivateKey(p256, p256.order - 1)
    assert key.public_point == p256.generator * (p256.order - 1)


def test_generate_uses_random_source(p256: EcGroup) -> None:
    def rng(length: int) -> bytes:
        return b"\x42" * length

    first = EcPrivateKey.generate(p256, rng)
    second = EcPrivateKey.generate(p256, rng)
    assert first.private_value == second.private_value
    assert 1 <= first.private_value < p256.order


def test_private_key_bytes(p256: EcGroup) -> None:
    key = EcPrivateKey(p256, 7)
    encoded = key.to_bytes()
    assert len(encoded) == 32  # noqa: PLR2004
    assert EcPrivateKey.from_bytes(p256, encoded).private_value == 7  # noqa: PLR2004


def test_destroyed_key_is_unusable(p256: EcGroup) -> None:
    key = EcPrivateKey.generate(p256)
    key.destroy()
    with pytest.raises(ConfigurationError, match="destroyed"):
        key.to_bytes()


def test_from_cryptography() -> None:
    private_key = ec.generate_private_key(ec.SECP384R1())
    key = EcPrivateKey.from_cryptography(private_key)
    assert key.group == EcGroup.from_name("secp384r1")
    assert key.private_value == private_key.private_numbers().private_value


def test_raw_agreement_matches_cryptography() -> None:
    alice = ec.generate_private_key(ec.SECP256R1())
    bob = ec.generate_private_key(ec.SECP256R1())
    expected = alice.exchange(ec.ECDH(), bob.public_key())

    agreement = RawKeyAgreement(EcPrivateKey.from_cryptography(alice))
    bob_point = EcPrivateKey.from_cryptography(bob).public_point
    assert agreement.agree(bob_point) == expected


def test_raw_agreement_cofactor_mode_on_prime_order_curve(p256: EcGroup) -> None:
    alice = EcPrivateKey.generate(p256)
    bob = EcPrivateKey.generate(p256)
    ordinary = RawKeyAgreement(alice).agree(bob.public_point)
    cofactor = RawKeyAgreement(alice, AgreementMode.COFACTOR).agree(bob.public_point)
    assert ordinary == cofactor


def test_raw_agreement_rejects_identity(p256: EcGroup) -> None:
    agreement = RawKeyAgreement(EcPrivateKey.generate(p256))
    with pytest.raises(KeyAgreementError):
        agreement.agree(INFINITY)
