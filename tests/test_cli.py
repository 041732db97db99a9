from typing import Any

import pytest
from click.testing import CliRunner

from isoecies.cli import cli

IV = "00" * 16


@pytest.fixture
def runner(monkeypatch: Any) -> CliRunner:
    for name in ("ECIES_CURVE", "ECIES_KDF", "ECIES_DEM", "ECIES_DEM_KEYLEN",
                 "ECIES_MAC", "ECIES_MAC_KEYLEN", "ECIES_COMPRESSION",
                 "ECIES_FLAGS", "ECIES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


def keygen(runner: CliRunner, *args: str) -> tuple[str, str]:
    result = runner.invoke(cli, ["keygen", *args])
    assert result.exit_code == 0, result.output
    lines = dict(line.split(": ", 1) for line in result.output.strip().splitlines())
    return lines["private"], lines["public"]


def test_cli_help(runner: CliRunner) -> None:
    """Test CLI help command."""
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_cli_primitives(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["primitives"])
    assert result.exit_code == 0
    assert "KDF2" in result.output
    assert "CBC" in result.output
    assert "HMAC" in result.output


def test_cli_keygen(runner: CliRunner) -> None:
    private, public = keygen(runner, "--curve", "secp256r1")
    assert len(bytes.fromhex(private)) == 32  # noqa: PLR2004
    assert bytes.fromhex(public)[0] == 0x04  # noqa: PLR2004
    assert len(bytes.fromhex(public)) == 65  # noqa: PLR2004

    _, compressed = keygen(runner, "--curve", "secp256r1", "--compression", "compressed")
    assert len(bytes.fromhex(compressed)) == 33  # noqa: PLR2004


def test_cli_encrypt_decrypt(runner: CliRunner) -> None:
    private, public = keygen(runner)

    result = runner.invoke(
        cli,
        ["encrypt", "--public-key", public, "--iv", IV, "--label", "cli", "hello world"],
    )
    assert result.exit_code == 0, result.output
    ciphertext = result.output.strip()

    result = runner.invoke(
        cli,
        ["decrypt", "--private-key", private, "--iv", IV, "--label", "cli", ciphertext],
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "hello world"


def test_cli_hex_messages_with_suite_options(runner: CliRunner) -> None:
    suite = [
        "--curve", "secp384r1",
        "--kdf", "KDF1-18033(SHA-256)",
        "--dem", "AES-128/CTR",
        "--dem-keylen", "16",
        "--mac", "CMAC(AES-128)",
        "--mac-keylen", "16",
        "--flag", "SINGLE_HASH_MODE",
        "--flag", "CHECK_MODE",
    ]
    private, public = keygen(runner, *suite)

    result = runner.invoke(
        cli, ["encrypt", "--public-key", public, "--iv", IV, "--hex-input", "deadbeef", *suite]
    )
    assert result.exit_code == 0, result.output

    result = runner.invoke(
        cli,
        ["decrypt", "--private-key", private, "--iv", IV, "--hex-output",
         result.output.strip(), *suite],
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "deadbeef"


def test_cli_decrypt_wrong_label(runner: CliRunner) -> None:
    private, public = keygen(runner)
    result = runner.invoke(cli, ["encrypt", "--public-key", public, "--iv", IV, "secret"])
    ciphertext = result.output.strip()

    result = runner.invoke(
        cli,
        ["decrypt", "--private-key", private, "--iv", IV, "--label", "x", ciphertext],
    )
    assert result.exit_code != 0
    assert "authentication-failure" in result.output


def test_cli_encrypt_without_iv(runner: CliRunner) -> None:
    _, public = keygen(runner)
    result = runner.invoke(cli, ["encrypt", "--public-key", public, "secret"])
    assert result.exit_code != 0
    assert "configuration-error" in result.output


def test_cli_unknown_curve(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["keygen", "--curve", "nosuchcurve"])
    assert result.exit_code != 0
    assert "unknown curve" in result.output


def test_cli_invalid_hex(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["encrypt", "--public-key", "zz", "--iv", IV, "secret"])
    assert result.exit_code != 0
    assert "not valid hex" in result.output


def test_cli_zero_key_length_is_rejected(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["keygen", "--dem-keylen", "0"])
    assert result.exit_code != 0
    assert not isinstance(result.exception, ValueError)
    assert "invalid suite" in result.output
    assert "dem_keylen" in result.output
