"""
Command-line interface for isoecies.

Keys, ciphertexts and IVs are passed as hex; nothing is written to disk.
"""

from __future__ import annotations

import functools
from typing import Any, Callable

import click
from pydantic import ValidationError

from isoecies.common.config import Config
from isoecies.common.exceptions import EciesError
from isoecies.common.logging_utils import setup_logging
from isoecies.common.models import SuiteConfig
from isoecies.ec.keys import EcPrivateKey
from isoecies.ecies.decryptor import Decryptor
from isoecies.ecies.encryptor import Encryptor
from isoecies.ecies.params import SystemParams
from isoecies.primitives import DEM, KDF, MAC, registry


def suite_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options overriding the suite taken from the environment."""
    options = [
        click.option("--curve", default=None, help="Curve name (default: ECIES_CURVE)"),
        click.option("--kdf", default=None, help="KDF spec (default: ECIES_KDF)"),
        click.option("--dem", default=None, help="DEM spec (default: ECIES_DEM)"),
        click.option("--dem-keylen", default=None, type=int, help="DEM key length"),
        click.option("--mac", default=None, help="MAC spec (default: ECIES_MAC)"),
        click.option("--mac-keylen", default=None, type=int, help="MAC key length"),
        click.option(
            "--compression",
            default=None,
            type=click.Choice(["uncompressed", "compressed", "hybrid"]),
            help="Ephemeral key encoding (default: ECIES_COMPRESSION)",
        ),
        click.option(
            "--flag",
            "flags",
            multiple=True,
            help="ECIES flag, repeatable (default: ECIES_FLAGS)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_params(overrides: dict[str, Any]) -> SystemParams:
    suite = SuiteConfig.from_config(Config())
    updates = {
        key: value
        for key, value in overrides.items()
        if value is not None and value != ()
    }
    try:
        suite = SuiteConfig.model_validate({**suite.model_dump(), **updates})
    except ValidationError as err:
        msg = f"invalid suite: {err}"
        raise click.ClickException(msg) from err
    return suite.to_system_params()


def parse_hex(value: str, what: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError as err:
        msg = f"{what} is not valid hex"
        raise click.BadParameter(msg) from err


def ecies_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report ECIES failures as click errors."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except EciesError as err:
            msg = f"{err.kind}: {err}"
            raise click.ClickException(msg) from err

    return wrapper


@click.group()
def cli() -> None:
    """ISO/IEC 18033-2 ECIES CLI"""
    setup_logging(Config())


@cli.command()
@suite_options
@ecies_errors
def keygen(**suite: Any) -> None:
    """Generate a key pair on the configured curve"""
    params = build_params(suite)
    key = EcPrivateKey.generate(params.domain)
    click.echo(f"private: {key.to_bytes().hex()}")
    click.echo(f"public: {key.public_bytes(params.compression).hex()}")


@cli.command()
@click.option("--public-key", required=True, help="Recipient public key (hex)")
@click.option("--iv", default="", help="DEM initialization vector (hex)")
@click.option("--label", default="", help="Label bound into the MAC")
@click.option("--hex-input", is_flag=True, help="Message is hex instead of text")
@click.argument("message")
@suite_options
@ecies_errors
def encrypt(
    public_key: str,
    iv: str,
    label: str,
    hex_input: bool,  # noqa: FBT001
    message: str,
    **suite: Any,
) -> None:
    """Encrypt a message to a public key"""
    params = build_params(suite)
    plaintext = parse_hex(message, "message") if hex_input else message.encode()
    with Encryptor(params) as encryptor:
        encryptor.set_other_key(parse_hex(public_key, "public key"))
        encryptor.set_initialization_vector(parse_hex(iv, "IV"))
        encryptor.set_label(label)
        click.echo(encryptor.encrypt(plaintext).hex())


@cli.command()
@click.option("--private-key", required=True, help="Recipient private key (hex)")
@click.option("--iv", default="", help="DEM initialization vector (hex)")
@click.option("--label", default="", help="Label bound into the MAC")
@click.option("--hex-output", is_flag=True, help="Print the plaintext as hex")
@click.argument("ciphertext")
@suite_options
@ecies_errors
def decrypt(
    private_key: str,
    iv: str,
    label: str,
    hex_output: bool,  # noqa: FBT001
    ciphertext: str,
    **suite: Any,
) -> None:
    """Decrypt a ciphertext with a private key"""
    params = build_params(suite)
    key = EcPrivateKey.from_bytes(params.domain, parse_hex(private_key, "private key"))
    with Decryptor(key, params) as decryptor:
        decryptor.set_initialization_vector(parse_hex(iv, "IV"))
        decryptor.set_label(label)
        plaintext = decryptor.decrypt_or_raise(parse_hex(ciphertext, "ciphertext"))
    if hex_output:
        click.echo(plaintext.hex())
    else:
        click.echo(plaintext.decode(errors="replace"))


@cli.command()
def primitives() -> None:
    """List the registered KDFs, DEMs and MACs"""
    for kind in (KDF, DEM, MAC):
        click.echo(f"{kind}: {', '.join(registry.available(kind))}")


if __name__ == "__main__":
    cli()
