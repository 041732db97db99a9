"""
Custom exceptions for the ECIES implementation.
"""

from __future__ import annotations


class EciesError(Exception):
    """Base exception for all ECIES failures."""

    kind = "ecies-error"

    def __init__(self, message: str, kind: str | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class ConfigurationError(EciesError, ValueError):
    """Exception for invalid parameters or key/parameter mismatches."""

    kind = "configuration-error"


class UnknownPrimitiveError(ConfigurationError):
    """Exception for primitive specs the registry cannot resolve."""

    def __init__(self, primitive_kind: str, spec: str) -> None:
        super().__init__(f"unknown {primitive_kind} spec: {spec!r}")
        self.primitive_kind = primitive_kind
        self.spec = spec


class MissingPeerKeyError(EciesError):
    """Exception for encryption attempted without the other party's key."""

    kind = "missing-peer-key"


class MalformedCiphertextError(EciesError):
    """Exception for ciphertexts that cannot be parsed."""

    kind = "malformed"


class BadPointError(MalformedCiphertextError):
    """Exception for point encodings that are invalid, off curve or at infinity."""

    kind = "bad-point"


class KeyAgreementError(EciesError):
    """Exception for degenerate key agreement results."""

    kind = "key-agreement-error"


class AuthenticationError(EciesError):
    """Exception for MAC verification failures."""

    kind = "authentication-failure"


class DemError(EciesError):
    """Exception for data encapsulation failures."""

    kind = "dem-error"
