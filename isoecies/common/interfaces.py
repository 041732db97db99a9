"""
Interfaces and protocols for the pluggable symmetric primitives.
"""

from __future__ import annotations

from typing import Protocol


class IKdf(Protocol):
    """Protocol for key derivation functions."""

    name: str

    def max_output_length(self) -> int: ...

    def derive(self, secret: bytes, length: int) -> bytes: ...


class ICipherMode(Protocol):
    """Protocol for data encapsulation mechanisms."""

    name: str

    def valid_key_length(self, length: int) -> bool: ...

    def valid_iv_length(self, length: int) -> bool: ...

    def output_length(self, input_length: int) -> int: ...

    def encrypt(self, key: bytes, iv: bytes, data: bytes) -> bytes: ...

    def decrypt(self, key: bytes, iv: bytes, data: bytes) -> bytes: ...


class IMac(Protocol):
    """Protocol for message authentication codes."""

    name: str
    output_length: int

    def valid_key_length(self, length: int) -> bool: ...

    def compute(self, key: bytes, *chunks: bytes) -> bytes: ...
