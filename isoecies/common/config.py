"""
Configuration settings for the ECIES package.
"""

from __future__ import annotations

import logging
import os


def _parse_log_level(value: str | None) -> int:
    if not value:
        return logging.WARNING
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        msg = f"Unknown log level: {value}"
        raise ValueError(msg)
    return level


class Config:
    """Central configuration class for default suite and logging settings."""

    def __init__(self) -> None:
        # Default suite, used by the CLI and SuiteConfig.from_config()
        self.CURVE: str = os.getenv("ECIES_CURVE", "brainpoolP256r1")
        self.KDF: str = os.getenv("ECIES_KDF", "KDF2(SHA-256)")
        self.DEM: str = os.getenv("ECIES_DEM", "AES-256/CBC/PKCS7")
        self.DEM_KEYLEN: int = int(os.getenv("ECIES_DEM_KEYLEN", "32"))
        self.MAC: str = os.getenv("ECIES_MAC", "HMAC(SHA-256)")
        self.MAC_KEYLEN: int = int(os.getenv("ECIES_MAC_KEYLEN", "32"))
        self.COMPRESSION: str = os.getenv("ECIES_COMPRESSION", "uncompressed")
        # Comma-separated flag names, e.g. "SINGLE_HASH_MODE,CHECK_MODE"
        self.FLAGS: list[str] = [
            name.strip()
            for name in os.getenv("ECIES_FLAGS", "SINGLE_HASH_MODE").split(",")
            if name.strip()
        ]

        # Logging
        self.LOG_LEVEL: int = _parse_log_level(os.getenv("ECIES_LOG_LEVEL"))
