"""
Registry resolving textual primitive specs to fresh instances.

Specs take one of three shapes:

* ``Name(Arg, ...)`` for KDFs and MACs, e.g. ``KDF2(SHA-1)``, ``HMAC(SHA-256)``
* ``Cipher/Mode[/Padding]`` for block cipher modes, e.g. ``AES-128/CBC/PKCS7``
* ``Name`` for primitives without arguments, e.g. ``ChaCha20Poly1305``
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from isoecies.common.exceptions import UnknownPrimitiveError

logger = logging.getLogger(__name__)

KDF = "kdf"
DEM = "dem"
MAC = "mac"

_CALL_RE = re.compile(r"^\s*([\w\-.]+)\s*\((.*)\)\s*$")

Factory = Callable[..., Any]


def parse_spec(spec: str) -> tuple[str, list[str]]:
    """Split a spec into the registered name and its arguments."""
    spec = spec.strip()
    match = _CALL_RE.match(spec)
    if match:
        args = [arg.strip() for arg in match.group(2).split(",") if arg.strip()]
        return match.group(1), args
    if "/" in spec:
        parts = [part.strip() for part in spec.split("/")]
        # cipher first, the mode is what gets registered
        return parts[1], [parts[0], *parts[2:]]
    return spec, []


class PrimitiveRegistry:
    """Maps (kind, name) to factories that build a new primitive per call."""

    def __init__(self) -> None:
        self._factories: dict[str, dict[str, Factory]] = {}

    def register(self, kind: str, *names: str) -> Callable[[Factory], Factory]:
        """Decorator registering a factory under one or more names."""

        def decorator(factory: Factory) -> Factory:
            table = self._factories.setdefault(kind, {})
            for name in names:
                table[name.upper()] = factory
            return factory

        return decorator

    def resolve(self, kind: str, spec: str) -> Any:
        """
        Build a new instance for the primitive string.

        Raises:
            UnknownPrimitiveError: if no factory matches or it rejects the arguments
        """
        name, args = parse_spec(spec)
        factory = self._factories.get(kind, {}).get(name.upper())
        if factory is None:
            raise UnknownPrimitiveError(kind, spec)
        try:
            return factory(*args)
        except (TypeError, KeyError, ValueError) as err:
            logger.debug("Factory for %s rejected %r: %s", kind, spec, err)
            raise UnknownPrimitiveError(kind, spec) from err

    def available(self, kind: str) -> list[str]:
        return sorted(self._factories.get(kind, {}))


registry = PrimitiveRegistry()


def resolve(kind: str, spec: str) -> Any:
    """Resolve a spec against the process-wide registry."""
    return registry.resolve(kind, spec)
