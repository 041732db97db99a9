"""
Elliptic curve domain parameters and point encoding.

Curve arithmetic is delegated to python-ecdsa (``CurveFp``/``PointJacobi``),
which covers the SEC 2 and Brainpool curves, curves with a cofactor and all
three X9.62 point encodings.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Union

from ecdsa import curves
from ecdsa.ellipticcurve import INFINITY, CurveEdTw, CurveFp, Point, PointJacobi
from ecdsa.errors import MalformedPointError

from isoecies.common.exceptions import BadPointError, ConfigurationError

if TYPE_CHECKING:
    from ecdsa.curves import Curve

logger = logging.getLogger(__name__)

EcPoint = Union[PointJacobi, Point]

# SEC 2 names that OpenSSL knows under their X9.62 aliases
_CURVE_ALIASES = {
    "secp192r1": "prime192v1",
    "secp256r1": "prime256v1",
    "P-192": "prime192v1",
    "P-224": "secp224r1",
    "P-256": "prime256v1",
    "P-384": "secp384r1",
    "P-521": "secp521r1",
}


class PointCompression(str, Enum):
    """X9.62 / SEC 1 point encoding formats."""

    UNCOMPRESSED = "uncompressed"
    COMPRESSED = "compressed"
    HYBRID = "hybrid"

    @classmethod
    def from_name(cls, name: str | PointCompression) -> PointCompression:
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError as err:
            msg = f"unknown point compression: {name!r}"
            raise ConfigurationError(msg) from err


class EcGroup:
    """Domain parameters of a short Weierstrass curve: curve, G, n and h."""

    def __init__(self, curve: Curve, name: str | None = None) -> None:
        if isinstance(curve.curve, CurveEdTw):
            msg = f"{curve.name} is an Edwards curve, ECIES needs a Weierstrass curve"
            raise ConfigurationError(msg)
        self._curve = curve
        self.name = name or curve.openssl_name or curve.name
        self._field_size = (int(curve.curve.p()).bit_length() + 7) // 8

    @classmethod
    def from_name(cls, name: str) -> EcGroup:
        """Look up a named curve, e.g. ``secp521r1`` or ``brainpoolP256r1``."""
        lookup = _CURVE_ALIASES.get(name, name)
        try:
            curve = curves.curve_by_name(lookup)
        except curves.UnknownCurveError as err:
            msg = f"unknown curve: {name!r}"
            raise ConfigurationError(msg) from err
        return cls(curve, name)

    @classmethod
    def from_parameters(  # noqa: PLR0913
        cls,
        p: int,
        a: int,
        b: int,
        gx: int,
        gy: int,
        order: int,
        cofactor: int = 1,
        name: str = "custom",
    ) -> EcGroup:
        """Build a group from explicit domain parameters."""
        curve_fp = CurveFp(p, a, b, cofactor)
        if not curve_fp.contains_point(gx, gy):
            msg = "base point is not on the curve"
            raise ConfigurationError(msg)
        generator = PointJacobi(curve_fp, gx, gy, 1, order, generator=True)
        return cls(curves.Curve(name, curve_fp, generator, None), name)

    @property
    def curve(self) -> CurveFp:
        return self._curve.curve

    @property
    def generator(self) -> PointJacobi:
        return self._curve.generator

    @property
    def order(self) -> int:
        return int(self._curve.order)

    @property
    def cofactor(self) -> int:
        return int(self.curve.cofactor() or 1)

    @property
    def p(self) -> int:
        return int(self.curve.p())

    @property
    def field_size(self) -> int:
        """Byte length of a field element."""
        return self._field_size

    def point_size(self, compression: PointCompression) -> int:
        """Length of an encoded point, which depends only on the curve and format."""
        if compression is PointCompression.COMPRESSED:
            return 1 + self._field_size
        return 1 + 2 * self._field_size

    @staticmethod
    def is_identity(point: EcPoint) -> bool:
        return point == INFINITY

    def is_on_curve(self, point: EcPoint) -> bool:
        if self.is_identity(point):
            return False
        return bool(self.curve.contains_point(point.x(), point.y()))

    def encode_point(self, point: EcPoint, compression: PointCompression) -> bytes:
        """Encode a point in the given X9.62 format."""
        if self.is_identity(point):
            msg = "cannot encode the point at infinity"
            raise BadPointError(msg)
        return bytes(point.to_bytes(compression.value))

    def decode_point(self, data: bytes) -> PointJacobi:
        """
        Decode an X9.62 encoded point and check that it lies on the curve.

        Any of the three encodings is accepted; hybrid encodings must be
        self-consistent.

        Raises:
            BadPointError: if the encoding is malformed or the point is off curve
        """
        data = bytes(data)
        try:
            point = PointJacobi.from_bytes(
                self.curve,
                data,
                validate_encoding=True,
                valid_encodings=("uncompressed", "compressed", "hybrid"),
            )
        except (MalformedPointError, ValueError) as err:
            msg = f"invalid point encoding: {err}"
            raise BadPointError(msg) from err
        if not self.is_on_curve(point):
            msg = "point is not on the curve"
            raise BadPointError(msg)
        return point

    def encode_x(self, point: EcPoint) -> bytes:
        """Affine X coordinate as a fixed-width big endian field element."""
        return int(point.x()).to_bytes(self._field_size, "big")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EcGroup):
            return NotImplemented
        return self._curve == other._curve and self.order == other.order

    def __hash__(self) -> int:
        return hash((self.curve, self.order))

    def __repr__(self) -> str:
        return f"EcGroup({self.name!r})"
