"""Secp256k1 public keys with the point operations commitments rely on."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

_BYTE_ORDER = "big"

_Jacobian = tuple[int, int, int]
_INFINITY: _Jacobian = (0, 1, 0)


def _on_curve(x: int, y: int) -> bool:
    return (y * y - x * x * x - 7) % P == 0


def _lift_x(x: int, odd: bool) -> int:
    """Return the y coordinate for ``x`` with the requested parity."""
    if not 0 <= x < P:
        raise ValueError("x coordinate is not a field element")
    y_squared = (pow(x, 3, P) + 7) % P
    y = pow(y_squared, (P + 1) // 4, P)
    if y * y % P != y_squared:
        raise ValueError("x coordinate is not on the secp256k1 curve")
    if (y & 1) != int(odd):
        y = P - y
    return y


def _double(point: _Jacobian) -> _Jacobian:
    x, y, z = point
    if z == 0 or y == 0:
        return _INFINITY
    y_sq = y * y % P
    s = 4 * x * y_sq % P
    m = 3 * x * x % P
    nx = (m * m - 2 * s) % P
    ny = (m * (s - nx) - 8 * y_sq * y_sq) % P
    nz = 2 * y * z % P
    return nx, ny, nz


def _add(a: _Jacobian, b: _Jacobian) -> _Jacobian:
    x1, y1, z1 = a
    x2, y2, z2 = b
    if z1 == 0:
        return b
    if z2 == 0:
        return a
    z1_sq = z1 * z1 % P
    z2_sq = z2 * z2 % P
    u1 = x1 * z2_sq % P
    u2 = x2 * z1_sq % P
    s1 = y1 * z2_sq * z2 % P
    s2 = y2 * z1_sq * z1 % P
    if u1 == u2:
        if s1 != s2:
            return _INFINITY
        return _double(a)
    h = (u2 - u1) % P
    r = (s2 - s1) % P
    h_sq = h * h % P
    h_cu = h * h_sq % P
    u1_h_sq = u1 * h_sq % P
    nx = (r * r - h_cu - 2 * u1_h_sq) % P
    ny = (r * (u1_h_sq - nx) - s1 * h_cu) % P
    nz = h * z1 * z2 % P
    return nx, ny, nz


def _multiply(scalar: int, point: _Jacobian) -> _Jacobian:
    result = _INFINITY
    addend = point
    while scalar:
        if scalar & 1:
            result = _add(result, addend)
        addend = _double(addend)
        scalar >>= 1
    return result


def _to_affine(point: _Jacobian) -> tuple[int, int] | None:
    x, y, z = point
    if z == 0:
        return None
    z_inv = pow(z, -1, P)
    z_inv_sq = z_inv * z_inv % P
    return x * z_inv_sq % P, y * z_inv_sq * z_inv % P


@total_ordering
@dataclass(frozen=True)
class PublicKey:
    """A point on secp256k1, ordered by its compressed serialization."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not (0 <= self.x < P and 0 <= self.y < P) or not _on_curve(self.x, self.y):
            raise ValueError("point is not on the secp256k1 curve")

    @classmethod
    def from_bytes(cls, data: bytes) -> PublicKey:
        """Parse a 33-byte compressed or 65-byte uncompressed public key."""
        data = bytes(data)
        if len(data) == 33 and data[0] in (0x02, 0x03):
            x = int.from_bytes(data[1:], _BYTE_ORDER)
            return cls(x, _lift_x(x, data[0] == 0x03))
        if len(data) == 65 and data[0] == 0x04:
            return cls(
                int.from_bytes(data[1:33], _BYTE_ORDER),
                int.from_bytes(data[33:], _BYTE_ORDER),
            )
        raise ValueError("malformed public key encoding")

    @classmethod
    def from_hex(cls, text: str) -> PublicKey:
        """Parse a public key from its hexadecimal serialization."""
        return cls.from_bytes(bytes.fromhex(text))

    @classmethod
    def from_secret_key(cls, secret: int | bytes) -> PublicKey:
        """Derive the public key of a secret scalar (int or 32 big-endian bytes)."""
        if isinstance(secret, (bytes, bytearray)):
            if len(secret) != 32:
                raise ValueError("secret key must be 32 bytes long")
            scalar = int.from_bytes(secret, _BYTE_ORDER)
        else:
            scalar = secret
        if not 0 < scalar < N:
            raise ValueError("secret key is out of range")
        x, y = _to_affine(_multiply(scalar, (_GX, _GY, 1)))  # type: ignore[misc]
        return cls(x, y)

    def serialize(self) -> bytes:
        """Return the 33-byte compressed serialization."""
        return bytes([0x03 if self.y & 1 else 0x02]) + self.x.to_bytes(32, _BYTE_ORDER)

    def hex(self) -> str:
        """Return the compressed serialization as lowercase hex."""
        return self.serialize().hex()

    def combine(self, other: PublicKey) -> PublicKey:
        """Add two points; raise ValueError if the sum is the point at infinity."""
        total = _to_affine(_add((self.x, self.y, 1), (other.x, other.y, 1)))
        if total is None:
            raise ValueError("sum of public keys is the point at infinity")
        return PublicKey(*total)

    def add_exp_tweak(self, tweak: bytes) -> PublicKey:
        """Return ``self + tweak*G`` for a 32-byte big-endian tweak."""
        tweak = bytes(tweak)
        if len(tweak) != 32:
            raise ValueError("tweak must be 32 bytes long")
        scalar = int.from_bytes(tweak, _BYTE_ORDER)
        if scalar >= N:
            raise ValueError("tweak is not below the curve order")
        total = _to_affine(_add((self.x, self.y, 1), _multiply(scalar, (_GX, _GY, 1))))
        if total is None:
            raise ValueError("tweaked public key is the point at infinity")
        return PublicKey(*total)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.serialize() < other.serialize()

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"PublicKey({self.hex()!r})"


@dataclass(frozen=True)
class XOnlyPublicKey:
    """A secp256k1 point identified by its x coordinate only."""

    x: int

    def __post_init__(self) -> None:
        _lift_x(self.x, False)

    @classmethod
    def from_bytes(cls, data: bytes) -> XOnlyPublicKey:
        """Parse a 32-byte x-only public key."""
        data = bytes(data)
        if len(data) != 32:
            raise ValueError("x-only public key must be 32 bytes long")
        return cls(int.from_bytes(data, _BYTE_ORDER))

    def serialize(self) -> bytes:
        """Return the 32-byte serialization."""
        return self.x.to_bytes(32, _BYTE_ORDER)

    def to_even_public_key(self) -> PublicKey:
        """Return the full public key with even y for this x coordinate."""
        return PublicKey.from_bytes(b"\x02" + self.serialize())

    def __str__(self) -> str:
        return self.serialize().hex()