"""Extra-transaction proofs of deterministic bitcoin commitments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .ec import PublicKey
from .errors import InvalidProofStructure


class ProofKind(IntEnum):
    """Proof variants with their strict-encoding tags."""

    EMBEDDED = 0x01
    EVEN_KEY = 0x02
    ODD_KEY = 0x03
    NESTED_EVEN_KEY = 0x05
    NESTED_ODD_KEY = 0x06
    SCRIPT_EVEN_KEY = 0x07
    SCRIPT_ODD_KEY = 0x08
    NESTED_SCRIPT_EVEN_KEY = 0x09
    NESTED_SCRIPT_ODD_KEY = 0x10
    X_ONLY_KEY_TAPROOT = 0x11

    @property
    def has_script(self) -> bool:
        """Whether proofs of this kind carry a script."""
        return self in _SCRIPT_KINDS

    @property
    def is_odd(self) -> bool:
        """Whether the stored key belongs to a point with odd y."""
        return self in _ODD_KINDS


_SCRIPT_KINDS = frozenset(
    {
        ProofKind.SCRIPT_EVEN_KEY,
        ProofKind.SCRIPT_ODD_KEY,
        ProofKind.NESTED_SCRIPT_EVEN_KEY,
        ProofKind.NESTED_SCRIPT_ODD_KEY,
    }
)
_ODD_KINDS = frozenset(
    {
        ProofKind.ODD_KEY,
        ProofKind.NESTED_ODD_KEY,
        ProofKind.SCRIPT_ODD_KEY,
        ProofKind.NESTED_SCRIPT_ODD_KEY,
    }
)


@dataclass(frozen=True)
class Proof:
    """Extra-transaction data needed to verify a commitment.

    ``key`` is the 32-byte x coordinate of the original (or taproot internal)
    key; its parity is part of ``kind``. Key data is not validated as a curve
    point until :meth:`public_key` is called.
    """

    kind: ProofKind
    key: bytes | None = None
    script: bytes | None = None
    merkle_subroot: bytes | None = None

    def __post_init__(self) -> None:
        kind = ProofKind(self.kind)
        object.__setattr__(self, "kind", kind)
        for name in ("key", "script", "merkle_subroot"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, bytes(value))

        if kind is ProofKind.EMBEDDED:
            if self.key is not None or self.script is not None or self.merkle_subroot is not None:
                raise ValueError("embedded proof carries no data")
            return
        if self.key is None or len(self.key) != 32:
            raise ValueError("proof key must be 32 bytes long")
        if kind.has_script:
            if self.script is None:
                raise ValueError("script proof requires a script")
        elif self.script is not None:
            raise ValueError("this proof kind carries no script")
        if kind is ProofKind.X_ONLY_KEY_TAPROOT:
            if self.merkle_subroot is None or len(self.merkle_subroot) != 32:
                raise ValueError("taproot proof requires a 32-byte merkle subroot")
        elif self.merkle_subroot is not None:
            raise ValueError("this proof kind carries no merkle subroot")

    @classmethod
    def from_public_key(cls, pubkey: PublicKey) -> Proof:
        """Build an even- or odd-key proof from a public key."""
        data = pubkey.serialize()
        kind = ProofKind.ODD_KEY if data[0] == 0x03 else ProofKind.EVEN_KEY
        return cls(kind, key=data[1:])

    def public_key(self) -> PublicKey:
        """Return the public key stored in the proof.

        Raises InvalidProofStructure for embedded proofs or key data that is
        not a curve point.
        """
        if self.kind is ProofKind.EMBEDDED or self.key is None:
            raise InvalidProofStructure()
        prefix = b"\x03" if self.kind.is_odd else b"\x02"
        try:
            return PublicKey.from_bytes(prefix + self.key)
        except ValueError as exc:
            raise InvalidProofStructure() from exc