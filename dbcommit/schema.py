"""Commitment schemata and containers for commitments into ``scriptPubkey``."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .container import Container
from .proof import Proof


class ScriptEncodeKind(Enum):
    """The ways a commitment source may be encoded in an output script."""

    SINGLE_PUBKEY = "single_pubkey"
    LOCK_SCRIPT = "lock_script"
    TAPROOT = "taproot"


@dataclass(frozen=True)
class ScriptEncodeData:
    """Minimum extra-transaction data needed to verify an output commitment.

    ``SINGLE_PUBKEY`` carries no data, since the original key is part of the
    proof. ``LOCK_SCRIPT`` carries the full original script, which may not be
    recoverable from the chain while the output is unspent. ``TAPROOT``
    carries the 32-byte hash of the tapscript merkle tree root.
    """

    kind: ScriptEncodeKind
    data: bytes | None = None

    def __post_init__(self) -> None:
        kind = ScriptEncodeKind(self.kind)
        object.__setattr__(self, "kind", kind)
        if self.data is not None:
            object.__setattr__(self, "data", bytes(self.data))
        if kind is ScriptEncodeKind.SINGLE_PUBKEY:
            if self.data is not None:
                raise ValueError("single public key encoding carries no data")
        elif kind is ScriptEncodeKind.LOCK_SCRIPT:
            if self.data is None:
                raise ValueError("lock script encoding requires a script")
        elif self.data is None or len(self.data) != 32:
            raise ValueError("taproot encoding requires a 32-byte merkle root hash")

    def __str__(self) -> str:
        if self.kind is ScriptEncodeKind.SINGLE_PUBKEY:
            return "single public key"
        if self.kind is ScriptEncodeKind.LOCK_SCRIPT:
            return f"lock script {self.data.hex()}"  # type: ignore[union-attr]
        return f"taproot {self.data.hex()}"  # type: ignore[union-attr]


@dataclass(order=True)
class CommitmentSchema:
    """Set of output-based commitment schemata a protocol allows.

    Each flag enables one schema; all are disabled by default.
    """

    p2pk_tweak: bool = False
    p2pkh_tweak: bool = False
    p2wpkh_tweak: bool = False
    p2wpkh_sh_tweak: bool = False
    bare_tweak: bool = False
    p2sh_tweak: bool = False
    p2wsh_tweak: bool = False
    p2wsh_sh_tweak: bool = False
    p2pk_return: bool = False
    p2tr_return: bool = False

    def update_pubkey_tweaks(self, allow: bool) -> None:
        """Set or clear all single-key tweak schemata (P2PK, P2PKH, P2WPKH, P2WPKH-in-P2SH)."""
        self.p2pk_tweak = allow
        self.p2pkh_tweak = allow
        self.p2wpkh_tweak = allow
        self.p2wpkh_sh_tweak = allow

    def update_script_tweaks(self, allow: bool) -> None:
        """Set or clear all script keyset tweak schemata (bare, P2SH, P2WSH, P2WSH-in-P2SH)."""
        self.bare_tweak = allow
        self.p2sh_tweak = allow
        self.p2wsh_tweak = allow
        self.p2wsh_sh_tweak = allow


@dataclass
class SpkContainer(Container):
    """Data participating in creating or verifying a ``scriptPubkey`` commitment.

    ``tweaking_factor`` is filled in once a commitment has been embedded.
    """

    proof: Proof
    allowed: CommitmentSchema = field(default_factory=CommitmentSchema)
    tag: bytes = b""
    tweaking_factor: bytes | None = None

    @classmethod
    def reconstruct(
        cls, proof: Proof, supplement: tuple[bytes, CommitmentSchema], host: Any = None
    ) -> SpkContainer:
        """Rebuild from a proof and a ``(tag, allowed schemata)`` supplement."""
        tag, allowed = supplement
        return cls(proof=proof, allowed=replace(allowed), tag=bytes(tag))

    def deconstruct(self) -> tuple[Proof, tuple[bytes, CommitmentSchema]]:
        """Split into the proof and the ``(tag, allowed schemata)`` supplement."""
        return self.proof, (self.tag, self.allowed)

    def to_proof(self) -> Proof:
        """Return the stored extra-transaction proof."""
        return self.proof