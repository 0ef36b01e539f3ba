"""Commitments into the internal key of a taproot output."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .container import Container
from .ec import XOnlyPublicKey
from .errors import InvalidProofStructure
from .proof import Proof, ProofKind
from .pubkey import PubkeyCommitment, PubkeyContainer


@dataclass
class TaprootContainer(Container):
    """Script tree root, intermediate x-only key and hashed protocol tag."""

    script_root: bytes
    intermediate_key: XOnlyPublicKey
    tag: bytes
    tweaking_factor: bytes | None = None

    def __post_init__(self) -> None:
        self.script_root = bytes(self.script_root)
        if len(self.script_root) != 32:
            raise ValueError("script root must be 32 bytes long")

    @classmethod
    def reconstruct(cls, proof: Proof, supplement: bytes, host: Any = None) -> TaprootContainer:
        """Rebuild from an x-only taproot proof; other proofs are rejected."""
        if proof.kind is not ProofKind.X_ONLY_KEY_TAPROOT:
            raise InvalidProofStructure()
        try:
            key = XOnlyPublicKey.from_bytes(proof.key or b"")
        except ValueError as exc:
            raise InvalidProofStructure() from exc
        return cls(
            script_root=proof.merkle_subroot or b"",
            intermediate_key=key,
            tag=bytes(supplement),
        )

    def deconstruct(self) -> tuple[Proof, bytes]:
        """Split into the taproot proof and the hashed tag."""
        return self.to_proof(), self.tag

    def to_proof(self) -> Proof:
        """Return the x-only taproot proof for this container."""
        return Proof(
            ProofKind.X_ONLY_KEY_TAPROOT,
            key=self.intermediate_key.serialize(),
            merkle_subroot=self.script_root,
        )


@dataclass(frozen=True)
class TaprootCommitment:
    """Script root together with the committed intermediate key."""

    script_root: bytes
    intermediate_key_commitment: PubkeyCommitment

    @classmethod
    def embed_commit(cls, container: TaprootContainer, msg: bytes | str) -> TaprootCommitment:
        """Commit into the even-y form of the intermediate key."""
        pubkey_container = PubkeyContainer(
            pubkey=container.intermediate_key.to_even_public_key(),
            tag=container.tag,
        )
        commitment = PubkeyCommitment.embed_commit(pubkey_container, msg)
        container.tweaking_factor = pubkey_container.tweaking_factor
        return cls(container.script_root, commitment)

    def verify(self, container: TaprootContainer, msg: bytes | str) -> bool:
        """Check that this commitment is produced by ``container`` and ``msg``."""
        return type(self).embed_commit(replace(container), msg) == self