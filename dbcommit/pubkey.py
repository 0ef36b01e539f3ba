"""LNPBP-1 commitments into a single public key."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from . import lnpbp1
from .container import Container
from .ec import PublicKey
from .proof import Proof


@dataclass
class PubkeyContainer(Container):
    """Original public key and hashed protocol tag for an LNPBP-1 commitment.

    ``tweaking_factor`` is filled in by :meth:`PubkeyCommitment.embed_commit`.
    """

    pubkey: PublicKey
    tag: bytes
    tweaking_factor: bytes | None = None

    @classmethod
    def reconstruct(cls, proof: Proof, supplement: bytes, host: Any = None) -> PubkeyContainer:
        """Rebuild the container from a key proof and the hashed protocol tag."""
        return cls(pubkey=proof.public_key(), tag=bytes(supplement))

    def deconstruct(self) -> tuple[Proof, bytes]:
        """Split into the key proof and the hashed protocol tag."""
        return self.to_proof(), self.tag

    def to_proof(self) -> Proof:
        """The proof of a public key commitment is the original key itself."""
        return Proof.from_public_key(self.pubkey)


@dataclass(frozen=True)
class PubkeyCommitment:
    """Public key committed to a message via the LNPBP-1 tweak."""

    pubkey: PublicKey

    @classmethod
    def embed_commit(cls, container: PubkeyContainer, msg: bytes | str) -> PubkeyCommitment:
        """Tweak the container's key with ``msg``; store the tweaking factor.

        Raises an Lnpbp1Error subclass when the tweak cannot be applied.
        """
        result = lnpbp1.commit({container.pubkey}, container.pubkey, container.tag, msg)
        container.tweaking_factor = result.tweaking_factor
        return cls(result.pubkey)

    def verify(self, container: PubkeyContainer, msg: bytes | str) -> bool:
        """Check that this commitment is produced by ``container`` and ``msg``."""
        return type(self).embed_commit(replace(container), msg) == self

    def __str__(self) -> str:
        return self.pubkey.hex()