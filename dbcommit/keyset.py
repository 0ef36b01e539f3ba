"""LNPBP-1 commitments into a public key together with a set of other keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from typing import Any

from . import lnpbp1
from .container import Container
from .ec import PublicKey
from .errors import InvalidKeyData, InvalidProofStructure, LockscriptParseError, UncompressedKey
from .proof import Proof

_OP_PUSHDATA1 = 0x4C
_OP_PUSHDATA2 = 0x4D
_OP_PUSHDATA4 = 0x4E


def _pushes(script: bytes) -> Iterator[bytes]:
    """Yield the data of every push operation in ``script``."""
    pos = 0
    while pos < len(script):
        opcode = script[pos]
        pos += 1
        if 0x01 <= opcode <= 0x4B:
            size = opcode
        elif opcode in (_OP_PUSHDATA1, _OP_PUSHDATA2, _OP_PUSHDATA4):
            width = {_OP_PUSHDATA1: 1, _OP_PUSHDATA2: 2, _OP_PUSHDATA4: 4}[opcode]
            if pos + width > len(script):
                raise LockscriptParseError()
            size = int.from_bytes(script[pos:pos + width], "little")
            pos += width
        else:
            continue
        if pos + size > len(script):
            raise LockscriptParseError()
        yield script[pos:pos + size]
        pos += size


def _extract_pubkeys(script: bytes) -> frozenset[PublicKey]:
    """Collect the public keys pushed by a script."""
    keys = set()
    for data in _pushes(script):
        if len(data) == 33 and data[0] in (0x02, 0x03):
            try:
                keys.add(PublicKey.from_bytes(data))
            except ValueError as exc:
                raise InvalidKeyData() from exc
        elif len(data) == 65 and data[0] == 0x04:
            raise UncompressedKey()
    return frozenset(keys)


@dataclass
class KeysetContainer(Container):
    """Target public key, the other participating keys and the hashed tag.

    ``tweaking_factor`` is filled in by :meth:`KeysetCommitment.embed_commit`.
    """

    pubkey: PublicKey
    keyset: Iterable[PublicKey] = field(default_factory=frozenset)
    tag: bytes = b""
    tweaking_factor: bytes | None = None

    def __post_init__(self) -> None:
        self.keyset = frozenset(self.keyset)

    @classmethod
    def reconstruct(cls, proof: Proof, supplement: bytes, host: Any = None) -> KeysetContainer:
        """Rebuild from a script proof: the keyset is read from the script.

        Raises InvalidProofStructure for proofs that carry no script.
        """
        if proof.script is None:
            raise InvalidProofStructure()
        return cls(
            pubkey=proof.public_key(),
            keyset=_extract_pubkeys(proof.script),
            tag=bytes(supplement),
        )

    def deconstruct(self) -> tuple[Proof, bytes]:
        """Split into the key proof of the target key and the hashed tag."""
        return Proof.from_public_key(self.pubkey), self.tag

    def to_proof(self) -> Proof:
        """Keyset containers cannot produce proofs; always raises TypeError."""
        raise TypeError("KeysetContainer does not support proof generation")


@dataclass(frozen=True)
class KeysetCommitment:
    """Public key committed to a message and to the sum of a keyset."""

    pubkey: PublicKey

    @classmethod
    def embed_commit(cls, container: KeysetContainer, msg: bytes | str) -> KeysetCommitment:
        """Tweak the target key over the whole keyset; store the tweaking factor."""
        keyset = set(container.keyset)
        keyset.add(container.pubkey)
        result = lnpbp1.commit(keyset, container.pubkey, container.tag, msg)
        container.tweaking_factor = result.tweaking_factor
        return cls(result.pubkey)

    def verify(self, container: KeysetContainer, msg: bytes | str) -> bool:
        """Check that this commitment is produced by ``container`` and ``msg``."""
        return type(self).embed_commit(replace(container), msg) == self

    def __str__(self) -> str:
        return self.pubkey.hex()