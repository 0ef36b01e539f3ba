"""LNPBP-1 collision-resistant commitments by tweaking secp256k1 public keys."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Iterable
from dataclasses import dataclass

from .ec import PublicKey
from .errors import InvalidTweak, Lnpbp1Error, NotKeysetMember, SumInfiniteResult

LNPBP1_HASHED_TAG: bytes = bytes(
    [
        245, 8, 242, 142, 252, 192, 113, 82, 108, 168, 134, 200, 224, 124, 105,
        212, 149, 78, 46, 201, 252, 82, 171, 140, 204, 209, 41, 17, 12, 0, 64, 175,
    ]
)
"""Single SHA256 hash of the ASCII string ``LNPBP1``."""


def _as_bytes(message: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


@dataclass(frozen=True)
class CommitResult:
    """Outcome of an LNPBP-1 commitment.

    ``pubkey`` is the tweaked target key, ``keyset`` the original keyset with
    the target key replaced by its tweaked version, and ``tweaking_factor``
    the 32-byte HMAC-SHA256 value that was added to the target key.
    """

    pubkey: PublicKey
    keyset: frozenset[PublicKey]
    tweaking_factor: bytes


def commit(
    keyset: Iterable[PublicKey],
    target_pubkey: PublicKey,
    protocol_tag: bytes,
    message: bytes | str,
) -> CommitResult:
    """Commit ``message`` into ``target_pubkey`` according to LNPBP-1.

    The target key must be a member of ``keyset``. The commitment covers the
    sum of all keys in the set, the LNPBP-1 tag, the protocol tag and the
    SHA256 hash of the message. The inputs are left untouched.

    Raises NotKeysetMember, SumInfiniteResult or InvalidTweak.
    """
    others = set(keyset)
    if target_pubkey not in others:
        raise NotKeysetMember()
    others.discard(target_pubkey)

    pubkey_sum = target_pubkey
    try:
        for pubkey in sorted(others):
            pubkey_sum = pubkey_sum.combine(pubkey)
    except ValueError as exc:
        raise SumInfiniteResult() from exc

    engine = hmac.new(pubkey_sum.serialize(), digestmod=hashlib.sha256)
    engine.update(LNPBP1_HASHED_TAG)
    engine.update(bytes(protocol_tag))
    engine.update(hashlib.sha256(_as_bytes(message)).digest())
    tweaking_factor = engine.digest()

    try:
        tweaked = target_pubkey.add_exp_tweak(tweaking_factor)
    except ValueError as exc:
        raise InvalidTweak() from exc

    others.add(tweaked)
    return CommitResult(
        pubkey=tweaked,
        keyset=frozenset(others),
        tweaking_factor=tweaking_factor,
    )


def verify(
    verified_pubkey: PublicKey,
    original_keyset: Iterable[PublicKey],
    target_pubkey: PublicKey,
    protocol_tag: bytes,
    message: bytes | str,
) -> bool:
    """Check that ``verified_pubkey`` commits to the given data under LNPBP-1.

    A commitment that cannot be produced from the given data counts as a
    failed verification, not as an error.
    """
    try:
        result = commit(original_keyset, target_pubkey, protocol_tag, message)
    except Lnpbp1Error:
        return False
    return result.pubkey == verified_pubkey