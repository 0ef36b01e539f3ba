"""Errors raised while creating or verifying deterministic bitcoin commitments."""

from __future__ import annotations


class DbcError(Exception):
    """Base class for errors of deterministic bitcoin commitment procedures."""

    default_message = (
        "deterministic bitcoin commitment procedure failed"
    )

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class Lnpbp1Error(DbcError):
    """Failure of applying an LNPBP-1 commitment tweak to a public key."""

    default_message = (
        "Indicates failure of applying commitment tweak to a public key"
    )


class NotKeysetMember(Lnpbp1Error):
    """The target public key is not a member of the keyset."""

    default_message = (
        "Keyset must include target public key, but no target key found it "
        "the provided set."
    )


class SumInfiniteResult(Lnpbp1Error):
    """Summing the keyset produced the point at infinity."""

    default_message = (
        "Elliptic curve point addition resulted in point in infinity; you "
        "must select different source public keys"
    )


class InvalidTweak(Lnpbp1Error):
    """The tweaking factor is out of range or tweaks the key to infinity."""

    default_message = (
        "LNPBP-1 commitment either is outside of Secp256k1 order `n` (this "
        "event has negligible probability <~2^-64), or, when added to the "
        "provided keyset, results in point at infinity. You may try with a "
        "different source message or public keys."
    )


class InvalidProofStructure(DbcError):
    """The proof has a structure not suitable for the verification."""

    default_message = (
        "Unable to verify commitment due to an incorrect proof data structure"
    )


class InvalidOpReturnKey(DbcError):
    """The tweaked key for an OP_RETURN commitment does not start with 02."""

    default_message = (
        "LNPBP-2 standard requires OP_RETURN-based commitments to be produced "
        "only if serialized version of a tweaked pubkey starts with `02` byte. "
        "This error indicates that the provided public key does not satisfy "
        "this condition"
    )


class InvalidKeyData(DbcError):
    """A public key could not be read from a script push."""

    default_message = (
        "Can't deserealized public key from bitcoin script push op code"
    )


class UnsupportedWitnessVersion(DbcError):
    """The witness version is not supported."""

    default_message = (
        "Wrong witness version, may be you need to upgrade used library version"
    )


class LockscriptParseError(DbcError):
    """The script could not be parsed."""

    default_message = (
        "Miniscript was unable to parse provided script data; they are either "
        "invalid or miniscript library contains a bug"
    )


class LockscriptContainsNoKeys(DbcError):
    """The script holds no keys to commit to."""

    default_message = (
        "Provided script contains no keys, so commitment or its verification "
        "is impossible"
    )


class LockscriptContainsUnknownHashes(DbcError):
    """The script holds key hashes with no matching public keys."""

    default_message = (
        "Bitcoin script contains public key hashes with no matching public "
        "keys provided. Commitment procedure fails since it can't ensure that "
        "commitment include all public key."
    )


class LockscriptKeyNotFound(DbcError):
    """The key that must hold the tweak is absent from the script."""

    default_message = (
        "Attempt to commit into LockScript has failed: the key that must "
        "contain the commitment/tweak was not found either in plain nor hash "
        "form in any of the script branches"
    )


class PolicyCompilation(DbcError):
    """A spending policy could not be compiled."""

    default_message = "Policy compilation error"


class UncompressedKey(DbcError):
    """An uncompressed public key was given where a compressed one is required."""

    default_message = (
        "Deterministic bitcoin commitments require use of compressed public keys"
    )