from dbcommit.errors import (
    DbcError,
    InvalidKeyData,
    InvalidOpReturnKey,
    InvalidProofStructure,
    InvalidTweak,
    Lnpbp1Error,
    LockscriptContainsNoKeys,
    LockscriptContainsUnknownHashes,
    LockscriptKeyNotFound,
    LockscriptParseError,
    NotKeysetMember,
    PolicyCompilation,
    SumInfiniteResult,
    UncompressedKey,
    UnsupportedWitnessVersion,
)


def test_lnpbp1_errors_are_caught_as_commitment_errors():
    not_member = NotKeysetMember()
    infinite = SumInfiniteResult()
    tweak = InvalidTweak("bad tweak")
    assert str(tweak) == "bad tweak"
    assert str(not_member).startswith("Keyset must include target public key")
    assert "point in infinity" in str(infinite)
    for err in (not_member, infinite, tweak):
        assert isinstance(err, Lnpbp1Error)
        assert isinstance(err, DbcError)


def test_other_errors_are_not_lnpbp1():
    errors = [
        InvalidProofStructure("a"),
        InvalidOpReturnKey("b"),
        InvalidKeyData("c"),
        UnsupportedWitnessVersion("d"),
        LockscriptParseError("e"),
        LockscriptContainsNoKeys("f"),
        LockscriptContainsUnknownHashes("g"),
        LockscriptKeyNotFound("h"),
        PolicyCompilation("i"),
        UncompressedKey("j"),
    ]
    assert [str(err) for err in errors] == list("abcdefghij")
    for err in errors:
        assert isinstance(err, DbcError)
        assert not isinstance(err, Lnpbp1Error)


def test_default_messages_follow_descriptions():
    assert str(NotKeysetMember()).startswith("Keyset must include target public key")
    assert "point in infinity" in str(SumInfiniteResult())
    assert "incorrect proof data structure" in str(InvalidProofStructure())
    assert str(PolicyCompilation()) == "Policy compilation error"
    assert "compressed public keys" in str(UncompressedKey())


def test_custom_message_overrides_default():
    assert str(LockscriptKeyNotFound("custom detail")) == "custom detail"


def test_messages_are_distinct():
    errors = [
        NotKeysetMember(),
        SumInfiniteResult(),
        InvalidTweak(),
        InvalidProofStructure(),
        InvalidOpReturnKey(),
        InvalidKeyData(),
        UnsupportedWitnessVersion(),
        LockscriptParseError(),
        LockscriptContainsNoKeys(),
        LockscriptContainsUnknownHashes(),
        LockscriptKeyNotFound(),
        PolicyCompilation(),
        UncompressedKey(),
    ]
    messages = {str(err) for err in errors}
    assert len(messages) == len(errors)