import hashlib

import pytest

from dbcommit.ec import PublicKey
from dbcommit.errors import InvalidProofStructure
from dbcommit.proof import Proof, ProofKind

EVEN_HEX = "0218845781f631c48f1c9709e23092067d06837f30aa0cd0544ac887fe91ddd166"
ODD_HEX = "03cfb81a7609a4d40914dfd41860f501209c30468d91834c8af1af34ce73f4f3fd"


def test_encoding_tags():
    even = Proof.from_public_key(PublicKey.from_hex(EVEN_HEX))
    odd = Proof.from_public_key(PublicKey.from_hex(ODD_HEX))
    assert even.kind == 0x02
    assert odd.kind == 0x03
    assert Proof(ProofKind.EMBEDDED).kind == 0x01
    assert ProofKind.NESTED_EVEN_KEY == 0x05
    assert ProofKind.NESTED_SCRIPT_ODD_KEY == 0x10
    assert ProofKind.X_ONLY_KEY_TAPROOT == 0x11
    assert 0x04 not in {kind.value for kind in ProofKind}


@pytest.mark.parametrize(
    "text, kind", [(EVEN_HEX, ProofKind.EVEN_KEY), (ODD_HEX, ProofKind.ODD_KEY)]
)
def test_from_public_key_round_trip(text, kind):
    pubkey = PublicKey.from_hex(text)
    proof = Proof.from_public_key(pubkey)
    assert proof.kind is kind
    assert proof.key == bytes.fromhex(text)[1:]
    assert proof.public_key() == pubkey


def test_embedded_has_no_public_key():
    with pytest.raises(InvalidProofStructure):
        Proof(ProofKind.EMBEDDED).public_key()


@pytest.mark.parametrize(
    "kind, prefix",
    [
        (ProofKind.NESTED_EVEN_KEY, "02"),
        (ProofKind.NESTED_ODD_KEY, "03"),
    ],
)
def test_nested_key_parity(kind, prefix):
    key = bytes.fromhex(EVEN_HEX)[1:]
    assert Proof(kind, key=key).public_key().hex() == prefix + EVEN_HEX[2:]


@pytest.mark.parametrize(
    "kind, prefix",
    [
        (ProofKind.SCRIPT_EVEN_KEY, "02"),
        (ProofKind.SCRIPT_ODD_KEY, "03"),
        (ProofKind.NESTED_SCRIPT_EVEN_KEY, "02"),
        (ProofKind.NESTED_SCRIPT_ODD_KEY, "03"),
    ],
)
def test_script_proof_keys(kind, prefix):
    key = bytes.fromhex(ODD_HEX)[1:]
    proof = Proof(kind, key=key, script=b"\x51")
    assert proof.public_key().hex() == prefix + ODD_HEX[2:]
    assert proof.script == b"\x51"


def test_taproot_proof_uses_even_key():
    key = bytes.fromhex(ODD_HEX)[1:]
    subroot = hashlib.sha256(b"subroot").digest()
    proof = Proof(ProofKind.X_ONLY_KEY_TAPROOT, key=key, merkle_subroot=subroot)
    assert proof.public_key().serialize() == b"\x02" + key
    assert proof.merkle_subroot == subroot


def test_invalid_key_point():
    with pytest.raises(InvalidProofStructure):
        Proof(ProofKind.EVEN_KEY, key=bytes(32)).public_key()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"kind": ProofKind.EVEN_KEY, "key": bytes(31)},
        {"kind": ProofKind.EVEN_KEY},
        {"kind": ProofKind.EMBEDDED, "key": bytes(32)},
        {"kind": ProofKind.SCRIPT_EVEN_KEY, "key": bytes(32)},
        {"kind": ProofKind.EVEN_KEY, "key": bytes(32), "script": b"\x51"},
        {"kind": ProofKind.X_ONLY_KEY_TAPROOT, "key": bytes(32)},
        {"kind": ProofKind.ODD_KEY, "key": bytes(32), "merkle_subroot": bytes(32)},
    ],
)
def test_malformed_proofs_rejected(kwargs):
    with pytest.raises(ValueError):
        Proof(**kwargs)


def test_proofs_compare_by_value():
    key = bytes.fromhex(EVEN_HEX)[1:]
    assert Proof(ProofKind.EVEN_KEY, key=bytearray(key)) == Proof(
        ProofKind.EVEN_KEY, key=key
    )
    assert hash(Proof(ProofKind.EVEN_KEY, key=key)) == hash(
        Proof(ProofKind.EVEN_KEY, key=key)
    )