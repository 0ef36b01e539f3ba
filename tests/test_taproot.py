import hashlib

import pytest

from dbcommit.ec import PublicKey, XOnlyPublicKey
from dbcommit.errors import InvalidProofStructure
from dbcommit.proof import Proof, ProofKind
from dbcommit.pubkey import PubkeyCommitment, PubkeyContainer
from dbcommit.taproot import TaprootCommitment, TaprootContainer

BASE_KEY = "0218845781f631c48f1c9709e23092067d06837f30aa0cd0544ac887fe91ddd166"


@pytest.fixture
def tag():
    return hashlib.sha256(b"TEST_TAG").digest()


@pytest.fixture
def script_root():
    return hashlib.sha256(b"script tree").digest()


@pytest.fixture
def xonly():
    return XOnlyPublicKey.from_bytes(bytes.fromhex(BASE_KEY)[1:])


def test_embed_commit_matches_pubkey_commitment(tag, script_root, xonly):
    container = TaprootContainer(script_root, xonly, tag)
    commitment = TaprootCommitment.embed_commit(container, "test message")
    expected = PubkeyCommitment.embed_commit(
        PubkeyContainer(PublicKey.from_hex(BASE_KEY), tag), "test message"
    )
    assert commitment.intermediate_key_commitment == expected
    assert commitment.script_root == script_root
    assert (
        commitment.intermediate_key_commitment.pubkey.hex()
        == "02de6531527f7a453e0b53e4b33a78c60f9bcdb69abbf59866e33de347ceda0bdf"
    )
    assert len(container.tweaking_factor) == 32


def test_verify(tag, script_root, xonly):
    commitment = TaprootCommitment.embed_commit(TaprootContainer(script_root, xonly, tag), b"msg")
    container = TaprootContainer(script_root, xonly, tag)
    assert commitment.verify(container, b"msg") is True
    assert commitment.verify(container, b"other") is False
    assert container.tweaking_factor is None


def test_verify_fails_with_other_root(tag, script_root, xonly):
    commitment = TaprootCommitment.embed_commit(TaprootContainer(script_root, xonly, tag), b"msg")
    other = TaprootContainer(hashlib.sha256(b"other").digest(), xonly, tag)
    assert commitment.verify(other, b"msg") is False


def test_proof_round_trip(tag, script_root, xonly):
    container = TaprootContainer(script_root, xonly, tag)
    proof, supplement = container.deconstruct()
    assert proof.kind is ProofKind.X_ONLY_KEY_TAPROOT
    assert proof.key == bytes.fromhex(BASE_KEY)[1:]
    assert proof.merkle_subroot == script_root
    assert supplement == tag
    assert TaprootContainer.reconstruct(proof, supplement, None) == container
    assert container.to_proof() == proof


def test_reconstruct_rejects_other_proofs(tag):
    proof = Proof.from_public_key(PublicKey.from_hex(BASE_KEY))
    with pytest.raises(InvalidProofStructure):
        TaprootContainer.reconstruct(proof, tag, None)


def test_reconstruct_rejects_invalid_key(tag, script_root):
    x = 5
    while True:
        try:
            XOnlyPublicKey(x)
        except ValueError:
            break
        x += 1
    proof = Proof(
        ProofKind.X_ONLY_KEY_TAPROOT, key=x.to_bytes(32, "big"), merkle_subroot=script_root
    )
    with pytest.raises(InvalidProofStructure):
        TaprootContainer.reconstruct(proof, tag, None)


def test_script_root_length_checked(tag, xonly):
    with pytest.raises(ValueError):
        TaprootContainer(b"\x00" * 31, xonly, tag)