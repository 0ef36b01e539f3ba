# dbcommit

Deterministic bitcoin commitments in pure Python. The package uses only the
standard library.

A message is committed into a secp256k1 public key by adding a
deterministic tweak to that key (the LNPBP-1 procedure). The tweak is an
HMAC-SHA256 keyed with the sum of all participating public keys. It covers
the SHA256 hash of `LNPBP1`, a 32-byte protocol tag and the SHA256 hash of
the message.

## Modules

- `dbcommit.ec`: `PublicKey` and `XOnlyPublicKey` on secp256k1.
  - `PublicKey.from_bytes` reads 33-byte compressed and 65-byte uncompressed
    keys. `from_hex` reads the same encodings as hex. `from_secret_key`
    takes an int or 32 big-endian bytes.
  - `serialize()` and `hex()` always produce the compressed form.
  - `combine()` adds two points. `add_exp_tweak()` adds `tweak*G`. Both
    raise `ValueError` when the result is the point at infinity.
  - Public keys are ordered by their compressed serialization.
  - `XOnlyPublicKey.to_even_public_key()` gives the point with even y.
- `dbcommit.lnpbp1`: the commitment procedure itself.
  - `commit(keyset, target_pubkey, protocol_tag, message)` returns a
    `CommitResult` with the tweaked `pubkey`, the new `keyset` (the target
    key replaced by its tweaked form) and the 32-byte `tweaking_factor`. The
    inputs are left unchanged.
  - It raises `NotKeysetMember`, `SumInfiniteResult` or `InvalidTweak`.
  - `verify(...)` returns `True` only if the commitment can be redone from
    the given data and gives the verified key. A failed commitment counts
    as `False`.
  - `LNPBP1_HASHED_TAG` holds the SHA256 hash of `LNPBP1`.
- `dbcommit.proof`: `Proof` holds the data kept outside the transaction to
  prove a commitment. `ProofKind` names its variants, with their encoding
  tags `0x01`–`0x11`.
  - `Proof.from_public_key()` builds an even- or odd-key proof.
  - `Proof.public_key()` reads the key back. It raises
    `InvalidProofStructure` for embedded proofs and for key data that is not
    a curve point.
- `dbcommit.container`: the abstract `Container` with `reconstruct`,
  `deconstruct` and `to_proof`.
- `dbcommit.pubkey`: `PubkeyContainer` and `PubkeyCommitment`, which commit
  into a single key.
- `dbcommit.keyset`: `KeysetContainer` and `KeysetCommitment`, which commit
  into a target key over the sum of a set of keys.
  - `KeysetContainer.reconstruct` reads the keyset from the compressed keys
    pushed by the proof's script. It raises `UncompressedKey` for
    uncompressed keys and `InvalidProofStructure` for proofs without a
    script.
  - `KeysetContainer.to_proof` always raises `TypeError`.
- `dbcommit.taproot`: `TaprootContainer` and `TaprootCommitment`. They
  commit into the even-y form of the intermediate x-only key and keep the
  script tree root alongside.
- `dbcommit.schema`: `CommitmentSchema`, the flags for which output-based
  commitment schemata a protocol allows, with `update_pubkey_tweaks` and
  `update_script_tweaks`. It also has `ScriptEncodeData` and
  `ScriptEncodeKind`, and `SpkContainer`, which holds a proof, the allowed
  schemata and the tag.
- `dbcommit.errors`: the exception hierarchy. All errors derive from
  `DbcError`, and the LNPBP-1 errors derive from `Lnpbp1Error`.

Every commitment class has `embed_commit(container, msg)` and
`verify(container, msg)`. `embed_commit` stores the applied tweak in the
container's `tweaking_factor`. `verify` works on a copy of the container.
A message may be `bytes` or `str`; a `str` is encoded as UTF-8.

## Installation

```
pip install .
```

## Example

```python
import hashlib

from dbcommit.ec import PublicKey
from dbcommit.pubkey import PubkeyCommitment, PubkeyContainer

tag = hashlib.sha256(b"TEST_TAG").digest()
pubkey = PublicKey.from_hex(
    "0218845781f631c48f1c9709e23092067d06837f30aa0cd0544ac887fe91ddd166"
)
container = PubkeyContainer(pubkey=pubkey, tag=tag)

commitment = PubkeyCommitment.embed_commit(container, b"test message")
assert commitment.verify(container, b"test message")
assert not commitment.verify(container, b"another message")
print(commitment)  # hex of the tweaked public key
```

## What it does not do

- No commitment into a `scriptPubkey`, a transaction output or a whole
  transaction. `SpkContainer` only stores the data for such a commitment.
  No script is parsed beyond reading pushed keys, and no key or key hash is
  replaced inside a script.
- No binary encoding of proofs.
- No command-line tool.

## Running the tests

```
pip install .[test]
pytest
```