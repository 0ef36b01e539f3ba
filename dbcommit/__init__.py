"""Deterministic bitcoin commitments made by tweaking secp256k1 public keys."""

__version__ = "0.1.0"
__all__ = [
    "container",
    "ec",
    "errors",
    "keyset",
    "lnpbp1",
    "proof",
    "pubkey",
    "schema",
    "taproot",
]