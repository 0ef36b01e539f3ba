"""Common interface of commitment containers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .proof import Proof


class Container(ABC):
    """Data needed to create or verify a commitment.

    A container can be rebuilt from an extra-transaction proof, a
    protocol-specific supplement and a host, and split back into a proof and
    its supplement.
    """

    @classmethod
    @abstractmethod
    def reconstruct(cls, proof: Proof, supplement: Any, host: Any) -> Container:
        """Rebuild the container from a proof and protocol-specific data."""

    @abstractmethod
    def deconstruct(self) -> tuple[Proof, Any]:
        """Split the container into its proof and supplement."""

    @abstractmethod
    def to_proof(self) -> Proof:
        """Return the extra-transaction proof for this container."""