"""
Proof Models

Pydantic models describing inclusion proofs and tree summaries in a
hex-encoded form. They validate proofs supplied from outside the process
(for example on the command line) before they reach the verifier.
"""

from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_HASH_ALGORITHM
from ..hashing import Hasher, get_hasher
from ..proof import verify_merkle_proof
from ..tree import MerkleTree
from ..utils.hex_helpers import bytes_to_hex, digests_to_hex, hex_to_bytes, is_hex_string


def _check_digest_hex(value: str) -> str:
    if not value or not is_hex_string(value) or value in ("0x", "0X"):
        raise ValueError(f"Digest must be a non-empty hex string, got {value!r}")
    return value


class ProofModel(BaseModel):
    """
    Hex-encoded inclusion proof for a single leaf.

    Attributes:
        leaf_index: Index of the leaf in the leaf level
        leaf: Leaf digest
        proof: Sibling digests, leaf level first
        root: Expected root digest
        algorithm: hashlib name of the digest function
    """
    leaf_index: int = Field(..., ge=0, description="Index of the proven leaf")
    leaf: str = Field(..., description="Leaf digest (hex string)")
    proof: List[str] = Field(default_factory=list, description="Sibling digests (hex strings)")
    root: str = Field(..., description="Root digest (hex string)")
    algorithm: str = Field(default=DEFAULT_HASH_ALGORITHM, description="Hash algorithm")

    @field_validator("leaf", "root")
    @classmethod
    def validate_digest(cls, v):
        """Validate a single digest field."""
        return _check_digest_hex(v)

    @field_validator("proof")
    @classmethod
    def validate_proof(cls, v):
        """Validate every sibling digest."""
        return [_check_digest_hex(step) for step in v]

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v):
        """Validate the algorithm is a usable fixed-length hashlib function."""
        Hasher(v)
        return v

    @classmethod
    def from_tree(cls, tree: MerkleTree, leaf_index: int) -> "ProofModel":
        return cls(
            leaf_index=leaf_index,
            leaf=bytes_to_hex(tree.leaf(leaf_index)),
            proof=digests_to_hex(tree.proof(leaf_index)),
            root=bytes_to_hex(tree.root),
            algorithm=tree.hasher.algorithm,
        )

    def to_bytes(self) -> Tuple[bytes, List[bytes], bytes]:
        """Decode to `(leaf, proof, root)` digests."""
        return (
            hex_to_bytes(self.leaf),
            [hex_to_bytes(step) for step in self.proof],
            hex_to_bytes(self.root),
        )

    def verify(self) -> bool:
        """Check the proof against its own root without a tree."""
        leaf, proof, root = self.to_bytes()
        return verify_merkle_proof(
            leaf, proof, self.leaf_index, root, get_hasher(self.algorithm)
        )


class TreeSummary(BaseModel):
    """
    Hex-encoded view of a whole tree.

    Attributes:
        root: Root digest
        count: Number of leaves
        depth: Levels below the root
        algorithm: hashlib name of the digest function
        nodes: Every node, root first
    """
    root: str = Field(..., description="Root digest (hex string)")
    count: int = Field(..., ge=1, description="Number of leaves")
    depth: int = Field(..., ge=0, description="Levels below the root")
    algorithm: str = Field(default=DEFAULT_HASH_ALGORITHM, description="Hash algorithm")
    nodes: List[str] = Field(default_factory=list, description="All node digests, root first")

    @classmethod
    def from_tree(cls, tree: MerkleTree) -> "TreeSummary":
        return cls(
            root=bytes_to_hex(tree.root),
            count=tree.count,
            depth=tree.depth,
            algorithm=tree.hasher.algorithm,
            nodes=digests_to_hex(tree.all_nodes()),
        )
