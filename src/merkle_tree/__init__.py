"""
Merkle Tree Library

A binary merkle tree over an ordered list of elements with append,
inclusion proof generation and verification.

Modules:
- hashing: Digest primitives (SHA3-256 by default)
- tree: Tree construction and the MerkleTree value
- proof: Tree-independent proof verification helpers
- models: Pydantic models for hex-encoded proofs
- visualize: Rich rendering of trees and proof paths
- cli: Command-line interface
"""

from .exceptions import InvalidInputError, MerkleTreeError
from .hashing import DEFAULT_HASHER, Hasher, get_hasher, hash_leaf, hash_pair
from .proof import (
    compute_root_from_proof,
    get_proof_indices,
    validate_proof_length,
    verify_merkle_proof,
)
from .tree import MerkleTree, build_hashes, is_power_of_two

__version__ = "0.1.0"

__all__ = [
    # Errors
    "InvalidInputError",
    "MerkleTreeError",

    # Hashing
    "DEFAULT_HASHER",
    "Hasher",
    "get_hasher",
    "hash_leaf",
    "hash_pair",

    # Tree
    "MerkleTree",
    "build_hashes",
    "is_power_of_two",

    # Proof helpers
    "compute_root_from_proof",
    "get_proof_indices",
    "validate_proof_length",
    "verify_merkle_proof",
]
