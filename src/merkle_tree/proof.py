"""
Merkle Proof Helpers

Tree-independent functions for checking inclusion proofs. A verifier that
only knows the expected root can use these without holding the tree.

A proof is the list of sibling digests from the leaf level up to, but not
including, the root. At each level the parity of the working index decides
which side the running hash sits on.
"""

from typing import List

from .hashing import DEFAULT_HASHER, Hasher


def compute_root_from_proof(
    leaf: bytes, index: int, proof: List[bytes], hasher: Hasher = DEFAULT_HASHER
) -> bytes:
    """
    Rebuild the merkle root from a leaf digest and its proof.

    Args:
        leaf: Digest of the target leaf
        index: 0-based position of the leaf in the leaf level
        proof: Sibling digests, one per level, leaf level first
        hasher: Digest function the tree was built with

    Returns:
        The reconstructed root digest

    Examples:
        >>> root = compute_root_from_proof(tree.leaf(3), 3, tree.proof(3))
    """
    current = leaf
    for sibling in proof:
        if index % 2 == 0:
            current = hasher.hash_pair(current, sibling)  # Leaf is left
        else:
            current = hasher.hash_pair(sibling, current)  # Leaf is right
        index //= 2
    return current


def verify_merkle_proof(
    leaf: bytes,
    proof: List[bytes],
    index: int,
    root: bytes,
    hasher: Hasher = DEFAULT_HASHER,
) -> bool:
    """
    Verify a merkle proof against a known root.

    Args:
        leaf: Digest of the leaf being proven
        proof: List of sibling digests
        index: Index of the leaf in the tree
        root: Expected merkle root
        hasher: Digest function the tree was built with

    Returns:
        True if the proof reproduces the root byte-for-byte
    """
    return compute_root_from_proof(leaf, index, proof, hasher) == bytes(root)


def validate_proof_length(proof: List[bytes], tree_depth: int) -> bool:
    """A proof carries exactly one sibling per level below the root."""
    return len(proof) == tree_depth


def get_proof_indices(index: int, tree_depth: int) -> List[int]:
    """
    Position of the proof sibling within each level, leaf level first.

    Sibling positions differ from the path position only in the lowest bit,
    so the path for leaf `index` is `index >> level` at each level.

    Examples:
        >>> get_proof_indices(3, 3)
        [2, 0, 1]
    """
    return [(index >> level) ^ 1 for level in range(tree_depth)]
