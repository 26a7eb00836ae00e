"""
Merkle Tree

This module implements a binary merkle tree over an ordered list of elements.
Every node of the complete tree is kept in one flat list, ordered level by
level from the root down to the leaves, each level left to right:

    [root, L1_0, L1_1, L2_0, L2_1, L2_2, L2_3, ...]

A level holding `s` nodes starts at position `s - 1`, so the root is always
at position 0 and the leaves occupy the last `count` positions. Proof
generation and verification rely only on this index arithmetic.

The leaf count must be a power of two.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from .exceptions import InvalidInputError
from .hashing import DEFAULT_HASHER, Element, Hasher
from .proof import validate_proof_length, verify_merkle_proof

logger = logging.getLogger(__name__)


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def _check_leaf_count(n: int) -> None:
    if n == 0:
        raise InvalidInputError("A merkle tree needs at least one element")
    if not is_power_of_two(n):
        raise InvalidInputError(f"Leaf count must be a power of two, got {n}")


def _as_element_list(elements: Iterable[Element]) -> List[Element]:
    # a lone str/bytes is iterable but is one element, not a sequence of them
    if isinstance(elements, (str, bytes, bytearray, memoryview)):
        raise InvalidInputError(
            f"Expected a sequence of elements, got a single {type(elements).__name__}"
        )
    return list(elements)


def build_hashes(leaves: Sequence[bytes], hasher: Hasher = DEFAULT_HASHER) -> List[bytes]:
    """
    Build the full hash hierarchy for a list of leaf digests.

    Adjacent digests are paired left to right and hashed into the parent
    level until a single root remains. The levels are then concatenated
    root first.

    Args:
        leaves: Leaf digests, length a power of two
        hasher: Digest function used for inner nodes

    Returns:
        Flat list of every node, root first and leaves last

    Raises:
        InvalidInputError: If `leaves` is empty or not a power of two long

    Examples:
        >>> hashes = build_hashes([hash_leaf("hola"), hash_leaf("moikka")])
        >>> len(hashes)
        3
    """
    _check_leaf_count(len(leaves))

    levels = [list(leaves)]
    while len(levels[-1]) > 1:
        level = levels[-1]
        levels.append(
            [hasher.hash_pair(level[i], level[i + 1]) for i in range(0, len(level), 2)]
        )

    hashes: List[bytes] = []
    for level in reversed(levels):
        hashes.extend(level)
    return hashes


class MerkleTree:
    """
    Binary merkle tree with append, inclusion proofs and verification.

    The tree keeps only digests; the original elements are not retained.
    It is not safe to read from one thread while another calls `add`.

    Examples:
        >>> tree = MerkleTree(["hola", "moikka", "heippa", "ahoj"])
        >>> proof = tree.proof(1)
        >>> tree.verify(proof, 1)
        True
    """

    def __init__(self, elements: Iterable[Element], hasher: Optional[Hasher] = None):
        """
        Build a tree from an initial list of elements.

        Args:
            elements: Raw elements (bytes or str), count a power of two
            hasher: Digest function, SHA3-256 when omitted

        Raises:
            InvalidInputError: If the element list is empty, not a power of
                two long, or holds something other than bytes/str
        """
        self.hasher = hasher or DEFAULT_HASHER
        elements = _as_element_list(elements)
        _check_leaf_count(len(elements))

        leaves = self._hash_elements(elements)
        self._hashes = build_hashes(leaves, self.hasher)
        self._count = len(leaves)
        logger.debug(
            f"Built tree with {self._count} leaves using {self.hasher.algorithm}"
        )

    def _hash_elements(self, elements: Sequence[Element]) -> List[bytes]:
        return [self.hasher.hash_leaf(e) for e in elements]

    def _check_index(self, leaf_index: int) -> None:
        if isinstance(leaf_index, bool) or not isinstance(leaf_index, int):
            raise InvalidInputError(
                f"Leaf index must be an integer, got {type(leaf_index).__name__}"
            )
        if not 0 <= leaf_index < self._count:
            raise InvalidInputError(
                f"Leaf index {leaf_index} out of range (max: {self._count - 1})"
            )

    @property
    def root(self) -> bytes:
        return self._hashes[0]

    @property
    def count(self) -> int:
        """Number of leaves currently in the tree."""
        return self._count

    @property
    def depth(self) -> int:
        """Number of levels below the root, which is also the proof length."""
        return self._count.bit_length() - 1

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return (
            f"MerkleTree(count={self._count}, algorithm={self.hasher.algorithm!r}, "
            f"root={self.root.hex()})"
        )

    def all_nodes(self) -> List[bytes]:
        """Return a copy of the flat node list, root first."""
        return list(self._hashes)

    def leaves(self) -> List[bytes]:
        return self._hashes[len(self._hashes) - self._count:]

    def leaf(self, leaf_index: int) -> bytes:
        self._check_index(leaf_index)
        return self._hashes[self._count - 1 + leaf_index]

    def levels(self) -> List[List[bytes]]:
        """Return the nodes grouped by level, root level first."""
        levels = []
        size = 1
        while size <= self._count:
            levels.append(self._hashes[size - 1:2 * size - 1])
            size *= 2
        return levels

    def add(self, elements: Iterable[Element]) -> None:
        """
        Append elements to the tree and rebuild every level.

        The new total leaf count must stay a power of two. Validation runs
        before anything is changed, so a rejected call leaves the tree as it
        was.

        Args:
            elements: Non-empty list of new raw elements

        Raises:
            InvalidInputError: If `elements` is empty, holds an unsupported
                type, or the resulting leaf count is not a power of two
        """
        elements = _as_element_list(elements)
        if not elements:
            raise InvalidInputError("Cannot add an empty list of elements")
        total = self._count + len(elements)
        if not is_power_of_two(total):
            raise InvalidInputError(
                f"Leaf count after add must be a power of two, got {total}"
            )

        new_leaves = self._hash_elements(elements)
        leaves = self.leaves() + new_leaves
        self._hashes = build_hashes(leaves, self.hasher)
        self._count = len(leaves)
        logger.debug(f"Added {len(new_leaves)} leaves, tree now has {self._count}")

    def proof(self, leaf_index: int) -> List[bytes]:
        """
        Generate an inclusion proof for a leaf.

        Args:
            leaf_index: 0-based index into the leaf level

        Returns:
            Sibling digests from the leaf level up to, not including, the root

        Raises:
            InvalidInputError: If the index is out of range
        """
        self._check_index(leaf_index)

        proof = []
        index = leaf_index
        level_start = self._count - 1

        while level_start != 0:
            if index % 2 == 0:
                sibling = self._hashes[level_start + index + 1]
            else:
                sibling = self._hashes[level_start + index - 1]
            proof.append(sibling)
            index //= 2
            level_start = (level_start + 1) // 2 - 1

        logger.debug(f"Generated {len(proof)}-step proof for leaf {leaf_index}")
        return proof

    def verify(self, proof: Sequence[bytes], leaf_index: int) -> bool:
        """
        Verify that a proof links the leaf at `leaf_index` to the root.

        Args:
            proof: Sibling digests as returned by `proof`
            leaf_index: Index the proof was generated for

        Returns:
            True if the recomputed root equals the tree root

        Raises:
            InvalidInputError: If the index is out of range or a proof step
                is not bytes-like
        """
        leaf = self.leaf(leaf_index)
        proof = list(proof)
        for step in proof:
            if not isinstance(step, (bytes, bytearray, memoryview)):
                raise InvalidInputError(
                    f"Proof steps must be bytes, got {type(step).__name__}"
                )
        if not validate_proof_length(proof, self.depth):
            logger.debug(
                f"Proof has {len(proof)} steps, tree depth is {self.depth}"
            )
            return False
        return verify_merkle_proof(leaf, proof, leaf_index, self.root, self.hasher)
