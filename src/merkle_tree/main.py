"""
Merkle Tree - entry point

Builds a tree from a list of elements and prints every node hash, root
first. The CLI and library callers share `build_tree`.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .config import get_settings
from .constants import DEMO_ELEMENTS
from .hashing import Element, get_hasher
from .tree import MerkleTree

logger = logging.getLogger(__name__)


@dataclass
class TreeResult:
    """Container for tree construction results."""
    tree: MerkleTree
    root: bytes
    metadata: Dict[str, Any]


def build_tree(elements: Sequence[Element], algorithm: Optional[str] = None,
               additions: Optional[Sequence[Element]] = None) -> TreeResult:
    """
    Build a tree, optionally appending a second batch of elements.

    Args:
        elements: Initial elements, count a power of two
        algorithm: hashlib algorithm name, MERKLE_HASH_ALGORITHM when omitted
        additions: Elements appended with `MerkleTree.add` after construction

    Returns:
        TreeResult with the tree, its root and descriptive metadata
    """
    algorithm = algorithm or get_settings().hash_algorithm
    tree = MerkleTree(elements, hasher=get_hasher(algorithm))
    if additions:
        tree.add(additions)

    logger.debug(f"Built merkle tree with {tree.count} leaves, root {tree.root.hex()}")
    metadata = {
        "leaf_count": tree.count,
        "depth": tree.depth,
        "node_count": len(tree.all_nodes()),
        "algorithm": tree.hasher.algorithm,
    }
    return TreeResult(tree=tree, root=tree.root, metadata=metadata)


def format_hashes(hashes: List[bytes]) -> List[str]:
    return [h.hex() for h in hashes]


def main(elements: Optional[Sequence[Element]] = None,
         algorithm: Optional[str] = None) -> List[str]:
    """Build the demo tree and print its hashes."""
    result = build_tree(DEMO_ELEMENTS if elements is None else elements, algorithm)
    hashes = format_hashes(result.tree.all_nodes())
    for i, h in enumerate(hashes):
        print(f"{i:3d}: {h}")
    return hashes


if __name__ == "__main__":
    main()
