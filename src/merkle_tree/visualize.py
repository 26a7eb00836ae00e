"""
Merkle Tree Visualization Module

Renders the levels of a tree with rich, optionally marking the proof path
of one leaf: the nodes on the path to the root and the sibling digests that
make up its proof.
"""

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from .proof import get_proof_indices
from .tree import MerkleTree
from .utils.hex_helpers import short_hex

PATH_STYLE = "bold green"
SIBLING_STYLE = "yellow"


def _node_style(tree: MerkleTree, level_size: int, position: int,
                highlight: Optional[int]) -> str:
    if highlight is None:
        return ""
    path_position = highlight // (tree.count // level_size)
    if position == path_position:
        return PATH_STYLE
    if level_size > 1 and position == path_position ^ 1:
        return SIBLING_STYLE
    return "dim"


def _label(tree: MerkleTree, nodes: List[bytes], level_size: int, position: int,
           highlight: Optional[int], hex_length: int) -> str:
    digest = nodes[level_size - 1 + position]
    if level_size == 1:
        name = "root"
    elif level_size == tree.count:
        name = f"leaf {position}"
    else:
        name = f"node {position}"
    text = f"{name}: {short_hex(digest, hex_length)}"
    style = _node_style(tree, level_size, position, highlight)
    return f"[{style}]{text}[/{style}]" if style else text


def render_tree(tree: MerkleTree, highlight: Optional[int] = None,
                hex_length: int = 8) -> Tree:
    """
    Build a rich Tree of every node, root at the top.

    Args:
        tree: Merkle tree to render
        highlight: Optional leaf index whose proof path is marked
        hex_length: Hex characters kept on each side of abbreviated digests

    Returns:
        rich.tree.Tree ready to print
    """
    if highlight is not None:
        tree.leaf(highlight)  # range check

    nodes = tree.all_nodes()
    root = Tree(_label(tree, nodes, 1, 0, highlight, hex_length))
    # (rich node, level size, position)
    stack = [(root, 1, 0)]
    while stack:
        node, level_size, position = stack.pop()
        if level_size == tree.count:
            continue
        child_size = level_size * 2
        for child_position in (2 * position, 2 * position + 1):
            child = node.add(_label(tree, nodes, child_size, child_position, highlight, hex_length))
            stack.append((child, child_size, child_position))
    return root


def print_tree_levels(tree: MerkleTree, console: Optional[Console] = None,
                      highlight: Optional[int] = None):
    """Print the rendered tree with a short header."""
    console = console or Console()
    console.print(
        f"[bold cyan]Merkle tree[/bold cyan] "
        f"({tree.count} leaves, depth {tree.depth}, {tree.hasher.algorithm})"
    )
    console.print(render_tree(tree, highlight))


def print_proof_path(tree: MerkleTree, leaf_index: int,
                     console: Optional[Console] = None):
    """
    Print a table with one row per proof step.

    Args:
        tree: Merkle tree the proof comes from
        leaf_index: Leaf being proven
        console: Console to print to, a new one when omitted
    """
    console = console or Console()
    proof = tree.proof(leaf_index)

    table = Table(title=f"Proof Path for Leaf {leaf_index}")
    table.add_column("Step", style="cyan")
    table.add_column("Index", style="cyan")
    table.add_column("Sibling Index", style="cyan")
    table.add_column("Side", style="magenta")
    table.add_column("Sibling", style="green")

    sibling_indices = get_proof_indices(leaf_index, tree.depth)
    for step, (sibling, sibling_index) in enumerate(zip(proof, sibling_indices)):
        index = leaf_index >> step
        side = "right" if index % 2 == 0 else "left"
        table.add_row(str(step), str(index), str(sibling_index), side, sibling.hex())

    console.print(table)
    console.print(f"[bold]Root:[/bold] {tree.root.hex()}")
