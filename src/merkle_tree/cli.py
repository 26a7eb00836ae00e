#!/usr/bin/env python3
"""
Merkle Tree CLI

Command-line interface for building merkle trees from a list of elements,
generating inclusion proofs and verifying them.
"""

import json
import logging
import sys
from typing import Any, Dict, Optional, Tuple

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import get_settings
from .constants import LOG_FORMAT
from .exceptions import MerkleTreeError
from .main import TreeResult, build_tree, main as run_demo
from .models import ProofModel, TreeSummary
from .tree import MerkleTree
from .utils.hex_helpers import hex_to_bytes
from .visualize import print_proof_path, print_tree_levels

# Configure rich console
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else get_settings().log_level_value
    logging.basicConfig(level=level, format=LOG_FORMAT)


def format_json(data: Dict[str, Any]) -> str:
    """Format a result for JSON output."""
    return json.dumps(data, indent=2)


def print_tree_result(result: TreeResult, format_output: str = "table"):
    """Print tree results in various formats."""
    if format_output == "json":
        click.echo(format_json(TreeSummary.from_tree(result.tree).model_dump()))
        return

    # Table format (default)
    table = Table(title="Merkle Tree")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Root Hash", result.root.hex())
    for key, value in result.metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value))

    console.print(table)

    if format_output == "detailed":
        console.print("\n[bold cyan]Nodes (root first):[/bold cyan]")
        for i, node in enumerate(result.tree.all_nodes()):
            console.print(f"  {i:3d}: {node.hex()}")


def _build(ctx, elements: Tuple[str, ...], additions: Tuple[str, ...] = ()) -> TreeResult:
    try:
        return build_tree(list(elements), ctx.obj.get("algorithm"), list(additions))
    except MerkleTreeError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--algorithm",
    envvar="MERKLE_HASH_ALGORITHM",
    help="hashlib algorithm used for leaves and nodes (default sha3_256)",
)
@click.pass_context
def cli(ctx, verbose: bool, algorithm: Optional[str]):
    """
    Merkle Tree CLI - build trees, generate and verify inclusion proofs.

    Elements are given as arguments and hashed as UTF-8 text. The number of
    leaves must be a power of two.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["algorithm"] = algorithm


@cli.command()
@click.argument("elements", nargs=-1, required=True)
@click.option(
    "--add",
    "additions",
    multiple=True,
    help="Element appended after the tree is built (repeatable)",
)
@click.option(
    "--format",
    "format_output",
    type=click.Choice(["table", "json", "detailed"]),
    default="table",
    help="Output format",
)
@click.pass_context
def build(ctx, elements: Tuple[str, ...], additions: Tuple[str, ...], format_output: str):
    """
    Build a tree and print its root.

    ELEMENTS: Leaf elements, in order
    """
    result = _build(ctx, elements, additions)
    print_tree_result(result, format_output)


@cli.command()
@click.argument("leaf_index", type=int)
@click.argument("elements", nargs=-1, required=True)
@click.option(
    "--format",
    "format_output",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.pass_context
def proof(ctx, leaf_index: int, elements: Tuple[str, ...], format_output: str):
    """
    Generate an inclusion proof.

    LEAF_INDEX: Index of the leaf to prove

    ELEMENTS: Leaf elements, in order

    Put `--` before the arguments when LEAF_INDEX is negative, otherwise
    it is read as an option: `merkle-tree proof -- -1 a b`.
    """
    tree = _build(ctx, elements).tree
    try:
        model = ProofModel.from_tree(tree, leaf_index)
    except MerkleTreeError as e:
        logger.error(f"Error generating proof: {e}")
        raise click.ClickException(str(e))

    if format_output == "json":
        click.echo(format_json(model.model_dump()))
        return
    print_proof_path(tree, leaf_index, console)


@cli.command()
@click.argument("leaf_index", type=int)
@click.argument("elements", nargs=-1, required=True)
@click.option(
    "--proof",
    "proof_steps",
    multiple=True,
    required=True,
    help="Sibling digest as hex, leaf level first (repeatable)",
)
@click.pass_context
def verify(ctx, leaf_index: int, elements: Tuple[str, ...], proof_steps: Tuple[str, ...]):
    """
    Verify an inclusion proof against the tree built from ELEMENTS.

    Exits with status 1 when the proof does not reproduce the root. Give
    --proof before `--` when LEAF_INDEX is negative:
    `merkle-tree verify --proof 0x.. -- -1 a b`.
    """
    tree: MerkleTree = _build(ctx, elements).tree
    try:
        steps = [hex_to_bytes(step) for step in proof_steps]
        is_valid = tree.verify(steps, leaf_index)
    except MerkleTreeError as e:
        raise click.ClickException(str(e))

    if is_valid:
        console.print(f"[green]Proof for leaf {leaf_index} is valid[/green]")
        return

    logger.warning(f"Proof for leaf {leaf_index} does not match root {tree.root.hex()}")
    console.print(f"[red]Proof for leaf {leaf_index} is INVALID[/red]")
    sys.exit(1)


@cli.command()
@click.argument("elements", nargs=-1, required=True)
@click.option("--highlight", type=int, help="Leaf index whose proof path is marked")
@click.pass_context
def show(ctx, elements: Tuple[str, ...], highlight: Optional[int]):
    """Draw every level of the tree."""
    tree = _build(ctx, elements).tree
    try:
        print_tree_levels(tree, console, highlight)
    except MerkleTreeError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.pass_context
def demo(ctx):
    """Build the demo tree and print all of its hashes."""
    console.print(
        Panel(
            "Building a merkle tree from Cat, Dog, Spider and Snake.\n"
            "Hashes are listed root first, leaves last.",
            title="Demo",
            border_style="blue",
        )
    )
    try:
        run_demo(algorithm=ctx.obj.get("algorithm"))
    except MerkleTreeError as e:
        console.print(f"[red]Demo failed: {e}[/red]", style="bold")
        if ctx.obj.get("verbose"):
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    cli()
