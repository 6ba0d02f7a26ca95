"""CLI command: stylecraft inspect -- display the generated node tree."""

from __future__ import annotations

from typing import IO

import click

from stylecraft.cli.loader import configure_logging, load_nodes
from stylecraft.model.nodes import AtRule, Declaration, Node, Rule, iter_nodes
from stylecraft.stringify import format_value


def _describe(node: Node) -> str:
    if isinstance(node, Declaration):
        return f"decl {node.prop}: {format_value(node.value)}"
    if isinstance(node, Rule):
        return f"rule {node.selector}"
    kind = "at-rule" if node.has_block else "statement"
    return f"{kind} {node.directive}"


@click.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"))
@click.option("-v", "--verbose", is_flag=True, help="Log build steps to stderr")
def inspect(input_file: IO[str], verbose: bool) -> None:
    """Build a JSON style document and display its node tree.

    Node names are shown as written; no transforms are applied.
    """
    configure_logging(verbose)
    nodes = load_nodes(input_file)

    counts = {"rule": 0, "at-rule": 0, "decl": 0}
    for depth, node in iter_nodes(nodes):
        click.echo("  " * depth + _describe(node))
        if isinstance(node, Declaration):
            counts["decl"] += 1
        elif isinstance(node, Rule):
            counts["rule"] += 1
        elif isinstance(node, AtRule):
            counts["at-rule"] += 1

    click.echo()
    click.echo(
        f"Summary: {counts['rule']} rule(s), {counts['at-rule']} at-rule(s), "
        f"{counts['decl']} declaration(s)"
    )
