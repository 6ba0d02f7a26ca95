"""CLI command: stylecraft compile -- turn a JSON style document into CSS."""

from __future__ import annotations

from typing import IO

import click

from stylecraft.cli.loader import configure_logging, load_nodes
from stylecraft.config import OutputConfig
from stylecraft.stringify import serialize
from stylecraft.transforms import apply_transforms


@click.command("compile")
@click.argument("input_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Write CSS here instead of stdout",
)
@click.option("--minify", is_flag=True, help="Emit minified CSS")
@click.option(
    "--indent", default=2, type=click.IntRange(min=0), help="Spaces per nesting level"
)
@click.option(
    "--hyphenate/--no-hyphenate",
    default=True,
    help="Convert camelCase property names to kebab-case",
)
@click.option("-v", "--verbose", is_flag=True, help="Log build steps to stderr")
def compile_css(
    input_file: IO[str],
    output: IO[str],
    minify: bool,
    indent: int,
    hyphenate: bool,
    verbose: bool,
) -> None:
    """Compile a JSON style document to CSS.

    INPUT_FILE holds a JSON object, or an array of objects, mapping selectors
    and at-rules to declarations. Use '-' to read from stdin.
    """
    configure_logging(verbose)
    config = OutputConfig.from_options(indent=indent, minify=minify, hyphenate=hyphenate)

    nodes = load_nodes(input_file)
    if config.hyphenate:
        nodes = apply_transforms(nodes)

    css = serialize(nodes, config)
    # Always write so an empty stylesheet still truncates a stale output file.
    output.write(f"{css}\n" if css else "")
