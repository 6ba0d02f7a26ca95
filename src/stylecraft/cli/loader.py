"""Shared input handling for CLI commands."""

from __future__ import annotations

import json
import logging
import sys
from typing import IO

import click

from stylecraft.errors import StyleError
from stylecraft.model.nodes import Node
from stylecraft.parser import parse_object_styles


def configure_logging(verbose: bool) -> None:
    """Send DEBUG build logs to stderr when *verbose* is set."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def load_nodes(stream: IO[str]) -> list[Node]:
    """Read a JSON style document from *stream* and build its nodes.

    Exits with status 1 on malformed JSON or style errors.
    """
    try:
        document = json.load(stream)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    try:
        return parse_object_styles(document)
    except StyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
