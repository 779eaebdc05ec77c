"""
CLI Utilities - Shared helper functions for command line operations.

This module provides formatted printing, logging setup, and the path
element loading and vertex resolution shared by the commands.
"""

import logging
from typing import Optional

import click

from ..core.exceptions import TraceLinkError, VertexNotFoundError
from ..graph.path_elems import PathElemIndex, load_path_elems


def _echo(message: str, err: bool = False, **style) -> None:
    click.echo(click.style(message, **style), err=err)


def echo_success(message: str) -> None:
    _echo(f"✅ {message}", fg="green")


def echo_error(message: str) -> None:
    """Errors go to stderr so ``--json`` output on stdout stays parseable."""
    _echo(f"❌ {message}", err=True, fg="red")


def echo_warning(message: str) -> None:
    _echo(f"⚠️  {message}", fg="yellow")


def echo_info(message: str) -> None:
    _echo(f"   {message}", dim=True)


def configure_logging(verbose: bool) -> None:
    """Route library debug logs to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def load_index(input_file: str) -> Optional[PathElemIndex]:
    """
    Load path elements, printing the failure instead of raising.

    Args:
        input_file (str): Path to a path elements JSON file.

    Returns:
        Optional[PathElemIndex]: The loaded index, or None if loading failed.
    """
    try:
        return load_path_elems(input_file)
    except TraceLinkError as e:
        echo_error(str(e))
        return None


def resolve_vertex(index: PathElemIndex, name: str) -> str:
    """
    Resolve a full or partial vertex name to a vertex key.

    Raises:
        VertexNotFoundError: If nothing matches.
    """
    if index.has_vertex(name):
        return name

    matches = index.find_keys(name)
    if not matches:
        raise VertexNotFoundError(name)

    if len(matches) > 1:
        click.echo(f"Ambiguous vertex '{name}'. Using first match: {matches[0]}")

    return matches[0]
