"""
Vertices Command - List the vertices of a path elements file.
"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ..utils import echo_warning, load_index

console = Console()


@click.command()
@click.option("-i", "--input", "input_file", default="paths.json",
              help="Path elements JSON file")
@click.option("--filter", "fragment", default=None, help="Only show keys containing this text")
def vertices(input_file: str, fragment: Optional[str]) -> None:
    """
    List vertex keys with their path and trace counts.
    """
    index = load_index(input_file)
    if index is None:
        raise SystemExit(1)

    keys = index.find_keys(fragment) if fragment else index.keys()
    if not keys:
        echo_warning("No vertices found")
        return

    table = Table(title=f"Vertices ({len(keys)})")
    table.add_column("Vertex", style="cyan")
    table.add_column("Paths", justify="right")
    table.add_column("Traces", justify="right")

    for key in sorted(keys):
        elems = index.get_visible_path_elems(key) or []
        table.add_row(key, str(len(elems)), str(index.trace_count(key)))

    console.print(table)
