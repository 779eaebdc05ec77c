"""
Link Command - Build and open the trace search link of a vertex.
"""

import functools
import json
import logging
import sys
import webbrowser
from pathlib import Path
from typing import List, Optional

import click
from pydantic import BaseModel

from ...core.exceptions import TraceLinkError
from ...core.settings import Settings
from ...core.trace_ids import build_trace_link
from ...graph.path_elems import load_path_elems
from ...search import url as search_url
from ..utils import configure_logging, echo_error, echo_info, echo_success, echo_warning, resolve_vertex

logger = logging.getLogger(__name__)


# --- API Models ---
class LinkResponse(BaseModel):
    vertex: str
    url: Optional[str] = None
    trace_ids: List[str]
    count: int


@click.command()
@click.argument("vertex")
@click.option("-i", "--input", "input_file", default="paths.json",
              help="Path elements JSON file")
@click.option("--no-open", is_flag=True, help="Print the link without opening a browser")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("-c", "--config", "config_path", default=None, type=click.Path(path_type=Path),
              help="Settings file (defaults to .tracelink/config.yaml)")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def link(vertex: str, input_file: str, no_open: bool, as_json: bool,
         config_path: Optional[Path], verbose: bool) -> None:
    """
    Open a trace search for all traces passing through VERTEX.

    VERTEX may be a full vertex key or any unique part of one.
    """
    configure_logging(verbose)
    settings = Settings.load(config_path)

    try:
        index = load_path_elems(input_file)
        vertex_key = resolve_vertex(index, vertex)
    except TraceLinkError as e:
        _fail(as_json, str(e))

    should_open = settings.browser.open and not no_open
    get_url = functools.partial(search_url.get_search_url, prefix=settings.search.prefix)
    context = settings.search.context

    elems = index.get_visible_path_elems(vertex_key)
    groups = [elem.trace_ids for elem in elems] if elems else None

    url = build_trace_link(
        vertex_key,
        groups,
        get_search_url=get_url,
        open_url=webbrowser.open_new_tab if should_open else _skip_open,
        search_context=context,
    )

    trace_ids = search_url.trace_ids_from_url(url) if url else []
    response = LinkResponse(vertex=vertex_key, url=url, trace_ids=trace_ids, count=len(trace_ids))

    if as_json:
        click.echo(json.dumps({"meta": {"status": "success"}, "data": response.model_dump()}))
        return

    if url is None:
        echo_warning(f"No path elements for {vertex_key}; nothing to open")
        return

    echo_success(f"{response.count} trace(s) through {vertex_key}")
    click.echo(url)
    if not should_open:
        echo_info("Browser disabled; copy the link above to open it.")


def _fail(as_json: bool, message: str) -> None:
    if as_json:
        click.echo(json.dumps({"meta": {"status": "error"}, "error": {"message": message}}))
    else:
        echo_error(message)
    sys.exit(1)


def _skip_open(url: str) -> None:
    logger.debug(f"Not opening {url}")
