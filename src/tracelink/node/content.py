"""
Vertex action surface.

NodeContent is everything a rendered dependency graph vertex does besides
drawing itself: its action menu (set focus, view traces, focus paths, hide,
show/hide parents and children) and its hover wiring. Each action forwards
the vertex key to a collaborator supplied by the graph view.
"""

import webbrowser
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.hover import HoverStateMachine, Scheduler
from ..core.trace_ids import build_trace_link
from ..core.types import CheckedStatus, Direction, PathElem, ViewModifier
from ..search import url as search_url

MenuItem = Tuple[str, Callable[[], Any]]


class NodeContent:
    """
    Actions and hover state of one dependency graph vertex.

    Collaborators:
        focus_paths_through_vertex(key)
        get_generation_visibility(key, direction) -> CheckedStatus | None
        get_visible_path_elems(key) -> Sequence[PathElem] | None
        hide_vertex(key)
        set_view_modifier(key, modifier, enabled)
        update_generation_visibility(key, direction)
    """

    def __init__(
        self,
        vertex_key: str,
        service: str,
        operation: Optional[str],
        *,
        focus_paths_through_vertex: Callable[[str], Any],
        get_generation_visibility: Callable[[str, Direction], Optional[CheckedStatus]],
        get_visible_path_elems: Callable[[str], Optional[Sequence[PathElem]]],
        hide_vertex: Callable[[str], Any],
        set_view_modifier: Callable[[str, ViewModifier, bool], Any],
        update_generation_visibility: Callable[[str, Direction], Any],
        is_focal_node: bool = False,
        focal_node_url: Optional[str] = None,
        get_search_url: Callable[[Dict[str, Any]], str] = search_url.get_search_url,
        open_url: Optional[Callable[[str], Any]] = None,
        search_context: Optional[Mapping[str, Any]] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        self.vertex_key = vertex_key
        self.service = service
        self.operation = operation
        self.is_focal_node = is_focal_node
        self.focal_node_url = focal_node_url

        self._focus_paths_through_vertex = focus_paths_through_vertex
        self._get_generation_visibility = get_generation_visibility
        self._get_visible_path_elems = get_visible_path_elems
        self._hide_vertex = hide_vertex
        self._update_generation_visibility = update_generation_visibility
        self._get_search_url = get_search_url
        self._open_url = open_url
        self._search_context = dict(search_context or {})

        self.hover = HoverStateMachine(vertex_key, set_view_modifier, scheduler=scheduler)

    @classmethod
    def get_node_renderer(
        cls,
        *,
        focus_paths_through_vertex: Callable[[str], Any],
        get_generation_visibility: Callable[[str, Direction], Optional[CheckedStatus]],
        get_visible_path_elems: Callable[[str], Optional[Sequence[PathElem]]],
        hide_vertex: Callable[[str], Any],
        set_view_modifier: Callable[[str, ViewModifier, bool], Any],
        update_generation_visibility: Callable[[str, Direction], Any],
        show_op: bool = True,
        base_url: Optional[str] = None,
        extra_url_args: Optional[Mapping[str, Any]] = None,
        **options: Any,
    ) -> Callable[[Mapping[str, Any]], "NodeContent"]:
        """
        Bind shared collaborators and return a per-vertex factory.

        The factory accepts a vertex mapping with ``key``, ``service``,
        ``operation`` and ``isFocalNode``. Non-focal vertices get a
        ``focal_node_url`` pointing at the graph re-focused on them.
        """
        def render(vertex: Mapping[str, Any]) -> "NodeContent":
            is_focal = bool(vertex.get("isFocalNode", False))
            focal_node_url = None
            if not is_focal:
                args = {
                    "operation": vertex.get("operation"),
                    "service": vertex["service"],
                    "showOp": show_op,
                    **(extra_url_args or {}),
                }
                focal_node_url = search_url.get_ddg_url(args, base_url)

            return cls(
                vertex["key"],
                vertex["service"],
                vertex.get("operation"),
                focus_paths_through_vertex=focus_paths_through_vertex,
                get_generation_visibility=get_generation_visibility,
                get_visible_path_elems=get_visible_path_elems,
                hide_vertex=hide_vertex,
                set_view_modifier=set_view_modifier,
                update_generation_visibility=update_generation_visibility,
                is_focal_node=is_focal,
                focal_node_url=focal_node_url,
                **options,
            )

        return render

    # --- Hover ---

    def on_mouse_enter(self) -> None:
        self.hover.enter()

    def on_mouse_leave(self) -> None:
        self.hover.leave()

    def unmount(self) -> None:
        self.hover.teardown()

    @property
    def hovered(self) -> bool:
        return self.hover.hovered

    # --- Actions ---

    def focus_paths(self) -> None:
        self._focus_paths_through_vertex(self.vertex_key)

    def hide_vertex(self) -> None:
        self._hide_vertex(self.vertex_key)

    def update_parents(self) -> None:
        self._update_generation_visibility(self.vertex_key, Direction.UPSTREAM)

    def update_children(self) -> None:
        self._update_generation_visibility(self.vertex_key, Direction.DOWNSTREAM)

    def generation_status(self, direction: Direction) -> Optional[CheckedStatus]:
        return self._get_generation_visibility(self.vertex_key, direction)

    def set_focus(self) -> Optional[str]:
        """Navigate to the graph re-focused on this vertex."""
        if not self.focal_node_url:
            return None
        opener = self._open_url or webbrowser.open_new_tab
        opener(self.focal_node_url)
        return self.focal_node_url

    def view_traces(self) -> Optional[str]:
        """Open a trace search for the traces passing through this vertex."""
        elems = self._get_visible_path_elems(self.vertex_key)
        if not elems:
            return None

        groups = [elem.member_of.trace_ids for elem in elems]
        return build_trace_link(
            self.vertex_key,
            groups,
            get_search_url=self._get_search_url,
            open_url=self._open_url,
            search_context=self._search_context,
        )

    def menu_items(self) -> List[MenuItem]:
        """
        The vertex's action menu as ``(label, action)`` pairs, in display order.

        Parent/child toggles only appear when that generation exists; the label
        reads "Hide" when it is fully visible and "View" otherwise.
        """
        items: List[MenuItem] = []

        if not self.is_focal_node and self.focal_node_url:
            items.append(("Set focus", self.set_focus))

        items.append(("View traces", self.view_traces))
        items.append(("Focus paths through this node", self.focus_paths))
        items.append(("Hide node", self.hide_vertex))

        parents = self.generation_status(Direction.UPSTREAM)
        if parents is not None:
            verb = "Hide" if parents == CheckedStatus.FULL else "View"
            items.append((f"{verb} parents", self.update_parents))

        children = self.generation_status(Direction.DOWNSTREAM)
        if children is not None:
            verb = "Hide" if children == CheckedStatus.FULL else "View"
            items.append((f"{verb} children", self.update_children))

        return items
