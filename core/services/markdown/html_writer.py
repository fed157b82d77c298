"""Host-side HTML output: list grouping and serialization of the visual tree."""
from html import escape
from typing import Iterable, List, Sequence, Tuple, Union

from core.services.markdown.renderer import LIST_ATTR, Node

LIST_CLASSES = {
    "ul": "list-disc pl-5 my-2",
    "ol": "list-decimal pl-5 my-2",
}


def group_list_items(nodes: Sequence[Union[Node, str]]) -> Tuple[Union[Node, str], ...]:
    """
    Wrap consecutive list items of the same kind in one ul/ol container.

    Applied recursively so list items anywhere in the tree are grouped.
    Items are never nested; an ordered item after a bullet starts a new list.
    """
    grouped: List[Union[Node, str]] = []
    pending: List[Node] = []
    pending_kind = None

    def flush():
        nonlocal pending, pending_kind
        if pending:
            grouped.append(Node(pending_kind, tuple(pending), classes=LIST_CLASSES[pending_kind]))
        pending = []
        pending_kind = None

    for node in nodes:
        if isinstance(node, Node) and node.tag == "li" and node.attr(LIST_ATTR) in LIST_CLASSES:
            kind = node.attr(LIST_ATTR)
            if kind != pending_kind:
                flush()
                pending_kind = kind
            pending.append(Node("li", group_list_items(node.children), node.classes))
            continue

        flush()
        if isinstance(node, Node):
            grouped.append(Node(node.tag, group_list_items(node.children), node.classes, node.attrs))
        else:
            grouped.append(node)

    flush()
    return tuple(grouped)


def _render_attrs(node: Node) -> str:
    parts = []
    if node.classes:
        parts.append(f' class="{escape(node.classes)}"')
    for key, value in node.attrs:
        parts.append(f' {key}="{escape(value)}"')
    return "".join(parts)


def to_html(nodes: Iterable[Union[Node, str]]) -> str:
    """Serialize nodes to HTML; text is escaped and otherwise left as is."""
    out: List[str] = []
    for node in nodes:
        if isinstance(node, str):
            out.append(escape(node, quote=False))
            continue
        out.append(f"<{node.tag}{_render_attrs(node)}>")
        out.append(to_html(node.children))
        out.append(f"</{node.tag}>")
    return "".join(out)


def write_html(nodes: Sequence[Union[Node, str]]) -> str:
    """Group list items and serialize, as the browser UI consumes it."""
    return to_html(group_list_items(nodes))
