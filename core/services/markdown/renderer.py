"""Map typed blocks and inline fragments to a visual tree."""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from core.services.markdown.block_splitter import (
    Blank,
    Block,
    CodeBlock,
    Heading,
    ListItem,
    Paragraph,
)
from core.services.markdown.inline_formatter import (
    BoldRun,
    CodeRun,
    InlineFragment,
    PlainRun,
    format_inline,
)

THEMES = ("light", "dark")

HEADING_CLASSES: Dict[int, str] = {
    1: "text-3xl font-extrabold my-4",
    2: "text-2xl font-bold my-3",
    3: "text-xl font-semibold my-2",
    4: "text-lg font-semibold my-2",
}

# Per-theme classes for the themed parts of the tree
THEME_CLASSES: Dict[str, Dict[str, str]] = {
    "light": {
        "text": "text-black",
        "muted": "text-gray-600",
        "code_block": "bg-gray-100 text-gray-900",
        "code_inline": "bg-gray-200",
        "table_head": "border-gray-200 bg-gray-100 text-black",
        "table_cell": "border-gray-200 text-black",
    },
    "dark": {
        "text": "text-gray-100",
        "muted": "text-gray-400",
        "code_block": "bg-gray-800 text-green-200",
        "code_inline": "bg-gray-700",
        "table_head": "border-gray-700 bg-gray-800 text-gray-100",
        "table_cell": "border-gray-800 text-gray-100",
    },
}

LIST_ATTR = "data-list"


@dataclass(frozen=True)
class Node:
    """Immutable element of the visual tree; children are nodes or text."""
    tag: str
    children: Tuple[Union["Node", str], ...] = ()
    classes: str = ""
    attrs: Tuple[Tuple[str, str], ...] = ()

    def attr(self, name: str) -> Optional[str]:
        for key, value in self.attrs:
            if key == name:
                return value
        return None


@dataclass(frozen=True)
class RenderOptions:
    """Explicit render configuration threaded through every render call."""
    theme: str = "light"

    def __post_init__(self):
        if self.theme not in THEMES:
            raise ValueError(f"Unknown theme: {self.theme}")

    def classes(self, role: str) -> str:
        return THEME_CLASSES[self.theme][role]


def render_fragments(fragments: Iterable[InlineFragment], options: RenderOptions) -> Tuple[Node, ...]:
    """Render inline fragments to span, strong and code nodes."""
    nodes: List[Node] = []
    for fragment in fragments:
        if isinstance(fragment, BoldRun):
            nodes.append(Node("strong", (fragment.text,)))
        elif isinstance(fragment, CodeRun):
            nodes.append(Node(
                "code",
                (fragment.text,),
                classes=f"px-1 rounded text-[0.85rem] {options.classes('code_inline')}",
            ))
        elif isinstance(fragment, PlainRun):
            nodes.append(Node("span", (fragment.text,)))
        else:
            raise TypeError(f"Unsupported inline fragment: {fragment!r}")
    return tuple(nodes)


def render_block(block: Block, options: RenderOptions) -> Node:
    """Render a single block to its fixed visual treatment."""
    if isinstance(block, Heading):
        return Node(f"h{block.level}", (block.content,), classes=HEADING_CLASSES[block.level])
    if isinstance(block, Paragraph):
        return Node("p", render_fragments(format_inline(block.content), options), classes="my-2")
    if isinstance(block, ListItem):
        return Node(
            "li",
            render_fragments(format_inline(block.content), options),
            attrs=((LIST_ATTR, "ol" if block.ordered else "ul"),),
        )
    if isinstance(block, CodeBlock):
        # Content goes through untouched; escaping is left to the writer
        return Node(
            "pre",
            (Node("code", (block.content,)),),
            classes=f"my-3 p-3 rounded overflow-auto text-sm {options.classes('code_block')}",
        )
    if isinstance(block, Blank):
        return Node("div", classes="h-2")
    raise TypeError(f"Unsupported block: {block!r}")


def render(blocks: Iterable[Block], options: RenderOptions = RenderOptions()) -> Tuple[Node, ...]:
    """Render blocks in order. Pure: same blocks, same tree."""
    return tuple(render_block(block, options) for block in blocks)
