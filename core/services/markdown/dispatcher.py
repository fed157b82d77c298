"""Answer dispatcher: picks the text pipeline, the table renderer or a raw dump."""
import json
from typing import Any, List, Optional, Tuple

from core.models.answer import Answer, PlainText, StructuredText, Table, Unknown, parse_answer
from core.services.markdown.block_splitter import split_into_blocks
from core.services.markdown.html_writer import write_html
from core.services.markdown.renderer import Node, RenderOptions, render


def cell_text(value: Any) -> str:
    """Display string for a single table cell; no type validation."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def render_text(text: str, options: RenderOptions) -> Tuple[Node, ...]:
    """Run text through splitter, formatter and renderer."""
    if not text:
        return ()
    container_classes = f"text-sm whitespace-pre-wrap leading-relaxed {options.classes('text')}"
    return (Node("div", render(split_into_blocks(text), options), classes=container_classes),)


def render_table(table: Table, options: RenderOptions) -> Tuple[Node, ...]:
    """Header row from columns, then one row per entry; short rows stay short."""
    children: List[Node] = []
    if table.title:
        children.append(Node("div", (table.title,), classes=f"mb-2 text-sm font-semibold {options.classes('text')}"))
    if table.description:
        children.append(Node("div", (table.description,), classes=f"mb-2 text-xs {options.classes('muted')}"))

    head_classes = f"p-2 border {options.classes('table_head')}"
    cell_classes = f"p-2 border {options.classes('table_cell')}"

    header = Node("tr", tuple(Node("th", (cell_text(column),), classes=head_classes) for column in table.columns))
    body_rows = tuple(
        Node("tr", tuple(Node("td", (cell_text(cell),), classes=cell_classes) for cell in row))
        for row in table.rows
    )
    grid = Node(
        "table",
        (Node("thead", (header,)), Node("tbody", body_rows)),
        classes="min-w-full border-collapse",
    )
    children.append(Node("div", (grid,), classes="overflow-auto rounded"))
    return (Node("div", tuple(children)),)


def render_unknown(value: Any, options: RenderOptions) -> Tuple[Node, ...]:
    """Pretty-printed dump so unrecognized shapes never render blank."""
    dump = json.dumps(value, indent=2, ensure_ascii=False, default=str)
    return (Node("pre", (dump,), classes=f"text-xs {options.classes('text')}"),)


def render_answer(answer: Optional[Answer], options: RenderOptions = RenderOptions()) -> Tuple[Node, ...]:
    """
    Render an answer to a visual tree.

    Decision order:
    1. No answer renders nothing
    2. Plain string goes through the text pipeline
    3. Table renders header and rows
    4. Text object feeds its text field to the text pipeline
    5. Anything else renders as a JSON dump
    """
    if answer is None:
        return ()
    if isinstance(answer, PlainText):
        return render_text(answer.text, options)
    if isinstance(answer, Table):
        return render_table(answer, options)
    if isinstance(answer, StructuredText):
        return render_text(answer.text, options)
    if isinstance(answer, Unknown):
        return render_unknown(answer.value, options)
    raise TypeError(f"Unsupported answer: {answer!r}")


def render_answer_html(raw: Any, theme: str = "light") -> str:
    """Parse a raw answer value, render it, and serialize it for the browser."""
    return write_html(render_answer(parse_answer(raw), RenderOptions(theme=theme)))
