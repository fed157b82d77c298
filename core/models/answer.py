"""Answer models: the closed set of shapes an assistant response can take."""
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union


@dataclass(frozen=True)
class PlainText:
    """Bare string answer, fed straight into the markdown pipeline."""
    text: str


@dataclass(frozen=True)
class StructuredText:
    """`{"type": "text", "text": ...}` answer."""
    text: str


@dataclass(frozen=True)
class Table:
    """
    `{"type": "table", "columns": [...], "rows": [[...], ...]}` answer.

    Row lengths are not checked against the column count; callers that need
    strict shapes must validate before rendering.
    """
    columns: Tuple[Any, ...]
    rows: Tuple[Tuple[Any, ...], ...]
    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class Unknown:
    """Any other JSON value; rendered as a pretty-printed dump."""
    value: Any


Answer = Union[PlainText, StructuredText, Table, Unknown]


def _as_row(row: Any) -> Tuple[Any, ...]:
    if isinstance(row, (list, tuple)):
        return tuple(row)
    return (row,)


def parse_answer(raw: Any) -> Optional[Answer]:
    """
    Convert a raw JSON answer into an Answer variant.

    Args:
        raw: Value as stored in the session file or received over HTTP

    Returns:
        The matching variant, or None when there is no answer
    """
    if raw is None:
        return None
    if isinstance(raw, (PlainText, StructuredText, Table, Unknown)):
        return raw
    if isinstance(raw, str):
        return PlainText(raw)
    if isinstance(raw, dict):
        if (
            raw.get("type") == "table"
            and isinstance(raw.get("columns"), list)
            and isinstance(raw.get("rows"), list)
        ):
            return Table(
                columns=tuple(raw["columns"]),
                rows=tuple(_as_row(row) for row in raw["rows"]),
                title=str(raw.get("title") or ""),
                description=str(raw.get("description") or ""),
            )
        text = raw.get("text")
        if isinstance(text, str):
            return StructuredText(text)
        if raw.get("type") == "text" and text is None:
            # Text shape without a text field renders as nothing
            return StructuredText("")
    return Unknown(raw)
