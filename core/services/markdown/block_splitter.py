"""Line-oriented splitter for the markdown subset used in chat answers."""
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

FENCE_MARKER = "```"

HEADING_RE = re.compile(r"^(#{1,4})\s+(.*)$")
ORDERED_ITEM_RE = re.compile(r"^\d+\.\s+")
BULLET_PREFIXES = ("- ", "* ")


@dataclass(frozen=True)
class Heading:
    """Heading line, level 1 to 4."""
    level: int
    content: str


@dataclass(frozen=True)
class ListItem:
    """Single list item; grouping into lists happens at render time."""
    ordered: bool
    content: str


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code block. The language tag is kept but never highlighted."""
    content: str
    language: str = ""


@dataclass(frozen=True)
class Paragraph:
    """Run of soft-wrapped lines joined with single spaces."""
    content: str


@dataclass(frozen=True)
class Blank:
    """Empty line outside a paragraph, rendered as vertical spacing."""


Block = Union[Heading, ListItem, CodeBlock, Paragraph, Blank]


class SplitterState(Enum):
    DEFAULT = "default"
    IN_CODE_FENCE = "in_code_fence"
    IN_PARAGRAPH = "in_paragraph"
    IN_LIST = "in_list"


def _is_fence(line: str) -> bool:
    return line.strip().startswith(FENCE_MARKER)


def _match_heading(line: str) -> Optional[Heading]:
    match = HEADING_RE.match(line)
    if not match:
        return None
    return Heading(level=len(match.group(1)), content=match.group(2).strip())


def _match_list_item(line: str) -> Optional[ListItem]:
    trimmed = line.strip()
    if trimmed.startswith(BULLET_PREFIXES):
        return ListItem(ordered=False, content=trimmed[2:].strip())
    match = ORDERED_ITEM_RE.match(trimmed)
    if match:
        return ListItem(ordered=True, content=trimmed[match.end():].strip())
    return None


def _is_marker(line: str) -> bool:
    """True when the line starts a block other than a paragraph."""
    return _is_fence(line) or _match_heading(line) is not None or _match_list_item(line) is not None


class BlockSplitter:
    """
    Single forward pass over lines, driven by an explicit state machine.

    States:
    - DEFAULT: between blocks
    - IN_CODE_FENCE: accumulating verbatim lines until a closing fence
    - IN_PARAGRAPH: accumulating soft-wrapped lines
    - IN_LIST: emitting consecutive list items
    """

    def __init__(self):
        self.state = SplitterState.DEFAULT
        self.blocks: List[Block] = []
        self._code_lines: List[str] = []
        self._code_language = ""
        self._paragraph_lines: List[str] = []

    def split(self, text: str) -> List[Block]:
        self.state = SplitterState.DEFAULT
        self.blocks = []
        lines = text.split("\n")
        # A final newline does not start another line
        if lines and lines[-1] == "":
            lines.pop()

        for line in lines:
            self._feed(line)
        self._finish()
        return self.blocks

    def _feed(self, line: str) -> None:
        handler = {
            SplitterState.DEFAULT: self._on_default,
            SplitterState.IN_CODE_FENCE: self._on_code_fence,
            SplitterState.IN_PARAGRAPH: self._on_paragraph,
            SplitterState.IN_LIST: self._on_list,
        }[self.state]
        handler(line)

    def _on_default(self, line: str) -> None:
        if _is_fence(line):
            self._code_language = line.strip()[len(FENCE_MARKER):].strip()
            self._code_lines = []
            self.state = SplitterState.IN_CODE_FENCE
            return

        heading = _match_heading(line)
        if heading is not None:
            self.blocks.append(heading)
            return

        item = _match_list_item(line)
        if item is not None:
            self.blocks.append(item)
            self.state = SplitterState.IN_LIST
            return

        if not line.strip():
            self.blocks.append(Blank())
            return

        self._paragraph_lines = [line.strip()]
        self.state = SplitterState.IN_PARAGRAPH

    def _on_code_fence(self, line: str) -> None:
        if _is_fence(line):
            self._close_code_block()
            return
        self._code_lines.append(line)

    def _on_paragraph(self, line: str) -> None:
        if not line.strip():
            # The blank line ends the paragraph and is consumed with it
            self._close_paragraph()
            return
        if _is_marker(line):
            self._close_paragraph()
            self._on_default(line)
            return
        self._paragraph_lines.append(line.strip())

    def _on_list(self, line: str) -> None:
        item = _match_list_item(line)
        if item is not None:
            self.blocks.append(item)
            return
        self.state = SplitterState.DEFAULT
        self._on_default(line)

    def _close_code_block(self) -> None:
        self.blocks.append(CodeBlock(content="\n".join(self._code_lines), language=self._code_language))
        self._code_lines = []
        self._code_language = ""
        self.state = SplitterState.DEFAULT

    def _close_paragraph(self) -> None:
        self.blocks.append(Paragraph(content=" ".join(self._paragraph_lines)))
        self._paragraph_lines = []
        self.state = SplitterState.DEFAULT

    def _finish(self) -> None:
        # Unterminated fences and pending paragraphs close at end of input
        if self.state == SplitterState.IN_CODE_FENCE:
            self._close_code_block()
        elif self.state == SplitterState.IN_PARAGRAPH:
            self._close_paragraph()
        self.state = SplitterState.DEFAULT


def split_into_blocks(text: str) -> List[Block]:
    """Split raw answer text into typed blocks in source order."""
    if not text:
        return []
    return BlockSplitter().split(text)
