"""Bold and inline-code span recognition within a single block."""
import re
from dataclasses import dataclass
from typing import List, Union

BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
CODE_RE = re.compile(r"`([^`]+)`")


@dataclass(frozen=True)
class PlainRun:
    text: str


@dataclass(frozen=True)
class BoldRun:
    text: str


@dataclass(frozen=True)
class CodeRun:
    text: str


InlineFragment = Union[PlainRun, BoldRun, CodeRun]


def format_inline(content: str) -> List[InlineFragment]:
    """
    Split content into plain, bold and code fragments.

    The earliest span wins; bold wins a tie. Unterminated markers stay
    literal text, and spans nested inside the winning span are not parsed.

    Args:
        content: Raw text of a paragraph or list item

    Returns:
        Ordered list of fragments, empty for empty content
    """
    fragments: List[InlineFragment] = []
    remaining = content

    while remaining:
        bold = BOLD_RE.search(remaining)
        code = CODE_RE.search(remaining)

        if bold is None and code is None:
            fragments.append(PlainRun(remaining))
            break

        if bold is not None and (code is None or bold.start() <= code.start()):
            match, run = bold, BoldRun(bold.group(1))
        else:
            match, run = code, CodeRun(code.group(1))

        if match.start() > 0:
            fragments.append(PlainRun(remaining[:match.start()]))
        fragments.append(run)
        remaining = remaining[match.end():]

    return fragments
