"""Markdown-subset pipeline for assistant answers.

Flow: raw answer -> parse_answer -> render_answer -> (text path) split_into_blocks
-> format_inline -> render -> html_writer.
"""
from core.services.markdown.block_splitter import (
    Blank,
    Block,
    CodeBlock,
    Heading,
    ListItem,
    Paragraph,
    split_into_blocks,
)
from core.services.markdown.inline_formatter import (
    BoldRun,
    CodeRun,
    InlineFragment,
    PlainRun,
    format_inline,
)
from core.services.markdown.renderer import Node, RenderOptions, render
from core.services.markdown.html_writer import group_list_items, to_html, write_html
from core.services.markdown.dispatcher import render_answer, render_answer_html

__all__ = [
    # Blocks
    "Block",
    "Blank",
    "CodeBlock",
    "Heading",
    "ListItem",
    "Paragraph",
    "split_into_blocks",
    # Inline
    "InlineFragment",
    "PlainRun",
    "BoldRun",
    "CodeRun",
    "format_inline",
    # Rendering
    "Node",
    "RenderOptions",
    "render",
    "render_answer",
    "render_answer_html",
    # Host output
    "group_list_items",
    "to_html",
    "write_html",
]
