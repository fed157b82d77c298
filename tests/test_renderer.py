"""Tests for the renderer and the HTML writer."""
import pytest
from core.services.markdown.block_splitter import Blank, CodeBlock, Heading, ListItem, Paragraph
from core.services.markdown.html_writer import group_list_items, to_html, write_html
from core.services.markdown.renderer import Node, RenderOptions, render


class TestRenderer:
    """Test cases for render."""

    def test_heading_levels_decrease_in_emphasis(self):
        nodes = render([Heading(1, "A"), Heading(4, "D")])
        assert nodes[0] == Node("h1", ("A",), classes="text-3xl font-extrabold my-4")
        assert nodes[1] == Node("h4", ("D",), classes="text-lg font-semibold my-2")

    def test_paragraph_gets_inline_formatting(self):
        (node,) = render([Paragraph("say **hi** with `code`")])
        assert node.tag == "p"
        assert [child.tag for child in node.children] == ["span", "strong", "span", "code"]
        assert node.children[1].children == ("hi",)

    def test_list_items_are_marked_with_their_kind(self):
        nodes = render([ListItem(False, "a"), ListItem(True, "b")])
        assert [n.tag for n in nodes] == ["li", "li"]
        assert nodes[0].attr("data-list") == "ul"
        assert nodes[1].attr("data-list") == "ol"

    def test_code_block_content_is_untouched(self):
        (node,) = render([CodeBlock("  <b>**not bold**</b>\n\tx", language="html")])
        assert node.tag == "pre"
        assert node.children == (Node("code", ("  <b>**not bold**</b>\n\tx",)),)

    def test_blank_renders_spacing(self):
        assert render([Blank()]) == (Node("div", classes="h-2"),)

    def test_empty_blocks_render_nothing(self):
        assert render([]) == ()

    def test_theme_is_explicit(self):
        light = render([CodeBlock("x")], RenderOptions(theme="light"))
        dark = render([CodeBlock("x")], RenderOptions(theme="dark"))
        assert "bg-gray-100" in light[0].classes
        assert "bg-gray-800" in dark[0].classes

    def test_unknown_theme_is_rejected(self):
        with pytest.raises(ValueError):
            RenderOptions(theme="neon")

    def test_render_is_pure(self):
        blocks = [Heading(2, "T"), Paragraph("**x**"), ListItem(True, "y")]
        assert render(blocks) == render(blocks)
        assert blocks == [Heading(2, "T"), Paragraph("**x**"), ListItem(True, "y")]


class TestHtmlWriter:
    """Test cases for list grouping and serialization."""

    def test_consecutive_items_share_one_list(self):
        nodes = render([
            ListItem(False, "a"),
            ListItem(False, "b"),
            ListItem(True, "c"),
            Paragraph("p"),
            ListItem(False, "d"),
        ])
        grouped = group_list_items(nodes)
        assert [n.tag for n in grouped] == ["ul", "ol", "p", "ul"]
        assert len(grouped[0].children) == 2
        assert len(grouped[1].children) == 1

    def test_grouping_reaches_nested_containers(self):
        wrapper = Node("div", render([ListItem(True, "a"), ListItem(True, "b")]))
        (grouped,) = group_list_items([wrapper])
        assert [n.tag for n in grouped.children] == ["ol"]

    def test_text_and_attributes_are_escaped(self):
        node = Node("p", ("a < b & \"c\"",), classes="x", attrs=(("title", "\"q\""),))
        assert to_html([node]) == '<p class="x" title="&quot;q&quot;">a &lt; b &amp; "c"</p>'

    def test_code_is_escaped_only(self):
        html = write_html(render([CodeBlock("if a < b:\n    pass")]))
        assert "<code>if a &lt; b:\n    pass</code>" in html

    def test_list_html(self):
        html = write_html(render([ListItem(False, "**a**"), ListItem(False, "b")]))
        assert html == (
            '<ul class="list-disc pl-5 my-2">'
            "<li><strong>a</strong></li>"
            "<li><span>b</span></li>"
            "</ul>"
        )
