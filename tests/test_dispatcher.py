"""Tests for the answer dispatcher and answer parsing."""
import pytest
from core.models.answer import PlainText, StructuredText, Table, Unknown, parse_answer
from core.services.markdown.dispatcher import cell_text, render_answer, render_answer_html
from core.services.markdown.renderer import RenderOptions


def _tbody(nodes):
    """Find the tbody node of a rendered table."""
    (root,) = nodes
    scroller = root.children[-1]
    (table,) = scroller.children
    return table.children[1]


class TestParseAnswer:
    """Test cases for parse_answer."""

    def test_none(self):
        assert parse_answer(None) is None

    def test_string(self):
        assert parse_answer("hi") == PlainText("hi")

    def test_text_object(self):
        assert parse_answer({"type": "text", "text": "hi"}) == StructuredText("hi")
        assert parse_answer({"text": "hi"}) == StructuredText("hi")

    def test_text_object_without_text(self):
        assert parse_answer({"type": "text"}) == StructuredText("")
        assert parse_answer({"type": "text", "text": None}) == StructuredText("")

    @pytest.mark.parametrize("raw", [
        {"type": "text", "text": 5},
        {"type": "text", "text": {"a": 1}},
    ])
    def test_non_string_text_is_unknown(self, raw):
        assert parse_answer(raw) == Unknown(raw)

    def test_table(self):
        answer = parse_answer({
            "type": "table",
            "title": "T",
            "columns": ["A", "B"],
            "rows": [[1, 2], [3]],
        })
        assert answer == Table(columns=("A", "B"), rows=((1, 2), (3,)), title="T", description="")

    @pytest.mark.parametrize("raw", [
        {"type": "table", "columns": "A"},
        {"type": "chart", "points": [1, 2]},
        [1, 2, 3],
        42,
        False,
    ])
    def test_unknown_shapes(self, raw):
        assert parse_answer(raw) == Unknown(raw)

    def test_parsed_answer_passes_through(self):
        answer = PlainText("x")
        assert parse_answer(answer) is answer


class TestRenderAnswer:
    """Test cases for render_answer."""

    def test_no_answer_renders_nothing(self):
        assert render_answer(None) == ()
        assert render_answer_html(None) == ""

    def test_plain_and_text_object_are_equivalent(self):
        assert render_answer(parse_answer("plain text")) == render_answer(
            parse_answer({"type": "text", "text": "plain text"})
        )

    def test_empty_text_renders_nothing(self):
        assert render_answer(PlainText("")) == ()
        assert render_answer_html({"type": "text"}) == ""

    @pytest.mark.parametrize("raw", [
        {"type": "text", "text": 5},
        {"type": "text", "text": {"a": 1}},
    ])
    def test_non_string_text_is_not_blank(self, raw):
        html = render_answer_html(raw)
        assert html != ""
        assert '"text"' in html

    def test_short_row_is_not_padded(self):
        nodes = render_answer(parse_answer({"type": "table", "columns": ["A", "B"], "rows": [["1", "2"], ["3"]]}))
        rows = _tbody(nodes).children
        assert len(rows) == 2
        assert [cell.children for cell in rows[0].children] == [("1",), ("2",)]
        assert [cell.children for cell in rows[1].children] == [("3",)]

    def test_table_header_title_and_description(self):
        html = render_answer_html({
            "type": "table",
            "title": "Scores",
            "description": "Latest run",
            "columns": ["Name", "Score"],
            "rows": [["a", 1.5], ["b", None]],
        })
        assert "Scores" in html
        assert "Latest run" in html
        assert html.count("<th ") == 2
        assert html.count("<td ") == 4
        assert ">1.5</td>" in html

    def test_unknown_renders_pretty_dump(self):
        (node,) = render_answer(Unknown({"foo": [1, 2]}))
        assert node.tag == "pre"
        assert node.children == ('{\n  "foo": [\n    1,\n    2\n  ]\n}',)

    def test_text_pipeline_output(self):
        html = render_answer_html("# Title\n\nSome **bold** text\n\n- one\n- two")
        assert "<h1 " in html
        assert "<strong>bold</strong>" in html
        assert '<ul class="list-disc pl-5 my-2"><li><span>one</span></li><li><span>two</span></li></ul>' in html

    def test_html_in_answer_is_escaped(self):
        html = render_answer_html("<script>alert(1)</script>")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_rendering_twice_is_identical(self):
        answer = parse_answer({"type": "table", "columns": ["A"], "rows": [["x"]]})
        options = RenderOptions(theme="dark")
        assert render_answer(answer, options) == render_answer(answer, options)
        assert render_answer_html("**x**", theme="dark") == render_answer_html("**x**", theme="dark")


class TestCellText:
    """Test cases for cell_text."""

    @pytest.mark.parametrize("value, expected", [
        ("text", "text"),
        (None, ""),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (2.5, "2.5"),
        ([1, 2], "[1, 2]"),
        ({"a": 1}, '{"a": 1}'),
    ])
    def test_cell_values(self, value, expected):
        assert cell_text(value) == expected
