from src.render.markdown import (
    Heading,
    ListItem,
    Paragraph,
    Spacer,
    Span,
    format_inline,
    render_markdown,
    to_html,
)


def test_markdown_empty_and_missing_input_render_nothing():
    assert list(render_markdown("")) == []
    assert list(render_markdown(None)) == []
    assert not render_markdown(None)
    assert to_html(render_markdown("")) == ""


def test_markdown_plain_text_is_one_paragraph_per_non_blank_line():
    blocks = list(render_markdown("first line\nsecond line\n\nthird"))

    assert blocks == [
        Paragraph((Span("first line"),)),
        Paragraph((Span("second line"),)),
        Spacer(),
        Paragraph((Span("third"),)),
    ]
    assert len([b for b in blocks if isinstance(b, Paragraph)]) == 3


def test_markdown_block_markers():
    text = "# Title\n## Sub\n### Small\n- dash item\n* star item\n12. twelfth\n   \nplain"
    blocks = list(render_markdown(text))

    assert blocks[0] == Heading(1, (Span("Title"),))
    assert blocks[1] == Heading(2, (Span("Sub"),))
    assert blocks[2] == Heading(3, (Span("Small"),))
    assert blocks[3] == ListItem(False, (Span("dash item"),))
    assert blocks[4] == ListItem(False, (Span("star item"),))
    assert blocks[5] == ListItem(True, (Span("twelfth"),))
    assert blocks[6] == Spacer()
    assert blocks[7] == Paragraph((Span("plain"),))


def test_markdown_markers_need_trailing_space():
    blocks = list(render_markdown("#hashtag\n-dash\n1.5 million"))
    assert all(isinstance(b, Paragraph) for b in blocks)


def test_markdown_bold_and_unmatched_asterisks():
    blocks = list(render_markdown("**bold** and *not bold*"))

    assert len(blocks) == 1
    para = blocks[0]
    assert isinstance(para, Paragraph)
    assert para.spans[0] == Span("bold", bold=True)
    assert para.spans[1:] == (Span(" and *not bold*"),)


def test_inline_unpaired_double_asterisk_is_literal():
    assert format_inline("**open only") == (Span("**open only"),)
    assert format_inline("a **b** c **d") == (Span("a "), Span("b", True), Span(" c **d"))


def test_inline_emphasis_applies_to_list_items():
    (item,) = list(render_markdown("- **Ship** fast"))
    assert item == ListItem(False, (Span("Ship", True), Span(" fast")))


def test_markdown_document_is_restartable():
    doc = render_markdown("# A\ntext")
    assert list(doc) == list(doc)
    assert len(doc.blocks()) == 2


def test_to_html_groups_list_items_and_escapes():
    out = to_html(render_markdown("1. one\n2. <two>\n- three\nend"))

    assert out.startswith("<ol><li>one</li><li>&lt;two&gt;</li></ol>")
    assert "<ul><li>three</li></ul>" in out
    assert out.endswith("<p>end</p>")
