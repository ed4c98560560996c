"""Unit tests for core/extract/html_blocks.py"""

import pytest

from pasteblocks.core.extract.html_blocks import node_to_blocks, parse_html
from pasteblocks.core.extract.nodes import element
from pasteblocks.core.models import BlockTypeEnum, CalloutVariantEnum


def _types(blocks):
    return [b.type for b in blocks]


def test_heading_levels_clamp_to_three():
    """h1-h6 become headers with level capped at 3."""
    blocks = parse_html("<h1>Top</h1><h2>Mid</h2><h5>Deep</h5>")
    assert [b.level for b in blocks] == [1, 2, 3]
    assert blocks[2].content == "Deep"


def test_paragraph_inline_markup():
    """Paragraph content carries inline markup for emphasis and links."""
    block = parse_html('<p>Hello <strong>world</strong>, see <a href="https://x.io">this</a></p>')[0]
    assert block.type == BlockTypeEnum.paragraph
    assert block.content == "Hello **world**, see [this](https://x.io)"


def test_paragraph_with_supabase_url_is_image():
    """A paragraph holding only a storage URL becomes an image block."""
    url = "https://abc.supabase.co/storage/v1/object/public/articles/upload-1"
    blocks = parse_html(f"<p>{url}</p>")
    assert len(blocks) == 1
    assert blocks[0].type == BlockTypeEnum.image
    assert blocks[0].src == url


def test_empty_paragraph_is_skipped():
    """Whitespace-only paragraphs emit nothing."""
    assert parse_html("<p>  </p><p><br></p>") == []


def test_aside_becomes_callout_without_icon():
    """Notion asides map to insight callouts with the leading emoji stripped."""
    block = parse_html("<aside>💡 Remember to <em>fold</em></aside>")[0]
    assert block.type == BlockTypeEnum.callout
    assert block.variant == CalloutVariantEnum.insight
    assert block.title == "Quick Note"
    assert block.content == "Remember to *fold*"


@pytest.mark.parametrize("tag", ["ul", "ol"])
def test_lists_take_direct_items(tag):
    """Each direct <li> becomes one item; nested list text folds into its parent item."""
    block = parse_html(f"<{tag}><li>one</li><li><em>two</em><ul><li>sub</li></ul></li></{tag}>")[0]
    assert block.type == BlockTypeEnum.list
    assert block.items == ["one", "*two*sub"]


def test_empty_list_is_skipped():
    """A list with no items emits nothing."""
    assert parse_html("<ul></ul>") == []


def test_pre_with_language_class():
    """Code language comes from the language-* class on the nested code element."""
    block = parse_html('<pre><code class="language-python">print(1)\n</code></pre>')[0]
    assert block.type == BlockTypeEnum.code
    assert block.language == "python"
    assert block.title == "Code"
    assert block.content == "print(1)"


def test_pre_without_code_element():
    """Bare <pre> text is used when no code element is present."""
    block = parse_html("<pre>  raw <b>text</b>  </pre>")[0]
    assert block.language == "text"
    assert block.content == "raw text"


def test_blockquote_never_splits_attribution():
    """HTML quotes keep dashes in the content and an empty attribution."""
    block = parse_html("<blockquote>Win -- Me</blockquote>")[0]
    assert block.content == "Win -- Me"
    assert block.attribution == ""


def test_img_element():
    """<img> maps straight to an image block."""
    block = parse_html('<img src="https://x.io/a.png" alt="Chart">')[0]
    assert block.src == "https://x.io/a.png"
    assert block.alt == "Chart"
    assert block.caption == ""


@pytest.mark.parametrize("src,expected", [
    ("../img/a.png", "https://site.io/img/a.png"),
    ("/img/a.png", "https://site.io/img/a.png"),
    ("b.png", "https://site.io/articles/b.png"),
    ("https://cdn.io/c.png", "https://cdn.io/c.png"),
])
def test_img_src_resolves_against_base_url(src, expected):
    """Relative sources resolve against base_url, including inside containers."""
    blocks = parse_html(f'<div><img src="{src}"></div>', base_url="https://site.io/articles/")
    assert blocks[0].src == expected


def test_img_src_kept_without_base_url():
    assert parse_html('<img src="../img/a.png">')[0].src == "../img/a.png"


def test_img_without_src_stays_placeholder_with_base_url():
    block = parse_html('<img alt="x">', base_url="https://site.io/")[0]
    assert block.is_placeholder


def test_containers_flatten_in_order():
    """Container elements emit their children's blocks, not a block of their own."""
    blocks = parse_html("<div><section><h2>A</h2><p>b</p></section><span>c</span></div>")
    assert _types(blocks) == [BlockTypeEnum.header, BlockTypeEnum.paragraph, BlockTypeEnum.paragraph]
    assert blocks[2].content == "c"


def test_unknown_element_falls_back_to_paragraph():
    """Unmapped elements contribute their inline text as a paragraph."""
    block = parse_html("<table><tr><td>cell <b>one</b></td></tr></table>")[0]
    assert block.type == BlockTypeEnum.paragraph
    assert block.content == "cell **one**"


def test_loose_text_node():
    """Top-level text becomes a trimmed paragraph; whitespace between tags is ignored."""
    blocks = parse_html("  loose text  \n<h1>A</h1>\n\n")
    assert _types(blocks) == [BlockTypeEnum.paragraph, BlockTypeEnum.header]
    assert blocks[0].content == "loose text"


def test_node_to_blocks_on_built_tree():
    """The converter works on hand-built trees without any HTML parsing."""
    tree = element("article", element("h3", "T"), element("blockquote", "q"))
    assert _types(node_to_blocks(tree)) == [BlockTypeEnum.header, BlockTypeEnum.quote]


def test_sample_html_order(sample_html):
    """A realistic rich paste keeps document order."""
    assert _types(parse_html(sample_html)) == [
        BlockTypeEnum.header,
        BlockTypeEnum.paragraph,
        BlockTypeEnum.callout,
        BlockTypeEnum.list,
        BlockTypeEnum.code,
        BlockTypeEnum.image,
    ]
