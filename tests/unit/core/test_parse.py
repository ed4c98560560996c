"""Unit tests for core/parse.py"""

import pytest

from pasteblocks.core.models import BlockTypeEnum
from pasteblocks.core.parse import looks_like_html, parse_paste


@pytest.mark.parametrize("text,expected", [
    ("<p>x</p>", True),
    ("before <B>bold</B> after", True),
    ("multi\nline <div\nclass='a'>", True),
    ("a < b and c > d", False),
    ("I <3 poker", False),
    ("plain text", False),
])
def test_looks_like_html(text, expected):
    """Anything shaped like '<letter ... >' is treated as HTML."""
    assert looks_like_html(text) is expected


def test_plain_text_routed_to_text_parser():
    """Markdown-ish text goes through the line scanner."""
    blocks = parse_paste("# Title\n\n- a\n- b")
    assert [b.type for b in blocks] == [BlockTypeEnum.header, BlockTypeEnum.list]


def test_html_routed_to_html_parser():
    """Rich pastes go through the HTML converter."""
    blocks = parse_paste("<h2>Title</h2><p>Body <em>text</em></p>")
    assert [b.type for b in blocks] == [BlockTypeEnum.header, BlockTypeEnum.paragraph]
    assert blocks[1].content == "Body *text*"


def test_html_paragraph_with_storage_url_is_image():
    """A <p> holding only a storage URL yields an image, not a paragraph."""
    url = "https://proj.supabase.co/storage/v1/object/public/articles/img-42"
    blocks = parse_paste(f"<p>{url}</p>")
    assert [b.type for b in blocks] == [BlockTypeEnum.image]
    assert blocks[0].src == url


@pytest.mark.parametrize("text", ["", "  \r\n  \n"])
def test_blank_paste_is_empty(text):
    """Whitespace-only pastes yield no blocks."""
    assert parse_paste(text) == []


def test_markdown_with_inline_html_tag_is_html():
    """A single tag anywhere switches the whole paste to the HTML path."""
    blocks = parse_paste("# Not a header here\n<p>para</p>")
    assert blocks[0].type == BlockTypeEnum.paragraph
    assert blocks[0].content == "# Not a header here"
