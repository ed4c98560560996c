"""Unit tests for core/extract/nodes.py"""

from pasteblocks.core.extract.nodes import element, parse_fragment


def test_parse_fragment_drops_comments_and_metadata():
    """Comments and head-only elements never reach the body tree."""
    body = parse_fragment('<meta charset="utf-8"><!-- StartFragment --><p>x</p><style>p{}</style>')
    tags = [c.tag for c in body.children if c.is_element]
    assert tags == ["p"]
    assert not any(c.is_text and "StartFragment" in c.text for c in body.children)


def test_parse_fragment_uses_document_body():
    """A full document is reduced to its body children."""
    body = parse_fragment("<html><head><title>T</title></head><body><h2>Hi</h2></body></html>")
    assert [c.tag for c in body.children if c.is_element] == ["h2"]


def test_multi_valued_attributes_are_joined():
    """class lists come back as a single space-separated string."""
    body = parse_fragment('<pre><code class="language-python hljs">x</code></pre>')
    code = body.children[0].find("code")
    assert code.get("class") == "language-python hljs"


def test_text_content_skips_markup():
    """text_content concatenates descendant text only."""
    node = element("div", "a", element("b", "b"), element("span", element("i", "c")))
    assert node.text_content() == "abc"


def test_find_returns_first_descendant():
    """find searches depth-first in document order."""
    node = element("pre", element("span", element("code", "one")), element("code", "two"))
    assert node.find("code").text_content() == "one"
    assert node.find("table") is None
