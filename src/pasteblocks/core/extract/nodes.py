"""Parser-independent HTML tree nodes and the BeautifulSoup adapter that builds them"""

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag


logger = logging.getLogger(__name__)

ELEMENT = "element"
TEXT = "text"

# Elements a browser keeps out of the document body when it parses a fragment.
METADATA_TAGS = frozenset({'head', 'meta', 'link', 'title', 'style', 'script', 'base'})


@dataclass(frozen=True)
class Node:
    """A minimal DOM node: an element with tag/attrs/children, or a text node."""
    kind:     str
    tag:      str = ""
    attrs:    dict[str, str] = field(default_factory=dict)
    children: tuple["Node", ...] = ()
    text:     str = ""              # text nodes only

    @property
    def is_text(self) -> bool:
        return self.kind == TEXT

    @property
    def is_element(self) -> bool:
        return self.kind == ELEMENT

    def get(self, name: str, default: str = "") -> str:
        return self.attrs.get(name, default)

    def find(self, tag: str) -> "Node | None":
        """Return the first descendant element with the given tag (document order)."""
        for child in self.children:
            if child.is_element:
                if child.tag == tag:
                    return child
                found = child.find(tag)
                if found is not None:
                    return found
        return None

    def text_content(self) -> str:
        """Concatenated text of all descendant text nodes."""
        if self.is_text:
            return self.text
        return ''.join(child.text_content() for child in self.children)


def element(tag: str, *children: "Node | str", **attrs: str) -> Node:
    """Build an element node; bare strings become text nodes."""
    kids = tuple(Node(kind=TEXT, text=c) if isinstance(c, str) else c for c in children)
    return Node(kind=ELEMENT, tag=tag.lower(), attrs=dict(attrs), children=kids)


def _attr_value(value) -> str:
    # bs4 returns multi-valued attributes (class, rel) as lists
    if isinstance(value, (list, tuple)):
        return ' '.join(value)
    return str(value)


def _convert(el) -> "Node | None":
    if isinstance(el, PreformattedString):
        return None                 # comments, doctype, CDATA, processing instructions
    if isinstance(el, NavigableString):
        return Node(kind=TEXT, text=str(el))
    if not isinstance(el, Tag):
        return None
    children = tuple(n for n in (_convert(c) for c in el.children) if n is not None)
    return Node(
        kind=ELEMENT,
        tag=el.name.lower(),
        attrs={k.lower(): _attr_value(v) for k, v in el.attrs.items()},
        children=children,
    )


def parse_fragment(html: str, builder: str = "html.parser") -> Node:
    """Parse an HTML fragment and return its body as a Node tree.

    Tree-builder failures propagate to the caller unchanged.
    """
    soup = BeautifulSoup(html, builder)
    root = soup.body or soup
    children = []
    for child in root.children:
        if isinstance(child, Tag) and child.name.lower() in METADATA_TAGS:
            continue
        node = _convert(child)
        if node is not None:
            children.append(node)
    logger.debug("parsed HTML fragment with %d top-level node(s) using %s", len(children), builder)
    return Node(kind=ELEMENT, tag="body", children=tuple(children))
