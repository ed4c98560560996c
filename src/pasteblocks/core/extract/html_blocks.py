"""Tag-to-block conversion for rich (HTML) clipboard pastes"""

import logging
import re
from urllib.parse import urljoin

from pasteblocks.core.extract.nodes import Node, parse_fragment
from pasteblocks.core.images import extract_image_url
from pasteblocks.core.inline import inline_markup
from pasteblocks.core.models import (
    CalloutBlock,
    CodeBlock,
    HeaderBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)


logger = logging.getLogger(__name__)

HEADING_TAGS = frozenset({'h1', 'h2', 'h3', 'h4', 'h5', 'h6'})
CONTAINER_TAGS = frozenset({'div', 'article', 'section', 'main', 'span'})

LEADING_EMOJI_RE = re.compile(r'^[\U0001F300-\U0001F9FF\u2600-\u26FF\u2700-\u27BF]\s*')
LANGUAGE_CLASS_RE = re.compile(r'language-(\w+)')

ASIDE_TITLE = 'Quick Note'


def _heading(node: Node) -> list:
    return [HeaderBlock(level=int(node.tag[1]), content=inline_markup(node))]


def _paragraph(node: Node) -> list:
    content = inline_markup(node)
    if not content.strip():
        return []
    url = extract_image_url(content)
    if url:
        return [ImageBlock(src=url)]
    return [ParagraphBlock(content=content)]


def _aside(node: Node) -> list:
    """Notion renders callouts as <aside>, usually led by an icon emoji."""
    content = LEADING_EMOJI_RE.sub('', inline_markup(node)).strip()
    return [CalloutBlock(title=ASIDE_TITLE, content=content)]


def _list(node: Node) -> list:
    items = [
        inline_markup(child)
        for child in node.children
        if child.is_element and child.tag == 'li'
    ]
    return [ListBlock(items=items)] if items else []


def _pre(node: Node) -> list:
    code = node.find('code')
    content = code.text_content() if code is not None else node.text_content()
    m = LANGUAGE_CLASS_RE.search(code.get('class')) if code is not None else None
    return [CodeBlock(
        language=m.group(1) if m else 'text',
        title='Code',
        content=content.strip(),
    )]


def _blockquote(node: Node) -> list:
    return [QuoteBlock(content=inline_markup(node), attribution='')]


def _img(node: Node, base_url: str = "") -> list:
    src = node.get('src')
    if src and base_url:
        src = urljoin(base_url, src)
    return [ImageBlock(src=src, alt=node.get('alt'))]


def _container(node: Node, base_url: str = "") -> list:
    blocks = []
    for child in node.children:
        blocks.extend(node_to_blocks(child, base_url))
    return blocks


TAG_HANDLERS = {
    'p': _paragraph,
    'aside': _aside,
    'ul': _list,
    'ol': _list,
    'pre': _pre,
    'blockquote': _blockquote,
}


def node_to_blocks(node: Node, base_url: str = "") -> list:
    """Map one node (and its subtree) to zero or more blocks in document order.

    Relative image sources resolve against base_url when one is given.
    """
    if node.is_text:
        text = node.text.strip()
        return [ParagraphBlock(content=text)] if text else []
    if not node.is_element:
        return []

    if node.tag in HEADING_TAGS:
        return _heading(node)
    if node.tag in CONTAINER_TAGS:
        return _container(node, base_url)
    if node.tag == 'img':
        return _img(node, base_url)
    handler = TAG_HANDLERS.get(node.tag)
    if handler is not None:
        return handler(node)

    text = inline_markup(node)
    return [ParagraphBlock(content=text)] if text.strip() else []


def parse_html(content: str, builder: str = "html.parser", base_url: str = "") -> list:
    """Convert an HTML fragment into an ordered list of blocks."""
    body = parse_fragment(content, builder)
    blocks = _container(body, base_url)
    logger.debug("converted HTML paste into %d block(s)", len(blocks))
    return blocks
