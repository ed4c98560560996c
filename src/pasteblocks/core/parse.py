"""Paste dispatcher: route pasted content to the HTML or plain-text parser"""

import logging
import re

from pasteblocks.core.extract.html_blocks import parse_html
from pasteblocks.core.extract.text import normalize_newlines, parse_text


logger = logging.getLogger(__name__)

HTML_TAG_RE = re.compile(r'<[a-z][\s\S]*>', re.IGNORECASE)


def looks_like_html(text: str) -> bool:
    """True if the text contains anything shaped like an HTML tag."""
    return HTML_TAG_RE.search(text) is not None


def parse_paste(content: str, html_parser: str = "html.parser", base_url: str = "") -> list:
    """Parse pasted content into an ordered list of content blocks.

    Whitespace-only input yields an empty list. HTML tree-builder errors
    propagate to the caller. base_url only affects image sources in HTML pastes.
    """
    text = normalize_newlines(content)
    if looks_like_html(text):
        logger.debug("paste looks like HTML; using %s tree builder", html_parser)
        return parse_html(text, html_parser, base_url)
    logger.debug("paste is plain text")
    return parse_text(text)
