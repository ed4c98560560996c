"""Inline markup: the compact emphasis/code/link notation carried in block text fields.

One encoder (HTML node -> markup text) and one decoder (markup text -> spans).
The grammar, tried left to right at the earliest matching position:

    ***bold italic***   **bold**   *italic*   `code`   [text](url)

Anything that does not match is literal text.
"""

import html
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pasteblocks.core.extract.nodes import Node


INLINE_RE = re.compile(
    r'\*\*\*(.+?)\*\*\*'
    r'|\*\*(.+?)\*\*'
    r'|\*(.+?)\*'
    r'|`(.+?)`'
    r'|\[([^\]]+)\]\(([^)]+)\)'
)


class SpanKindEnum(str, Enum):
    text = "text"
    bold_italic = "bold_italic"
    bold = "bold"
    italic = "italic"
    code = "code"
    link = "link"


@dataclass(frozen=True)
class InlineSpan:
    kind: SpanKindEnum
    text: str
    href: Optional[str] = None


_GROUP_KINDS = (
    (1, SpanKindEnum.bold_italic),
    (2, SpanKindEnum.bold),
    (3, SpanKindEnum.italic),
    (4, SpanKindEnum.code),
)


def _span(m: re.Match) -> InlineSpan:
    for group, kind in _GROUP_KINDS:
        if m.group(group) is not None:
            return InlineSpan(kind=kind, text=m.group(group))
    return InlineSpan(kind=SpanKindEnum.link, text=m.group(5), href=m.group(6))


def parse_inline(text: str) -> list[InlineSpan]:
    """Split inline markup into an ordered list of non-overlapping spans."""
    spans: list[InlineSpan] = []
    last = 0
    for m in INLINE_RE.finditer(text or ''):
        if m.start() > last:
            spans.append(InlineSpan(kind=SpanKindEnum.text, text=text[last:m.start()]))
        spans.append(_span(m))
        last = m.end()
    if text and last < len(text):
        spans.append(InlineSpan(kind=SpanKindEnum.text, text=text[last:]))
    return spans


def render_inline_html(text: str) -> str:
    """Render inline markup as HTML; literal text is escaped."""
    out = []
    for span in parse_inline(text):
        body = html.escape(span.text)
        if span.kind == SpanKindEnum.bold_italic:
            out.append(f"<strong><em>{body}</em></strong>")
        elif span.kind == SpanKindEnum.bold:
            out.append(f"<strong>{body}</strong>")
        elif span.kind == SpanKindEnum.italic:
            out.append(f"<em>{body}</em>")
        elif span.kind == SpanKindEnum.code:
            out.append(f"<code>{body}</code>")
        elif span.kind == SpanKindEnum.link:
            href = html.escape(span.href, quote=True)
            out.append(f'<a href="{href}" target="_blank" rel="noopener noreferrer">{body}</a>')
        else:
            out.append(body)
    return ''.join(out)


# --- encoder ---

_WRAPPERS = {
    'strong': '**', 'b': '**',
    'em': '*', 'i': '*',
    'code': '`',
}


def inline_markup(node: Node) -> str:
    """Flatten an element's children into inline markup text."""
    parts = []
    for child in node.children:
        if child.is_text:
            parts.append(child.text)
            continue
        if not child.is_element:
            continue
        inner = inline_markup(child)
        if child.tag in _WRAPPERS:
            mark = _WRAPPERS[child.tag]
            parts.append(f"{mark}{inner}{mark}")
        elif child.tag == 'a' and child.get('href'):
            parts.append(f"[{inner}]({child.get('href')})")
        elif child.tag == 'br':
            parts.append(' ')
        else:
            parts.append(inner)
    return ''.join(parts)
