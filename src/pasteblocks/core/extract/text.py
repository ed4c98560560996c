"""Line scanner that turns pasted plain text / Notion markdown into content blocks.

Each scanner takes the immutable line list and a cursor index and either
declines (returns None) or returns (block, next_index). The first scanner
that accepts the current line wins.
"""

import logging
import re
from typing import Callable, Optional

from pasteblocks.core.images import extract_image_url, is_image_url
from pasteblocks.core.models import (
    CalloutBlock,
    CalloutVariantEnum,
    CodeBlock,
    HeaderBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)


logger = logging.getLogger(__name__)

FENCE = '```'
CALLOUT_MARK = ':::'

CALLOUT_RE = re.compile(r':::([A-Za-z0-9_]+)?\s*(.*?)(?:::)?')
BARE_CALLOUT_RE = re.compile(r':::[A-Za-z0-9_]+\s*:::')
HEADER_RE = re.compile(r'(#{1,3})\s+(.+)')
QUOTE_PREFIX_RE = re.compile(r'^>\s*')
# Last dash-like separator followed by a dash-free tail; misfires on hyphenated words.
ATTRIBUTION_RE = re.compile(r'(.+?)(?:\s*[—–-]{1,2}\s*)([^—–-]+)$')
BULLET_RE = re.compile(r'[-*•]\s+(.+)')
NUMBERED_RE = re.compile(r'\d+\.\s+(.+)')
LIST_START_RE = re.compile(r'(?:[-*•]|\d+\.)\s+')
MD_IMAGE_RE = re.compile(r'!\[([^\]]*)\]\(([^)]+)\)')

ATTACHMENT_SCHEME = 'attachment:'
ATTACHMENT_ALT = 'Image placeholder - add URL'
ATTACHMENT_CAPTION = '⚠️ Notion attachment detected - please add image URL'

CALLOUT_VARIANTS = {v.value for v in CalloutVariantEnum}

Scan = Optional[tuple[Optional[object], int]]


def capitalize(word: str) -> str:
    """Uppercase the first character only ('javaScript' -> 'JavaScript')."""
    return word[:1].upper() + word[1:]


def normalize_newlines(text: str) -> str:
    return text.replace('\r\n', '\n').replace('\r', '\n')


def _list_item(line: str) -> Optional[str]:
    m = BULLET_RE.fullmatch(line) or NUMBERED_RE.fullmatch(line)
    return m.group(1) if m else None


def scan_code(lines: list[str], i: int) -> Scan:
    """Fenced code block; content lines are kept verbatim."""
    opener = lines[i].strip()
    if not opener.startswith(FENCE):
        return None
    language = opener[len(FENCE):].strip() or 'text'
    j = i + 1
    while j < len(lines) and not lines[j].strip().startswith(FENCE):
        j += 1
    block = CodeBlock(
        language=language,
        title=capitalize(language),
        content='\n'.join(lines[i + 1:j]),
    )
    return block, j + 1


def scan_callout(lines: list[str], i: int) -> Scan:
    """:::variant title ... ::: callouts, single- or multi-line."""
    opener = lines[i].strip()
    if not opener.startswith(CALLOUT_MARK):
        return None
    m = CALLOUT_RE.fullmatch(opener)
    keyword = m.group(1) or 'insight'
    title_or_content = m.group(2) or ''
    variant = keyword if keyword in CALLOUT_VARIANTS else 'insight'

    if opener.endswith(CALLOUT_MARK) and not BARE_CALLOUT_RE.fullmatch(opener):
        content = re.sub(r':::$', '', title_or_content).strip()
        return CalloutBlock(variant=variant, title=capitalize(keyword), content=content), i + 1

    j = i + 1
    while j < len(lines) and not lines[j].strip().startswith(CALLOUT_MARK):
        j += 1
    block = CalloutBlock(
        variant=variant,
        title=title_or_content or capitalize(keyword),
        content='\n'.join(lines[i + 1:j]).strip(),
    )
    return block, j + 1


def scan_header(lines: list[str], i: int) -> Scan:
    m = HEADER_RE.fullmatch(lines[i].strip())
    if not m:
        return None
    return HeaderBlock(level=len(m.group(1)), content=m.group(2).strip()), i + 1


def split_attribution(text: str) -> tuple[str, str]:
    """Split 'quote -- author' on the last dash separator; ('text', '') if none."""
    m = ATTRIBUTION_RE.search(text)
    if not m:
        return text, ''
    return m.group(1).strip(), m.group(2).strip()


def scan_quote(lines: list[str], i: int) -> Scan:
    """Consecutive '>' lines joined into one quote with optional attribution."""
    if not lines[i].strip().startswith('>'):
        return None
    parts = []
    j = i
    while j < len(lines) and lines[j].strip().startswith('>'):
        parts.append(QUOTE_PREFIX_RE.sub('', lines[j].strip()))
        j += 1
    content, attribution = split_attribution(' '.join(parts).strip())
    return QuoteBlock(content=content, attribution=attribution), j


def scan_list(lines: list[str], i: int) -> Scan:
    """Bulleted and numbered lines collapse into a single list.

    A blank line ends the list and is consumed; any other line ends it
    without being consumed.
    """
    if not LIST_START_RE.match(lines[i].strip()):
        return None
    items = []
    j = i
    while j < len(lines):
        line = lines[j].strip()
        item = _list_item(line)
        if item is not None:
            items.append(item)
            j += 1
        elif line == '':
            j += 1
            break
        else:
            break
    return (ListBlock(items=items) if items else None), j


def scan_image_url(lines: list[str], i: int) -> Scan:
    url = extract_image_url(lines[i])
    if url is None:
        return None
    return ImageBlock(src=url), i + 1


def scan_markdown_image(lines: list[str], i: int) -> Scan:
    """![alt](url); Notion 'attachment:' references become placeholders."""
    m = MD_IMAGE_RE.fullmatch(lines[i].strip())
    if not m:
        return None
    alt, src = m.group(1), m.group(2)
    if src.startswith(ATTACHMENT_SCHEME):
        logger.warning("Notion attachment %r has no public URL; emitting placeholder image", src)
        block = ImageBlock(src='', alt=alt or ATTACHMENT_ALT, caption=ATTACHMENT_CAPTION)
    else:
        block = ImageBlock(src=src, alt=alt)
    return block, i + 1


def _ends_paragraph(line: str) -> bool:
    return (
        line == ''
        or line.startswith(('#', '>', FENCE, CALLOUT_MARK, '!['))
        or LIST_START_RE.match(line) is not None
        or is_image_url(line)
    )


def scan_paragraph(lines: list[str], i: int) -> Scan:
    """Fallback: the current line plus following plain lines, joined with spaces."""
    parts = [lines[i].strip()]
    j = i + 1
    while j < len(lines) and not _ends_paragraph(lines[j].strip()):
        parts.append(lines[j].strip())
        j += 1
    return ParagraphBlock(content=' '.join(parts)), j


SCANNERS: tuple[Callable[[list[str], int], Scan], ...] = (
    scan_code,
    scan_callout,
    scan_header,
    scan_quote,
    scan_list,
    scan_image_url,
    scan_markdown_image,
    scan_paragraph,
)


def parse_text(content: str) -> list:
    """Convert newline-delimited pasted text into an ordered list of blocks."""
    lines = normalize_newlines(content).split('\n')
    blocks = []
    i = 0
    while i < len(lines):
        if not lines[i].strip():
            i += 1
            continue
        for scan in SCANNERS:
            result = scan(lines, i)
            if result is not None:
                block, i = result
                if block is not None:
                    blocks.append(block)
                break
    logger.debug("parsed %d line(s) of text into %d block(s)", len(lines), len(blocks))
    return blocks
