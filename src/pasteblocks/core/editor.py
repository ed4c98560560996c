"""Article draft editing: block operations, paste import, and save preparation.

Every operation returns a new Article; the draft passed in is left untouched.
"""

import logging
from datetime import datetime
from typing import Any, Optional

from pasteblocks.config import Settings
from pasteblocks.core.models import (
    Article,
    BlockTypeEnum,
    CalloutBlock,
    ChartData,
    CodeBlock,
    DataVizBlock,
    HeaderBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)
from pasteblocks.core.parse import parse_paste
from pasteblocks.core.utils.slug import slugify


logger = logging.getLogger(__name__)

EXCERPT_ELLIPSIS = '...'


def new_block(block_type: str):
    """Return an empty block of the given type, pre-filled with editor defaults."""
    kind = BlockTypeEnum(block_type)
    if kind == BlockTypeEnum.header:
        return HeaderBlock(level=2, content='')
    if kind == BlockTypeEnum.paragraph:
        return ParagraphBlock(content='')
    if kind == BlockTypeEnum.callout:
        return CalloutBlock(variant='insight', title='Quick Note', content='')
    if kind == BlockTypeEnum.list:
        return ListBlock(items=[''])
    if kind == BlockTypeEnum.code:
        return CodeBlock(language='javascript', title='Code', content='')
    if kind == BlockTypeEnum.data_viz:
        return DataVizBlock(title='Chart', data=ChartData(labels=['A', 'B', 'C'], values=[10, 20, 15]))
    if kind == BlockTypeEnum.quote:
        return QuoteBlock(content='', attribution='')
    return ImageBlock(src='', alt='', caption='')


def new_article(settings: Optional[Settings] = None) -> Article:
    """Blank draft using configured category and read-time defaults."""
    settings = settings or Settings()
    return Article(category=settings.default_category, read_time=settings.default_read_time)


def _with_blocks(article: Article, blocks: list) -> Article:
    return article.model_copy(update={"blocks": blocks})


def _check_index(article: Article, index: int) -> None:
    if not 0 <= index < len(article.blocks):
        raise IndexError(f"Block index {index} out of range (0..{len(article.blocks) - 1})")


def add_block(article: Article, block_type: str) -> Article:
    return _with_blocks(article, [*article.blocks, new_block(block_type)])


def update_block(article: Article, index: int, **updates: Any) -> Article:
    """Merge field updates into one block; the result is re-validated."""
    _check_index(article, index)
    old = article.blocks[index]
    updated = type(old).model_validate({**old.model_dump(), **updates})
    blocks = list(article.blocks)
    blocks[index] = updated
    return _with_blocks(article, blocks)


def remove_block(article: Article, index: int) -> Article:
    _check_index(article, index)
    return _with_blocks(article, [b for i, b in enumerate(article.blocks) if i != index])


def move_block(article: Article, index: int, direction: int) -> Article:
    """Swap a block with its neighbour; moving past either end is a no-op."""
    _check_index(article, index)
    target = index + direction
    if target < 0 or target >= len(article.blocks):
        return article
    blocks = list(article.blocks)
    blocks[index], blocks[target] = blocks[target], blocks[index]
    return _with_blocks(article, blocks)


def insert_image_urls(text: str, cursor: int, urls: list[str]) -> str:
    """Inline uploaded image URLs at the cursor, each on its own line."""
    image_text = ''.join(f"\n{url}\n" for url in urls)
    return text[:cursor] + image_text + text[cursor:]


def _excerpt(content: str, limit: int) -> str:
    if len(content) > limit:
        return content[:limit] + EXCERPT_ELLIPSIS
    return content


def apply_paste(
    article: Article,
    content: str,
    excerpt_length: int = 200,
    html_parser: str = "html.parser",
    base_url: str = "",
    ) -> Article:
    """Parse pasted content and append its blocks to the draft.

    A leading level-1 header becomes the title. If the draft has no excerpt,
    the first remaining paragraph supplies one.
    """
    if not content.strip():
        return article

    blocks = parse_paste(content, html_parser, base_url)
    title = article.title
    excerpt = article.excerpt

    if blocks and blocks[0].type == BlockTypeEnum.header and blocks[0].level == 1:
        title = blocks[0].content
        blocks = blocks[1:]

    if not excerpt and blocks and blocks[0].type == BlockTypeEnum.paragraph:
        excerpt = _excerpt(blocks[0].content, excerpt_length)

    logger.info("imported %d block(s) from paste", len(blocks))
    return article.model_copy(update={
        "title": title or article.title,
        "excerpt": excerpt or article.excerpt,
        "blocks": [*article.blocks, *blocks],
    })


def finalize(article: Article, publish: Optional[bool] = None) -> Article:
    """Prepare a draft for storage: require a title and fill in the slug."""
    if not article.title:
        raise ValueError("Article needs a title before it can be saved")
    return article.model_copy(update={
        "slug": article.slug or slugify(article.title),
        "published": article.published if publish is None else publish,
    })


def schedule(article: Article, when: datetime) -> Article:
    """Finalize as published with a future publication time."""
    return finalize(article, publish=True).model_copy(update={"scheduled_for": when})
