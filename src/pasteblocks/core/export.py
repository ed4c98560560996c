"""Export: re-serialize articles to Markdown (with YAML frontmatter) or JSON"""

import re
from pathlib import Path

import yaml

from pasteblocks.core.models import Article, BlockTypeEnum


PLACEHOLDER_SRC = 'attachment:placeholder'
FRONTMATTER_FIELDS = ('title', 'slug', 'category', 'excerpt', 'read_time', 'published')


LINE_BREAK_RE = re.compile(r'\s*\n\s*')


def one_line(text: str) -> str:
    """Fold internal line breaks to single spaces for constructs that live on one line."""
    return LINE_BREAK_RE.sub(' ', text.strip())


def block_to_markdown(block) -> str:
    """Serialize one block using the same notation the text parser reads.

    Paragraph text that itself starts with a construct marker ('#', '>', '- ',
    '1. ', ':::', a fence, '![' or a bare image URL) has no escape in that
    notation and reads back as the construct it looks like.
    """
    kind = block.type
    if kind == BlockTypeEnum.header:
        return f"{'#' * block.level} {one_line(block.content)}"
    if kind == BlockTypeEnum.callout:
        return f":::{block.variant.value} {one_line(block.title)}".rstrip() + f"\n{block.content}\n:::"
    if kind == BlockTypeEnum.list:
        return "\n".join(f"- {one_line(item)}" for item in block.items)
    if kind == BlockTypeEnum.code:
        return f"```{block.language}\n{block.content}\n```"
    if kind == BlockTypeEnum.quote:
        if block.attribution:
            return f"> {one_line(block.content)} — {one_line(block.attribution)}"
        return f"> {one_line(block.content)}"
    if kind == BlockTypeEnum.image:
        return f"![{one_line(block.alt)}]({block.src or PLACEHOLDER_SRC})"
    if kind == BlockTypeEnum.data_viz:
        data = yaml.dump(block.data.model_dump(), default_flow_style=False, sort_keys=False)
        return f"```chart\n# {block.title}\n{data.rstrip()}\n```"
    return one_line(block.content)


def build_body(blocks: list) -> str:
    return "\n\n".join(block_to_markdown(b) for b in blocks)


def build_markdown(article: Article) -> str:
    """Return the article body with a YAML frontmatter block prepended."""
    data = article.model_dump(mode="json")
    fm = {k: data[k] for k in FRONTMATTER_FIELDS}
    if article.scheduled_for:
        fm['scheduled_for'] = data['scheduled_for']
    header = yaml.dump(fm, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{header}---\n\n{build_body(article.blocks)}\n"


def write_article(article: Article, output_dir: Path, fmt: str = 'md') -> Path:
    """Write an article to output_dir/<slug>.<fmt>. Returns the written path."""
    if not article.slug:
        raise ValueError("Article has no slug; finalize it before export")
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{article.slug}.{fmt}"
    if fmt == 'json':
        path.write_text(article.model_dump_json(indent=2), encoding='utf-8')
    else:
        path.write_text(build_markdown(article), encoding='utf-8')
    return path
