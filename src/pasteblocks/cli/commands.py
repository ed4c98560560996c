"""CLI command implementations"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from pasteblocks.config import Settings, load_config
from pasteblocks.core.editor import apply_paste, finalize, new_article
from pasteblocks.core.export import write_article
from pasteblocks.core.models import Article, dump_blocks
from pasteblocks.core.parse import parse_paste


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1.

    Validation errors are listed one field per line (`field: reason`) rather
    than as pydantic's multi-line report.
    """
    typer.echo(f"Error: {msg}", err=True)
    if isinstance(cause, ValidationError):
        for err in cause.errors():
            loc = ".".join(str(part) for part in err["loc"]) or "value"
            typer.echo(f"  {loc}: {err['msg']}", err=True)
    elif cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _read_source(path: str) -> str:
    """Read pasted content from a file, or from stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def _load_article(path: Path) -> Article:
    try:
        return Article.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        _fail(f"Cannot read {path}", e)
    except ValidationError as e:
        _fail(f"{path} is not a valid article", e)


def _emit(text: str, out: Optional[Path]) -> None:
    if out is None:
        typer.echo(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"Wrote {out}")


def parse_cmd(
    path: Annotated[str, typer.Argument(help="File with pasted content, or '-' for stdin")],
    out: Annotated[Optional[Path], typer.Option("--out", help="Write JSON here instead of stdout")] = None,
    html_parser: Annotated[Optional[str], typer.Option("--html-parser", help="BeautifulSoup tree builder")] = None,
    base_url: Annotated[Optional[str], typer.Option("--base-url", help="Resolve relative image sources against this URL")] = None,
    ):
    """Parse pasted text or HTML into a JSON list of content blocks."""
    settings = _settings(overrides={"html_parser": html_parser, "base_url": base_url})
    content = _read_source(path)
    try:
        blocks = parse_paste(content, settings.html_parser, settings.base_url)
    except Exception as e:
        _fail("Parse failed", e)
    _emit(json.dumps(dump_blocks(blocks), indent=2, ensure_ascii=False), out)


def import_cmd(
    path: Annotated[str, typer.Argument(help="File with pasted content, or '-' for stdin")],
    article: Annotated[Optional[Path], typer.Option("--article", help="Existing draft JSON to append to")] = None,
    out: Annotated[Optional[Path], typer.Option("--out", help="Write the draft JSON here instead of stdout")] = None,
    excerpt_length: Annotated[Optional[int], typer.Option("--excerpt-length", help="Max excerpt characters")] = None,
    base_url: Annotated[Optional[str], typer.Option("--base-url", help="Resolve relative image sources against this URL")] = None,
    ):
    """Append a paste to an article draft, taking title and excerpt from it when missing."""
    settings = _settings(overrides={"excerpt_length": excerpt_length, "base_url": base_url})
    draft = _load_article(article) if article else new_article(settings)
    content = _read_source(path)
    try:
        draft = apply_paste(draft, content, settings.excerpt_length, settings.html_parser, settings.base_url)
    except Exception as e:
        _fail("Import failed", e)
    typer.echo(f"Draft has {len(draft.blocks)} block(s)", err=True)
    _emit(draft.model_dump_json(indent=2), out)


def export_cmd(
    article: Annotated[Path, typer.Argument(help="Article draft JSON")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="md or json")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    publish: Annotated[bool, typer.Option("--publish", help="Mark the article as published")] = False,
    ):
    """Finalize a draft (slug, publish flag) and write it as Markdown or JSON."""
    settings = _settings(overrides={"output_format": fmt, "output_dir": out})
    draft = _load_article(article)
    try:
        final = finalize(draft, publish=True if publish else None)
        path = write_article(final, Path(settings.output_dir), settings.output_format)
    except ValueError as e:
        _fail(str(e))
    typer.echo(f"  {final.slug} -> {path}")
