"""Content block and article models shared by the parsers, editor, and export"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


MAX_HEADER_LEVEL = 3


class BlockTypeEnum(str, Enum):
    """Restrict content blocks to the variants the editor knows how to render"""
    header = "header"
    paragraph = "paragraph"
    callout = "callout"
    list = "list"
    code = "code"
    quote = "quote"
    image = "image"
    data_viz = "data-viz"


class CalloutVariantEnum(str, Enum):
    insight = "insight"
    warning = "warning"
    stat = "stat"
    tip = "tip"


class CategoryEnum(str, Enum):
    strategy = "Strategy"
    analysis = "Analysis"
    fundamentals = "Fundamentals"
    mindset = "Mindset"
    tools = "Tools"


class _Block(BaseModel):
    model_config = ConfigDict(frozen=True)


class HeaderBlock(_Block):
    type: Literal["header"] = "header"
    level: int = 2
    content: str = ""               # inline markup

    @field_validator("level", mode="before")
    @classmethod
    def _clamp_level(cls, v):
        return min(max(int(v), 1), MAX_HEADER_LEVEL)


class ParagraphBlock(_Block):
    type: Literal["paragraph"] = "paragraph"
    content: str = ""


class CalloutBlock(_Block):
    type: Literal["callout"] = "callout"
    variant: CalloutVariantEnum = CalloutVariantEnum.insight
    title: str = ""
    content: str = ""


class ListBlock(_Block):
    type: Literal["list"] = "list"
    items: list[str] = Field(..., min_length=1)


class CodeBlock(_Block):
    type: Literal["code"] = "code"
    language: str = "text"
    title: str = ""
    content: str = ""               # raw, never inline-processed


class QuoteBlock(_Block):
    type: Literal["quote"] = "quote"
    content: str = ""
    attribution: str = ""


class ImageBlock(_Block):
    """An image reference; an empty src marks a placeholder that still needs a URL."""
    type: Literal["image"] = "image"
    src: str = ""
    alt: str = ""
    caption: str = ""

    @property
    def is_placeholder(self) -> bool:
        return not self.src


class ChartData(BaseModel):
    model_config = ConfigDict(frozen=True)
    labels: list[str] = Field(default_factory=list)
    values: list[float] = Field(default_factory=list)


class DataVizBlock(_Block):
    """Bar chart block; only ever created from the editor, never by a parser."""
    type: Literal["data-viz"] = "data-viz"
    title: str = "Chart"
    data: ChartData = Field(default_factory=ChartData)


ContentBlock = Annotated[
    Union[
        HeaderBlock, ParagraphBlock, CalloutBlock, ListBlock,
        CodeBlock, QuoteBlock, ImageBlock, DataVizBlock,
    ],
    Field(discriminator="type"),
]

BLOCKS_ADAPTER = TypeAdapter(list[ContentBlock])


def dump_blocks(blocks: list) -> list[dict]:
    """Serialize blocks into plain JSON-ready dicts."""
    return BLOCKS_ADAPTER.dump_python(blocks, mode="json")


def load_blocks(data: list[dict]) -> list:
    """Validate a list of block dicts back into typed blocks."""
    return BLOCKS_ADAPTER.validate_python(data)


class Article(BaseModel):
    """An in-progress or stored article draft."""
    id:            Optional[str] = None
    title:         str = ""
    slug:          str = ""
    category:      CategoryEnum = CategoryEnum.strategy
    excerpt:       str = ""
    read_time:     str = "5 min"
    thumbnail:     str = "default"
    thumbnail_url: str = ""
    blocks:        list[ContentBlock] = Field(default_factory=list)
    published:     bool = False
    scheduled_for: Optional[datetime] = None
