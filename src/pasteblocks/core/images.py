"""Bare-URL image detection shared by the plain-text and HTML parsers"""

import re
from typing import Optional


IMAGE_EXTENSIONS = ('jpg', 'jpeg', 'png', 'gif', 'webp', 'svg')

STANDARD_IMAGE_RE = re.compile(
    r'https?://\S+\.(?:' + '|'.join(IMAGE_EXTENSIONS) + r')(?:\?\S*)?',
    re.IGNORECASE,
)
SUPABASE_STORAGE_PREFIX_RE = re.compile(r'https?://[^/]+\.supabase\.co/storage/v1/object/')
SUPABASE_STORAGE_RE = re.compile(r'https?://[^/]+\.supabase\.co/storage/v1/object/\S+')


def is_standard_image_url(url: str) -> bool:
    """True if url is an http(s) URL ending in a known image extension (query string allowed)."""
    return STANDARD_IMAGE_RE.fullmatch(url) is not None


def is_supabase_storage_url(url: str) -> bool:
    """True if url points into a Supabase storage bucket."""
    return SUPABASE_STORAGE_PREFIX_RE.match(url) is not None


def is_image_url(url: str) -> bool:
    """True if the trimmed url should be treated as an image reference."""
    trimmed = url.strip()
    return is_standard_image_url(trimmed) or is_supabase_storage_url(trimmed)


def extract_image_url(line: str) -> Optional[str]:
    """Return the image URL if the trimmed line is nothing but one, else None."""
    trimmed = line.strip()
    if STANDARD_IMAGE_RE.fullmatch(trimmed):
        return trimmed
    if SUPABASE_STORAGE_RE.fullmatch(trimmed):
        return trimmed
    return None
