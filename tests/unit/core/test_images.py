"""Unit tests for core/images.py"""

import pytest

from pasteblocks.core.images import (
    extract_image_url,
    is_image_url,
    is_standard_image_url,
    is_supabase_storage_url,
)


SUPABASE = "https://xyz.supabase.co/storage/v1/object/public/articles/1700000000-abc"


@pytest.mark.parametrize("url,expected", [
    ("https://example.com/a.jpg", True),
    ("https://example.com/a.JPEG", True),
    ("http://example.com/dir/a.webp?size=large", True),
    ("https://example.com/a.svg", True),
    ("https://example.com/a.pdf", False),
    ("ftp://example.com/a.png", False),
    ("https://example.com/my photo.png", False),
])
def test_is_standard_image_url(url, expected):
    """Only http(s) URLs without whitespace ending in an image extension match."""
    assert is_standard_image_url(url) is expected


def test_is_supabase_storage_url():
    """Supabase storage object URLs are images whatever their extension."""
    assert is_supabase_storage_url(SUPABASE)
    assert not is_supabase_storage_url("https://xyz.supabase.co/rest/v1/articles")


def test_is_image_url_trims():
    """Surrounding whitespace does not affect detection."""
    assert is_image_url(f"  {SUPABASE}\n")
    assert not is_image_url("see https://example.com/a.png")


def test_extract_image_url_returns_trimmed_url():
    """extract_image_url returns the bare URL or None."""
    assert extract_image_url("  https://example.com/a.gif ") == "https://example.com/a.gif"
    assert extract_image_url(SUPABASE) == SUPABASE
    assert extract_image_url("not a url") is None


def test_extract_image_url_requires_object_path():
    """A Supabase URL with nothing after the object prefix is not extracted."""
    assert extract_image_url("https://xyz.supabase.co/storage/v1/object/") is None
