"""Slug generation for article URLs"""

import re


def slugify(text: str) -> str:
    """Lowercase text; runs of anything outside [a-z0-9] become single hyphens."""
    text = re.sub(r'[^a-z0-9]+', '-', text.lower())
    return text.strip('-')
