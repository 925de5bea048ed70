"""Hashtag and mention normalisation.

Post content stores hashtags without the leading '#' and mentions with a
single leading '@'. Both behave as sets: duplicates (ignoring case) are
dropped, first spelling and first position win.
"""

from __future__ import annotations

import re
from typing import Iterable

# '#' or '@' followed by word chars (including unicode)
HASHTAG_PATTERN = re.compile(r'#([\w\u0080-\uFFFF]+)', re.UNICODE)
MENTION_PATTERN = re.compile(r'(?<![\w@])@([\w.]+)', re.UNICODE)


def normalize_hashtag(tag: str) -> str:
    """Strip whitespace and leading '#' characters from a hashtag.

    Example:
        normalize_hashtag("  ##Python ")  # "Python"
    """
    return tag.strip().lstrip("#").strip()


def normalize_mention(handle: str) -> str:
    """Return the handle with exactly one leading '@', or "" if empty."""
    name = handle.strip().lstrip("@").strip()
    return f"@{name}" if name else ""


def _dedupe(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for value in values:
        if not value:
            continue
        key = value.casefold()
        if key in seen:
            continue
        seen.add(key)
        result.append(value)
    return result


def normalize_hashtags(tags: Iterable[str]) -> list[str]:
    """Normalise a collection of hashtags, dropping blanks and duplicates."""
    return _dedupe(normalize_hashtag(tag) for tag in tags)


def normalize_mentions(handles: Iterable[str]) -> list[str]:
    """Normalise a collection of mentions, dropping blanks and duplicates."""
    return _dedupe(normalize_mention(handle) for handle in handles)


def extract_hashtags(text: str) -> list[str]:
    """Extract hashtags (without '#') from free text, in order of appearance."""
    if not text:
        return []
    return normalize_hashtags(HASHTAG_PATTERN.findall(text))


def extract_mentions(text: str) -> list[str]:
    """Extract mentions (with '@') from free text, in order of appearance."""
    if not text:
        return []
    return normalize_mentions(m.rstrip(".") for m in MENTION_PATTERN.findall(text))
