"""Reusable field checks carrying user-facing error messages."""

from __future__ import annotations

import re
from typing import Callable

from pydantic import AfterValidator

from ..content.models import is_http_url

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check(predicate: Callable[[str], bool], message: str) -> AfterValidator:
    def validator(value: str) -> str:
        if not predicate(value):
            raise ValueError(message)
        return value

    return AfterValidator(validator)


def required(message: str) -> AfterValidator:
    """Reject empty or blank strings."""
    return _check(lambda v: bool(v.strip()), message)


def max_chars(limit: int, message: str) -> AfterValidator:
    """Reject strings longer than limit characters."""
    return _check(lambda v: len(v) <= limit, message)


def email(message: str = "Invalid email address") -> AfterValidator:
    return _check(lambda v: bool(EMAIL_PATTERN.match(v)), message)


def url(message: str) -> AfterValidator:
    """Accept only absolute http(s) URLs."""
    return _check(is_http_url, message)
