from __future__ import annotations

import re
from typing import Optional

WHITESPACE = re.compile(r"\s")


def is_blank(value: Optional[str]) -> bool:
    """True for ``None``, the empty string and whitespace-only text."""
    return value is None or not value.strip()


def split_text(raw: str, delimiter: str) -> list[str]:
    """
    Split ``raw`` on the literal ``delimiter``.

    An empty delimiter splits on every single whitespace character, so runs of
    whitespace leave empty segments behind.
    """
    if delimiter:
        return raw.split(delimiter)
    return WHITESPACE.split(raw)
