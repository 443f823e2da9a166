"""Extraction of subscription group names from product identifiers.

Auto-renewing subscription product ids follow the convention
``<vendor-prefix>.subscription.<group>.<product-name>``, for example
``com.example.subscription.vip.gold``.
"""
from __future__ import annotations

from typing import Optional

from .models import ProductId

DEFAULT_MARKER = "subscription"
DEFAULT_SEPARATOR = "."


def group_key(group: str) -> str:
    """Comparison key for group names, which match case-insensitively."""

    return group.casefold()


def parse_group_name(
    product_id: ProductId,
    *,
    marker: str = DEFAULT_MARKER,
    separator: str = DEFAULT_SEPARATOR,
) -> Optional[str]:
    """Return the segment following the first marker segment, if any."""

    segments = product_id.split(separator)
    wanted = marker.casefold()
    for position, segment in enumerate(segments):
        if segment.casefold() == wanted:
            if position + 1 < len(segments):
                return segments[position + 1]
            return None
    return None
