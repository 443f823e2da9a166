"""Subscription ranker configuration helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional
import os


@dataclass(frozen=True)
class RankerConfig:
    """Configuration for product id parsing and entitlement aggregation."""

    id_marker: str = "subscription"
    id_separator: str = "."
    concurrent_lookups: bool = False


def _to_bool(value: Optional[str], *, default: bool) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return default


def _to_token(value: Optional[str], *, name: str, default: str, strip: bool = True) -> str:
    if value is None:
        return default
    token = value.strip() if strip else value
    if not token:
        raise ValueError(f"{name} must not be empty")
    return token


def load_ranker_config(env: Optional[Mapping[str, str]] = None) -> RankerConfig:
    """Load :class:`RankerConfig` from environment variables."""

    env_mapping = os.environ if env is None else env

    id_marker = _to_token(
        env_mapping.get("STORETIERS_ID_MARKER"),
        name="STORETIERS_ID_MARKER",
        default="subscription",
    )
    # Separators are taken verbatim; whitespace is a legal separator.
    id_separator = _to_token(
        env_mapping.get("STORETIERS_ID_SEPARATOR"),
        name="STORETIERS_ID_SEPARATOR",
        default=".",
        strip=False,
    )
    concurrent_lookups = _to_bool(
        env_mapping.get("STORETIERS_CONCURRENT_LOOKUPS"),
        default=False,
    )

    return RankerConfig(
        id_marker=id_marker,
        id_separator=id_separator,
        concurrent_lookups=concurrent_lookups,
    )
