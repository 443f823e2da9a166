"""Store integration points consumed by the subscription ranker."""
from __future__ import annotations

import asyncio
from typing import Dict, Iterable, Mapping, Optional, Protocol, Sequence

from .models import ProductId, SubscriptionInfo
from .parser import group_key


class SubscriptionStore(Protocol):
    """Catalog owner and entitlement provider for subscription products."""

    @property
    def subscription_product_ids(self) -> Optional[Sequence[ProductId]]:
        """Subscription product ids, highest tier first within each group."""

    async def subscription_info(self, group: str) -> Optional[SubscriptionInfo]:
        """Return the caller's highest-tier entitlement in ``group``, if any."""


class InMemorySubscriptionStore:
    """Simple in-memory store suitable for tests and local development."""

    def __init__(
        self,
        product_ids: Optional[Iterable[ProductId]] = None,
        entitlements: Optional[Mapping[str, SubscriptionInfo]] = None,
        *,
        delays: Optional[Mapping[str, float]] = None,
    ) -> None:
        self._product_ids = list(product_ids) if product_ids is not None else None
        self._entitlements: Dict[str, SubscriptionInfo] = {}
        self._delays: Dict[str, float] = {}
        self.lookups: list[str] = []
        for group, info in (entitlements or {}).items():
            self.grant(group, info)
        for group, seconds in (delays or {}).items():
            self._delays[group_key(group)] = seconds

    @property
    def subscription_product_ids(self) -> Optional[Sequence[ProductId]]:
        return self._product_ids

    def set_product_ids(self, product_ids: Optional[Iterable[ProductId]]) -> None:
        self._product_ids = list(product_ids) if product_ids is not None else None

    def grant(self, group: str, info: SubscriptionInfo) -> None:
        self._entitlements[group_key(group)] = info

    def revoke(self, group: str) -> None:
        self._entitlements.pop(group_key(group), None)

    async def subscription_info(self, group: str) -> Optional[SubscriptionInfo]:
        key = group_key(group)
        self.lookups.append(group)
        delay = self._delays.get(key)
        if delay:
            await asyncio.sleep(delay)
        return self._entitlements.get(key)
