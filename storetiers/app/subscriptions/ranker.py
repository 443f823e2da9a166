"""Ranking of subscription products by group and service level.

Service level relies on the ordering of product ids within a group in the
store's product id list. A product appearing earlier in its group has a higher
service level than one appearing later: in a group of three products the first
has service level 2 and the last has service level 0.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, List, Optional

from ...config import RankerConfig
from .models import CatalogProduct, ProductId, SubscriptionInfo
from .ordered import OrderedSet
from .parser import group_key, parse_group_name
from .store import SubscriptionStore

logger = logging.getLogger(__name__)


class SubscriptionRanker:
    """Derives groups, memberships and service levels from product ids."""

    def __init__(
        self,
        store: Optional[SubscriptionStore],
        *,
        config: Optional[RankerConfig] = None,
    ) -> None:
        self._store = store
        self._config = config or RankerConfig()

    @property
    def config(self) -> RankerConfig:
        return self._config

    def detach_store(self) -> None:
        """Drop the store reference; every lookup then reports no result."""

        self._store = None

    def group_name(self, product_id: ProductId) -> Optional[str]:
        """Extract the subscription group name present in ``product_id``."""

        return parse_group_name(
            product_id,
            marker=self._config.id_marker,
            separator=self._config.id_separator,
        )

    def groups(self) -> Optional[OrderedSet[str]]:
        """Return the group names present in the store's product ids.

        Names are returned in order of first appearance, using the casing of
        that first appearance.
        """

        product_ids = self._product_ids()
        if product_ids is None:
            return None

        found: OrderedSet[str] = OrderedSet(key=group_key)
        for product_id in product_ids:
            group = self.group_name(product_id)
            if group:
                found.add(group)

        return found if found else None

    def subscriptions(self, group: str) -> Optional[OrderedSet[ProductId]]:
        """Return the product ids in ``group``, highest service level first.

        Ids with an empty group segment (``a.subscription..x``) belong to no
        group, so ``subscriptions("")`` is always ``None``.
        """

        product_ids = self._product_ids()
        if product_ids is None:
            return None

        wanted = group_key(group)
        matched: OrderedSet[ProductId] = OrderedSet()
        for product_id in product_ids:
            matched_group = self.group_name(product_id)
            if matched_group and group_key(matched_group) == wanted:
                matched.add(product_id)

        return matched if matched else None

    def service_level(self, group: str, product_id: ProductId) -> Optional[int]:
        """Return the service level of ``product_id`` within ``group``.

        ``None`` is returned when the product is not a member of the group.
        """

        members = self.subscriptions(group)
        if members is None:
            return None

        level = len(members) - 1
        for member in members:
            if member == product_id:
                return level
            level -= 1

        return None

    def service_levels(self, group: str) -> Optional[Dict[ProductId, int]]:
        members = self.subscriptions(group)
        if members is None:
            return None
        top = len(members) - 1
        return {member: top - position for position, member in enumerate(members)}

    def highest_service_level_product(self, group: str) -> Optional[ProductId]:
        members = self.subscriptions(group)
        return members[0] if members else None

    def is_upgrade(self, group: str, from_product_id: ProductId, to_product_id: ProductId) -> Optional[bool]:
        """Whether moving between two products in ``group`` raises the service level."""

        current = self.service_level(group, from_product_id)
        target = self.service_level(group, to_product_id)
        if current is None or target is None:
            return None
        return target > current

    async def group_subscription_info(self) -> Optional[OrderedSet[SubscriptionInfo]]:
        """Collect the highest-tier entitlement held in each group.

        Results follow group discovery order whether lookups run one at a time
        or concurrently. Groups without an entitlement are skipped.
        """

        store = self._store
        if store is None:
            logger.debug("Subscription store unavailable; skipping entitlement lookup")
            return None

        groups = self.groups() or OrderedSet()
        if self._config.concurrent_lookups:
            results = await self._gather_lookups(store, groups)
        else:
            results = []
            for group in groups:
                results.append(await store.subscription_info(group))

        collected: OrderedSet[SubscriptionInfo] = OrderedSet()
        for group, info in zip(groups, results):
            if info is None:
                logger.debug("No entitlement held in subscription group %s", group)
                continue
            collected.add(info)

        return collected if collected else None

    @staticmethod
    def subscription_information(
        product: CatalogProduct,
        subscription_info: Optional[Iterable[SubscriptionInfo]],
    ) -> Optional[SubscriptionInfo]:
        """Return the entry for ``product`` if it is the top held tier of its group.

        A product owned at a lower tier than another product in the same group
        is not reported.
        """

        if not subscription_info:
            return None
        for info in subscription_info:
            if info.product is not None and info.product.id == product.id:
                return info
        return None

    @staticmethod
    async def _gather_lookups(
        store: SubscriptionStore,
        groups: Iterable[str],
    ) -> List[Optional[SubscriptionInfo]]:
        """Run one lookup per group concurrently, returning results in group order.

        If any lookup fails, or the caller is cancelled, the remaining lookups
        are cancelled before the error propagates.
        """

        tasks = [asyncio.ensure_future(store.subscription_info(group)) for group in groups]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    def _product_ids(self) -> Optional[Iterable[ProductId]]:
        if self._store is None:
            return None
        return self._store.subscription_product_ids
