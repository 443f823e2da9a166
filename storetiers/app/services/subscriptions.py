"""Application wiring for the subscription ranker."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from dotenv import load_dotenv

from ...config import load_ranker_config
from ..subscriptions import ProductId, SubscriptionInfo, SubscriptionRanker, SubscriptionStore


logger = logging.getLogger("subscriptions")


class LoggingSubscriptionStore(SubscriptionStore):
    """Store decorator that records entitlement lookups to the application logger."""

    def __init__(self, store: SubscriptionStore) -> None:
        self._store = store

    @property
    def subscription_product_ids(self) -> Optional[Sequence[ProductId]]:
        product_ids = self._store.subscription_product_ids
        if product_ids is None:
            logger.warning("Subscription product ids are not configured")
        return product_ids

    async def subscription_info(self, group: str) -> Optional[SubscriptionInfo]:
        logger.debug("Looking up entitlement for subscription group %s", group)
        info = await self._store.subscription_info(group)
        if info is None:
            logger.debug("No entitlement for subscription group %s", group)
        else:
            logger.info(
                "Entitlement for subscription group %s product=%s status=%s",
                group,
                info.product_id,
                info.status.value,
            )
        return info


def get_subscription_ranker(store: Optional[SubscriptionStore], *, log_lookups: bool = True) -> SubscriptionRanker:
    """Build a ranker for ``store`` using environment configuration."""

    load_dotenv()
    config = load_ranker_config()
    if store is not None and log_lookups:
        store = LoggingSubscriptionStore(store)
    return SubscriptionRanker(store, config=config)


__all__ = ["get_subscription_ranker", "LoggingSubscriptionStore"]
