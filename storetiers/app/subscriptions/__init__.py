"""Subscription group discovery and service level ranking."""

from .models import CatalogProduct, ProductId, SubscriptionInfo, SubscriptionState
from .ordered import OrderedSet
from .parser import DEFAULT_MARKER, DEFAULT_SEPARATOR, group_key, parse_group_name
from .ranker import SubscriptionRanker
from .store import InMemorySubscriptionStore, SubscriptionStore

__all__ = [
    "DEFAULT_MARKER",
    "DEFAULT_SEPARATOR",
    "CatalogProduct",
    "InMemorySubscriptionStore",
    "OrderedSet",
    "ProductId",
    "SubscriptionInfo",
    "SubscriptionRanker",
    "SubscriptionState",
    "SubscriptionStore",
    "group_key",
    "parse_group_name",
]
