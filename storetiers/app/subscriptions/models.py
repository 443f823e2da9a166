"""Domain models shared by the subscription ranker and store integrations."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

ProductId = str


class SubscriptionState(str, Enum):
    """Renewal state reported by the store for a held subscription."""

    SUBSCRIBED = "subscribed"
    IN_GRACE_PERIOD = "in_grace_period"
    IN_BILLING_RETRY = "in_billing_retry"
    EXPIRED = "expired"
    REVOKED = "revoked"


class CatalogProduct(BaseModel):
    """A product as listed in the store catalog. Identity is ``id``."""

    id: ProductId
    display_name: str = ""
    description: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("product id must not be blank")
        return value


class SubscriptionInfo(BaseModel):
    """The caller's entitlement for the highest-tier product held in one group."""

    group: str
    product: Optional[CatalogProduct] = None
    latest_transaction_id: Optional[int] = None
    status: SubscriptionState = SubscriptionState.SUBSCRIBED

    model_config = ConfigDict(frozen=True)

    @property
    def product_id(self) -> Optional[ProductId]:
        return self.product.id if self.product else None
