"""
core/checkout.py – CheckoutService class.
Stub order placement: validates the cart, returns ETA + delivery deep link.
"""
import logging
from typing import Any, Optional

from ..models import CheckoutRequest, CheckoutResponse, Item
from .browse import summarize

logger = logging.getLogger(__name__)

METHODS = ("pickup", "delivery")
ETA_MINS: dict[str, int] = {"pickup": 15, "delivery": 35}

PROVIDER_LINKS: dict[str, str] = {
    "grab":      "https://food.grab.com/ph/en",
    "foodpanda": "https://www.foodpanda.ph/",
    "toktok":    "https://www.toktok.ph/",
    "joyride":   "https://www.joyride.com.ph/",
    "angkas":    "https://www.angkas.com/",
}


class CheckoutService:
    """No payment is taken; this only echoes what the order would look like."""

    def place(self, req: CheckoutRequest) -> CheckoutResponse:
        items = self.cart_items(req.items)
        if req.method not in METHODS:
            raise ValueError("Invalid method")
        summary = summarize(items)
        logger.info(
            "[Checkout] %d items, %s via %s, total ₱%.2f",
            len(items), req.method, req.provider or "-", summary.total_php,
        )
        return CheckoutResponse(
            eta_mins=ETA_MINS[req.method],
            provider_link=self.provider_link(req.provider),
            payment=req.wallet if req.payment == "wallet" else req.payment,
            summary=summary,
        )

    @staticmethod
    def cart_items(raw: Any) -> list[Item]:
        """Non-empty list of items; anything else is `No items`. Bad entries raise ValidationError."""
        if not isinstance(raw, list) or not raw:
            raise ValueError("No items")
        return [i if isinstance(i, Item) else Item.model_validate(i) for i in raw]

    @staticmethod
    def provider_link(provider: Optional[str]) -> Optional[str]:
        return PROVIDER_LINKS.get(provider) if provider else None
