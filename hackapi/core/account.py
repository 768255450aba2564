"""
core/account.py – AccountService class.
Demo account page data: guest profile, past orders, loyalty stamp card.
"""
from datetime import datetime, timedelta
from typing import Optional

from ..models import AccountResponse, LoyaltyStamp, PastOrder
from .catalog import DEMO_STORE

STAMP_COUNT = 10
# 1-based stamp number → reward label
REWARDS: dict[int, str] = {6: "30%OFF", 10: "50%OFF"}
REWARDS_NOTE = (
    "Rewards: 6th order = 30% off, 10th order = 50% off. "
    "Vouchers apply to your next order, not the ongoing one."
)


def loyalty_stamps(earned: int, total: int = STAMP_COUNT) -> list[LoyaltyStamp]:
    """Stamp card; earned stamps carry no label."""
    return [
        LoyaltyStamp(index=i, earned=i < earned, label="" if i < earned else REWARDS.get(i + 1, ""))
        for i in range(total)
    ]


class AccountService:
    def __init__(self, earned_stamps: int = 2) -> None:
        self._earned = earned_stamps

    def summary(self, now: Optional[datetime] = None) -> AccountResponse:
        now = now or datetime.now()
        orders = [
            PastOrder(store=DEMO_STORE, date=(now - timedelta(days=2)).isoformat()),
            PastOrder(store=DEMO_STORE, date=(now - timedelta(hours=1)).isoformat()),
        ]
        orders.sort(key=lambda o: o.date, reverse=True)
        return AccountResponse(
            name="Guest",
            mobile="+63 ••• ••• ••••",
            email="myemail@gmail.com",
            past_orders=orders,
            stamps=loyalty_stamps(self._earned),
            rewards_note=REWARDS_NOTE,
        )
