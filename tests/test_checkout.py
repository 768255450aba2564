"""
tests/test_checkout.py – CheckoutService, OtpService, AccountService.
"""
from datetime import datetime

import pytest

from hackapi.core.account import AccountService, loyalty_stamps
from hackapi.core.auth import OtpService
from hackapi.core.checkout import CheckoutService, PROVIDER_LINKS
from hackapi.models import CheckoutRequest
from tests.conftest import make_item


# ── Checkout ───────────────────────────────────────────────────────────────────

class TestCheckout:
    def test_pickup_cash(self, sample_items):
        res = CheckoutService().place(CheckoutRequest(items=sample_items, method="pickup"))
        assert res.eta_mins == 15
        assert res.payment == "cash"
        assert res.provider_link is None
        assert res.summary.total_php == 1160

    def test_delivery_wallet(self):
        res = CheckoutService().place(CheckoutRequest(
            items=[make_item()], method="delivery", provider="foodpanda", payment="wallet", wallet="gcash",
        ))
        assert res.eta_mins == 35
        assert res.payment == "gcash"
        assert res.provider_link == PROVIDER_LINKS["foodpanda"]

    def test_unknown_provider_has_no_link(self):
        assert CheckoutService.provider_link("pigeon") is None

    @pytest.mark.parametrize("items,method,msg", [
        (None, "pickup", "No items"),
        ([], "pickup", "No items"),
        ("cake", "pickup", "No items"),
        ({"storeName": "x"}, "pickup", "No items"),
        ([make_item()], None, "Invalid method"),
        ([make_item()], "teleport", "Invalid method"),
    ])
    def test_rejects(self, items, method, msg):
        with pytest.raises(ValueError, match=msg):
            CheckoutService().place(CheckoutRequest(items=items, method=method))


# ── OTP ────────────────────────────────────────────────────────────────────────

class TestOtp:
    @pytest.mark.parametrize("mobile", ["+63 917 123 4567", "639171234567", "0917-123-4567", "(0917) 123.4567"])
    def test_valid_mobiles(self, mobile):
        assert OtpService.is_valid_ph_mobile(mobile)

    @pytest.mark.parametrize("mobile", ["12345", "+1 917 123 4567", "08171234567", "091712345678"])
    def test_invalid_mobiles(self, mobile):
        assert not OtpService.is_valid_ph_mobile(mobile)

    def test_request_returns_demo_otp(self):
        assert OtpService(demo_otp="654321").request("Juan", "09171234567") == "654321"

    def test_request_missing_fields(self):
        with pytest.raises(ValueError, match="Missing fields"):
            OtpService().request("  ", "09171234567")

    def test_verify(self):
        svc = OtpService()
        svc.verify("09171234567", " 123456 ")
        with pytest.raises(ValueError, match="Invalid code"):
            svc.verify("09171234567", "111111")

    def test_mask(self):
        assert OtpService.mask("+63 917 123 4567") == "•••4567"


# ── Account ────────────────────────────────────────────────────────────────────

class TestAccount:
    def test_stamps(self):
        stamps = loyalty_stamps(2)
        assert [s.earned for s in stamps[:3]] == [True, True, False]
        assert stamps[5].label == "30%OFF"
        assert stamps[9].label == "50%OFF"
        assert stamps[0].label == ""

    def test_earned_reward_stamp_has_no_label(self):
        assert loyalty_stamps(6)[5].label == ""

    def test_orders_newest_first(self):
        res = AccountService().summary(now=datetime(2025, 1, 10, 12, 0))
        assert [o.date for o in res.past_orders] == ["2025-01-10T11:00:00", "2025-01-08T12:00:00"]
        assert res.name == "Guest"


class TestCartItems:
    def test_dicts_are_validated(self):
        items = CheckoutService.cart_items([
            {"storeName": "Pan de Manila", "foodName": "Ensaymada", "originalPricePhp": 90, "discountedPricePhp": 45},
        ])
        assert items[0].food_name == "Ensaymada"
        assert items[0].discounted_price_php == 45

    def test_bad_entry_raises_value_error(self):
        with pytest.raises(ValueError):
            CheckoutService.cart_items([{"qty": -1}])
