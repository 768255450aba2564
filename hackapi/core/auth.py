"""
core/auth.py – OtpService class.
Demo sign-up: every request gets the same OTP, verification is a constant comparison.
"""
import logging
import re

logger = logging.getLogger(__name__)

# +639XXXXXXXXX, 639XXXXXXXXX or 09XXXXXXXXX after stripping separators
PH_MOBILE = re.compile(r"^(?:\+?63|0)9\d{9}$")
_SEPARATORS = re.compile(r"[\s\-().]")


class OtpService:
    """Mock OTP issuer/verifier."""

    def __init__(self, demo_otp: str = "123456") -> None:
        self._otp = demo_otp

    def request(self, full_name: str, mobile: str) -> str:
        """Validate sign-up fields and return the OTP hint."""
        if not full_name.strip() or not mobile.strip():
            raise ValueError("Missing fields")
        if not self.is_valid_ph_mobile(mobile):
            raise ValueError("Enter a valid PH mobile (e.g., +63 917 123 4567).")
        logger.info("[OTP] issued for %s", self.mask(mobile))
        return self._otp

    def verify(self, mobile: str, otp: str) -> None:
        if not mobile.strip() or not otp.strip():
            raise ValueError("Missing fields")
        if otp.strip() != self._otp:
            logger.info("[OTP] rejected for %s", self.mask(mobile))
            raise ValueError("Invalid code")
        logger.info("[OTP] verified %s", self.mask(mobile))

    @staticmethod
    def is_valid_ph_mobile(mobile: str) -> bool:
        return bool(PH_MOBILE.match(_SEPARATORS.sub("", mobile)))

    @staticmethod
    def mask(mobile: str) -> str:
        digits = _SEPARATORS.sub("", mobile)
        return f"•••{digits[-4:]}" if len(digits) >= 4 else "•••"
