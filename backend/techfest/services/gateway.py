"""
Gateway Service — Razorpay order creation.

The server only ever creates orders; payment completion happens between the
browser and Razorpay and comes back as a signed callback.
"""
import logging
from functools import lru_cache

from techfest.config import get_settings

logger = logging.getLogger("techfest.gateway")


class RazorpayGateway:
    """Wraps the Razorpay SDK client built from the configured key pair."""

    def __init__(self, key_id: str, key_secret: str):
        import razorpay

        self._client = razorpay.Client(auth=(key_id, key_secret))

    def create_order(self, amount: int, currency: str, receipt: str) -> dict:
        """Create an order for ``amount`` in major units.

        Razorpay expects the smallest currency unit, so ₹499 is sent as 49900.
        Returns the gateway's order dict (``id``, ``amount``, ``currency``,
        ``status`` and whatever else Razorpay includes).
        """
        order = self._client.order.create(data={
            "amount": amount * 100,
            "currency": currency,
            "receipt": receipt,
        })
        logger.info("Gateway order %s created (%s %s)", order.get("id"), order.get("amount"), currency)
        return order


@lru_cache()
def get_gateway() -> RazorpayGateway:
    """FastAPI dependency: process-wide gateway client."""
    settings = get_settings()
    return RazorpayGateway(settings.RAZORPAY_KEY_ID, settings.RAZORPAY_KEY_SECRET)
