"""
Payment Routes — Razorpay order creation, callback verification and ticket lookup.
"""
from fastapi import APIRouter, Depends

from techfest.config import get_settings
from techfest.errors import NotFound
from techfest.models.payment import TicketPayment, STATUS_PAID
from techfest.schemas.schemas import CreateOrderRequest, VerifyPaymentRequest
from techfest.services.gateway import get_gateway
from techfest.services.payment_service import PaymentService
from techfest.services.store import Store, get_store

settings = get_settings()
router = APIRouter(prefix="/api", tags=["Payment"])


@router.post("/create-order")
def create_order(
    payload: CreateOrderRequest,
    store: Store = Depends(get_store),
    gateway=Depends(get_gateway),
):
    """Create a gateway order and a pending ticket or registration payment.

    Returns the gateway order (``id``, ``amount`` in paisa, ``currency``,
    ``status``) for the browser checkout.

    Ticket orders must carry ``contact``; without it the request is rejected
    with 400. Pending tickets are swept, and tickets looked up, by contact.
    """
    return PaymentService.create_order(store, gateway, payload, default_currency=settings.DEFAULT_CURRENCY)


@router.post("/verify-payment")
def verify_payment(payload: VerifyPaymentRequest, store: Store = Depends(get_store)):
    """Verify the checkout callback signature and mark the payment paid."""
    return PaymentService.verify(store, payload, settings.RAZORPAY_KEY_SECRET)


@router.get("/ticket/{lookup}")
def get_ticket(lookup: str, store: Store = Depends(get_store)):
    """Find the latest paid ticket for this contact (email/phone) or name.

    Pending tickets are not returned: a ticket ID is only revealed once its
    payment has been verified.
    """
    ticket = store.find_one_matching_any(TicketPayment, lookup, ("contact", "name"), status=STATUS_PAID)
    if not ticket:
        raise NotFound("Ticket not found")
    return {"message": "Ticket found", "data": ticket.to_dict()}
