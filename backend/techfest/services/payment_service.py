"""
Payment Service — Order creation and callback verification for entry fees
and event tickets.

Lifecycle of both record kinds:

    create_order  ->  status "created"  (orderId from Razorpay, ticketId minted)
    verify        ->  status "paid"     (paymentId, signature, paymentTime set)

No other transition exists; a paid record is never written again.
"""
import logging
import time
from datetime import datetime

from techfest.errors import (
    InvalidSignature, NotFound, OrderCreationFailed, PersistenceError, TechfestError,
)
from techfest.models.payment import RegistrationPayment, TicketPayment, STATUS_CREATED, STATUS_PAID
from techfest.schemas.schemas import CreateOrderRequest, VerifyPaymentRequest
from techfest.services.id_service import IdService, TICKET
from techfest.services.store import Store
from techfest.utils.hashing import verify_signature

logger = logging.getLogger("techfest.payments")

PAYMENT_MODELS = {
    "ticket": TicketPayment,
    "registration": RegistrationPayment,
}


class PaymentService:
    """Drives the two-step handshake with the payment gateway."""

    @staticmethod
    def create_order(store: Store, gateway, payload: CreateOrderRequest, default_currency: str = "INR") -> dict:
        """Create a gateway order and persist the matching pending record.

        Args:
            store: Store bound to the request's session.
            gateway: Object with ``create_order(amount, currency, receipt)``.
            payload: Validated order intent.
            default_currency: Used when the payload carries none.

        Returns:
            The gateway's order dict, unchanged.

        Raises:
            OrderCreationFailed: gateway call or persistence failed.
        """
        currency = payload.currency or default_currency
        receipt = f"receipt_{int(time.time() * 1000)}"

        try:
            order = gateway.create_order(payload.amount, currency, receipt)
            order_id = order["id"]
        except Exception as exc:
            logger.exception("Gateway rejected %s order for %s %s", payload.payment_for, payload.amount, currency)
            raise OrderCreationFailed() from exc

        try:
            if payload.payment_for == "ticket":
                PaymentService._sweep_pending_tickets(store, payload.contact)
                record = IdService.insert_with_fresh_id(
                    store, TICKET,
                    lambda ticket_id: TicketPayment(
                        ticket_id=ticket_id,
                        order_id=order_id,
                        name=payload.name,
                        type=payload.type,
                        event_name=payload.event_name,
                        contact=payload.contact,
                        amount=payload.amount,
                        currency=currency,
                        status=order.get("status", STATUS_CREATED),
                    ),
                )
                logger.info("Ticket order %s pending as %s", record.order_id, record.ticket_id)
            else:
                record = store.insert(RegistrationPayment(
                    order_id=order_id,
                    name=payload.name,
                    category=payload.category,
                    competition=payload.competition,
                    event_name=payload.event_name,
                    amount=payload.amount,
                    currency=currency,
                    fee_paid=payload.amount,
                    status=order.get("status", STATUS_CREATED),
                ))
                logger.info("Registration order %s pending", record.order_id)
        except TechfestError as exc:
            # The gateway order now exists without a local record; it simply expires unpaid.
            logger.error("Order %s created at gateway but not stored: %s", order_id, exc.message)
            raise OrderCreationFailed() from exc

        return order

    @staticmethod
    def _sweep_pending_tickets(store: Store, contact: str | None) -> int:
        """Delete unpaid tickets left by earlier attempts from the same contact.

        Failures are logged only; the new order still goes ahead.
        """
        if not contact:
            return 0
        removed = 0
        try:
            for stale in store.find_all(TicketPayment, contact=contact, status=STATUS_CREATED):
                stale_id, ticket_id, order_id = stale.id, stale.ticket_id, stale.order_id
                if store.delete_one(TicketPayment, id=stale_id):
                    removed += 1
                    logger.info("Swept pending ticket %s (order %s)", ticket_id, order_id)
        except PersistenceError:
            logger.exception("Sweep of pending tickets failed; continuing with new order")
        return removed

    @staticmethod
    def verify(store: Store, payload: VerifyPaymentRequest, secret: str) -> dict:
        """Authenticate the gateway callback and promote the record to paid.

        Raises:
            InvalidSignature: HMAC does not match; nothing is written.
            NotFound: no pending record for the order.
        """
        if not secret:
            logger.error("Gateway key secret is not configured; rejecting verify for %s", payload.razorpay_order_id)
            raise InvalidSignature()
        if not verify_signature(
            payload.razorpay_order_id, payload.razorpay_payment_id, payload.razorpay_signature, secret,
        ):
            logger.warning("Signature mismatch for order %s", payload.razorpay_order_id)
            raise InvalidSignature()

        model = PAYMENT_MODELS[payload.payment_for]
        record = store.find_one(model, order_id=payload.razorpay_order_id)
        if record is None:
            raise NotFound("Order not found", success=False)

        if record.status != STATUS_PAID:
            record = store.find_one_and_update(
                model,
                {"order_id": payload.razorpay_order_id},
                {
                    "payment_id": payload.razorpay_payment_id,
                    "signature": payload.razorpay_signature,
                    "status": STATUS_PAID,
                    "payment_time": datetime.utcnow(),
                },
            )
            if record is None:
                raise NotFound("Order not found", success=False)
            logger.info("Order %s marked paid (%s)", record.order_id, payload.payment_for)
        else:
            logger.info("Order %s already paid; verify replay ignored", record.order_id)

        if payload.payment_for == "ticket":
            return {
                "success": True,
                "message": "Ticket payment verified successfully",
                "ticketId": record.ticket_id,
            }
        return {
            "success": True,
            "message": "Registration payment verified successfully",
        }
