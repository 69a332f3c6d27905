"""
Payment Models — Gateway-backed payment records.

Both kinds share the lifecycle created → paid. ``payment_id``, ``signature``
and ``payment_time`` stay NULL until the gateway callback is verified.
"""
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime

from techfest.database import Base, DocumentMixin

STATUS_CREATED = "created"
STATUS_PAID = "paid"


class RegistrationPayment(DocumentMixin, Base):
    """Competition entry fee paid through the gateway."""

    __tablename__ = "registrationpayments"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    order_id = Column(String(64), unique=True, nullable=False, index=True)

    name = Column(String(120))
    category = Column(String(64))        # e.g. Coding Competition, Project Expo
    competition = Column(String(120))
    event_name = Column(String(120))

    amount = Column(Integer, nullable=False)   # Major units (₹), not paisa
    currency = Column(String(8), default="INR")
    fee_paid = Column(Integer)

    status = Column(String(16), default=STATUS_CREATED)  # created | paid
    payment_id = Column(String(64))
    signature = Column(String(128))
    payment_time = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    __document_fields__ = (
        ("order_id", "orderId"),
        ("payment_id", "paymentId"),
        ("signature", "signature"),
        ("name", "name"),
        ("category", "category"),
        ("competition", "competition"),
        ("event_name", "eventName"),
        ("amount", "amount"),
        ("currency", "currency"),
        ("fee_paid", "feePaid"),
        ("status", "status"),
        ("payment_time", "paymentTime"),
        ("created_at", "createdAt"),
    )


class TicketPayment(DocumentMixin, Base):
    """Event ticket. ``ticket_id`` is minted at order time, revealed after verify."""

    __tablename__ = "ticketpayments"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    ticket_id = Column(String(16), unique=True, nullable=False, index=True)  # TICK#####
    order_id = Column(String(64), unique=True, nullable=False, index=True)

    name = Column(String(120), index=True)
    type = Column(String(32))            # VIP | Regular | Early Bird
    event_name = Column(String(120))
    contact = Column(String(254), index=True)   # Email or phone

    amount = Column(Integer, nullable=False)
    currency = Column(String(8), default="INR")

    status = Column(String(16), default=STATUS_CREATED)
    payment_id = Column(String(64))
    signature = Column(String(128))
    payment_time = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    __document_fields__ = (
        ("ticket_id", "ticketId"),
        ("order_id", "orderId"),
        ("payment_id", "paymentId"),
        ("signature", "signature"),
        ("name", "name"),
        ("type", "type"),
        ("event_name", "eventName"),
        ("contact", "contact"),
        ("amount", "amount"),
        ("currency", "currency"),
        ("status", "status"),
        ("payment_time", "paymentTime"),
        ("created_at", "createdAt"),
    )
