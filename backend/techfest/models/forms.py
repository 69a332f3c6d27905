"""
Form Models — Competition registrations, stall bookings, sponsorship leads
and contact enquiries. Each form posts into its own table.
"""
from datetime import datetime
from sqlalchemy import Column, String, Integer, Float, DateTime, Boolean, Text

from techfest.database import Base, DocumentMixin


class Registration(DocumentMixin, Base):
    __tablename__ = "competitions"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    registration_id = Column(String(16), unique=True, nullable=False, index=True)  # REG######

    name = Column(String(120), nullable=False)
    competition = Column(String(120), nullable=False)
    email = Column(String(254), nullable=False, index=True)
    mobile = Column(String(10), nullable=False, index=True)
    category = Column(String(64), default="Competition")
    fee = Column(Float, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    __document_fields__ = (
        ("registration_id", "registrationId"),
        ("name", "name"),
        ("competition", "competition"),
        ("email", "email"),
        ("mobile", "mobile"),
        ("category", "category"),
        ("fee", "fee"),
        ("created_at", "createdAt"),
    )


class Stall(DocumentMixin, Base):
    __tablename__ = "stalls"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    stall_id = Column(String(16), unique=True, nullable=False, index=True)  # STALL######

    name = Column(String(120), nullable=False)
    competition = Column(String(120), nullable=False)
    email = Column(String(254), nullable=False, index=True)
    mobile = Column(String(10), nullable=False, index=True)
    fee = Column(String(32), nullable=False)   # Free text on the stall form, e.g. "2500"
    category = Column(String(64), default="Stall")

    created_at = Column(DateTime, default=datetime.utcnow)

    __document_fields__ = (
        ("stall_id", "stallId"),
        ("name", "name"),
        ("competition", "competition"),
        ("email", "email"),
        ("mobile", "mobile"),
        ("fee", "fee"),
        ("category", "category"),
        ("created_at", "createdAt"),
    )


class Sponsorship(DocumentMixin, Base):
    __tablename__ = "sponsorships"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)

    name = Column(String(120), nullable=False)          # Sponsoring organisation
    competition = Column(String(120), nullable=False)
    contact_name = Column(String(120))
    email = Column(String(254), nullable=False)
    mobile = Column(String(10), nullable=False)
    terms = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    __document_fields__ = (
        ("name", "name"),
        ("competition", "competition"),
        ("contact_name", "contactName"),
        ("email", "email"),
        ("mobile", "mobile"),
        ("terms", "terms"),
        ("created_at", "createdAt"),
    )


class Contact(DocumentMixin, Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)

    name = Column(String(120), nullable=False)
    email = Column(String(254), nullable=False)
    mobile = Column(String(10))
    subject = Column(String(200))
    message = Column(Text, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    __document_fields__ = (
        ("name", "name"),
        ("email", "email"),
        ("mobile", "mobile"),
        ("subject", "subject"),
        ("message", "message"),
        ("created_at", "createdAt"),
    )
