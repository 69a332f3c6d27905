"""
Pydantic Schemas — Request models for API validation.

Form rules run in ``model_validator`` hooks so the first violated rule is
the message the client sees.
"""
from typing import Optional, Literal, Union
from pydantic import BaseModel, Field, model_validator

from techfest.utils.validators import check_form, is_blank


class FormModel(BaseModel):
    """Accepts camelCase keys from the browser and snake_case from Python."""

    class Config:
        populate_by_name = True

    def form_values(self) -> dict:
        return self.model_dump()


# ──────────────── Competition Registration ────────────────

class RegistrationRequest(FormModel):
    name: Optional[str] = None
    competition: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    category: Optional[str] = "Competition"
    fee: Optional[float] = None

    @model_validator(mode="after")
    def check_rules(self):
        check_form(self.form_values(), required=("name", "competition", "email", "mobile", "fee"))
        return self


# ──────────────── Stall Booking ────────────────

class StallRequest(FormModel):
    name: Optional[str] = None
    competition: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    fee: Optional[Union[str, int, float]] = None
    category: Optional[str] = "Stall"

    @model_validator(mode="after")
    def check_rules(self):
        check_form(self.form_values(), required=("name", "competition", "email", "mobile", "fee"))
        return self


# ──────────────── Sponsorship ────────────────

class SponsorshipRequest(FormModel):
    name: Optional[str] = None
    competition: Optional[str] = None
    contact_name: Optional[str] = Field(None, alias="contactName")
    email: Optional[str] = None
    mobile: Optional[str] = None
    terms: Optional[bool] = None

    @model_validator(mode="after")
    def check_rules(self):
        check_form(self.form_values(), required=("name", "competition", "email", "mobile"))
        return self


class SponsorshipRegisterRequest(SponsorshipRequest):
    """Full sponsorship form: named contact person and accepted terms."""

    @model_validator(mode="after")
    def check_rules(self):
        filled = (self.name, self.competition, self.contact_name, self.email, self.mobile)
        if any(is_blank(value) for value in filled) or self.terms is not True:
            raise ValueError("All fields are required and Terms must be accepted.")
        check_form(self.form_values(), required=())
        return self


# ──────────────── Contact ────────────────

class ContactRequest(FormModel):
    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def check_rules(self):
        check_form(self.form_values(), required=("name", "email", "message"))
        return self


# ──────────────── Payment ────────────────

PaymentFor = Literal["ticket", "registration"]


class CreateOrderRequest(FormModel):
    amount: int = Field(..., gt=0, description="Amount in major units (₹), not paisa")
    currency: Optional[str] = None
    payment_for: PaymentFor = Field(..., alias="paymentFor")

    name: Optional[str] = None
    event_name: Optional[str] = Field(None, alias="eventName")

    # Registration fee fields
    category: Optional[str] = None
    competition: Optional[str] = None

    # Ticket fields
    type: Optional[str] = None
    contact: Optional[str] = None   # Email or phone

    @model_validator(mode="after")
    def check_ticket_contact(self):
        if self.payment_for == "ticket" and not self.contact:
            raise ValueError("Contact is required for ticket orders")
        return self


class VerifyPaymentRequest(FormModel):
    razorpay_order_id: str = Field(..., min_length=1)
    razorpay_payment_id: str = Field(..., min_length=1)
    razorpay_signature: str = Field(..., min_length=1)
    payment_for: PaymentFor = Field(..., alias="paymentFor")
