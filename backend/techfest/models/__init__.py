from techfest.models.forms import Registration, Stall, Sponsorship, Contact
from techfest.models.payment import RegistrationPayment, TicketPayment

__all__ = ["Registration", "Stall", "Sponsorship", "Contact", "RegistrationPayment", "TicketPayment"]
