"""
Identifier Service — Human-readable IDs for registrations, stalls and tickets.
"""
import logging
import random
import re
from typing import Callable, NamedTuple

from techfest.config import get_settings
from techfest.errors import DuplicateKey, IdExhausted
from techfest.models.forms import Registration, Stall
from techfest.models.payment import TicketPayment
from techfest.services.store import Store

settings = get_settings()
logger = logging.getLogger("techfest.ids")


class IdScheme(NamedTuple):
    prefix: str
    low: int
    high: int
    model: type
    field: str

    @property
    def pattern(self) -> re.Pattern:
        return re.compile(rf"^{self.prefix}[0-9]{{{len(str(self.high))}}}$")


REGISTRATION = IdScheme("REG", 100000, 999999, Registration, "registration_id")
STALL = IdScheme("STALL", 100000, 999999, Stall, "stall_id")
TICKET = IdScheme("TICK", 10000, 99999, TicketPayment, "ticket_id")


class IdService:
    """Mints identifiers by rejection-sampling against the owning table."""

    @staticmethod
    def mint(store: Store, scheme: IdScheme) -> str:
        """Draw ``PREFIX + random`` until the table has no row with that ID.

        Format examples: REG482913, STALL100274, TICK40517.

        Raises:
            IdExhausted: after ``ID_MINT_MAX_ATTEMPTS`` consecutive hits.
        """
        for _ in range(settings.ID_MINT_MAX_ATTEMPTS):
            candidate = f"{scheme.prefix}{random.randint(scheme.low, scheme.high)}"
            if not store.exists(scheme.model, **{scheme.field: candidate}):
                return candidate
        logger.error("No free %s identifier after %d draws", scheme.prefix, settings.ID_MINT_MAX_ATTEMPTS)
        raise IdExhausted()

    @staticmethod
    def insert_with_fresh_id(store: Store, scheme: IdScheme, build: Callable[[str], object]):
        """Mint an ID, build the row with it and insert; re-mint if a concurrent
        insert claimed the same ID first.
        """
        for _ in range(settings.ID_MINT_MAX_ATTEMPTS):
            identifier = IdService.mint(store, scheme)
            try:
                return store.insert(build(identifier))
            except DuplicateKey:
                logger.warning("%s collided on insert, re-minting", identifier)
        raise IdExhausted()

    @staticmethod
    def validate(identifier: str, scheme: IdScheme) -> bool:
        return bool(identifier) and bool(scheme.pattern.match(identifier))
