"""
Sponsorship Routes — Sponsor leads from the two sponsorship forms.
"""
import logging

from fastapi import APIRouter, Depends

from techfest.models.forms import Sponsorship
from techfest.schemas.schemas import SponsorshipRequest, SponsorshipRegisterRequest
from techfest.services.store import Store, get_store

logger = logging.getLogger("techfest.sponsorships")
router = APIRouter(prefix="/api", tags=["Sponsorship"])


def _save(store: Store, payload: SponsorshipRequest) -> Sponsorship:
    sponsorship = store.insert(Sponsorship(
        name=payload.name,
        competition=payload.competition,
        contact_name=payload.contact_name,
        email=payload.email,
        mobile=payload.mobile,
        terms=bool(payload.terms),
    ))
    logger.info("Sponsorship lead from %s for %s", sponsorship.name, sponsorship.competition)
    return sponsorship


@router.post("/sponsorship", status_code=201)
def create_sponsorship(payload: SponsorshipRequest, store: Store = Depends(get_store)):
    """Quick sponsorship enquiry; contact person and terms are optional."""
    sponsorship = _save(store, payload)
    return {"message": "Sponsorship submitted successfully!", "data": sponsorship.to_dict()}


@router.post("/sponsorship/register", status_code=201)
def register_sponsorship(payload: SponsorshipRegisterRequest, store: Store = Depends(get_store)):
    """Full sponsorship registration; requires contactName and terms=true."""
    sponsorship = _save(store, payload)
    return {"message": "Sponsorship registration successful!", "data": sponsorship.to_dict()}


@router.get("/sponsorship")
@router.get("/sponsorships")
def list_sponsorships(store: Store = Depends(get_store)):
    return [s.to_dict() for s in store.list_all(Sponsorship)]
