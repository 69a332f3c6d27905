"""
Registration Routes — Competition sign-ups.
"""
import logging

from fastapi import APIRouter, Depends

from techfest.errors import NotFound
from techfest.models.forms import Registration
from techfest.schemas.schemas import RegistrationRequest
from techfest.services.id_service import IdService, REGISTRATION
from techfest.services.store import Store, get_store

logger = logging.getLogger("techfest.registrations")
router = APIRouter(prefix="/api", tags=["Registrations"])


@router.post("/register", status_code=201)
def register(payload: RegistrationRequest, store: Store = Depends(get_store)):
    """Register a participant for a competition (mints REG######)."""
    registration = IdService.insert_with_fresh_id(
        store, REGISTRATION,
        lambda registration_id: Registration(
            registration_id=registration_id,
            name=payload.name,
            competition=payload.competition,
            email=payload.email,
            mobile=payload.mobile,
            category=payload.category or "Competition",
            fee=payload.fee,
        ),
    )
    logger.info("Registration %s for %s", registration.registration_id, registration.competition)

    return {
        "message": "Registration successful!",
        "registrationId": registration.registration_id,
        "data": registration.to_dict(),
    }


@router.get("/registrations")
def list_registrations(store: Store = Depends(get_store)):
    """All registrations, newest first."""
    return [r.to_dict() for r in store.list_all(Registration)]


@router.get("/registration/{lookup}")
def get_registration(lookup: str, store: Store = Depends(get_store)):
    """Find a registration by email or mobile number."""
    registration = store.find_one_matching_any(Registration, lookup, ("email", "mobile"))
    if not registration:
        raise NotFound("Registration not found")
    return {"message": "Registration found", "data": registration.to_dict()}
