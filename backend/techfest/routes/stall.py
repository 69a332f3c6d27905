"""
Stall Routes — Stall bookings for the fest grounds.
"""
import logging

from fastapi import APIRouter, Depends

from techfest.errors import NotFound
from techfest.models.forms import Stall
from techfest.schemas.schemas import StallRequest
from techfest.services.id_service import IdService, STALL
from techfest.services.store import Store, get_store

logger = logging.getLogger("techfest.stalls")
router = APIRouter(prefix="/api/stalls", tags=["Stalls"])


@router.post("", status_code=201)
def register_stall(payload: StallRequest, store: Store = Depends(get_store)):
    """Book a stall (mints STALL######)."""
    stall = IdService.insert_with_fresh_id(
        store, STALL,
        lambda stall_id: Stall(
            stall_id=stall_id,
            name=payload.name,
            competition=payload.competition,
            email=payload.email,
            mobile=payload.mobile,
            fee=str(payload.fee),
            category=payload.category or "Stall",
        ),
    )
    logger.info("Stall %s booked by %s", stall.stall_id, stall.name)

    return {
        "message": "Stall registered successfully",
        "stallId": stall.stall_id,
        "data": stall.to_dict(),
    }


@router.get("")
def list_stalls(store: Store = Depends(get_store)):
    return [s.to_dict() for s in store.list_all(Stall)]


@router.get("/{lookup}")
def get_stall(lookup: str, store: Store = Depends(get_store)):
    """Find a stall booking by email or mobile number."""
    stall = store.find_one_matching_any(Stall, lookup, ("email", "mobile"))
    if not stall:
        raise NotFound("Stall not found")
    return {"message": "Stall found", "data": stall.to_dict()}
