from fastapi import APIRouter, Depends

from techfest.models.forms import Contact
from techfest.schemas.schemas import ContactRequest
from techfest.services.store import Store, get_store

router = APIRouter(prefix="/api/contact", tags=["Contact"])


@router.post("", status_code=201)
def create_contact(payload: ContactRequest, store: Store = Depends(get_store)):
    """Store a contact-us enquiry."""
    contact = store.insert(Contact(
        name=payload.name,
        email=payload.email,
        mobile=payload.mobile or None,
        subject=payload.subject,
        message=payload.message,
    ))
    return {"message": "Message received! We will get back to you soon.", "data": contact.to_dict()}


@router.get("")
def list_contacts(store: Store = Depends(get_store)):
    return [c.to_dict() for c in store.list_all(Contact)]
