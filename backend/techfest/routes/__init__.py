from techfest.routes.registration import router as registration_router
from techfest.routes.stall import router as stall_router
from techfest.routes.sponsorship import router as sponsorship_router
from techfest.routes.contact import router as contact_router
from techfest.routes.payment import router as payment_router

__all__ = ["registration_router", "stall_router", "sponsorship_router", "contact_router", "payment_router"]
