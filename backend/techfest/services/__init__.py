from techfest.services.store import Store, get_store
from techfest.services.id_service import IdService
from techfest.services.gateway import RazorpayGateway, get_gateway
from techfest.services.payment_service import PaymentService

__all__ = ["Store", "get_store", "IdService", "RazorpayGateway", "get_gateway", "PaymentService"]
