import os

# Must be set before techfest.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RAZORPAY_KEY_ID"] = "rzp_test_key"
os.environ["RAZORPAY_KEY_SECRET"] = "test_secret"

import pytest
from fastapi.testclient import TestClient

import techfest.models  # noqa: F401  (registers tables on Base.metadata)
from techfest.config import get_settings
from techfest.database import Base, SessionLocal, engine
from techfest.main import app
from techfest.services.gateway import get_gateway
from techfest.services.store import Store
from techfest.utils.hashing import generate_signature


class FakeGateway:
    """Stands in for Razorpay: hands out sequential order ids."""

    def __init__(self):
        self.orders = []
        self.fail = False

    def create_order(self, amount, currency, receipt):
        if self.fail:
            raise RuntimeError("gateway unavailable")
        order = {
            "id": f"order_{len(self.orders) + 1:04d}",
            "entity": "order",
            "amount": amount * 100,
            "currency": currency,
            "receipt": receipt,
            "status": "created",
        }
        self.orders.append(order)
        return order


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def gateway():
    fake = FakeGateway()
    app.dependency_overrides[get_gateway] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_gateway, None)


@pytest.fixture()
def client(gateway):
    return TestClient(app)


@pytest.fixture()
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture()
def store(db):
    return Store(db)


@pytest.fixture()
def sign():
    secret = get_settings().RAZORPAY_KEY_SECRET

    def _sign(order_id, payment_id):
        return generate_signature(order_id, payment_id, secret)

    return _sign
