"""API tests for the create-order / verify-payment handshake."""
import re

from techfest.errors import PersistenceError
from techfest.models.payment import RegistrationPayment, TicketPayment
from techfest.services.store import Store

TICKET_ORDER = {
    "paymentFor": "ticket",
    "amount": 499,
    "name": "A",
    "type": "VIP",
    "eventName": "Fest",
    "contact": "a@x.com",
}

REGISTRATION_ORDER = {
    "paymentFor": "registration",
    "amount": 200,
    "name": "Asha Rao",
    "category": "Coding Competition",
    "competition": "Hackathon",
    "eventName": "Fest",
}


def _verify(client, order_id, payment_id, signature, payment_for="ticket"):
    return client.post("/api/verify-payment", json={
        "razorpay_order_id": order_id,
        "razorpay_payment_id": payment_id,
        "razorpay_signature": signature,
        "paymentFor": payment_for,
    })


def _assert_lifecycle_invariants(record):
    assert record.order_id
    paid_fields = (record.payment_id, record.signature, record.payment_time)
    if record.status == "paid":
        assert all(value is not None for value in paid_fields)
    else:
        assert all(value is None for value in paid_fields)


class TestTicketOrder:
    def test_happy_path(self, client, store, sign):
        response = client.post("/api/create-order", json=TICKET_ORDER)

        assert response.status_code == 200
        order = response.json()
        assert order["id"] == "order_0001"
        assert order["amount"] == 49900
        assert order["currency"] == "INR"
        assert order["status"] == "created"

        ticket = store.find_one(TicketPayment, order_id="order_0001")
        assert ticket.status == "created"
        assert re.match(r"^TICK[0-9]{5}$", ticket.ticket_id)
        assert ticket.amount == 499
        assert ticket.contact == "a@x.com"
        assert ticket.type == "VIP"
        assert ticket.event_name == "Fest"
        _assert_lifecycle_invariants(ticket)
        minted = ticket.ticket_id

        response = _verify(client, "order_0001", "pay_Y", sign("order_0001", "pay_Y"))

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Ticket payment verified successfully",
            "ticketId": minted,
        }

        store.db.expire_all()
        ticket = store.find_one(TicketPayment, order_id="order_0001")
        assert ticket.status == "paid"
        assert ticket.ticket_id == minted
        assert ticket.payment_id == "pay_Y"
        _assert_lifecycle_invariants(ticket)

    def test_gateway_receives_minor_units_and_receipt(self, client, gateway):
        client.post("/api/create-order", json=TICKET_ORDER)

        assert gateway.orders[0]["amount"] == 49900
        assert re.match(r"^receipt_[0-9]+$", gateway.orders[0]["receipt"])

    def test_custom_currency(self, client, store):
        response = client.post("/api/create-order", json={**TICKET_ORDER, "currency": "USD"})

        assert response.json()["currency"] == "USD"
        assert store.find_one(TicketPayment, order_id="order_0001").currency == "USD"

    def test_invalid_signature_leaves_record_pending(self, client, store):
        client.post("/api/create-order", json=TICKET_ORDER)

        response = _verify(client, "order_0001", "pay_Y", "deadbeef")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid signature"}
        ticket = store.find_one(TicketPayment, order_id="order_0001")
        assert ticket.status == "created"
        _assert_lifecycle_invariants(ticket)

    def test_signature_for_other_payment_is_rejected(self, client, store, sign):
        client.post("/api/create-order", json=TICKET_ORDER)

        response = _verify(client, "order_0001", "pay_Y", sign("order_0001", "pay_OTHER"))

        assert response.status_code == 400
        assert store.find_one(TicketPayment, order_id="order_0001").status == "created"

    def test_abandon_and_retry_keeps_one_pending_ticket(self, client, store):
        client.post("/api/create-order", json=TICKET_ORDER)
        second = client.post("/api/create-order", json=TICKET_ORDER).json()

        pending = store.find_all(TicketPayment, contact="a@x.com", status="created")
        assert len(pending) == 1
        assert pending[0].order_id == second["id"]

    def test_sweep_spares_paid_tickets_and_other_contacts(self, client, store, sign):
        client.post("/api/create-order", json=TICKET_ORDER)
        _verify(client, "order_0001", "pay_1", sign("order_0001", "pay_1"))
        client.post("/api/create-order", json={**TICKET_ORDER, "contact": "b@x.com"})

        client.post("/api/create-order", json=TICKET_ORDER)

        assert store.find_one(TicketPayment, order_id="order_0001").status == "paid"
        assert store.find_one(TicketPayment, order_id="order_0002").status == "created"
        assert store.find_one(TicketPayment, order_id="order_0003").contact == "a@x.com"
        assert len(store.list_all(TicketPayment)) == 3

    def test_ticket_ids_are_unique(self, client, store):
        for i in range(15):
            client.post("/api/create-order", json={**TICKET_ORDER, "contact": f"user{i}@x.com"})

        ids = [t.ticket_id for t in store.list_all(TicketPayment)]
        assert len(ids) == 15
        assert len(set(ids)) == 15
        assert all(re.match(r"^TICK[0-9]{5}$", tid) for tid in ids)

    def test_replayed_verify_is_idempotent(self, client, store, sign):
        client.post("/api/create-order", json=TICKET_ORDER)
        signature = sign("order_0001", "pay_Y")

        first = _verify(client, "order_0001", "pay_Y", signature)
        snapshot = store.find_one(TicketPayment, order_id="order_0001").to_dict()
        second = _verify(client, "order_0001", "pay_Y", signature)

        assert first.json() == second.json()
        assert second.status_code == 200
        store.db.expire_all()
        assert store.find_one(TicketPayment, order_id="order_0001").to_dict() == snapshot

    def test_verify_unknown_ticket_order(self, client, sign):
        response = _verify(client, "order_nope", "pay_Y", sign("order_nope", "pay_Y"))

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Order not found"}

    def test_ticket_order_requires_contact(self, client, gateway):
        order = {k: v for k, v in TICKET_ORDER.items() if k != "contact"}

        response = client.post("/api/create-order", json=order)

        assert response.status_code == 400
        assert response.json() == {"message": "Contact is required for ticket orders"}
        assert gateway.orders == []


class TestRegistrationOrder:
    def test_happy_path(self, client, store, sign):
        order = client.post("/api/create-order", json=REGISTRATION_ORDER).json()

        record = store.find_one(RegistrationPayment, order_id=order["id"])
        assert record.status == "created"
        assert record.amount == 200
        assert record.fee_paid == 200
        assert record.competition == "Hackathon"
        assert record.category == "Coding Competition"
        _assert_lifecycle_invariants(record)

        response = _verify(client, order["id"], "pay_R", sign(order["id"], "pay_R"), "registration")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Registration payment verified successfully",
        }
        store.db.expire_all()
        record = store.find_one(RegistrationPayment, order_id=order["id"])
        assert record.status == "paid"
        _assert_lifecycle_invariants(record)

    def test_registration_orders_are_not_swept(self, client, store):
        client.post("/api/create-order", json=REGISTRATION_ORDER)
        client.post("/api/create-order", json=REGISTRATION_ORDER)

        assert len(store.find_all(RegistrationPayment, status="created")) == 2

    def test_verify_unknown_registration_order_is_not_found(self, client, sign):
        response = _verify(client, "order_nope", "pay_R", sign("order_nope", "pay_R"), "registration")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_verify_only_looks_in_the_named_collection(self, client, store, sign):
        client.post("/api/create-order", json=TICKET_ORDER)

        response = _verify(client, "order_0001", "pay_Y", sign("order_0001", "pay_Y"), "registration")

        assert response.status_code == 404
        assert store.find_one(TicketPayment, order_id="order_0001").status == "created"


class TestOrderFailures:
    def test_gateway_failure_writes_nothing(self, client, store, gateway):
        gateway.fail = True

        response = client.post("/api/create-order", json=TICKET_ORDER)

        assert response.status_code == 500
        assert response.json() == {"message": "Unable to create payment order"}
        assert store.list_all(TicketPayment) == []

    def test_gateway_failure_keeps_prior_pending_ticket(self, client, store, gateway):
        client.post("/api/create-order", json=TICKET_ORDER)
        gateway.fail = True

        client.post("/api/create-order", json=TICKET_ORDER)

        assert store.find_one(TicketPayment, order_id="order_0001").status == "created"

    def test_failed_sweep_does_not_block_new_order(self, client, store, monkeypatch):
        client.post("/api/create-order", json=TICKET_ORDER)

        def broken_delete(self, model, **criteria):
            raise PersistenceError()

        monkeypatch.setattr(Store, "delete_one", broken_delete)
        response = client.post("/api/create-order", json=TICKET_ORDER)

        assert response.status_code == 200
        assert response.json()["id"] == "order_0002"
        pending = store.find_all(TicketPayment, contact="a.com", status="created")
        assert sorted(t.order_id for t in pending) == ["order_0001", "order_0002"]

    def test_insert_failure_after_gateway_order(self, client, store, gateway, monkeypatch):
        def broken_insert(self, record):
            raise PersistenceError()

        monkeypatch.setattr(Store, "insert", broken_insert)
        response = client.post("/api/create-order", json=TICKET_ORDER)

        assert response.status_code == 500
        assert response.json() == {"message": "Unable to create payment order"}
        assert len(gateway.orders) == 1
        assert store.list_all(TicketPayment) == []

    def test_gateway_order_without_id(self, client, store, gateway, monkeypatch):
        monkeypatch.setattr(gateway, "create_order", lambda amount, currency, receipt: {"status": "created"})

        response = client.post("/api/create-order", json=REGISTRATION_ORDER)

        assert response.status_code == 500
        assert response.json() == {"message": "Unable to create payment order"}
        assert store.list_all(RegistrationPayment) == []

        assert store.find_one(TicketPayment, order_id="order_0001").status == "created"

    def test_amount_must_be_positive(self, client, gateway):
        response = client.post("/api/create-order", json={**TICKET_ORDER, "amount": 0})

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid value for amount"}
        assert gateway.orders == []

    def test_unknown_payment_kind(self, client):
        response = client.post("/api/create-order", json={**TICKET_ORDER, "paymentFor": "merch"})

        assert response.status_code == 400

    def test_verify_requires_callback_fields(self, client):
        response = client.post("/api/verify-payment", json={"paymentFor": "ticket"})

        assert response.status_code == 400
        assert response.json() == {"message": "All fields are required"}


class TestTicketLookup:
    def test_lookup_by_contact_and_name(self, client, sign):
        client.post("/api/create-order", json=TICKET_ORDER)
        ticket_id = _verify(client, "order_0001", "pay_Y", sign("order_0001", "pay_Y")).json()["ticketId"]

        by_contact = client.get("/api/ticket/a@x.com")
        assert by_contact.status_code == 200
        assert by_contact.json()["data"]["orderId"] == "order_0001"
        assert by_contact.json()["data"]["ticketId"] == ticket_id
        assert by_contact.json()["data"]["status"] == "paid"

        by_name = client.get("/api/ticket/A")
        assert by_name.status_code == 200
        assert by_name.json()["data"]["ticketId"] == ticket_id

    def test_pending_ticket_is_not_revealed(self, client, store):
        client.post("/api/create-order", json=TICKET_ORDER)
        assert store.find_one(TicketPayment, order_id="order_0001").ticket_id

        for lookup in ("a@x.com", "A"):
            response = client.get(f"/api/ticket/{lookup}")
            assert response.status_code == 404
            assert response.json() == {"message": "Ticket not found"}

    def test_new_attempt_does_not_hide_paid_ticket(self, client, sign):
        client.post("/api/create-order", json=TICKET_ORDER)
        ticket_id = _verify(client, "order_0001", "pay_Y", sign("order_0001", "pay_Y")).json()["ticketId"]
        client.post("/api/create-order", json=TICKET_ORDER)

        response = client.get("/api/ticket/a@x.com")

        assert response.status_code == 200
        assert response.json()["data"]["ticketId"] == ticket_id
        assert response.json()["data"]["orderId"] == "order_0001"

    def test_unknown_ticket(self, client):
        response = client.get("/api/ticket/unknown@x.com")

        assert response.status_code == 404
        assert response.json() == {"message": "Ticket not found"}
