"""
Cryptographic Hashing Utilities — HMAC-SHA256 signatures for gateway callbacks.
"""
import hashlib
import hmac


def generate_signature(order_id: str, payment_id: str, secret: str) -> str:
    """HMAC-SHA256 of ``"{order_id}|{payment_id}"`` keyed by ``secret``, lowercase hex.

    This is the signature the gateway attaches to its checkout callback.
    """
    message = f"{order_id}|{payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def verify_signature(order_id: str, payment_id: str, signature: str | None, secret: str) -> bool:
    """Check a callback signature. Any mismatch, including a missing signature, is False."""
    if not signature:
        return False
    expected = generate_signature(order_id, payment_id, secret).encode("utf-8")
    received = signature.encode("utf-8")
    if len(received) != len(expected):
        return False
    return hmac.compare_digest(expected, received)
