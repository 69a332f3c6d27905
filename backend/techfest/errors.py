"""
Error Taxonomy — Domain exceptions rendered as uniform JSON envelopes.
"""


class TechfestError(Exception):
    """Base error. Rendered as ``{**extra, "message": message}`` with ``status_code``."""

    status_code = 500
    default_message = "Server error. Please try again later."

    def __init__(self, message: str | None = None, **extra):
        self.message = message or self.default_message
        self.extra = extra
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {**self.extra, "message": self.message}


class ValidationError(TechfestError):
    status_code = 400
    default_message = "All fields are required"


class InvalidSignature(TechfestError):
    status_code = 400
    default_message = "Invalid signature"

    def __init__(self, message: str | None = None, **extra):
        extra.setdefault("success", False)
        super().__init__(message, **extra)


class NotFound(TechfestError):
    status_code = 404
    default_message = "Not found"


class OrderCreationFailed(TechfestError):
    status_code = 500
    default_message = "Unable to create payment order"


class PersistenceError(TechfestError):
    status_code = 500
    default_message = "Server error. Please try again later."


class DuplicateKey(PersistenceError):
    """A unique constraint rejected the write."""


class IdExhausted(TechfestError):
    status_code = 500
    default_message = "Could not allocate a unique identifier"
