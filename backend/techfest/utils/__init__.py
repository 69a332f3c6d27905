from techfest.utils.hashing import generate_signature, verify_signature
from techfest.utils.validators import validate_name, validate_email, validate_mobile, check_form

__all__ = [
    "generate_signature", "verify_signature",
    "validate_name", "validate_email", "validate_mobile", "check_form",
]
