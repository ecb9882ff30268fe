import re
from typing import Any, Dict, Optional

# ECMAScript \s: includes the BOM, excludes the \x1c-\x1f separators and \x85.
WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

EMAIL_RE = re.compile(rf"[^{WHITESPACE}@]+@[^{WHITESPACE}@]+\.[^{WHITESPACE}@]+")

REQUIRED_FIELDS = ("name", "email", "message")

MISSING_FIELDS_ERROR = "Name, email, and message are required"
INVALID_EMAIL_ERROR = "Invalid email format"


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.fullmatch(email))


def validate_submission(payload: Any) -> Optional[str]:
    """Return the client-facing error for an invalid submission, or None.

    Payloads that are not JSON objects carry no fields. Non-string values
    count as missing.
    """
    fields: Dict[str, Any] = payload if isinstance(payload, dict) else {}

    for key in REQUIRED_FIELDS:
        value = fields.get(key)
        if not value or not isinstance(value, str):
            return MISSING_FIELDS_ERROR

    if not is_valid_email(fields["email"]):
        return INVALID_EMAIL_ERROR

    return None
