"""
Redaction of user records before they leave the service.
"""

from typing import Any

from shared.models import stringify_id

# Credentials that must never appear in a response
SENSITIVE_USER_FIELDS = frozenset({"password", "firebaseUID"})


def redact(user: dict[str, Any]) -> dict[str, Any]:
    """
    Build the public view of a stored user.

    Drops the password and external-auth identifier and passes every
    other field through, including _id and isAdmin. Never mutates
    its argument.
    """
    public = stringify_id(user) or {}
    return {key: value for key, value in public.items() if key not in SENSITIVE_USER_FIELDS}
