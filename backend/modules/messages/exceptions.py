"""
Messages module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class InvalidEmailError(ValidationError):
    """Raised when an email does not look like local@domain.tld."""

    def __init__(self, email: str):
        super().__init__(
            "Please provide a valid email address",
            code="INVALID_EMAIL",
            details={"email": email},
        )


class MessageNotFoundError(NotFoundError):
    """Raised when a message id does not resolve."""

    def __init__(self, message_id: str):
        super().__init__(
            "Message not found",
            code="MESSAGE_NOT_FOUND",
            details={"message_id": message_id},
        )


class NoMessageUpdateFieldsError(ValidationError):
    """Raised when an update carries neither status nor isRead."""

    def __init__(self):
        super().__init__(
            "No valid update fields provided",
            code="NO_UPDATE_FIELDS",
        )
