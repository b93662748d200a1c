"""
Guards module exceptions.
"""

from shared.exceptions import NotFoundError


class GuardNotFoundError(NotFoundError):
    """Raised when a guard id does not resolve."""

    def __init__(self, guard_id: str):
        super().__init__(
            "Guard not found",
            code="GUARD_NOT_FOUND",
            details={"guard_id": guard_id},
        )
