"""
Shared data helpers used across modules.

These helpers are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def stringify_id(document: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """
    Return a copy of a stored document with its ObjectId rendered as a string.

    Leaves documents without an _id untouched.
    """
    if document is None:
        return None
    result = dict(document)
    if isinstance(result.get("_id"), ObjectId):
        result["_id"] = str(result["_id"])
    return result


class CamelModel(BaseModel):
    """
    Base model for records stored and exchanged with camelCase keys.

    Python code uses snake_case attributes; documents and JSON bodies
    use camelCase (isAdmin, createdAt, dutyPlace, ...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_document(self, **kwargs: Any) -> dict[str, Any]:
        """Dump with camelCase keys, as stored in the collection."""
        return self.model_dump(by_alias=True, **kwargs)
