"""
Base model classes for RoleScout data models.

Provides common fields and functionality shared across all models.
"""

import hashlib
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes (as returned by PyMongo) as UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def date_only(value: Any) -> Any:
    """
    Reduce a stored datetime to its calendar date.

    BSON has no date type, so date fields come back from PyMongo as
    datetimes, often with a time part left by the writer's timezone.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def derived_object_id(parent_id: Any, field: str, index: int) -> ObjectId:
    """Stable id for an embedded row stored without `_id`."""
    digest = hashlib.sha256(f"{parent_id}:{field}:{index}".encode()).digest()
    return ObjectId(digest[:12])


class PyObjectId(ObjectId):
    """Custom ObjectId type for Pydantic v2 compatibility with MongoDB."""

    @classmethod
    def __get_pydantic_core_schema__(cls, _source_type: Any, _handler: Any) -> Any:
        from pydantic_core import core_schema

        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(ObjectId),
                core_schema.chain_schema(
                    [
                        core_schema.str_schema(),
                        core_schema.no_info_plain_validator_function(cls.validate),
                    ]
                ),
            ],
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def validate(cls, value: Any) -> ObjectId:
        """Validate and convert string to ObjectId."""
        if isinstance(value, ObjectId):
            return value
        if isinstance(value, str) and ObjectId.is_valid(value):
            return ObjectId(value)
        raise ValueError(f"Invalid ObjectId: {value}")


class BaseDocument(BaseModel):
    """
    Base document model for MongoDB collections.

    Provides common fields and configuration for all database documents.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        use_enum_values=True,
    )

    id: Optional[PyObjectId] = Field(default=None, alias="_id")


class EmbeddedModel(BaseModel):
    """
    Base model for embedded documents (subdocuments).

    Use this for models that are embedded within other documents
    rather than stored in their own collection.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )


class EmbeddedEntity(EmbeddedModel):
    """Embedded document with its own identity (e.g. a casting call inside a project)."""

    id: PyObjectId = Field(default_factory=ObjectId, alias="_id")


class ResponseModel(BaseModel):
    """
    Base model for payloads handed to the API layer.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_response(self) -> dict[str, Any]:
        """Serialize with camelCase keys, JSON-safe values."""
        return self.model_dump(mode="json", by_alias=True)
