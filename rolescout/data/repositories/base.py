"""
Base repository class providing common read operations.

All entity-specific repositories inherit from this base class. The
suggestion engine only ever reads, so only asynchronous reads live here.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Optional, TypeVar

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError

from rolescout.core.exceptions import StoreFailureError
from rolescout.data.database import get_database_manager
from rolescout.data.models.base import BaseDocument
from rolescout.utils.logger import get_logger

logger = get_logger(__name__)

# Type variable for document models
T = TypeVar("T", bound=BaseDocument)


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository providing common database operations.

    Subclasses must define the collection name and model class.
    """

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the MongoDB collection."""
        pass

    @property
    @abstractmethod
    def model_class(self) -> type[T]:
        """Pydantic model class for this repository."""
        pass

    def __init__(self) -> None:
        """Initialize repository with database connection."""
        self._db_manager = get_database_manager()

    # -------------------------------------------------------------------------
    # Collection Access
    # -------------------------------------------------------------------------

    def _get_async_collection(self) -> AsyncIOMotorCollection:
        """Get asynchronous collection instance."""
        return self._db_manager.get_async_collection(self.collection_name)

    # -------------------------------------------------------------------------
    # Document Conversion
    # -------------------------------------------------------------------------

    def _to_model(self, document: Optional[dict[str, Any]]) -> Optional[T]:
        """
        Convert MongoDB document to Pydantic model.

        Raises:
            StoreFailureError: if the stored document does not fit the model
        """
        if document is None:
            return None
        try:
            return self.model_class.model_validate(document)
        except ValidationError as exc:
            logger.error(
                f"{self.collection_name}: document {document.get('_id')} failed validation: {exc}"
            )
            raise StoreFailureError(f"{self.collection_name} document decoding") from exc

    def _to_models(self, documents: list[dict[str, Any]]) -> list[T]:
        """Convert list of MongoDB documents to Pydantic models."""
        return [self._to_model(doc) for doc in documents if doc is not None]

    @staticmethod
    def _to_object_id(id_value: str | ObjectId) -> ObjectId:
        """Convert string to ObjectId if needed."""
        if isinstance(id_value, ObjectId):
            return id_value
        return ObjectId(id_value)

    def _to_object_ids(self, id_values: Iterable[str | ObjectId]) -> list[ObjectId]:
        """Convert and de-duplicate a collection of ids, keeping order."""
        return list(dict.fromkeys(self._to_object_id(v) for v in id_values))

    # -------------------------------------------------------------------------
    # Asynchronous Reads
    # -------------------------------------------------------------------------

    async def get_by_id_async(self, id_value: str | ObjectId) -> Optional[T]:
        """Get a document by its ID asynchronously."""
        collection = self._get_async_collection()
        document = await collection.find_one({"_id": self._to_object_id(id_value)})
        return self._to_model(document)

    async def find_async(
        self,
        query: dict[str, Any],
        sort_by: str = "_id",
    ) -> list[T]:
        """
        Find all documents matching a query asynchronously.

        Results are sorted ascending on `sort_by` so repeated reads of
        unchanged data come back in the same order.
        """
        collection = self._get_async_collection()
        cursor = collection.find(query).sort(sort_by, 1)
        documents = await cursor.to_list(length=None)
        logger.debug(f"{self.collection_name}: {len(documents)} documents for {query}")
        return self._to_models(documents)

    async def get_many_async(self, ids: Iterable[str | ObjectId]) -> list[T]:
        """Get the documents with the given IDs asynchronously."""
        object_ids = self._to_object_ids(ids)
        if not object_ids:
            return []
        return await self.find_async({"_id": {"$in": object_ids}})
