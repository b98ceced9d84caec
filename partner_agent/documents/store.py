"""Document and schema stores consulted by the document validator."""

import asyncio
from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence
from uuid import uuid4

from ..core.error import BaseError
from .models import CredentialType, MyDocument, SchemaInfo


class StorageError(BaseError):
    """Base class for document storage errors."""


class StorageNotFoundError(StorageError):
    """Record not found in storage."""


class StorageDuplicateError(StorageError):
    """Duplicate record found in storage."""


class BaseDocumentStore(ABC):
    """Abstract document store interface."""

    @abstractmethod
    async def find_all(self) -> Sequence[MyDocument]:
        """Return every stored document."""

    @abstractmethod
    async def get_document(self, document_id: str) -> Optional[MyDocument]:
        """Fetch a document by id, or None."""

    @abstractmethod
    async def add_document(self, document: MyDocument) -> MyDocument:
        """Persist a new document."""

    @abstractmethod
    async def update_document(self, document: MyDocument) -> MyDocument:
        """Replace an existing document."""

    def __repr__(self) -> str:
        """Human readable representation of this instance."""
        return "<{}>".format(self.__class__.__name__)


class BaseSchemaStore(ABC):
    """Abstract schema store interface."""

    @abstractmethod
    async def get_schema_for(self, schema_id: str) -> Optional[SchemaInfo]:
        """Fetch a schema by id, or None."""

    @abstractmethod
    async def add_schema(self, schema: SchemaInfo) -> SchemaInfo:
        """Register a schema."""

    def __repr__(self) -> str:
        """Human readable representation of this instance."""
        return "<{}>".format(self.__class__.__name__)


class InMemoryDocumentStore(BaseDocumentStore):
    """Basic in-memory document store.

    `add_document` rejects a second organizational profile while holding the
    store lock, which closes the window left between a validator's scan and
    the insert.
    """

    def __init__(self):
        """Initialize a `InMemoryDocumentStore` instance."""
        self.documents: Dict[str, MyDocument] = {}
        self._lock = asyncio.Lock()

    async def find_all(self) -> Sequence[MyDocument]:
        """Return every stored document."""
        return list(self.documents.values())

    async def get_document(self, document_id: str) -> Optional[MyDocument]:
        """Fetch a document by id, or None."""
        return self.documents.get(document_id)

    async def add_document(self, document: MyDocument) -> MyDocument:
        """Persist a new document, assigning an id when it has none."""
        async with self._lock:
            if not document.id:
                document.id = str(uuid4())
            if document.id in self.documents:
                raise StorageDuplicateError("Duplicate document")
            if document.type == CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL and any(
                doc.type == CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL
                for doc in self.documents.values()
            ):
                raise StorageDuplicateError("Organizational profile already stored")
            self.documents[document.id] = document
        return document

    async def update_document(self, document: MyDocument) -> MyDocument:
        """Replace an existing document."""
        async with self._lock:
            if document.id not in self.documents:
                raise StorageNotFoundError(f"Document {document.id} not found")
            self.documents[document.id] = document
        return document


class InMemorySchemaStore(BaseSchemaStore):
    """Basic in-memory schema store."""

    def __init__(self, schemas: Sequence[SchemaInfo] = None):
        """Initialize a `InMemorySchemaStore` instance."""
        self.schemas: Dict[str, SchemaInfo] = {
            schema.schema_id: schema for schema in schemas or ()
        }

    async def get_schema_for(self, schema_id: str) -> Optional[SchemaInfo]:
        """Fetch a schema by id, or None."""
        return self.schemas.get(schema_id)

    async def add_schema(self, schema: SchemaInfo) -> SchemaInfo:
        """Register a schema."""
        if schema.schema_id in self.schemas:
            raise StorageDuplicateError(f"Schema {schema.schema_id} already exists")
        self.schemas[schema.schema_id] = schema
        return schema
