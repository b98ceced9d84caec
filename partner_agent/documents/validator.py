"""
Validation of locally authored documents.

Documents are checked before they are stored, so that everything persisted
is in a defined state and no later stage has to validate again.
"""

import logging
from typing import Optional

from ..config.messages import get_message
from ..core.error import DocumentValidationError
from .models import CredentialType, MyDocument
from .store import BaseDocumentStore, BaseSchemaStore

LOGGER = logging.getLogger(__name__)


def _error(code: str, field: str = None, **params) -> DocumentValidationError:
    return DocumentValidationError(
        get_message(code, **params), error_code=code, field=field
    )


class DocumentValidator:
    """Validates new and edited documents against stored state."""

    def __init__(
        self, document_store: BaseDocumentStore, schema_store: BaseSchemaStore
    ):
        """Initialize DocumentValidator."""
        self.document_store = document_store
        self.schema_store = schema_store

    async def validate_new(self, document: MyDocument):
        """Validate a document that is about to be created."""
        await self._verify_only_one_org_profile(document)
        await self._validate_internal(document)

    async def validate_existing(
        self, existing: Optional[MyDocument], new_document: MyDocument
    ):
        """Validate an edit of `existing` into `new_document`."""
        if existing is None:
            raise _error(DocumentValidationError.DOCUMENT_NOT_FOUND)

        if existing.type != new_document.type:
            raise _error(DocumentValidationError.TYPE_CHANGED, field="type")

        await self._validate_internal(new_document)

    async def _validate_internal(self, document: MyDocument):
        if not document.schema_governed:
            return

        if not document.schema_id:
            raise _error(
                DocumentValidationError.SCHEMA_ID_MISSING, field="schema_id"
            )

        schema = await self.schema_store.get_schema_for(document.schema_id)
        if not schema:
            raise _error(
                DocumentValidationError.SCHEMA_NOT_FOUND,
                field=document.schema_id,
                id=document.schema_id,
            )

        # assuming flat structure
        attribute_names = schema.schema_attribute_names
        for name in document.document_data:
            if name not in attribute_names:
                LOGGER.debug(
                    "Attribute %s not declared by schema %s", name, schema.schema_id
                )
                raise _error(
                    DocumentValidationError.ATTRIBUTE_NOT_IN_SCHEMA,
                    field=name,
                    attr=name,
                )

    async def _verify_only_one_org_profile(self, document: MyDocument):
        if document.type != CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL:
            return
        for stored in await self.document_store.find_all():
            if stored.type == CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL:
                raise _error(
                    DocumentValidationError.PROFILE_ALREADY_EXISTS, field="type"
                )
