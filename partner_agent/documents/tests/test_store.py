import asyncio

import pytest

from ..models import CredentialType, MyDocument, SchemaInfo
from ..store import (
    InMemoryDocumentStore,
    InMemorySchemaStore,
    StorageDuplicateError,
    StorageNotFoundError,
)


@pytest.fixture
def store():
    yield InMemoryDocumentStore()


def org_profile(**data):
    return MyDocument(
        type=CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL, document_data=data
    )


@pytest.mark.asyncio
async def test_add_get_find_all(store):
    doc = await store.add_document(
        MyDocument(type=CredentialType.INDY, schema_id="s", document_data={"a": 1})
    )
    assert doc.id
    assert await store.get_document(doc.id) is doc
    assert await store.get_document("missing") is None
    assert await store.find_all() == [doc]


@pytest.mark.asyncio
async def test_add_duplicate_id(store):
    await store.add_document(MyDocument(id="1", type=CredentialType.INDY))
    with pytest.raises(StorageDuplicateError):
        await store.add_document(MyDocument(id="1", type=CredentialType.INDY))


@pytest.mark.asyncio
async def test_concurrent_org_profiles(store):
    results = await asyncio.gather(
        store.add_document(org_profile(legalName="A")),
        store.add_document(org_profile(legalName="B")),
        return_exceptions=True,
    )
    assert sum(isinstance(res, StorageDuplicateError) for res in results) == 1
    assert len(await store.find_all()) == 1


@pytest.mark.asyncio
async def test_update(store):
    doc = await store.add_document(org_profile(legalName="A"))
    edited = org_profile(legalName="B")
    edited.id = doc.id
    await store.update_document(edited)
    assert (await store.get_document(doc.id)).document_data == {"legalName": "B"}
    with pytest.raises(StorageNotFoundError):
        await store.update_document(org_profile())


@pytest.mark.asyncio
async def test_schema_store():
    schemas = InMemorySchemaStore()
    schema = SchemaInfo(schema_id="s:2:n:1.0", schema_attribute_names=["a", "b"])
    await schemas.add_schema(schema)
    assert await schemas.get_schema_for("s:2:n:1.0") is schema
    assert await schemas.get_schema_for("other") is None
    with pytest.raises(StorageDuplicateError):
        await schemas.add_schema(schema)
