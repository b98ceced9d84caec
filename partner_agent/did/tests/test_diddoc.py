from copy import deepcopy

import pytest

from ...models.base import BaseModelError
from ..diddoc import DEFAULT_VERIFICATION_KEY_TYPE, DIDDocument, Service
from . import DOC


def test_deserialize():
    doc = DIDDocument.deserialize(DOC)
    assert doc.id == "did:example:123"
    assert [vm.id for vm in doc.verification_method] == [
        "did:example:123#key-1",
        "did:example:123#key-2",
    ]
    assert doc.verification_method[0].type == DEFAULT_VERIFICATION_KEY_TYPE
    assert (
        doc.verification_method[0].public_key_base58
        == "H3C2AVvLMv6gmMNam3uVAjZpfkcJCwDwnZn6z3wXmqPV"
    )


def test_serialize_uses_json_ld_names():
    ser = DIDDocument.deserialize(DOC).serialize()
    assert ser["verificationMethod"][0]["publicKeyBase58"]
    assert ser["service"][1]["serviceEndpoint"] == "https://partner.example/profile"


def test_find_public_profile_url():
    doc = DIDDocument.deserialize(DOC)
    assert doc.find_public_profile_url() == "https://partner.example/profile"
    assert DIDDocument(id="did:example:456").find_public_profile_url() is None


def test_find_public_profile_url_ignores_structured_endpoint():
    doc = DIDDocument(
        id="did:example:456",
        service=[Service(type="profile", service_endpoint={"uri": "https://x"})],
    )
    assert doc.find_public_profile_url() is None


def test_has_aries_endpoint():
    assert DIDDocument.deserialize(DOC).has_aries_endpoint()
    doc = DIDDocument(
        id="did:example:456",
        service=[Service(type="profile", service_endpoint="https://x")],
    )
    assert not doc.has_aries_endpoint()
    doc.service.append(Service(type="IndyAgent", service_endpoint="https://y"))
    assert doc.has_aries_endpoint()


def test_empty_verification_methods():
    doc = DIDDocument.deserialize({"id": "did:example:456"})
    assert doc.verification_method == []
    assert doc.service == []


def test_legacy_public_key():
    legacy = deepcopy(DOC)
    legacy["publicKey"] = legacy.pop("verificationMethod")
    doc = DIDDocument.deserialize(legacy)
    assert len(doc.verification_method) == 2


def test_id_required():
    with pytest.raises(BaseModelError):
        DIDDocument.deserialize({"id": ""})
    with pytest.raises(BaseModelError):
        DIDDocument.deserialize({"service": []})


def test_undecodable_key_keeps_document():
    doc = deepcopy(DOC)
    doc["verificationMethod"][1] = {
        "id": "did:example:123#key-2",
        "type": "X25519KeyAgreementKey2019",
        "publicKeyBase58": "0OIl",
    }
    parsed = DIDDocument.deserialize(doc)
    assert [vm.id for vm in parsed.verification_method] == [
        "did:example:123#key-1",
        "did:example:123#key-2",
    ]
    assert parsed.verification_method[1].public_key_base58 == "0OIl"


def test_service_type_list():
    doc = deepcopy(DOC)
    doc["service"][0]["type"] = ["did-communication", "DIDCommMessaging"]
    doc["service"][1]["type"] = ["profile"]
    parsed = DIDDocument.deserialize(doc)
    assert parsed.find_public_profile_url() == "https://partner.example/profile"
    assert parsed.has_aries_endpoint()
    assert parsed.serialize()["service"][1]["type"] == ["profile"]


def test_service_type_invalid():
    doc = deepcopy(DOC)
    doc["service"][1]["type"] = {"name": "profile"}
    with pytest.raises(BaseModelError):
        DIDDocument.deserialize(doc)


def test_service_has_type():
    assert Service(type="profile").has_type("profile")
    assert Service(type=["LinkedDomains", "profile"]).has_type("IndyAgent", "profile")
    assert not Service(type=["LinkedDomains"]).has_type("profile")
    assert not Service().has_type("profile")
