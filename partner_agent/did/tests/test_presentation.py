from copy import deepcopy

from ..presentation import (
    CREDENTIALS_CONTEXT_V1_URL,
    LDProof,
    VerifiablePresentation,
)
from . import PROFILE


def test_deserialize():
    presentation = VerifiablePresentation.deserialize(PROFILE)
    assert presentation.holder_id == "did:example:123"
    assert len(presentation.verifiable_credential) == 1
    assert isinstance(presentation.proof, LDProof)
    assert presentation.proof_verification_method == "did:example:123#key-1"


def test_serialize_keeps_unknown_members():
    profile = deepcopy(PROFILE)
    profile["custom"] = {"foo": "bar"}
    profile["proof"]["nonce"] = "1234"
    ser = VerifiablePresentation.deserialize(profile).serialize()
    assert ser["custom"] == {"foo": "bar"}
    assert ser["proof"]["nonce"] == "1234"
    assert ser["@context"] == [CREDENTIALS_CONTEXT_V1_URL]
    assert ser["proof"]["verificationMethod"] == "did:example:123#key-1"


def test_unsigned_presentation():
    profile = deepcopy(PROFILE)
    del profile["proof"]
    presentation = VerifiablePresentation.deserialize(profile)
    assert presentation.proof is None
    assert presentation.proof_verification_method == ""


def test_holder_as_object():
    presentation = VerifiablePresentation(holder={"id": "did:example:789"})
    assert presentation.holder_id == "did:example:789"
    assert VerifiablePresentation().holder_id is None


def test_serialize_is_unchanged_document():
    assert VerifiablePresentation.deserialize(PROFILE).serialize() == PROFILE

    minimal = {
        "type": ["VerifiablePresentation"],
        "holder": "did:example:123",
        "proof": {
            "type": "Ed25519Signature2018",
            "verificationMethod": "did:example:123#key-1",
            "jws": "eyJhbGciOiJFZERTQSJ9..c2ln",
        },
    }
    ser = VerifiablePresentation.deserialize(minimal).serialize()
    assert ser == minimal
    assert "@context" not in ser
    assert "verifiableCredential" not in ser


def test_string_context_and_type():
    profile = deepcopy(PROFILE)
    profile["@context"] = CREDENTIALS_CONTEXT_V1_URL
    profile["type"] = "VerifiablePresentation"
    assert VerifiablePresentation.deserialize(profile).serialize() == profile
