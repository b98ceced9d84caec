from ...did.diddoc import DIDDocument
from ...did.tests import DOC
from ..models import PartnerResult, TrustState


def test_trust_state_is_tri_state():
    assert PartnerResult(did="did:example:123").trust_state is TrustState.UNDETERMINED
    assert PartnerResult(valid=True).trust_state is TrustState.VERIFIED
    assert PartnerResult(valid=False).trust_state is TrustState.INVALID


def test_serialize_omits_unset_validity():
    partner = PartnerResult(
        did="did:example:123",
        aries_support=True,
        did_doc=DIDDocument.deserialize(DOC),
    )
    ser = partner.serialize()
    assert "valid" not in ser
    assert ser["ariesSupport"] is True
    assert ser["didDocument"]["id"] == "did:example:123"

    partner.valid = False
    assert partner.serialize()["valid"] is False


def test_round_trip():
    partner = PartnerResult.deserialize(
        {
            "did": "did:example:123",
            "valid": True,
            "label": "Partner Ltd.",
            "credentials": [
                {
                    "type": "ORGANIZATIONAL_PROFILE_CREDENTIAL",
                    "credentialData": {"legalName": "Partner Ltd."},
                }
            ],
        }
    )
    assert partner.valid is True
    assert partner.credentials[0].credential_data == {"legalName": "Partner Ltd."}
