import pytest

from ...documents.models import CredentialType
from ..models import PartnerCredential, PartnerResult
from ..util import (
    PartnerState,
    get_partner_profile,
    get_partner_profile_route,
    get_partner_state,
    get_partner_state_color,
)


def test_get_partner_profile_credential_data():
    partner = PartnerResult(
        did="did:example:123",
        credentials=[
            PartnerCredential(type=CredentialType.INDY, credential_data={"a": 1}),
            PartnerCredential(
                type=CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL,
                credential_data={"legalName": "Partner Ltd."},
            ),
        ],
    )
    assert get_partner_profile(partner) == {"legalName": "Partner Ltd."}


def test_get_partner_profile_document_data():
    partner = PartnerResult(
        did="did:example:123",
        credentials=[
            PartnerCredential(
                type=CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL,
                document_data={"legalName": "Draft Ltd."},
            )
        ],
    )
    assert get_partner_profile(partner) == {"legalName": "Draft Ltd."}


def test_get_partner_profile_absent():
    assert get_partner_profile(None) is None
    assert get_partner_profile(PartnerResult(did="did:example:123")) is None


@pytest.mark.parametrize(
    "state, incoming, expected",
    [
        ("request", False, PartnerState.CONNECTION_REQUEST_SENT),
        ("request", True, PartnerState.CONNECTION_REQUEST_RECEIVED),
        ("active", False, PartnerState.ACTIVE_OR_RESPONSE),
        ("response", True, PartnerState.ACTIVE_OR_RESPONSE),
        ("completed", False, PartnerState.ACTIVE_OR_RESPONSE),
        (PartnerState.PING_RESPONSE, False, PartnerState.ACTIVE_OR_RESPONSE),
        ("abandoned", False, PartnerState.ABANDONED),
        ("invitation", False, PartnerState.INVITATION),
        ("unheard_of", False, None),
        (None, False, None),
    ],
)
def test_get_partner_state(state, incoming, expected):
    assert get_partner_state(state, incoming) == expected


@pytest.mark.parametrize(
    "state, color",
    [
        ("request", "yellow"),
        ("abandoned", "red"),
        ("ping_no_response", "red"),
        (PartnerState.ACTIVE_OR_RESPONSE, "green"),
        ("active", "green"),
        ("ping_response", "green"),
        ("invitation", "grey"),
        ("unheard_of", "grey"),
        (None, "grey"),
    ],
)
def test_get_partner_state_color(state, color):
    assert get_partner_state_color(state) == color


def test_get_partner_profile_route():
    credential = PartnerCredential(
        id="cred-1",
        type=CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL,
        credential_data={"legalName": "Partner Ltd."},
        document_data={"legalName": "Draft Ltd."},
    )
    partner = PartnerResult(did="did:example:123", credentials=[credential])
    assert get_partner_profile_route(partner) == {
        "name": "Credential",
        "params": {"id": "cred-1"},
    }

    credential.credential_data = None
    assert get_partner_profile_route(partner) == {
        "name": "Document",
        "params": {"id": "cred-1"},
    }

    credential.document_data = None
    assert get_partner_profile_route(partner) is None


def test_get_partner_profile_route_without_profile():
    partner = PartnerResult(
        did="did:example:123",
        credentials=[
            PartnerCredential(
                id="cred-1", type=CredentialType.INDY, credential_data={"a": 1}
            )
        ],
    )
    assert get_partner_profile_route(partner) is None
    assert get_partner_profile_route(None) is None
