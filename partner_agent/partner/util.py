"""Presentation helpers for partners."""

from enum import Enum
from typing import Optional, Union

from ..documents.models import CredentialType
from .models import PartnerCredential, PartnerResult


class PartnerState(Enum):
    """Connection states of a partner, plus the folded display states."""

    INVITATION = "invitation"
    REQUEST = "request"
    RESPONSE = "response"
    ACTIVE = "active"
    COMPLETED = "completed"
    PING_RESPONSE = "ping_response"
    PING_NO_RESPONSE = "ping_no_response"
    ABANDONED = "abandoned"
    CONNECTION_REQUEST_SENT = "connection_request_sent"
    CONNECTION_REQUEST_RECEIVED = "connection_request_received"
    ACTIVE_OR_RESPONSE = "active_or_response"


ACTIVE_STATES = (
    PartnerState.ACTIVE,
    PartnerState.RESPONSE,
    PartnerState.COMPLETED,
    PartnerState.PING_RESPONSE,
)


def _profile_credential(
    partner: Optional[PartnerResult],
) -> Optional[PartnerCredential]:
    if not partner:
        return None
    return next(
        (
            credential
            for credential in partner.credentials
            if credential.type == CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL
        ),
        None,
    )


def get_partner_profile(partner: Optional[PartnerResult]) -> Optional[dict]:
    """Return the data of the partner's organizational profile, if published."""
    credential = _profile_credential(partner)
    if not credential:
        return None
    if credential.credential_data is not None:
        return credential.credential_data
    return credential.document_data


def get_partner_profile_route(partner: Optional[PartnerResult]) -> Optional[dict]:
    """
    Return the route showing the partner's organizational profile.

    A profile with credential data opens as a `Credential`, one with only
    document data as a `Document`. The route is None when neither is present.
    """
    credential = _profile_credential(partner)
    if not credential:
        return None
    if credential.credential_data is not None:
        return {"name": "Credential", "params": {"id": credential.id}}
    if credential.document_data is not None:
        return {"name": "Document", "params": {"id": credential.id}}
    return None


def _to_state(state: Union[str, PartnerState, None]) -> Optional[PartnerState]:
    if isinstance(state, PartnerState) or state is None:
        return state
    try:
        return PartnerState(state)
    except ValueError:
        return None


def get_partner_state(
    state: Union[str, PartnerState, None], incoming: bool = False
) -> Optional[PartnerState]:
    """
    Fold a connection state into the state shown for a partner.

    Requests are split by direction and all established states collapse
    into `ACTIVE_OR_RESPONSE`. Unknown states map to None.
    """
    state = _to_state(state)
    if state == PartnerState.REQUEST:
        return (
            PartnerState.CONNECTION_REQUEST_RECEIVED
            if incoming
            else PartnerState.CONNECTION_REQUEST_SENT
        )
    if state in ACTIVE_STATES:
        return PartnerState.ACTIVE_OR_RESPONSE
    return state


def get_partner_state_color(state: Union[str, PartnerState, None]) -> str:
    """Map a partner state to its traffic light color."""
    state = _to_state(state)
    if state == PartnerState.REQUEST:
        return "yellow"
    if state in (PartnerState.ABANDONED, PartnerState.PING_NO_RESPONSE):
        return "red"
    if state == PartnerState.ACTIVE_OR_RESPONSE or state in ACTIVE_STATES:
        return "green"
    return "grey"
