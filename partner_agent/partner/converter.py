"""Conversion of a signed public profile into a partner result."""

import logging
from typing import Optional

from ..did.presentation import VerifiablePresentation
from ..documents.models import CredentialType
from .models import PartnerCredential, PartnerResult

LOGGER = logging.getLogger(__name__)

ORG_PROFILE_VC_TYPE = "OrganizationalProfileCredential"
ORG_PROFILE_LABEL = "legalName"


def _issuer_id(credential: dict) -> Optional[str]:
    issuer = credential.get("indyIssuer") or credential.get("issuer")
    if isinstance(issuer, dict):
        return issuer.get("id")
    return issuer


def credential_to_partner_credential(credential: dict) -> PartnerCredential:
    """Map one verifiable credential of a profile to a partner credential."""
    types = credential.get("type") or []
    if isinstance(types, str):
        types = [types]
    subject = dict(credential.get("credentialSubject") or {})
    subject.pop("id", None)

    return PartnerCredential(
        id=credential.get("id"),
        type=(
            CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL
            if ORG_PROFILE_VC_TYPE in types
            else CredentialType.INDY
        ),
        issuer=_issuer_id(credential),
        schema_id=credential.get("schemaId"),
        credential_data=subject,
    )


def presentation_to_partner(
    presentation: VerifiablePresentation, did: Optional[str] = None
) -> PartnerResult:
    """Build a partner result from a public profile presentation.

    The partner DID is the presentation holder, else the subject of the first
    credential, else `did`.
    """
    credentials = [
        credential_to_partner_credential(vc)
        for vc in presentation.verifiable_credential or []
        if isinstance(vc, dict)
    ]

    partner_did = presentation.holder_id
    if not partner_did:
        for vc in presentation.verifiable_credential or []:
            subject = vc.get("credentialSubject") if isinstance(vc, dict) else None
            if isinstance(subject, dict) and subject.get("id"):
                partner_did = subject["id"]
                break
    if not partner_did:
        partner_did = did

    label = None
    for credential in credentials:
        if credential.type == CredentialType.ORGANIZATIONAL_PROFILE_CREDENTIAL:
            label = credential.credential_data.get(ORG_PROFILE_LABEL)
            break

    LOGGER.debug("Converted profile of %s with %d credentials", did, len(credentials))
    return PartnerResult(did=partner_did, label=label, credentials=credentials)
