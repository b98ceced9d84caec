"""Build indy requested-credentials structures from matching wallet credentials."""

import logging
from typing import Iterable, Mapping, Optional, Sequence

from .models import FulfillmentRequest, MatchingCredential, PresentationExchangeRecord

LOGGER = logging.getLogger(__name__)


def match_referent(
    matching_credentials: Sequence[MatchingCredential], referent: str
) -> Optional[str]:
    """
    Return the id of the first credential that lists the referent.

    Only the first listing credential is considered. When it carries no
    credential id the referent stays unanswered.
    """
    for cred in matching_credentials:
        if referent in cred.presentation_referents:
            return cred.credential_id or None
    return None


def _requested_referents(
    exchange: PresentationExchangeRecord, attr: str
) -> Iterable[str]:
    request = exchange.presentation_request
    referents: Optional[Mapping[str, dict]] = (
        getattr(request, attr, None) if request else None
    )
    return list(referents or {})


def accept_all(
    exchange: PresentationExchangeRecord,
    matching_credentials: Sequence[MatchingCredential],
) -> Optional[FulfillmentRequest]:
    """
    Auto-accept a proof request with every matching wallet credential.

    Each requested attribute and predicate referent is answered by the first
    credential in `matching_credentials` that lists it, in request order.
    Referents without a match are left out, so the result may only partially
    fulfill the request. Attributes are always revealed; predicates carry no
    timestamp, the agent fills that in.

    Args:
        exchange: the presentation exchange holding the proof request
        matching_credentials: wallet credentials with the referents they satisfy

    Returns:
        The fulfillment, or None when no referent could be matched

    """
    requested_attributes = {}
    for referent in _requested_referents(exchange, "requested_attributes"):
        cred_id = match_referent(matching_credentials, referent)
        if cred_id:
            requested_attributes[referent] = {"cred_id": cred_id, "revealed": True}
        else:
            LOGGER.debug("No credential matches attribute referent %s", referent)

    requested_predicates = {}
    for referent in _requested_referents(exchange, "requested_predicates"):
        cred_id = match_referent(matching_credentials, referent)
        if cred_id:
            requested_predicates[referent] = {"cred_id": cred_id}
        else:
            LOGGER.debug("No credential matches predicate referent %s", referent)

    if not requested_attributes and not requested_predicates:
        return None

    return FulfillmentRequest(
        requested_attributes=requested_attributes,
        requested_predicates=requested_predicates,
    )
