"""Resolve a partner by DID and verify its signed public profile."""

import asyncio
import logging
from typing import Awaitable, Optional, Sequence, TypeVar

import base58

from ..cache.base import BaseCache
from ..config.base import BaseSettings
from ..config.logging import context_partner_did
from ..config.messages import get_message
from ..config.settings import DEFAULT_PARTNER_LOOKUP_TTL
from ..core.error import PartnerLookupError
from ..crypto.verifier import BaseTrustVerifier
from ..did.diddoc import DEFAULT_VERIFICATION_KEY_TYPE, VerificationMethod
from ..did.presentation import VerifiablePresentation
from ..resolver.base import BaseDIDDocClient
from .converter import presentation_to_partner
from .models import PartnerResult

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def _decodes(public_key_base58: Optional[str]) -> bool:
    if not public_key_base58:
        return False
    try:
        base58.b58decode(public_key_base58)
    except ValueError:
        return False
    return True


def match_key(
    verification_method: Optional[str],
    verification_methods: Optional[Sequence[VerificationMethod]],
    default_key_type: str = DEFAULT_VERIFICATION_KEY_TYPE,
) -> Optional[str]:
    """
    Find the public key in a DID document matching a proof's verification method.

    An exact id match wins. Otherwise the first verification method of the
    default key type is used, since proofs often omit or mis-reference the
    verification method. A selected key that is absent or does not decode as
    base58 yields no key.

    Args:
        verification_method: the verification method referenced by the proof
        verification_methods: the verification methods of the DID document
        default_key_type: key type to fall back to

    Returns:
        The matching base58 public key, or None when trust can not be determined

    """
    methods = verification_methods or []
    key = None
    if verification_method and methods:
        key = next((vm for vm in methods if vm.id == verification_method), None)
    if not key:
        key = next((vm for vm in methods if vm.type == default_key_type), None)

    if key:
        if _decodes(key.public_key_base58):
            return key.public_key_base58
        LOGGER.warning(
            "Key of %s is missing or not base58 encoded, trust is undetermined",
            key.id,
        )
        return None
    LOGGER.warning(
        "Expected at least one %s in the did document, but found none",
        default_key_type,
    )
    return None


class PartnerLookup:
    """Looks up partners and determines whether their public profile is trusted."""

    def __init__(
        self,
        client: BaseDIDDocClient,
        verifier: BaseTrustVerifier,
        cache: Optional[BaseCache] = None,
        *,
        ttl: Optional[int] = None,
        default_key_type: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize PartnerLookup.

        Args:
            client: resolves DID documents and public profiles
            verifier: checks profile signatures
            cache: optional cache of results, keyed by DID
            ttl: seconds a result stays cached
            default_key_type: key type used when the proof names no usable key
            timeout: optional limit in seconds for each collaborator call
        """
        self.client = client
        self.verifier = verifier
        self.cache = cache
        self.ttl = ttl or DEFAULT_PARTNER_LOOKUP_TTL
        self.default_key_type = default_key_type or DEFAULT_VERIFICATION_KEY_TYPE
        self.timeout = timeout

    @classmethod
    def from_settings(
        cls,
        settings: BaseSettings,
        client: BaseDIDDocClient,
        verifier: BaseTrustVerifier,
        cache: Optional[BaseCache] = None,
    ) -> "PartnerLookup":
        """Create a lookup from the `partner_lookup.*` settings."""
        return cls(
            client,
            verifier,
            cache,
            ttl=settings.get_int("partner_lookup.cache_ttl"),
            default_key_type=settings.get_str("partner_lookup.default_key_type"),
            timeout=settings.get_int("resolver.timeout"),
        )

    async def _call(self, awaitable: Awaitable[T], description: str) -> Optional[T]:
        """Await a collaborator, treating a timeout as an absent result."""
        if self.timeout is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, self.timeout)
        except asyncio.TimeoutError:
            LOGGER.warning("Timed out after %ss: %s", self.timeout, description)
            return None

    async def lookup_partner(self, did: str) -> PartnerResult:
        """
        Resolve a partner's DID document and verify its public profile.

        Results are cached keyed by the DID, so repeated lookups before the
        entry expires return the same object. Failures are never cached.

        Args:
            did: the partner's DID

        Returns:
            The partner result; `valid` is unset when trust is undetermined

        Raises:
            PartnerLookupError: no DID document, or no content at the
                advertised profile endpoint

        """
        token = context_partner_did.set(did)
        try:
            if self.cache is None:
                return await self._lookup_partner(did)
            async with self.cache.acquire(did) as entry:
                if entry.result:
                    LOGGER.debug("Partner %s served from cache", did)
                    return entry.result
                result = await self._lookup_partner(did)
                await entry.set_result(result, ttl=self.ttl)
                return result
        finally:
            context_partner_did.reset(token)

    async def _lookup_partner(self, did: str) -> PartnerResult:
        did_doc = await self._call(
            self.client.resolve_did_document(did), f"resolving did {did}"
        )
        if not did_doc:
            raise PartnerLookupError(
                get_message(PartnerLookupError.NO_DID_DOC, did=did),
                error_code=PartnerLookupError.NO_DID_DOC,
                did=did,
            )

        profile_url = did_doc.find_public_profile_url()
        if not profile_url:
            LOGGER.warning(
                "Did: %s has no profile endpoint, probably not a business partner",
                did,
            )
            return PartnerResult(
                did=did_doc.id,
                aries_support=did_doc.has_aries_endpoint(),
                did_doc=did_doc,
            )

        partner = await self._lookup_profile(did, profile_url, did_doc)
        partner.aries_support = did_doc.has_aries_endpoint()
        partner.did_doc = did_doc
        return partner

    async def _lookup_profile(self, did, endpoint, did_doc) -> PartnerResult:
        profile: Optional[VerifiablePresentation] = await self._call(
            self.client.resolve_public_profile(endpoint),
            f"fetching public profile from {endpoint}",
        )
        if not profile:
            raise PartnerLookupError(
                get_message(PartnerLookupError.NO_ENDPOINT, endpoint=endpoint),
                error_code=PartnerLookupError.NO_ENDPOINT,
                did=did,
                endpoint=endpoint,
            )

        partner = presentation_to_partner(profile, did)

        public_key = match_key(
            profile.proof_verification_method,
            did_doc.verification_method,
            self.default_key_type,
        )
        if public_key:
            valid = await self._call(
                self.verifier.verify(public_key, profile),
                f"verifying the profile of {did}",
            )
            if valid is not None:
                partner.valid = bool(valid)
        else:
            LOGGER.warning(
                "No key to verify the profile of %s, trust is undetermined", did
            )
        return partner
