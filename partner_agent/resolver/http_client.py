"""DID document client backed by a universal resolver over HTTP."""

import asyncio
import logging
from typing import Optional

import aiohttp
from pydid import DID

from ..config.base import BaseSettings
from ..config.settings import DEFAULT_RESOLVER_ENDPOINT, DEFAULT_RESOLVER_TIMEOUT
from ..did.diddoc import DIDDocument
from ..did.presentation import VerifiablePresentation
from ..models.base import BaseModelError
from .base import BaseDIDDocClient

LOGGER = logging.getLogger(__name__)


class HttpDIDDocClient(BaseDIDDocClient):
    """Universal resolver client with HTTP bindings."""

    def __init__(
        self,
        *,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize HttpDIDDocClient."""
        self._endpoint = (endpoint or DEFAULT_RESOLVER_ENDPOINT).rstrip("/")
        self._timeout = timeout or DEFAULT_RESOLVER_TIMEOUT

    @classmethod
    def from_settings(cls, settings: BaseSettings) -> "HttpDIDDocClient":
        """Create a client from the `resolver.*` settings."""
        return cls(
            endpoint=settings.get_str("resolver.endpoint"),
            timeout=settings.get_int("resolver.timeout"),
        )

    @property
    def endpoint(self) -> str:
        """Accessor for the universal resolver base url."""
        return self._endpoint

    async def _get_json(self, url: str) -> Optional[dict]:
        """GET a JSON document, returning None on any failure."""
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url) as resp:
                    if resp.status == 200:
                        return await resp.json(content_type=None)
                    text = await resp.text()
                    LOGGER.warning(
                        "Unexpected status from %s (%s): %s", url, resp.status, text
                    )
        except asyncio.TimeoutError:
            LOGGER.warning("Timed out after %ss fetching %s", self._timeout, url)
        except (aiohttp.ClientError, ValueError) as err:
            LOGGER.warning("Could not fetch %s: %s", url, err)
        return None

    async def resolve_did_document(self, did: str) -> Optional[DIDDocument]:
        """Resolve DID through the remote universal resolver."""
        if not DID.is_valid(did):
            LOGGER.warning("Not resolving malformed DID: %s", did)
            return None

        body = await self._get_json(f"{self._endpoint}/1.0/identifiers/{did}")
        if not isinstance(body, dict) or not isinstance(body.get("didDocument"), dict):
            return None
        try:
            did_doc = DIDDocument.deserialize(body["didDocument"])
        except BaseModelError as err:
            LOGGER.warning("Invalid did document for %s: %s", did, err.roll_up)
            return None
        LOGGER.debug("Retrieved doc: %s", did_doc)
        return did_doc

    async def resolve_public_profile(
        self, endpoint: str
    ) -> Optional[VerifiablePresentation]:
        """Fetch a partner's signed public profile."""
        body = await self._get_json(endpoint)
        if not isinstance(body, dict):
            return None
        try:
            return VerifiablePresentation.deserialize(body)
        except BaseModelError as err:
            LOGGER.warning("Invalid public profile at %s: %s", endpoint, err.roll_up)
            return None
