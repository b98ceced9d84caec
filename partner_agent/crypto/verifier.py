"""Trust verification of signed partner profiles."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional

import aiohttp

from ..config.base import BaseSettings
from ..config.settings import DEFAULT_RESOLVER_TIMEOUT, DEFAULT_VERIFIER_ADMIN_URL
from ..did.presentation import VerifiablePresentation

LOGGER = logging.getLogger(__name__)


class BaseTrustVerifier(ABC):
    """Checks a signed structure against a base58 encoded public key."""

    @abstractmethod
    async def verify(
        self, public_key_base58: str, signed: VerifiablePresentation
    ) -> bool:
        """Return whether the signature on `signed` is valid for the key."""

    def __repr__(self) -> str:
        """Human readable representation of this instance."""
        return "<{}>".format(self.__class__.__name__)


class AdminApiVerifier(BaseTrustVerifier):
    """Delegates linked data proof verification to an agent's admin API."""

    def __init__(
        self,
        admin_url: Optional[str] = None,
        *,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize AdminApiVerifier."""
        self._admin_url = (admin_url or DEFAULT_VERIFIER_ADMIN_URL).rstrip("/")
        self._api_key = api_key
        self._timeout = timeout or DEFAULT_RESOLVER_TIMEOUT

    @classmethod
    def from_settings(cls, settings: BaseSettings) -> "AdminApiVerifier":
        """Create a verifier from the `verifier.*` settings."""
        return cls(
            settings.get_str("verifier.admin_url"),
            api_key=settings.get_str("verifier.api_key"),
            timeout=settings.get_int("resolver.timeout"),
        )

    async def verify(
        self, public_key_base58: str, signed: VerifiablePresentation
    ) -> bool:
        """Post the signed document and key to `/jsonld/verify`."""
        headers = {"X-API-Key": self._api_key} if self._api_key else None
        payload = {"verkey": public_key_base58, "doc": signed.serialize()}
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    f"{self._admin_url}/jsonld/verify", json=payload, headers=headers
                ) as resp:
                    if resp.status != 200:
                        LOGGER.warning(
                            "Signature verification request failed (%s): %s",
                            resp.status,
                            await resp.text(),
                        )
                        return False
                    result = await resp.json()
        except asyncio.TimeoutError:
            LOGGER.warning("Timed out verifying signature with %s", self._admin_url)
            return False
        except (aiohttp.ClientError, ValueError) as err:
            LOGGER.warning("Could not verify signature: %s", err)
            return False

        if not isinstance(result, dict):
            LOGGER.warning("Unexpected signature verification response: %s", result)
            return False
        if result.get("error"):
            LOGGER.warning("Signature verification error: %s", result["error"])
        return bool(result.get("valid"))
