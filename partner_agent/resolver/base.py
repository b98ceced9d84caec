"""Base class for DID document and public profile resolution."""

from abc import ABC, abstractmethod
from typing import Optional

from ..core.error import BaseError
from ..did.diddoc import DIDDocument
from ..did.presentation import VerifiablePresentation


class ResolverError(BaseError):
    """Base class for resolver exceptions."""


class BaseDIDDocClient(ABC):
    """Resolves partner DIDs and their signed public profiles.

    Implementations return `None` for anything that could not be resolved,
    including timeouts, so that callers only ever see "absent".
    """

    @abstractmethod
    async def resolve_did_document(self, did: str) -> Optional[DIDDocument]:
        """Resolve the DID document of a DID."""

    @abstractmethod
    async def resolve_public_profile(
        self, endpoint: str
    ) -> Optional[VerifiablePresentation]:
        """Fetch the signed public profile published at an endpoint."""

    def __repr__(self) -> str:
        """Human readable representation of this instance."""
        return "<{}>".format(self.__class__.__name__)
