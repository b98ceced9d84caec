"""Classes for configuring the default injection context."""

import logging
from typing import Mapping

from ..cache.base import BaseCache
from ..cache.in_memory import InMemoryCache
from ..crypto.verifier import AdminApiVerifier, BaseTrustVerifier
from ..documents.store import (
    BaseDocumentStore,
    BaseSchemaStore,
    InMemoryDocumentStore,
    InMemorySchemaStore,
)
from ..documents.validator import DocumentValidator
from ..partner.lookup import PartnerLookup
from ..resolver.base import BaseDIDDocClient
from ..resolver.http_client import HttpDIDDocClient
from .injector import Injector
from .settings import (
    DEFAULT_PARTNER_LOOKUP_TTL,
    DEFAULT_RESOLVER_ENDPOINT,
    DEFAULT_RESOLVER_TIMEOUT,
    DEFAULT_VERIFIER_ADMIN_URL,
    Settings,
)

LOGGER = logging.getLogger(__name__)


class DefaultContextBuilder:
    """Build the injector holding every core component."""

    def __init__(self, settings: Mapping[str, object] = None):
        self.settings = Settings(settings)

    async def build_context(self) -> Injector:
        """Build the base injector with every core component bound once."""
        LOGGER.debug("Building new injection context")

        injector = Injector(settings=self.settings)
        settings = injector.settings
        settings.set_default("resolver.endpoint", DEFAULT_RESOLVER_ENDPOINT)
        settings.set_default("resolver.timeout", DEFAULT_RESOLVER_TIMEOUT)
        settings.set_default("verifier.admin_url", DEFAULT_VERIFIER_ADMIN_URL)
        settings.set_default("partner_lookup.cache_ttl", DEFAULT_PARTNER_LOOKUP_TTL)

        # Shared in-memory cache
        cache = InMemoryCache()
        injector.bind_instance(BaseCache, cache)

        client = HttpDIDDocClient.from_settings(settings)
        injector.bind_instance(BaseDIDDocClient, client)

        verifier = AdminApiVerifier.from_settings(settings)
        injector.bind_instance(BaseTrustVerifier, verifier)

        injector.bind_instance(
            PartnerLookup, PartnerLookup.from_settings(settings, client, verifier, cache)
        )

        document_store = InMemoryDocumentStore()
        schema_store = InMemorySchemaStore()
        injector.bind_instance(BaseDocumentStore, document_store)
        injector.bind_instance(BaseSchemaStore, schema_store)
        injector.bind_instance(
            DocumentValidator, DocumentValidator(document_store, schema_store)
        )

        return injector
