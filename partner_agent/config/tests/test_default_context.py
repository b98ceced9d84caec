from unittest import IsolatedAsyncioTestCase

from ...cache.base import BaseCache
from ...crypto.verifier import AdminApiVerifier, BaseTrustVerifier
from ...documents.store import BaseDocumentStore, BaseSchemaStore
from ...documents.validator import DocumentValidator
from ...partner.lookup import PartnerLookup
from ...resolver.base import BaseDIDDocClient
from ...resolver.http_client import HttpDIDDocClient
from ..base import SettingsError
from ..default_context import DefaultContextBuilder
from ..injector import Injector
from ..settings import (
    DEFAULT_PARTNER_LOOKUP_TTL,
    DEFAULT_RESOLVER_ENDPOINT,
    DEFAULT_RESOLVER_TIMEOUT,
)


class TestDefaultContext(IsolatedAsyncioTestCase):
    async def test_build_context(self):
        """Test context init."""
        builder = DefaultContextBuilder()
        result = await builder.build_context()
        assert isinstance(result, Injector)

        for cls in (
            BaseCache,
            BaseDIDDocClient,
            BaseTrustVerifier,
            PartnerLookup,
            BaseDocumentStore,
            BaseSchemaStore,
            DocumentValidator,
        ):
            assert isinstance(result.inject(cls), cls)

        lookup = result.inject(PartnerLookup)
        assert lookup.cache is result.inject(BaseCache)
        assert lookup.client is result.inject(BaseDIDDocClient)
        assert lookup.verifier is result.inject(BaseTrustVerifier)
        assert lookup.ttl == DEFAULT_PARTNER_LOOKUP_TTL
        assert result.inject(BaseDIDDocClient).endpoint == DEFAULT_RESOLVER_ENDPOINT

    async def test_build_context_settings(self):
        builder = DefaultContextBuilder(
            settings={
                "resolver.endpoint": "https://resolver.example/",
                "verifier.admin_url": "http://agent:8031",
                "partner_lookup.cache_ttl": "60",
            }
        )
        result = await builder.build_context()

        client = result.inject(BaseDIDDocClient)
        assert isinstance(client, HttpDIDDocClient)
        assert client.endpoint == "https://resolver.example"
        verifier = result.inject(BaseTrustVerifier)
        assert isinstance(verifier, AdminApiVerifier)
        assert verifier._admin_url == "http://agent:8031"
        assert result.inject(PartnerLookup).ttl == 60

    async def test_build_context_keeps_caller_settings(self):
        builder = DefaultContextBuilder({"partner_lookup.cache_ttl": 5})
        result = await builder.build_context()
        assert result.inject(PartnerLookup).ttl == 5
        assert result.settings["resolver.timeout"] == DEFAULT_RESOLVER_TIMEOUT
        assert "resolver.timeout" not in builder.settings

    async def test_build_context_bad_integer(self):
        builder = DefaultContextBuilder({"resolver.timeout": "soon"})
        with self.assertRaises(SettingsError):
            await builder.build_context()
