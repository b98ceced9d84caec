import pytest

from ...cache.base import BaseCache
from ...cache.in_memory import InMemoryCache
from ..base import InjectorError
from ..injector import Injector


@pytest.fixture
def injector():
    yield Injector({"resolver.endpoint": "https://resolver.example"})


def test_settings(injector):
    assert injector.settings["resolver.endpoint"] == "https://resolver.example"
    assert injector.settings.get_str("resolver.timeout") is None
    with pytest.raises(KeyError):
        injector.settings["resolver.timeout"]


def test_inject_bound(injector):
    cache = InMemoryCache()
    injector.bind_instance(BaseCache, cache)
    assert injector.inject(BaseCache) is cache


def test_inject_unbound(injector):
    assert injector.inject(BaseCache, required=False) is None
    with pytest.raises(InjectorError):
        injector.inject(BaseCache)


def test_bind_none(injector):
    with pytest.raises(ValueError):
        injector.bind_instance(BaseCache, None)


def test_inject_wrong_type(injector):
    injector.bind_instance(BaseCache, "not a cache")
    with pytest.raises(InjectorError):
        injector.inject(BaseCache)

    injector.enforce_typing = False
    assert injector.inject(BaseCache) == "not a cache"


def test_clear_binding(injector):
    injector.bind_instance(BaseCache, InMemoryCache())
    injector.clear_binding(BaseCache)
    assert injector.inject(BaseCache, required=False) is None
    injector.clear_binding(BaseCache)
