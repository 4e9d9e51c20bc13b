import pytest

from objtree.core.config import get_settings


@pytest.fixture(autouse=True)
def settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(name="tree")
def tree_fixture():
    return {
        "name": "edge-01",
        "tags": ["wan", "dmz"],
        "ntp": {"servers": ["pool.ntp.org", "10.0.0.1"], "enabled": True},
        "interfaces": [{"name": "ge1", "mtu": 1500}, {"name": "ge2", "mtu": None}],
    }
