import pytest

from hiccpy import tag_cache


@pytest.fixture(autouse=True)
def clear_tag_cache():
    tag_cache.clear()
    yield
    tag_cache.clear()
