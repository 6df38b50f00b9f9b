"""Global configuration and fixtures for all pytest-based tests"""

from unittest import mock

import pytest

from logdate.util.locales import default_locale
from logdate.util.time import UTC, TimeParser


@pytest.fixture(name="utc_local_timezone")
def fixture_utc_local_timezone():
    """pins the platform timezone to UTC"""
    with mock.patch.object(TimeParser, "local_timezone", return_value=UTC):
        yield


@pytest.fixture(autouse=True)
def clear_default_locale_cache():
    """the platform locale is cached, tests that patch it must not leak"""
    default_locale.cache_clear()
    yield
    default_locale.cache_clear()
