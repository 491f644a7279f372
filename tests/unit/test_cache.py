"""Unit tests for the resolved license info cache."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from license_inspector.cache import ResolvedLicenseInfoCache
from license_inspector.models import Identifier, ResolvedLicenseInfo


@pytest.fixture
def cache() -> ResolvedLicenseInfoCache:
    return ResolvedLicenseInfoCache()


class TestResolvedLicenseInfoCache:
    """Test cache operations."""

    def test_get_miss(self, cache, package_id):
        assert cache.get(package_id) is None

    def test_get_or_compute_stores_result(self, cache, package_id, mocker):
        """Test that the computation runs only once per identifier."""
        compute = mocker.Mock(side_effect=lambda key: ResolvedLicenseInfo(key, ()))

        first = cache.get_or_compute(package_id, compute)
        second = cache.get_or_compute(package_id, compute)

        assert first is second
        assert cache.get(package_id) is first
        compute.assert_called_once_with(package_id)
        assert cache.info() == {"count": 1, "hits": 1, "misses": 1}

    def test_first_stored_result_wins(self, cache, package_id):
        """Test that a result stored during a computation is kept."""
        stored = ResolvedLicenseInfo(package_id, ())

        def compute(key):
            cache.get_or_compute(key, lambda k: stored)
            return ResolvedLicenseInfo(key, ())

        assert cache.get_or_compute(package_id, compute) is stored

    def test_errors_are_not_cached(self, cache, package_id):
        def compute(key):
            raise RuntimeError("provider failed")

        with pytest.raises(RuntimeError):
            cache.get_or_compute(package_id, compute)
        assert package_id not in cache

    def test_clear_single_entry(self, cache, package_id):
        other = Identifier("PyPI", "", "urllib3", "2.0.0")
        cache.get_or_compute(package_id, lambda key: ResolvedLicenseInfo(key, ()))
        cache.get_or_compute(other, lambda key: ResolvedLicenseInfo(key, ()))

        cache.clear(package_id)

        assert package_id not in cache
        assert other in cache

    def test_clear_all(self, cache, package_id):
        cache.get_or_compute(package_id, lambda key: ResolvedLicenseInfo(key, ()))
        cache.clear()
        assert len(cache) == 0

    def test_counters_under_concurrent_access(self, cache):
        """Test that every lookup from many threads is counted."""
        ids = [Identifier("PyPI", "", f"package-{i % 10}", "1.0") for i in range(1000)]

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(
                executor.map(
                    lambda id: cache.get_or_compute(id, lambda key: ResolvedLicenseInfo(key, ())),
                    ids,
                )
            )

        info = cache.info()
        assert info["count"] == 10
        assert info["hits"] + info["misses"] == 1000
        assert info["misses"] >= 10
