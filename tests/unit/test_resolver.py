"""Unit tests for LicenseInfoResolver."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from license_inspector.cache import ResolvedLicenseInfoCache
from license_inspector.exceptions import ProviderError
from license_inspector.models import (
    CopyrightFinding,
    Identifier,
    LicenseFinding,
    LicenseSource,
    Provenance,
    ResolvedCopyright,
    ResolvedLicenseLocation,
    TextLocation,
)
from license_inspector.providers import (
    ConcludedLicenseInfo,
    DeclaredLicenseInfo,
    DetectedLicenseInfo,
    Findings,
    LicenseInfo,
    LicenseInfoProvider,
    StaticLicenseInfoProvider,
)
from license_inspector.resolver import LicenseInfoResolver
from license_inspector.spdx import DeclaredLicenseProcessor, SpdxSingleLicense, parse


@pytest.fixture
def resolver(provider) -> LicenseInfoResolver:
    return LicenseInfoResolver(provider)


class TestResolveLicenseInfo:
    """Test merging the evidence of one package."""

    def test_end_to_end(self, resolver, package_id, provenance):
        """Test concluded, declared and detected licenses of one package."""
        info = resolver.resolve_license_info(package_id)

        assert info.id == package_id
        assert [str(resolved.license) for resolved in info.licenses] == [
            "MIT",
            "BSD-3-Clause",
            "Apache-2.0",
        ]

        mit, bsd, apache = info.licenses
        assert mit.sources == frozenset({LicenseSource.CONCLUDED})
        assert mit.locations == frozenset()

        assert bsd.sources == frozenset({LicenseSource.DECLARED})
        assert bsd.original_declared_licenses == frozenset({"BSD-3"})

        assert apache.sources == frozenset({LicenseSource.DETECTED})
        copyright = CopyrightFinding("Copyright 2020 Jane Doe", TextLocation.at("LICENSE", 3))
        assert apache.locations == frozenset(
            {
                ResolvedLicenseLocation(
                    provenance,
                    "LICENSE",
                    1,
                    5,
                    frozenset(
                        {ResolvedCopyright("Copyright 2020 Jane Doe", frozenset({copyright}))}
                    ),
                )
            }
        )
        assert info.unmatched_copyrights == {}

    def test_sources_are_merged(self, package_id, provenance):
        """Test that a license from several sources appears only once."""
        processed = DeclaredLicenseProcessor().process(["MIT"])
        info = LicenseInfo(
            id=package_id,
            concluded_license_info=ConcludedLicenseInfo(parse("MIT OR Apache-2.0")),
            declared_license_info=DeclaredLicenseInfo(frozenset({"MIT"}), processed),
            detected_license_info=DetectedLicenseInfo(
                (
                    Findings(
                        provenance,
                        licenses=frozenset(
                            {LicenseFinding(parse("MIT"), TextLocation("LICENSE", 1, 20))}
                        ),
                    ),
                )
            ),
        )
        resolved = LicenseInfoResolver(StaticLicenseInfoProvider([info])).resolve_license_info(
            package_id
        )

        assert len(resolved.licenses) == 2
        mit = resolved.get("MIT")
        assert mit.sources == frozenset(
            {LicenseSource.CONCLUDED, LicenseSource.DECLARED, LicenseSource.DETECTED}
        )
        assert mit.original_declared_licenses == frozenset({"MIT"})
        assert len(mit.locations) == 1

    def test_declared_ids_merge_with_concluded_ids(self, package_id):
        """Test that a lowercase declared id is merged with the concluded license."""
        info = StaticLicenseInfoProvider.parse_record(
            {
                "id": package_id.to_coordinates(),
                "concluded_license": "MIT",
                "declared_licenses": ["mit and apache-2.0"],
            }
        )
        resolved = LicenseInfoResolver(StaticLicenseInfoProvider([info])).resolve_license_info(
            package_id
        )

        assert [str(license.license) for license in resolved.licenses] == ["MIT", "Apache-2.0"]
        mit, apache = resolved.licenses
        assert mit.sources == frozenset({LicenseSource.CONCLUDED, LicenseSource.DECLARED})
        assert mit.original_declared_licenses == frozenset({"mit and apache-2.0"})
        assert apache.sources == frozenset({LicenseSource.DECLARED})

    def test_copyrights_are_grouped_across_provenances(self, package_id):
        vcs = Provenance.vcs("https://github.com/example/sample.git", "v1")
        artifact = Provenance.artifact("https://example.com/sample-1.0.tar.gz")
        first = CopyrightFinding("Copyright 2020 Jane Doe", TextLocation.at("LICENSE", 2))
        second = CopyrightFinding("Copyright (c) 2020 Jane Doe", TextLocation.at("LICENSE", 2))
        unmatched = CopyrightFinding("Copyright 2021 John Roe", TextLocation.at("README", 1))
        license = LicenseFinding(parse("MIT"), TextLocation("LICENSE", 1, 3))

        info = LicenseInfo(
            id=package_id,
            detected_license_info=DetectedLicenseInfo(
                (
                    Findings(vcs, frozenset({license}), frozenset({first, unmatched})),
                    Findings(artifact, frozenset({license}), frozenset({second})),
                )
            ),
        )
        resolved = LicenseInfoResolver(StaticLicenseInfoProvider([info])).resolve_license_info(
            package_id
        )

        (mit,) = resolved.licenses
        assert {location.provenance for location in mit.locations} == {vcs, artifact}
        assert resolved.copyright_statements() == ["Copyright (c) 2020 Jane Doe"]
        assert resolved.unmatched_copyrights == {vcs: frozenset({unmatched})}
        with pytest.raises(TypeError):
            resolved.unmatched_copyrights[artifact] = frozenset()

    def test_result_is_cached(self, provider, package_id, mocker):
        spy = mocker.spy(provider, "get")
        resolver = LicenseInfoResolver(provider)

        first = resolver.resolve_license_info(package_id)
        second = resolver.resolve_license_info(package_id)

        assert first is second
        spy.assert_called_once_with(package_id)

    def test_shared_cache(self, provider, package_id):
        cache = ResolvedLicenseInfoCache()
        LicenseInfoResolver(provider, cache=cache).resolve_license_info(package_id)
        assert package_id in cache

    def test_provider_errors_propagate(self, resolver):
        with pytest.raises(ProviderError):
            resolver.resolve_license_info(Identifier("PyPI", "", "unknown", "1.0"))

    def test_issues_are_kept(self, package_id):
        info = StaticLicenseInfoProvider.parse_record(
            {"id": package_id.to_coordinates(), "concluded_license": "MIT AND ("}
        )
        resolved = LicenseInfoResolver(StaticLicenseInfoProvider([info])).resolve_license_info(
            package_id
        )

        assert resolved.licenses == ()
        assert len(resolved.issues) == 1

    def test_concurrent_resolution_gives_equal_results(self, sample_license_info, package_id):
        """Test that racing first calls may compute twice but agree."""
        barrier = threading.Barrier(2)

        class SlowProvider(LicenseInfoProvider):
            def get(self, id: Identifier) -> LicenseInfo:
                barrier.wait(timeout=5)
                return sample_license_info

        resolver = LicenseInfoResolver(SlowProvider())

        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [executor.submit(resolver.resolve_license_info, package_id) for _ in range(2)]
            first, second = (future.result() for future in futures)

        assert first == second
        assert resolver.cache.get(package_id) == first


class TestResolveBatch:
    """Test concurrent batch resolution."""

    @pytest.mark.asyncio
    async def test_resolve_batch(self, resolver, package_id):
        unknown = Identifier("PyPI", "", "unknown", "1.0")

        results = await resolver.resolve_batch([package_id, unknown, package_id])

        assert list(results) == [package_id, unknown]
        assert results[package_id].id == package_id
        assert results[unknown] is None

    @pytest.mark.asyncio
    async def test_resolve_batch_logs_failures(self, resolver, caplog):
        unknown = Identifier("PyPI", "", "unknown", "1.0")

        await resolver.resolve_batch([unknown])

        assert "Exception resolving PyPI::unknown:1.0" in caplog.text

    @pytest.mark.asyncio
    async def test_resolve_batch_empty(self, resolver):
        assert await resolver.resolve_batch([]) == {}
