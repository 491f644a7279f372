"""Resolver building the resolved license information of packages.

The resolver pulls the raw evidence of a package from a provider and merges
concluded, declared and detected licenses into one entry per single license.
Detected licenses carry their locations together with the copyrights matched
to them. Results are cached per identifier.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from license_inspector.cache import ResolvedLicenseInfoCache
from license_inspector.copyright import CopyrightStatementsProcessor
from license_inspector.matcher import FindingsMatcher
from license_inspector.models import (
    CopyrightFinding,
    Identifier,
    LicenseSource,
    Provenance,
    ResolvedCopyright,
    ResolvedLicense,
    ResolvedLicenseInfo,
    ResolvedLicenseLocation,
)
from license_inspector.providers.base import LicenseInfo, LicenseInfoProvider
from license_inspector.spdx import SpdxSingleLicense

logger = logging.getLogger(__name__)


@dataclass
class _ResolvedLicenseBuilder:
    license: SpdxSingleLicense
    sources: set[LicenseSource] = field(default_factory=set)
    original_declared_licenses: set[str] = field(default_factory=set)
    locations: set[ResolvedLicenseLocation] = field(default_factory=set)

    def build(self) -> ResolvedLicense:
        return ResolvedLicense(
            license=self.license,
            sources=frozenset(self.sources),
            original_declared_licenses=frozenset(self.original_declared_licenses),
            locations=frozenset(self.locations),
        )


class LicenseInfoResolver:
    """Resolves and caches the license information of packages.

    Resolution is safe to run from several threads. The provider is the only
    collaborator that may block, and its errors propagate to the caller.

    Attributes:
        provider: Source of the raw license evidence.
        cache: Cache of resolved information.
        copyright_processor: Groups copyright statement variants.
        findings_matcher: Associates copyright with license findings.
    """

    def __init__(
        self,
        provider: LicenseInfoProvider,
        cache: Optional[ResolvedLicenseInfoCache] = None,
        copyright_processor: Optional[CopyrightStatementsProcessor] = None,
        findings_matcher: Optional[FindingsMatcher] = None,
    ) -> None:
        self.provider = provider
        self.cache = cache if cache is not None else ResolvedLicenseInfoCache()
        self.copyright_processor = copyright_processor or CopyrightStatementsProcessor()
        self.findings_matcher = findings_matcher or FindingsMatcher()

    def resolve_license_info(self, id: Identifier) -> ResolvedLicenseInfo:
        """Return the resolved license information of a package.

        The result is computed on the first call for an identifier and served
        from the cache afterwards.

        Args:
            id: Identifier of the package.

        Returns:
            The resolved license information.

        Raises:
            ProviderError: If the provider cannot supply the evidence.
        """
        return self.cache.get_or_compute(id, self._resolve)

    def _resolve(self, id: Identifier) -> ResolvedLicenseInfo:
        logger.debug("Resolving license info for %s using %s", id, self.provider.name)
        info = self.provider.get(id)

        builders: dict[SpdxSingleLicense, _ResolvedLicenseBuilder] = {}

        def builder_for(license: SpdxSingleLicense) -> _ResolvedLicenseBuilder:
            return builders.setdefault(license, _ResolvedLicenseBuilder(license))

        concluded = info.concluded_license_info.concluded_license
        if concluded is not None:
            for license in concluded.decompose():
                builder_for(license).sources.add(LicenseSource.CONCLUDED)

        processed = info.declared_license_info.processed
        if processed.spdx_expression is not None:
            for license in processed.spdx_expression.decompose():
                builder = builder_for(license)
                builder.sources.add(LicenseSource.DECLARED)
                builder.original_declared_licenses.update(processed.originals_for(license))

        unmatched_copyrights = self._add_detected_licenses(info, builder_for)

        resolved = ResolvedLicenseInfo(
            id=id,
            licenses=tuple(builder.build() for builder in builders.values()),
            unmatched_copyrights=unmatched_copyrights,
            issues=info.issues,
        )

        logger.debug(
            "Resolved %d licenses for %s (%d provenances with unmatched copyrights)",
            len(resolved.licenses),
            id,
            len(unmatched_copyrights),
        )

        return resolved

    def _add_detected_licenses(
        self, info: LicenseInfo, builder_for
    ) -> dict[Provenance, frozenset[CopyrightFinding]]:
        findings = info.detected_license_info.findings

        # Statements are grouped once over all provenances so the same holder
        # gets the same representative everywhere.
        grouping = self.copyright_processor.process(
            copyright.statement for f in findings for copyright in f.copyrights
        ).to_mapping()
        representatives = {
            variant: representative
            for representative, variants in grouping.items()
            for variant in variants
        }

        unmatched: dict[Provenance, set[CopyrightFinding]] = {}
        for f in findings:
            result = self.findings_matcher.match(f.licenses, f.copyrights)

            for license_finding, copyrights in result.matched_findings.items():
                by_statement: dict[str, set[CopyrightFinding]] = {}
                for copyright in copyrights:
                    statement = representatives.get(copyright.statement, copyright.statement)
                    by_statement.setdefault(statement, set()).add(copyright)

                location = ResolvedLicenseLocation(
                    provenance=f.provenance,
                    path=license_finding.location.path,
                    start_line=license_finding.location.start_line,
                    end_line=license_finding.location.end_line,
                    copyrights=frozenset(
                        ResolvedCopyright(statement, frozenset(originals))
                        for statement, originals in by_statement.items()
                    ),
                )

                for license in license_finding.license.decompose():
                    builder = builder_for(license)
                    builder.sources.add(LicenseSource.DETECTED)
                    builder.locations.add(location)

            if result.unmatched_copyrights:
                unmatched.setdefault(f.provenance, set()).update(result.unmatched_copyrights)

        return {provenance: frozenset(c) for provenance, c in unmatched.items()}

    async def resolve_batch(
        self, ids: Iterable[Identifier]
    ) -> dict[Identifier, Optional[ResolvedLicenseInfo]]:
        """Resolve multiple packages concurrently.

        Resolutions run on worker threads, so a slow provider does not block
        the event loop.

        Args:
            ids: Identifiers of the packages to resolve.

        Returns:
            Dictionary mapping each identifier to its resolved information
            (or None if resolution failed). All identifiers are guaranteed to
            have an entry in the result dictionary.
        """
        ids = list(dict.fromkeys(ids))
        logger.info("Starting batch resolution of %d packages", len(ids))

        tasks = [asyncio.to_thread(self.resolve_license_info, id) for id in ids]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        result_dict: dict[Identifier, Optional[ResolvedLicenseInfo]] = {}
        for id, result in zip(ids, results):
            if isinstance(result, Exception):
                logger.error("Exception resolving %s: %s", id, result)
                result_dict[id] = None
            else:
                result_dict[id] = result

        successful = sum(1 for info in result_dict.values() if info is not None)
        logger.info("Batch resolution complete: %d/%d successful", successful, len(ids))

        return result_dict
