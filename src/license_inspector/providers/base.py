"""Base interface for license info providers.

Providers supply the raw license evidence of a package: the concluded license,
the declared licenses from the package manifest and the findings of source
code scans. They are the only place where the resolver may block on I/O.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from license_inspector.models import (
    CopyrightFinding,
    Identifier,
    Issue,
    LicenseFinding,
    Provenance,
)
from license_inspector.spdx import ProcessedDeclaredLicense, SpdxExpression


@dataclass(frozen=True)
class ConcludedLicenseInfo:
    """The license concluded by a human curator, if any."""

    concluded_license: Optional[SpdxExpression] = None


@dataclass(frozen=True)
class DeclaredLicenseInfo:
    """The declared licenses of a package.

    Attributes:
        licenses: The raw strings found in the manifest.
        processed: The mapping of these strings to SPDX expressions.
    """

    licenses: frozenset[str] = frozenset()
    processed: ProcessedDeclaredLicense = field(default_factory=ProcessedDeclaredLicense)


@dataclass(frozen=True)
class Findings:
    """The scan findings of one provenance.

    Attributes:
        provenance: Where the scanned files came from.
        licenses: License findings in the scanned files.
        copyrights: Copyright findings in the scanned files.
    """

    provenance: Provenance
    licenses: frozenset[LicenseFinding] = frozenset()
    copyrights: frozenset[CopyrightFinding] = frozenset()


@dataclass(frozen=True)
class DetectedLicenseInfo:
    findings: tuple[Findings, ...] = ()


@dataclass(frozen=True)
class LicenseInfo:
    """All raw license evidence of one package.

    Attributes:
        id: The identifier of the package.
        concluded_license_info: Curated license.
        declared_license_info: Manifest licenses.
        detected_license_info: Scan findings per provenance.
        issues: Problems encountered while reading the evidence.
    """

    id: Identifier
    concluded_license_info: ConcludedLicenseInfo = field(default_factory=ConcludedLicenseInfo)
    declared_license_info: DeclaredLicenseInfo = field(default_factory=DeclaredLicenseInfo)
    detected_license_info: DetectedLicenseInfo = field(default_factory=DetectedLicenseInfo)
    issues: tuple[Issue, ...] = ()


class LicenseInfoProvider(ABC):
    """Abstract base class for license info providers.

    Implementations must not modify shared state in get(), the resolver may
    call it from several threads at once.
    """

    @abstractmethod
    def get(self, id: Identifier) -> LicenseInfo:
        """Return the raw license evidence of a package.

        Args:
            id: Identifier of the package.

        Returns:
            The evidence for the package.

        Raises:
            ProviderError: If the evidence cannot be obtained.
        """
        ...

    @property
    def name(self) -> str:
        """Return the provider name for logging."""
        return type(self).__name__
