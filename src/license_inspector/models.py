"""Core data models for license_inspector.

This module defines the value types shared by all components: package
identifiers, text locations and findings, the dependency tree model, and the
resolved license information produced by the resolver. All types are frozen
for hashability so they can be used as dictionary keys and set members.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Iterator, Mapping, Optional, Union

if TYPE_CHECKING:
    from license_inspector.spdx.expression import SpdxExpression, SpdxSingleLicense


@dataclass(frozen=True, order=True)
class Identifier:
    """Stable key of a project or package.

    Comparison and ordering are lexicographic over
    ``(type, namespace, name, version)``.

    Attributes:
        type: Package type or package manager name (e.g. "Maven", "PyPI").
        namespace: Group, organization or scope; may be empty.
        name: Package name.
        version: Package version; may be empty.
    """

    type: str
    namespace: str
    name: str
    version: str

    @classmethod
    def from_coordinates(cls, coordinates: str) -> "Identifier":
        """Parse the colon-separated ``type:namespace:name:version`` form.

        Missing trailing components are treated as empty strings, surplus
        colons are kept as part of the version.

        Args:
            coordinates: String such as "PyPI::requests:2.31.0".

        Returns:
            The parsed Identifier.
        """
        parts = coordinates.strip().split(":", 3)
        parts += [""] * (4 - len(parts))
        return cls(*parts)

    def to_coordinates(self) -> str:
        """Return the colon-separated string form of this identifier."""
        return ":".join((self.type, self.namespace, self.name, self.version))

    def __str__(self) -> str:
        return self.to_coordinates()


@dataclass(frozen=True, order=True)
class TextLocation:
    """A range of lines in a file.

    Attributes:
        path: Path of the file, relative to the root of its provenance.
        start_line: First line of the range (1-based).
        end_line: Last line of the range, inclusive.
    """

    UNKNOWN_LINE = -1

    path: str
    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("The path must not be empty.")

        unknown = self.start_line == self.UNKNOWN_LINE and self.end_line == self.UNKNOWN_LINE
        if not unknown and not 1 <= self.start_line <= self.end_line:
            raise ValueError(
                f"Invalid start or end line values: {self.start_line}-{self.end_line}."
            )

    @classmethod
    def at(cls, path: str, line: int) -> "TextLocation":
        """Create a location spanning a single line."""
        return cls(path, line, line)

    @property
    def span(self) -> int:
        """Number of lines covered beyond the first one."""
        return self.end_line - self.start_line


@dataclass(frozen=True)
class LicenseFinding:
    """A license detected at a specific location.

    Attributes:
        license: The detected license expression.
        location: Where the license was found.
    """

    license: "SpdxExpression"
    location: TextLocation


@dataclass(frozen=True, order=True)
class CopyrightFinding:
    """A copyright statement detected at a specific location.

    Attributes:
        statement: The raw statement text as reported by the scanner.
        location: Where the statement was found.
    """

    statement: str
    location: TextLocation


@dataclass(frozen=True, order=True)
class Provenance:
    """Where a scanned file tree came from.

    Attributes:
        kind: Either "vcs" for a checkout or "artifact" for a source archive.
        url: Repository or artifact URL.
        revision: VCS revision; empty for artifacts.
        path: Sub-path inside the repository; empty for the root.
    """

    kind: str
    url: str
    revision: str = ""
    path: str = ""

    @classmethod
    def vcs(cls, url: str, revision: str = "", path: str = "") -> "Provenance":
        return cls("vcs", url, revision, path)

    @classmethod
    def artifact(cls, url: str) -> "Provenance":
        return cls("artifact", url)

    def __str__(self) -> str:
        if self.kind == "vcs":
            suffix = f"@{self.revision}" if self.revision else ""
            sub_path = f"/{self.path}" if self.path else ""
            return f"{self.url}{suffix}{sub_path}"
        return self.url


class LicenseSource(str, Enum):
    """Where a resolved license was taken from."""

    CONCLUDED = "CONCLUDED"
    DECLARED = "DECLARED"
    DETECTED = "DETECTED"


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    HINT = "HINT"


@dataclass(frozen=True)
class Issue:
    """A diagnostic recorded while building or processing data.

    Attributes:
        source: Name of the component that reported the issue.
        message: Human-readable description.
        severity: How serious the issue is.
    """

    source: str
    message: str
    severity: Severity = Severity.ERROR


@dataclass(frozen=True)
class PackageReference:
    """A node of a legacy dependency tree.

    Each reference carries the references to its own dependencies, so a
    project's scopes form a tree of these objects.

    Attributes:
        id: Identifier of the referenced package.
        dependencies: Direct dependencies of the package in this scope.
        issues: Problems encountered while resolving this reference.
    """

    id: Identifier
    dependencies: tuple["PackageReference", ...] = ()
    issues: tuple[Issue, ...] = ()


@dataclass(frozen=True)
class Scope:
    """A named dependency scope of a project, e.g. "compile" or "test"."""

    name: str
    dependencies: tuple[PackageReference, ...] = ()


@dataclass(frozen=True)
class Project:
    """A project whose dependencies can be navigated.

    A project either carries its dependency trees directly in ``scopes``
    (legacy representation) or only lists ``scope_names`` whose
    dependencies live in a shared dependency graph.

    Attributes:
        id: Identifier of the project.
        definition_file_path: Path of the manifest defining the project.
        declared_licenses: License strings declared in the manifest.
        scopes: Dependency trees per scope.
        scope_names: Names of scopes stored in a dependency graph.
    """

    id: Identifier
    definition_file_path: str = ""
    declared_licenses: frozenset[str] = frozenset()
    scopes: tuple[Scope, ...] = ()
    scope_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedCopyright:
    """A processed copyright statement with the findings it was built from.

    Attributes:
        statement: The representative statement of its group.
        original_findings: The raw findings grouped under the statement.
    """

    statement: str
    original_findings: frozenset[CopyrightFinding]


@dataclass(frozen=True)
class ResolvedLicenseLocation:
    """A detected license location with its matched copyrights."""

    provenance: Provenance
    path: str
    start_line: int
    end_line: int
    copyrights: frozenset[ResolvedCopyright] = frozenset()


@dataclass(frozen=True)
class ResolvedLicense:
    """A single license with all evidence supporting it for one package.

    Attributes:
        license: The single-license term.
        sources: Which kinds of evidence mention the license.
        original_declared_licenses: Declared strings that mapped to the license.
        locations: Detected locations of the license.
    """

    license: "SpdxSingleLicense"
    sources: frozenset[LicenseSource]
    original_declared_licenses: frozenset[str] = frozenset()
    locations: frozenset[ResolvedLicenseLocation] = frozenset()


@dataclass(frozen=True)
class ResolvedLicenseInfo:
    """The resolved license picture of one project or package.

    Instances are snapshots: they are built once by the resolver and never
    modified afterwards.

    Attributes:
        id: The identifier the information belongs to.
        licenses: One entry per distinct single license.
        unmatched_copyrights: Read-only mapping of provenance to the copyright
            findings that could not be associated with any license finding.
        issues: Problems encountered in the underlying evidence.
    """

    id: Identifier
    licenses: tuple[ResolvedLicense, ...]
    unmatched_copyrights: Mapping[Provenance, frozenset[CopyrightFinding]] = field(
        default_factory=dict
    )
    issues: tuple[Issue, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "unmatched_copyrights", MappingProxyType(dict(self.unmatched_copyrights))
        )

    def __iter__(self) -> Iterator[ResolvedLicense]:
        return iter(self.licenses)

    def __len__(self) -> int:
        return len(self.licenses)

    def get(self, license: Union[str, "SpdxSingleLicense"]) -> Optional[ResolvedLicense]:
        """Return the entry for a license, given as value or canonical string."""
        key = str(license)
        for resolved in self.licenses:
            if resolved.license == license or str(resolved.license) == key:
                return resolved
        return None

    def filter(self, sources: Iterable[LicenseSource]) -> list[ResolvedLicense]:
        """Return the licenses supported by any of the given sources."""
        wanted = set(sources)
        return [resolved for resolved in self.licenses if resolved.sources & wanted]

    def license_ids(self) -> list[str]:
        return sorted(str(resolved.license) for resolved in self.licenses)

    def copyright_statements(self) -> list[str]:
        """Return all processed copyright statements attached to any location."""
        return sorted(
            {
                copyright.statement
                for resolved in self.licenses
                for location in resolved.locations
                for copyright in location.copyrights
            }
        )
