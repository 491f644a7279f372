"""Provider serving license evidence from memory or from a JSON file.

The JSON format lists one record per package::

    {
        "packages": [
            {
                "id": "PyPI::requests:2.31.0",
                "concluded_license": "Apache-2.0",
                "declared_licenses": ["Apache 2.0"],
                "findings": [
                    {
                        "provenance": {"kind": "artifact", "url": "https://..."},
                        "licenses": [
                            {"license": "Apache-2.0", "path": "LICENSE",
                             "start_line": 1, "end_line": 175}
                        ],
                        "copyrights": [
                            {"statement": "Copyright 2019 Kenneth Reitz",
                             "path": "LICENSE", "start_line": 3, "end_line": 3}
                        ]
                    }
                ]
            }
        ]
    }

Malformed license expressions in a record do not fail the whole record; they
are dropped and reported as issues of the package.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from license_inspector.exceptions import ProviderError
from license_inspector.models import (
    CopyrightFinding,
    Identifier,
    Issue,
    LicenseFinding,
    Provenance,
    TextLocation,
)
from license_inspector.providers.base import (
    ConcludedLicenseInfo,
    DeclaredLicenseInfo,
    DetectedLicenseInfo,
    Findings,
    LicenseInfo,
    LicenseInfoProvider,
)
from license_inspector.spdx import DeclaredLicenseProcessor, parse_or_issue

logger = logging.getLogger(__name__)


def _parse_location(data: dict[str, Any]) -> TextLocation:
    return TextLocation(
        data["path"],
        int(data.get("start_line", TextLocation.UNKNOWN_LINE)),
        int(data.get("end_line", data.get("start_line", TextLocation.UNKNOWN_LINE))),
    )


class StaticLicenseInfoProvider(LicenseInfoProvider):
    """Serves a fixed set of license evidence.

    Attributes:
        evidence: The evidence keyed by package identifier.
    """

    def __init__(self, evidence: Iterable[LicenseInfo]) -> None:
        self.evidence: dict[Identifier, LicenseInfo] = {}
        for info in evidence:
            if info.id in self.evidence:
                logger.warning("Ignoring duplicate evidence for %s", info.id)
                continue
            self.evidence[info.id] = info

    def get(self, id: Identifier) -> LicenseInfo:
        info = self.evidence.get(id)
        if info is None:
            raise ProviderError(f"No license evidence available for '{id}'.")
        return info

    @staticmethod
    def _parse_findings(data: dict[str, Any], issues: list[Issue]) -> Findings:
        provenance = Provenance(
            kind=data["provenance"].get("kind", "artifact"),
            url=data["provenance"]["url"],
            revision=data["provenance"].get("revision", ""),
            path=data["provenance"].get("path", ""),
        )

        licenses = set()
        for finding in data.get("licenses", []):
            expression, issue = parse_or_issue(finding["license"], source="LicenseFinding")
            if issue is not None:
                issues.append(issue)
                continue
            licenses.add(LicenseFinding(expression, _parse_location(finding)))

        copyrights = frozenset(
            CopyrightFinding(finding["statement"], _parse_location(finding))
            for finding in data.get("copyrights", [])
        )

        return Findings(provenance, frozenset(licenses), copyrights)

    @classmethod
    def parse_record(
        cls,
        data: dict[str, Any],
        declared_processor: Optional[DeclaredLicenseProcessor] = None,
    ) -> LicenseInfo:
        """Build the evidence of one package from its JSON record.

        Args:
            data: The record.
            declared_processor: Processor mapping the declared licenses. A
                default processor is used if None.

        Returns:
            The evidence, with malformed expressions reported as issues.
        """
        declared_processor = declared_processor or DeclaredLicenseProcessor()
        issues: list[Issue] = []

        concluded = None
        if data.get("concluded_license"):
            concluded, issue = parse_or_issue(
                data["concluded_license"], source="ConcludedLicense"
            )
            if issue is not None:
                issues.append(issue)

        declared = frozenset(data.get("declared_licenses", []))
        processed = declared_processor.process(declared)
        for unmapped in sorted(processed.unmapped):
            issues.append(
                Issue(
                    source="DeclaredLicense",
                    message=f"Could not map declared license '{unmapped}'.",
                )
            )

        findings = tuple(cls._parse_findings(f, issues) for f in data.get("findings", []))

        return LicenseInfo(
            id=Identifier.from_coordinates(data["id"]),
            concluded_license_info=ConcludedLicenseInfo(concluded),
            declared_license_info=DeclaredLicenseInfo(declared, processed),
            detected_license_info=DetectedLicenseInfo(findings),
            issues=tuple(issues),
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "StaticLicenseInfoProvider":
        """Load evidence from a JSON file.

        Args:
            path: Path of the evidence file.

        Returns:
            A provider serving the evidence of all packages in the file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ProviderError: If the file is not valid JSON or a record misses
                required fields.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ProviderError(f"Invalid JSON in {path}: {e}") from e

        processor = DeclaredLicenseProcessor()
        try:
            records = [cls.parse_record(record, processor) for record in data.get("packages", [])]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ProviderError(f"Invalid evidence record in {path}: {e!r}") from e

        logger.info("Loaded license evidence for %d packages from %s", len(records), path)
        return cls(records)
