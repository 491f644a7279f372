"""Unit tests for StaticLicenseInfoProvider."""

import pytest

from license_inspector.exceptions import ProviderError
from license_inspector.models import Identifier, Provenance, TextLocation
from license_inspector.providers import StaticLicenseInfoProvider
from license_inspector.spdx import SpdxSingleLicense


class TestStaticLicenseInfoProvider:
    """Test serving evidence from memory and from JSON files."""

    def test_get(self, provider, package_id, sample_license_info):
        assert provider.get(package_id) is sample_license_info

    def test_unknown_id_raises(self, provider):
        with pytest.raises(ProviderError, match="No license evidence"):
            provider.get(Identifier("PyPI", "", "unknown", "1.0"))

    def test_name(self, provider):
        assert provider.name == "StaticLicenseInfoProvider"

    def test_from_json(self, evidence_file):
        provider = StaticLicenseInfoProvider.from_json(evidence_file)
        info = provider.get(Identifier("Maven", "com.example", "sample", "1.0.0"))

        assert info.concluded_license_info.concluded_license == SpdxSingleLicense("MIT")
        assert info.declared_license_info.licenses == frozenset({"BSD-3"})
        assert info.declared_license_info.processed.spdx_expression == SpdxSingleLicense(
            "BSD-3-Clause"
        )
        assert info.issues == ()

        (findings,) = info.detected_license_info.findings
        assert findings.provenance == Provenance.vcs(
            "https://github.com/example/sample.git", "v1.0.0"
        )
        (license,) = findings.licenses
        assert license.location == TextLocation("LICENSE", 1, 5)
        assert len(findings.copyrights) == 2

    def test_malformed_evidence_becomes_issues(self, evidence_file):
        """Test that bad expressions and unmapped licenses do not fail the record."""
        provider = StaticLicenseInfoProvider.from_json(evidence_file)
        info = provider.get(Identifier("PyPI", "", "broken", "0.1"))

        assert info.concluded_license_info.concluded_license is None
        assert [issue.source for issue in info.issues] == ["ConcludedLicense", "DeclaredLicense"]
        assert info.declared_license_info.processed.unmapped == frozenset({"Some Custom License"})

    def test_malformed_license_finding(self):
        info = StaticLicenseInfoProvider.parse_record(
            {
                "id": "PyPI::pkg:1.0",
                "findings": [
                    {
                        "provenance": {"url": "https://example.com/pkg-1.0.tar.gz"},
                        "licenses": [
                            {"license": "MIT OR", "path": "LICENSE", "start_line": 1},
                            {"license": "MIT", "path": "LICENSE", "start_line": 1},
                        ],
                    }
                ],
            }
        )

        (findings,) = info.detected_license_info.findings
        assert findings.provenance.kind == "artifact"
        assert len(findings.licenses) == 1
        assert [issue.source for issue in info.issues] == ["LicenseFinding"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            StaticLicenseInfoProvider.from_json(tmp_path / "missing.json")

    def test_invalid_records(self, tmp_path):
        path = tmp_path / "evidence.json"
        path.write_text('{"packages": [{"concluded_license": "MIT"}]}', encoding="utf-8")

        with pytest.raises(ProviderError, match="Invalid evidence record"):
            StaticLicenseInfoProvider.from_json(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "evidence.json"
        path.write_text("[", encoding="utf-8")

        with pytest.raises(ProviderError, match="Invalid JSON"):
            StaticLicenseInfoProvider.from_json(path)
