"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from license_inspector.models import (
    CopyrightFinding,
    Identifier,
    LicenseFinding,
    Provenance,
    TextLocation,
)
from license_inspector.providers import (
    ConcludedLicenseInfo,
    DeclaredLicenseInfo,
    DetectedLicenseInfo,
    Findings,
    LicenseInfo,
    StaticLicenseInfoProvider,
)
from license_inspector.spdx import DeclaredLicenseProcessor, parse


@pytest.fixture
def package_id() -> Identifier:
    """Return the identifier of the sample package."""
    return Identifier("Maven", "com.example", "sample", "1.0.0")


@pytest.fixture
def provenance() -> Provenance:
    """Return the provenance of the sample package's scan."""
    return Provenance.vcs("https://github.com/example/sample.git", "v1.0.0")


@pytest.fixture
def sample_license_info(package_id: Identifier, provenance: Provenance) -> LicenseInfo:
    """Evidence with a concluded, a declared and a detected license."""
    return LicenseInfo(
        id=package_id,
        concluded_license_info=ConcludedLicenseInfo(parse("MIT")),
        declared_license_info=DeclaredLicenseInfo(
            frozenset({"BSD-3"}), DeclaredLicenseProcessor().process(["BSD-3"])
        ),
        detected_license_info=DetectedLicenseInfo(
            (
                Findings(
                    provenance,
                    licenses=frozenset(
                        {LicenseFinding(parse("Apache-2.0"), TextLocation("LICENSE", 1, 5))}
                    ),
                    copyrights=frozenset(
                        {CopyrightFinding("Copyright 2020 Jane Doe", TextLocation.at("LICENSE", 3))}
                    ),
                ),
            )
        ),
    )


@pytest.fixture
def provider(sample_license_info: LicenseInfo) -> StaticLicenseInfoProvider:
    """Return a provider serving the sample evidence."""
    return StaticLicenseInfoProvider([sample_license_info])


@pytest.fixture
def evidence_file(tmp_path: Path) -> Path:
    """Write an evidence file with two packages."""
    data = {
        "packages": [
            {
                "id": "Maven:com.example:sample:1.0.0",
                "concluded_license": "MIT",
                "declared_licenses": ["BSD-3"],
                "findings": [
                    {
                        "provenance": {
                            "kind": "vcs",
                            "url": "https://github.com/example/sample.git",
                            "revision": "v1.0.0",
                        },
                        "licenses": [
                            {
                                "license": "Apache-2.0",
                                "path": "LICENSE",
                                "start_line": 1,
                                "end_line": 5,
                            }
                        ],
                        "copyrights": [
                            {
                                "statement": "Copyright 2020 Jane Doe",
                                "path": "LICENSE",
                                "start_line": 3,
                                "end_line": 3,
                            },
                            {
                                "statement": "Copyright 2021 John Roe",
                                "path": "src/Main.java",
                                "start_line": 1,
                                "end_line": 1,
                            },
                        ],
                    }
                ],
            },
            {
                "id": "PyPI::broken:0.1",
                "concluded_license": "MIT AND (",
                "declared_licenses": ["Some Custom License"],
            },
        ]
    }
    path = tmp_path / "evidence.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
