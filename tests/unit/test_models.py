import pytest

from license_inspector.models import (
    CopyrightFinding,
    Identifier,
    LicenseSource,
    Provenance,
    ResolvedLicense,
    ResolvedLicenseInfo,
    ResolvedCopyright,
    ResolvedLicenseLocation,
    TextLocation,
)
from license_inspector.spdx import SpdxSingleLicense


def test_identifier_from_coordinates():
    """Test that coordinates are split into the four components."""
    id = Identifier.from_coordinates("Maven:org.apache:commons-lang3:3.12.0")
    assert id == Identifier("Maven", "org.apache", "commons-lang3", "3.12.0")
    assert id.to_coordinates() == "Maven:org.apache:commons-lang3:3.12.0"


def test_identifier_from_short_coordinates():
    """Test that missing components become empty strings."""
    assert Identifier.from_coordinates("PyPI::requests") == Identifier("PyPI", "", "requests", "")


def test_identifier_ordering_is_lexicographic():
    """Test that identifiers sort by type, namespace, name and version."""
    ids = [
        Identifier("PyPI", "", "b", "1"),
        Identifier("Maven", "z", "a", "1"),
        Identifier("PyPI", "", "a", "2"),
        Identifier("PyPI", "", "a", "10"),
    ]
    assert sorted(ids) == [ids[1], ids[3], ids[2], ids[0]]


def test_text_location_rejects_inverted_lines():
    """Test that a start line after the end line is rejected."""
    with pytest.raises(ValueError):
        TextLocation("LICENSE", 5, 1)


def test_text_location_rejects_empty_path():
    with pytest.raises(ValueError):
        TextLocation("", 1, 1)


def test_text_location_allows_unknown_lines():
    """Test that unknown line numbers are accepted for both ends."""
    location = TextLocation("LICENSE", TextLocation.UNKNOWN_LINE, TextLocation.UNKNOWN_LINE)
    assert location.span == 0


def test_provenance_str():
    assert str(Provenance.vcs("https://host/repo.git", "abc", "sub")) == "https://host/repo.git@abc/sub"
    assert str(Provenance.artifact("https://host/a.tar.gz")) == "https://host/a.tar.gz"


class TestResolvedLicenseInfo:
    """Test the query helpers of ResolvedLicenseInfo."""

    @pytest.fixture
    def info(self) -> ResolvedLicenseInfo:
        finding = CopyrightFinding("Copyright 2020 Jane Doe", TextLocation.at("LICENSE", 3))
        location = ResolvedLicenseLocation(
            Provenance.artifact("https://host/a.tar.gz"),
            "LICENSE",
            1,
            5,
            frozenset({ResolvedCopyright("Copyright 2020 Jane Doe", frozenset({finding}))}),
        )
        return ResolvedLicenseInfo(
            Identifier("PyPI", "", "a", "1.0"),
            (
                ResolvedLicense(SpdxSingleLicense("MIT"), frozenset({LicenseSource.CONCLUDED})),
                ResolvedLicense(
                    SpdxSingleLicense("Apache-2.0"),
                    frozenset({LicenseSource.DETECTED}),
                    locations=frozenset({location}),
                ),
            ),
        )

    def test_get_by_value_and_string(self, info):
        """Test that licenses can be looked up by value or by string."""
        assert info.get(SpdxSingleLicense("MIT")) is info.licenses[0]
        assert info.get("Apache-2.0") is info.licenses[1]
        assert info.get("BSD-3-Clause") is None

    def test_filter_by_source(self, info):
        assert info.filter([LicenseSource.DETECTED]) == [info.licenses[1]]

    def test_license_ids_and_copyrights(self, info):
        assert info.license_ids() == ["Apache-2.0", "MIT"]
        assert info.copyright_statements() == ["Copyright 2020 Jane Doe"]
        assert len(info) == 2
