"""Unit tests for license name mappings."""

import pytest

from license_inspector.exceptions import RegistryError
from license_inspector.spdx import (
    ALIAS_MAPPING,
    DECLARED_LICENSE_MAPPING,
    LICENSES,
    LicenseMapping,
    SpdxSingleLicense,
    canonicalize_ids,
    map_deprecated_ids,
    map_license,
    parse,
)


class TestLicenseMapping:
    """Test construction invariants of mappings."""

    def test_rejects_keys_differing_in_case(self):
        with pytest.raises(RegistryError, match="different capitalizations"):
            LicenseMapping.from_strings([("Apache2", "Apache-2.0"), ("APACHE2", "Apache-2.0")])

    def test_rejects_repeated_keys(self):
        with pytest.raises(RegistryError, match="more than once"):
            LicenseMapping.from_strings([("Apache2", "Apache-2.0"), ("Apache2", "MIT")])

    def test_rejects_canonical_ids(self):
        """Test that aliases cannot be plain canonical ids."""
        with pytest.raises(RegistryError, match="canonical"):
            LicenseMapping.from_strings([("mit", "MIT")], reject_ids_from=LICENSES)

    def test_allows_deprecated_ids_as_keys(self):
        mapping = LicenseMapping.from_strings([("GPL-2.0", "GPL-2.0-only")], reject_ids_from=LICENSES)
        assert mapping["gpl-2.0"] == SpdxSingleLicense("GPL-2.0-only")

    def test_values_use_registered_spelling(self):
        mapping = LicenseMapping.from_strings([("GPLv2 with CPE", "gpl-2.0-only with classpath-exception-2.0")])
        assert str(mapping["GPLv2 with CPE"]) == "GPL-2.0-only WITH Classpath-exception-2.0"

    def test_lookup(self):
        mapping = LicenseMapping.from_strings([("GPLv2 with CPE", "GPL-2.0-only WITH Classpath-exception-2.0")])
        assert mapping["gplv2 WITH cpe"] == parse("GPL-2.0-only WITH Classpath-exception-2.0")
        assert " GPLv2 with CPE " in mapping
        assert mapping.get("unknown") is None
        with pytest.raises(KeyError):
            mapping["unknown"]
        assert list(mapping) == ["GPLv2 with CPE"]

    def test_bundled_tables(self):
        assert len(ALIAS_MAPPING) > 0
        assert DECLARED_LICENSE_MAPPING["Apache License, Version 2.0"] == SpdxSingleLicense(
            "Apache-2.0"
        )

    def test_declared_table_urls_and_references(self):
        assert len(DECLARED_LICENSE_MAPPING) > 400
        assert DECLARED_LICENSE_MAPPING["http://www.apache.org/licenses/LICENSE-2.0"] == SpdxSingleLicense(
            "Apache-2.0"
        )
        assert DECLARED_LICENSE_MAPPING["Commons Clause"] == SpdxSingleLicense(
            "LicenseRef-scancode-commons-clause"
        )
        assert str(DECLARED_LICENSE_MAPPING["CDDL/GPLv2+CE"]) == (
            "CDDL-1.0 OR GPL-2.0-only WITH Classpath-exception-2.0"
        )


class TestMapLicense:
    """Test mapping of single license names."""

    def test_alias_lookup_is_case_insensitive(self):
        assert map_license("apache2") == map_license("APACHE2") == map_license("Apache2")
        assert map_license("Apache2") == SpdxSingleLicense("Apache-2.0")

    def test_alias_with_or_later(self):
        assert map_license("GPLv2+") == SpdxSingleLicense("GPL-2.0-or-later")

    def test_deprecated_ids(self):
        assert map_license("GPL-2.0") == SpdxSingleLicense("GPL-2.0-only")
        assert map_license("GPL-2.0", map_deprecated=False) == SpdxSingleLicense("GPL-2.0")
        assert map_license("GPL-2.0-with-classpath-exception") == parse(
            "GPL-2.0-only WITH Classpath-exception-2.0"
        )

    def test_canonical_ids(self):
        assert map_license("mit") == SpdxSingleLicense("MIT")
        assert map_license("Apache-2.0+") == SpdxSingleLicense("Apache-2.0", or_later=True)

    def test_unknown_names(self):
        assert map_license("Not a license") is None
        assert map_license("  ") is None


class TestMapDeprecatedIds:
    """Test replacing deprecated ids inside expressions."""

    def test_replaces_leaves(self):
        assert str(map_deprecated_ids(parse("GPL-2.0 OR LGPL-2.1+ AND MIT"))) == (
            "GPL-2.0-only OR LGPL-2.1-or-later AND MIT"
        )

    def test_keeps_exception(self):
        assert map_deprecated_ids(parse("GPL-2.0 WITH Classpath-exception-2.0")) == parse(
            "GPL-2.0-only WITH Classpath-exception-2.0"
        )

    def test_keeps_current_ids(self):
        expression = parse("MIT AND Apache-2.0")
        assert map_deprecated_ids(expression) == expression


class TestCanonicalizeIds:
    """Test spelling ids the way the registries do."""

    def test_licenses_and_exceptions(self):
        expression = parse("mit AND (apache-2.0 OR gpl-2.0-or-later WITH CLASSPATH-EXCEPTION-2.0)")
        assert str(canonicalize_ids(expression)) == (
            "MIT AND (Apache-2.0 OR GPL-2.0-or-later WITH Classpath-exception-2.0)"
        )

    def test_keeps_or_later(self):
        assert canonicalize_ids(parse("bsd-3-clause+")) == SpdxSingleLicense("BSD-3-Clause", or_later=True)

    def test_keeps_unknown_ids_and_references(self):
        expression = parse("Unknown-1.0 OR LicenseRef-custom")
        assert canonicalize_ids(expression) == expression
