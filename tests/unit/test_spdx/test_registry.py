"""Unit tests for the license and exception registries."""

import pytest

from license_inspector.exceptions import RegistryError
from license_inspector.spdx import (
    EXCEPTIONS,
    LICENSES,
    LicenseRecord,
    LicenseRegistry,
    Strictness,
    parse,
)


class TestLicenseRegistry:
    """Test registry construction and lookups."""

    def test_rejects_case_insensitive_collision(self):
        """Test that 'MIT' and 'mit' cannot both be canonical ids."""
        with pytest.raises(RegistryError):
            LicenseRegistry([LicenseRecord("MIT", "MIT License"), LicenseRecord("mit", "mit")])

    def test_rejects_duplicate_ids(self):
        with pytest.raises(RegistryError):
            LicenseRegistry.from_rows([("MIT", "MIT License", False), ("MIT", "MIT", False)])

    def test_lookup_is_case_insensitive(self):
        assert LICENSES.for_id("apache-2.0").id == "Apache-2.0"
        assert "APACHE-2.0" in LICENSES
        assert "Not-A-License" not in LICENSES

    def test_lookup_by_full_name(self):
        assert LICENSES.for_id("MIT License").id == "MIT"

    def test_deprecated_ids(self):
        assert LICENSES.is_deprecated("GPL-2.0")
        assert not LICENSES.is_deprecated("GPL-2.0-only")
        assert "GPL-2.0" in LICENSES.ids()
        assert "GPL-2.0" not in LICENSES.ids(include_deprecated=False)

    def test_bundled_text_and_url(self):
        record = LICENSES.for_id("MIT")
        assert "Permission is hereby granted" in record.text
        assert record.url == "https://spdx.org/licenses/MIT.html"

    def test_exceptions(self):
        assert "Classpath-exception-2.0" in EXCEPTIONS
        assert "Classpath-exception-2.0" not in LICENSES

    def test_current_ids_from_license_index(self):
        """Test that ids beyond the bundled names are known."""
        assert len(LICENSES) > 500
        for text in [
            "BSD-3-Clause-LBNL",
            "Unicode-3.0",
            "MIT-Modern-Variant",
            "Apache-2.0 WITH Swift-exception",
        ]:
            parse(text, Strictness.ALLOW_CURRENT)

    def test_canonical_id(self):
        assert LICENSES.canonical_id("bsd-3-clause-lbnl") == "BSD-3-Clause-LBNL"
        assert EXCEPTIONS.canonical_id("CLASSPATH-EXCEPTION-2.0") == "Classpath-exception-2.0"
        assert LICENSES.canonical_id("Not-A-License") is None


class TestFromLicenseIndex:
    """Test building a registry from license index entries."""

    INDEX = [
        {
            "license_key": "mit",
            "spdx_license_key": "MIT",
            "other_spdx_license_keys": ["LicenseRef-MIT-Bootstrap"],
            "is_exception": False,
        },
        {
            "license_key": "gpl-2.0",
            "spdx_license_key": "GPL-2.0-only",
            "other_spdx_license_keys": ["GPL-2.0", "GPL 2.0"],
            "is_exception": False,
        },
        {
            "license_key": "old-license",
            "spdx_license_key": "Old-License-1.0",
            "is_exception": False,
            "is_deprecated": True,
        },
        {
            "license_key": "classpath-exception-2.0",
            "spdx_license_key": "Classpath-exception-2.0",
            "is_exception": True,
        },
    ]

    def test_registers_current_and_legacy_ids(self):
        registry = LicenseRegistry.from_license_index(
            self.INDEX, names=[("MIT", "MIT License")], deprecated=["Removed-1.0"]
        )

        assert registry.ids() == [
            "GPL-2.0",
            "GPL-2.0-only",
            "MIT",
            "Old-License-1.0",
            "Removed-1.0",
        ]
        assert registry.ids(include_deprecated=False) == ["GPL-2.0-only", "MIT"]
        assert registry.for_id("mit license").id == "MIT"

    def test_registers_exceptions_separately(self):
        registry = LicenseRegistry.from_license_index(self.INDEX, exceptions=True)
        assert registry.ids() == ["Classpath-exception-2.0"]

    def test_rejects_colliding_current_ids(self):
        index = self.INDEX + [
            {"license_key": "mit-2", "spdx_license_key": "mit", "is_exception": False}
        ]
        with pytest.raises(RegistryError, match="collide"):
            LicenseRegistry.from_license_index(index)
