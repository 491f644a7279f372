"""SPDX license expressions, registries and mappings.

This package provides the expression grammar (parsing, validation,
decomposition and canonical printing), the bundled license and exception
registries, and the tables that map non-canonical license names to SPDX
expressions.
"""

from license_inspector.spdx.declared import DeclaredLicenseProcessor, ProcessedDeclaredLicense
from license_inspector.spdx.expression import (
    SpdxCompoundExpression,
    SpdxExpression,
    SpdxOperator,
    SpdxSingleLicense,
    Strictness,
)
from license_inspector.spdx.mapping import (
    ALIAS_MAPPING,
    DECLARED_LICENSE_MAPPING,
    DEPRECATED_MAPPING,
    LicenseMapping,
    canonicalize_ids,
    map_deprecated_ids,
    map_license,
)
from license_inspector.spdx.parser import parse, parse_or_issue, tokenize
from license_inspector.spdx.registry import EXCEPTIONS, LICENSES, LicenseRecord, LicenseRegistry

__all__ = [
    "ALIAS_MAPPING",
    "DECLARED_LICENSE_MAPPING",
    "DEPRECATED_MAPPING",
    "EXCEPTIONS",
    "LICENSES",
    "DeclaredLicenseProcessor",
    "LicenseMapping",
    "LicenseRecord",
    "LicenseRegistry",
    "ProcessedDeclaredLicense",
    "SpdxCompoundExpression",
    "SpdxExpression",
    "SpdxOperator",
    "SpdxSingleLicense",
    "Strictness",
    "canonicalize_ids",
    "map_deprecated_ids",
    "map_license",
    "parse",
    "parse_or_issue",
    "tokenize",
]
