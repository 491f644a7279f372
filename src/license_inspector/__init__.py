"""License Inspector - License compliance analysis core.

This package turns raw per-package license and copyright evidence into a
resolved, per-license picture of each package, and provides the SPDX
expression handling and dependency navigation it is built on.
"""

__version__ = "0.1.0"

from license_inspector.models import (
    CopyrightFinding,
    Identifier,
    LicenseFinding,
    LicenseSource,
    Provenance,
    ResolvedLicense,
    ResolvedLicenseInfo,
    TextLocation,
)
from license_inspector.resolver import LicenseInfoResolver

__all__ = [
    "__version__",
    "CopyrightFinding",
    "Identifier",
    "LicenseFinding",
    "LicenseInfoResolver",
    "LicenseSource",
    "Provenance",
    "ResolvedLicense",
    "ResolvedLicenseInfo",
    "TextLocation",
]
