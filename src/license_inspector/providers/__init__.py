"""Sources of raw per-package license evidence."""

from license_inspector.providers.base import (
    ConcludedLicenseInfo,
    DeclaredLicenseInfo,
    DetectedLicenseInfo,
    Findings,
    LicenseInfo,
    LicenseInfoProvider,
)
from license_inspector.providers.static import StaticLicenseInfoProvider

__all__ = [
    "ConcludedLicenseInfo",
    "DeclaredLicenseInfo",
    "DetectedLicenseInfo",
    "Findings",
    "LicenseInfo",
    "LicenseInfoProvider",
    "StaticLicenseInfoProvider",
]
