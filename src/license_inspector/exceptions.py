"""Exception hierarchy for license_inspector.

Expression errors are reported per item by the pipelines that consume them,
graph construction errors fail fast, and provider errors are propagated to the
caller unchanged.
"""

from typing import Optional


class LicenseInspectorError(Exception):
    """Base class for all errors raised by license_inspector."""


class SpdxException(LicenseInspectorError):
    """Base class for errors concerning SPDX license expressions."""


class SpdxSyntaxError(SpdxException):
    """Raised when a license expression does not match the grammar.

    Attributes:
        expression: The complete text that failed to parse.
        fragment: The offending part of the text.
        position: Character offset of the fragment, if known.
    """

    def __init__(
        self,
        message: str,
        expression: str = "",
        fragment: str = "",
        position: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.expression = expression
        self.fragment = fragment
        self.position = position


class SpdxValidationError(SpdxException):
    """Raised when a syntactically valid expression violates a strictness level.

    Attributes:
        invalid_ids: The license or exception ids that were rejected.
    """

    def __init__(self, message: str, invalid_ids: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.invalid_ids = invalid_ids


class RegistryError(LicenseInspectorError):
    """Raised when a license, exception or alias table is inconsistent."""


class GraphConstructionError(LicenseInspectorError):
    """Raised when a dependency graph references nodes that do not exist."""


class ProviderError(LicenseInspectorError):
    """Raised by license info providers when evidence cannot be obtained."""
