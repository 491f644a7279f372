"""Processing of declared licenses into SPDX expressions.

Declared licenses are the free-text license strings found in package
manifests. They are mapped one by one to SPDX expressions and the results are
combined with AND into the package's declared license expression.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Mapping, Optional

from license_expression import ExpressionError, get_spdx_licensing

from license_inspector.exceptions import SpdxException
from license_inspector.spdx.expression import (
    SpdxCompoundExpression,
    SpdxExpression,
    SpdxSingleLicense,
    Strictness,
    is_license_ref,
)
from license_inspector.spdx.mapping import (
    DECLARED_LICENSE_MAPPING,
    canonicalize_ids,
    map_deprecated_ids,
    map_license,
)
from license_inspector.spdx.parser import parse
from license_inspector.spdx.registry import LICENSES

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _spdx_licensing():
    """Return the license-expression library's SPDX licensing (loaded once)."""
    return get_spdx_licensing()


@dataclass(frozen=True)
class ProcessedDeclaredLicense:
    """The result of processing a package's declared licenses.

    Attributes:
        spdx_expression: All mapped expressions combined with AND, or None if
            no declared license could be mapped.
        mapped: Each successfully mapped declared string with its expression.
        unmapped: Declared strings that could not be mapped.
    """

    spdx_expression: Optional[SpdxExpression] = None
    mapped: Mapping[str, SpdxExpression] = field(default_factory=dict)
    unmapped: frozenset[str] = frozenset()

    def originals_for(self, license: SpdxSingleLicense) -> frozenset[str]:
        """Return the declared strings whose expression contains ``license``."""
        return frozenset(
            declared
            for declared, expression in self.mapped.items()
            if license in expression.decompose()
        )


class DeclaredLicenseProcessor:
    """Maps declared license strings to SPDX expressions.

    For each string, the declared license table is tried first, then the
    alias and deprecated id mappings, then the expression grammar, and finally
    the license-expression library as a last resort normalizer.
    """

    def __init__(self, use_license_expression: bool = True) -> None:
        self.use_license_expression = use_license_expression

    def map(self, declared_license: str) -> Optional[SpdxExpression]:
        """Map a single declared license string.

        Args:
            declared_license: The string as found in the manifest.

        Returns:
            The corresponding expression, or None if it cannot be mapped.
        """
        text = declared_license.strip()
        if not text:
            return None

        mapped = DECLARED_LICENSE_MAPPING.get(text)
        if mapped is not None:
            return mapped

        mapped = map_license(text)
        if mapped is not None:
            return mapped

        mapped = self._map_expression(text)
        if mapped is not None:
            return mapped

        if self.use_license_expression:
            return self.normalize_with_license_expression(text)

        return None

    def _map_expression(self, text: str) -> Optional[SpdxExpression]:
        try:
            expression = parse(text)
        except SpdxException:
            return None

        mapped = self._map_leaves(expression)
        if mapped is None or not mapped.is_valid(Strictness.ALLOW_DEPRECATED):
            return None

        return map_deprecated_ids(canonicalize_ids(mapped))

    def _map_leaves(self, expression: SpdxExpression) -> Optional[SpdxExpression]:
        if isinstance(expression, SpdxCompoundExpression):
            operands = [self._map_leaves(operand) for operand in expression.operands]
            if any(operand is None for operand in operands):
                return None
            return SpdxCompoundExpression(expression.operator, tuple(operands))

        if not isinstance(expression, SpdxSingleLicense):
            return None

        if is_license_ref(expression.id) or expression.id in LICENSES:
            return expression

        name = f"{expression.id}+" if expression.or_later else expression.id
        mapped = map_license(name)
        if isinstance(mapped, SpdxSingleLicense) and expression.exception:
            if mapped.exception:
                return None
            return mapped.with_exception(expression.exception)
        return mapped

    def normalize_with_license_expression(self, text: str) -> Optional[SpdxExpression]:
        """Normalize a string with the license-expression library.

        The library knows further spellings of license keys. Its output is
        parsed again and spelled with the registered ids.

        Returns:
            The normalized expression, or None if the library rejects the text.
        """
        text = text.strip()
        try:
            parsed = _spdx_licensing().parse(text, validate=True)
        except ExpressionError as e:
            logger.debug("license-expression could not parse '%s': %s", text, e)
            return None

        if parsed is None:
            return None

        try:
            expression = parse(str(parsed))
        except SpdxException as e:
            logger.debug("Could not re-parse normalized '%s' for '%s': %s", parsed, text, e)
            return None

        return map_deprecated_ids(canonicalize_ids(expression))

    def process(self, declared_licenses: Iterable[str]) -> ProcessedDeclaredLicense:
        """Map all declared licenses of a package.

        Args:
            declared_licenses: The declared license strings.

        Returns:
            The combined expression together with the per-string mapping and
            the strings that could not be mapped.
        """
        mapped: dict[str, SpdxExpression] = {}
        unmapped: set[str] = set()

        for declared_license in sorted(set(declared_licenses)):
            expression = self.map(declared_license)
            if expression is None:
                logger.warning("Could not map declared license '%s'", declared_license)
                unmapped.add(declared_license)
            else:
                mapped[declared_license] = expression

        combined: Optional[SpdxExpression] = None
        for expression in dict.fromkeys(mapped.values()):
            combined = expression if combined is None else combined.and_(expression)

        return ProcessedDeclaredLicense(combined, mapped, frozenset(unmapped))
