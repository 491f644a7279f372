"""Mappings from non-canonical license names to SPDX expressions.

Three tables are provided:

* ``ALIAS_MAPPING`` maps varied spellings of license ids ("Apache2", "BSD-3",
  "GPLv2+") to expressions. Plain SPDX ids are rejected as keys, aliases exist
  for non-canonical spellings only.
* ``DEPRECATED_MAPPING`` maps deprecated SPDX license and exception ids to
  their current expression.
* ``DECLARED_LICENSE_MAPPING`` maps free-text manifest strings that the
  expression grammar cannot parse to expressions.

All lookups are case-insensitive. The tables are built once at import time and
never modified afterwards.
"""

import logging
from typing import Iterable, Iterator, Optional

from license_inspector.exceptions import RegistryError
from license_inspector.spdx import data
from license_inspector.spdx.expression import (
    SpdxCompoundExpression,
    SpdxExpression,
    SpdxSingleLicense,
    is_license_ref,
)
from license_inspector.spdx.parser import parse
from license_inspector.spdx.registry import EXCEPTIONS, LICENSES, LicenseRegistry

logger = logging.getLogger(__name__)


def canonicalize_ids(expression: SpdxExpression) -> SpdxExpression:
    """Spell known license and exception ids the way the registries do.

    SPDX ids are case-insensitive, so "mit" and "MIT" denote the same
    license; after canonicalization they also compare equal. Unknown ids and
    license references are kept as they are.
    """
    if isinstance(expression, SpdxCompoundExpression):
        return SpdxCompoundExpression(
            expression.operator,
            tuple(canonicalize_ids(operand) for operand in expression.operands),
        )

    if not isinstance(expression, SpdxSingleLicense) or is_license_ref(expression.id):
        return expression

    exception = expression.exception
    if exception:
        exception = EXCEPTIONS.canonical_id(exception) or exception

    return SpdxSingleLicense(
        LICENSES.canonical_id(expression.id) or expression.id,
        or_later=expression.or_later,
        exception=exception,
    )


class LicenseMapping:
    """Case-insensitive, read-only mapping of names to SPDX expressions.

    Args:
        entries: Pairs of name and expression.
        name: Label used in error messages.
        reject_ids_from: If given, keys that are current (not deprecated) ids
            of this registry are rejected.

    Raises:
        RegistryError: If a key occurs more than once, in the same or in a
            different capitalization, or if a key is a rejected canonical id.
    """

    def __init__(
        self,
        entries: Iterable[tuple[str, SpdxExpression]],
        name: str = "mapping",
        reject_ids_from: Optional[LicenseRegistry] = None,
    ) -> None:
        self.name = name
        mapping: dict[str, tuple[str, SpdxExpression]] = {}
        same_case: list[str] = []
        other_case: list[str] = []
        canonical: list[str] = []

        for key, expression in entries:
            existing = mapping.get(key.lower())
            if existing is not None:
                (same_case if existing[0] == key else other_case).append(key)
                continue
            if (
                reject_ids_from is not None
                and key in reject_ids_from
                and not reject_ids_from.is_deprecated(key)
            ):
                canonical.append(key)
                continue
            mapping[key.lower()] = (key, expression)

        if same_case:
            raise RegistryError(
                f"The {name} contains {len(same_case)} keys more than once: {same_case}"
            )
        if other_case:
            raise RegistryError(
                f"The {name} contains {len(other_case)} keys in different capitalizations: "
                f"{other_case}"
            )
        if canonical:
            raise RegistryError(
                f"The {name} must not map canonical SPDX ids: {canonical}"
            )

        self._mapping = mapping

    @classmethod
    def from_strings(
        cls,
        entries: Iterable[tuple[str, str]],
        name: str = "mapping",
        reject_ids_from: Optional[LicenseRegistry] = None,
    ) -> "LicenseMapping":
        """Build a mapping whose values are given as expression strings.

        Known ids in the values are spelled the way the registries do.
        """
        return cls(
            ((key, canonicalize_ids(parse(value))) for key, value in entries),
            name=name,
            reject_ids_from=reject_ids_from,
        )

    def get(self, key: str) -> Optional[SpdxExpression]:
        entry = self._mapping.get(key.strip().lower())
        return entry[1] if entry else None

    def __getitem__(self, key: str) -> SpdxExpression:
        result = self.get(key)
        if result is None:
            raise KeyError(key)
        return result

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.strip().lower() in self._mapping

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._mapping.values())

    def __len__(self) -> int:
        return len(self._mapping)

    def items(self) -> list[tuple[str, SpdxExpression]]:
        return list(self._mapping.values())


ALIAS_MAPPING = LicenseMapping.from_strings(
    data.ALIASES, name="alias mapping", reject_ids_from=LICENSES
)

DEPRECATED_MAPPING = LicenseMapping.from_strings(
    data.DEPRECATED_LICENSE_IDS + data.DEPRECATED_EXCEPTION_IDS,
    name="deprecated id mapping",
)

DECLARED_LICENSE_MAPPING = LicenseMapping.from_strings(
    data.DECLARED_LICENSES, name="declared license mapping", reject_ids_from=LICENSES
)


def map_license(name: str, map_deprecated: bool = True) -> Optional[SpdxExpression]:
    """Map a license name to an SPDX expression.

    The alias table is consulted first, then the table of deprecated ids and
    finally the license registry itself.

    Args:
        name: A license id or alias in any capitalization, e.g. "apache2".
        map_deprecated: If True, deprecated SPDX ids resolve to their current
            expression, otherwise they resolve to the deprecated id itself.

    Returns:
        The corresponding expression, or None if the name is unknown.
    """
    name = name.strip()
    if not name:
        return None

    mapped = ALIAS_MAPPING.get(name)
    if mapped is not None:
        return mapped

    if map_deprecated:
        mapped = DEPRECATED_MAPPING.get(name)
        if mapped is not None:
            return mapped

    or_later = name.endswith("+")
    record = LICENSES.for_id(name[:-1] if or_later else name)
    if record is not None and record.id.lower() == (name[:-1] if or_later else name).lower():
        return SpdxSingleLicense(record.id, or_later=or_later)

    logger.debug("No mapping found for license '%s'", name)
    return None


def map_deprecated_ids(expression: SpdxExpression) -> SpdxExpression:
    """Replace deprecated ids in an expression by their current expression.

    A ``WITH`` exception on a deprecated license is carried over when the
    replacement is a single license without an exception of its own.
    """
    if isinstance(expression, SpdxCompoundExpression):
        return SpdxCompoundExpression(
            expression.operator,
            tuple(map_deprecated_ids(operand) for operand in expression.operands),
        )

    if not isinstance(expression, SpdxSingleLicense):
        return expression

    key = f"{expression.id}+" if expression.or_later else expression.id
    mapped = DEPRECATED_MAPPING.get(key)
    if mapped is None and expression.or_later:
        base = DEPRECATED_MAPPING.get(expression.id)
        if isinstance(base, SpdxSingleLicense) and not base.exception:
            mapped = SpdxSingleLicense(base.id, or_later=True)
    if mapped is None:
        return expression

    if expression.exception:
        if isinstance(mapped, SpdxSingleLicense) and not mapped.exception:
            return mapped.with_exception(expression.exception)
        return expression

    return mapped
