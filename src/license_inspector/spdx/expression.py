"""Abstract syntax tree of SPDX license expressions.

An expression is either a single license term, optionally carrying the "or
later" modifier and a ``WITH`` exception, or a compound of two or more
operands joined by one operator. Trees are immutable; the composition helpers
always return new objects.

Operator precedence, tightest first: ``+`` > ``WITH`` > ``AND`` > ``OR``.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from license_inspector.exceptions import SpdxValidationError
from license_inspector.spdx.registry import EXCEPTIONS, LICENSES, LicenseRegistry

logger = logging.getLogger(__name__)

LICENSE_REF_PREFIX = "LicenseRef-"
DOCUMENT_REF_PREFIX = "DocumentRef-"


class Strictness(str, Enum):
    """How strictly license ids are checked during validation.

    ALLOW_ANY accepts every syntactically valid id, ALLOW_DEPRECATED only
    known SPDX ids (deprecated ones included) and ALLOW_CURRENT only SPDX ids
    that are not deprecated. License references are accepted at all levels.
    """

    ALLOW_ANY = "ALLOW_ANY"
    ALLOW_DEPRECATED = "ALLOW_DEPRECATED"
    ALLOW_CURRENT = "ALLOW_CURRENT"


class SpdxOperator(str, Enum):
    """Operators joining compound expressions.

    An operator with a higher priority binds stronger.
    """

    AND = "AND"
    OR = "OR"

    @property
    def priority(self) -> int:
        return 1 if self is SpdxOperator.AND else 0


def is_license_ref(license_id: str) -> bool:
    """Return whether an id is a ``LicenseRef-`` or ``DocumentRef-`` reference."""
    return license_id.startswith(LICENSE_REF_PREFIX) or license_id.startswith(
        DOCUMENT_REF_PREFIX
    )


def _is_known(registry: LicenseRegistry, key: str, strictness: Strictness) -> bool:
    if strictness is Strictness.ALLOW_ANY or is_license_ref(key):
        return True

    record = registry.for_id(key)
    if record is None or record.id.lower() != key.lower():
        return False

    return strictness is Strictness.ALLOW_DEPRECATED or not record.is_deprecated


class SpdxExpression(ABC):
    """Base class of all license expression nodes."""

    @abstractmethod
    def decompose(self) -> list["SpdxSingleLicense"]:
        """Flatten the expression into its single-license terms.

        Both AND and OR are flattened, so the logical structure is lost: this
        is meant for reporting the set of licenses involved, not for deciding
        whether a choice of licenses satisfies the expression. Order is
        preserved and duplicates are kept.
        """
        ...

    def licenses(self) -> list[str]:
        """Return the distinct single-license terms as sorted strings."""
        return sorted({str(license) for license in self.decompose()})

    def validate(self, strictness: Strictness) -> None:
        """Check all license and exception ids against a strictness level.

        Raises:
            SpdxValidationError: If any id is unknown or deprecated where the
                strictness level does not allow it.
        """
        invalid: list[str] = []
        for license in self.decompose():
            if not _is_known(LICENSES, license.id, strictness):
                invalid.append(license.id)
            if license.exception and not _is_known(
                EXCEPTIONS, license.exception, strictness
            ):
                invalid.append(license.exception)

        if invalid:
            unique = tuple(dict.fromkeys(invalid))
            raise SpdxValidationError(
                f"The expression '{self}' contains ids not allowed by "
                f"{strictness.value}: {', '.join(unique)}",
                invalid_ids=unique,
            )

    def is_valid(self, strictness: Strictness = Strictness.ALLOW_DEPRECATED) -> bool:
        try:
            self.validate(strictness)
        except SpdxValidationError as e:
            logger.debug("Validation failed: %s", e)
            return False
        return True

    def and_(self, other: "SpdxExpression") -> "SpdxCompoundExpression":
        return SpdxCompoundExpression.combine(SpdxOperator.AND, (self, other))

    def or_(self, other: "SpdxExpression") -> "SpdxCompoundExpression":
        return SpdxCompoundExpression.combine(SpdxOperator.OR, (self, other))

    def __and__(self, other: "SpdxExpression") -> "SpdxCompoundExpression":
        return self.and_(other)

    def __or__(self, other: "SpdxExpression") -> "SpdxCompoundExpression":
        return self.or_(other)


@dataclass(frozen=True)
class SpdxSingleLicense(SpdxExpression):
    """A single license term such as ``GPL-2.0-or-later WITH Classpath-exception-2.0``.

    Attributes:
        id: License id or license reference.
        or_later: True if the ``+`` modifier was given.
        exception: Id of the license exception after ``WITH``, if any.
    """

    id: str
    or_later: bool = False
    exception: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("A license id must not be empty.")
        if self.or_later and is_license_ref(self.id):
            raise ValueError(f"The '+' modifier is not allowed on '{self.id}'.")

    @property
    def is_license_ref(self) -> bool:
        return is_license_ref(self.id)

    def with_exception(self, exception: str) -> "SpdxSingleLicense":
        return SpdxSingleLicense(self.id, self.or_later, exception)

    def without_exception(self) -> "SpdxSingleLicense":
        return SpdxSingleLicense(self.id, self.or_later)

    def decompose(self) -> list["SpdxSingleLicense"]:
        return [self]

    def __str__(self) -> str:
        text = f"{self.id}+" if self.or_later else self.id
        if self.exception:
            text = f"{text} WITH {self.exception}"
        return text


@dataclass(frozen=True)
class SpdxCompoundExpression(SpdxExpression):
    """Two or more operands joined by the same operator.

    Attributes:
        operator: The joining operator.
        operands: The operands in their original order.
    """

    operator: SpdxOperator
    operands: tuple[SpdxExpression, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "operands", tuple(self.operands))
        if len(self.operands) < 2:
            raise ValueError(
                f"A compound expression needs at least two operands, got {len(self.operands)}."
            )

    @classmethod
    def combine(
        cls, operator: SpdxOperator, operands: Sequence[SpdxExpression]
    ) -> "SpdxCompoundExpression":
        """Join operands, merging operands that are compounds of the same operator."""
        flat: list[SpdxExpression] = []
        for operand in operands:
            if isinstance(operand, SpdxCompoundExpression) and operand.operator is operator:
                flat.extend(operand.operands)
            else:
                flat.append(operand)
        return cls(operator, tuple(flat))

    def decompose(self) -> list[SpdxSingleLicense]:
        return [license for operand in self.operands for license in operand.decompose()]

    def _operand_string(self, operand: SpdxExpression) -> str:
        # Nested compounds of the same operator keep their parentheses so that
        # parsing the output reproduces the same tree.
        if isinstance(operand, SpdxCompoundExpression) and (
            operand.operator.priority <= self.operator.priority
        ):
            return f"({operand})"
        return str(operand)

    def __str__(self) -> str:
        return f" {self.operator.value} ".join(
            self._operand_string(operand) for operand in self.operands
        )
