"""Case-insensitive registries of SPDX licenses and license exceptions.

The module-level ``LICENSES`` and ``EXCEPTIONS`` registries are built once at
import time from the SPDX keys in the license index shipped with the
license-expression library, completed by the bundled names, texts and
deprecated ids. They are read-only afterwards, so they can be shared between
threads without locking.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional

from license_expression import get_license_index

from license_inspector.exceptions import RegistryError
from license_inspector.spdx import data

logger = logging.getLogger(__name__)

# Keys like "GPL 2.0" or "LicenseRef-GPL-2.0" are aliases, not SPDX ids.
SPDX_ID_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9.\-]*")


def _is_spdx_id(key: str) -> bool:
    return bool(SPDX_ID_PATTERN.fullmatch(key)) and not key.startswith("LicenseRef-")


@dataclass(frozen=True)
class LicenseRecord:
    """Metadata of one SPDX license or license exception.

    Attributes:
        id: The canonical SPDX short identifier (e.g. "Apache-2.0").
        full_name: Human-readable name (e.g. "Apache License 2.0"), if known.
        is_deprecated: True if SPDX marks the id as deprecated.
        text: The license text, if bundled.
    """

    id: str
    full_name: str = ""
    is_deprecated: bool = False
    text: str = ""

    @property
    def url(self) -> str:
        return f"https://spdx.org/licenses/{self.id}.html"


class LicenseRegistry:
    """Immutable lookup table of license records keyed case-insensitively.

    Raises:
        RegistryError: If two records share an id, ignoring case.
    """

    def __init__(self, records: Iterable[LicenseRecord]) -> None:
        by_id: dict[str, LicenseRecord] = {}
        for record in records:
            key = record.id.lower()
            existing = by_id.get(key)
            if existing is not None:
                raise RegistryError(
                    f"The ids '{existing.id}' and '{record.id}' collide when compared "
                    "case-insensitively."
                )
            by_id[key] = record

        # Current ids take precedence over deprecated ones sharing a full name.
        by_name: dict[str, LicenseRecord] = {}
        for record in sorted(by_id.values(), key=lambda r: (r.is_deprecated, r.id)):
            if record.full_name:
                by_name.setdefault(record.full_name.lower(), record)

        self._by_id = by_id
        self._by_name = by_name

    @classmethod
    def from_rows(
        cls, rows: Iterable[tuple[str, str, bool]], texts: Optional[dict[str, str]] = None
    ) -> "LicenseRegistry":
        """Build a registry from ``(id, full_name, is_deprecated)`` rows."""
        texts = texts or {}
        return cls(
            LicenseRecord(id, name, deprecated, texts.get(id, ""))
            for id, name, deprecated in rows
        )

    @classmethod
    def from_license_index(
        cls,
        index: Iterable[Mapping[str, Any]],
        exceptions: bool = False,
        names: Iterable[tuple[str, str]] = (),
        texts: Optional[Mapping[str, str]] = None,
        deprecated: Iterable[str] = (),
    ) -> "LicenseRegistry":
        """Build a registry from the entries of a license-expression license index.

        The ``spdx_license_key`` of every current entry is a canonical id.
        Further SPDX ids from ``other_spdx_license_keys`` and from entries the
        index marks as deprecated are legacy spellings: they are registered as
        deprecated unless they are canonical ids themselves. ``LicenseRef-``
        keys are skipped since references need no registration.

        Args:
            index: Entries as returned by ``license_expression.get_license_index()``.
            exceptions: If True, register license exceptions instead of licenses.
            names: ``(id, full_name)`` pairs.
            texts: License texts by id.
            deprecated: Ids SPDX marks as deprecated. Ids missing from the
                index are added.

        Raises:
            RegistryError: If two current entries share an id, ignoring case.
        """
        full_names = {id.lower(): name for id, name in names}
        texts = texts or {}
        deprecated_keys = {id.lower(): id for id in deprecated}

        current: list[str] = []
        legacy: dict[str, str] = {}
        for entry in index:
            if bool(entry.get("is_exception")) is not exceptions:
                continue

            key = entry.get("spdx_license_key") or ""
            others = list(entry.get("other_spdx_license_keys") or [])
            if entry.get("is_deprecated"):
                others.insert(0, key)
            elif _is_spdx_id(key):
                current.append(key)

            for other in others:
                if _is_spdx_id(other):
                    legacy.setdefault(other.lower(), other)

        current_keys = {id.lower() for id in current}
        ids = current + [id for key, id in legacy.items() if key not in current_keys]
        known = current_keys | legacy.keys()
        ids += [id for key, id in deprecated_keys.items() if key not in known]

        logger.debug(
            "Registering %d %s from the license index",
            len(ids),
            "exceptions" if exceptions else "licenses",
        )
        return cls(
            LicenseRecord(
                id,
                full_names.get(id.lower(), ""),
                id.lower() in deprecated_keys or id.lower() not in current_keys,
                texts.get(id, ""),
            )
            for id in ids
        )

    def for_id(self, id_or_name: str) -> Optional[LicenseRecord]:
        """Look up a record by id, falling back to its full name.

        Args:
            id_or_name: SPDX id or human-readable name, in any case.

        Returns:
            The matching record, or None.
        """
        key = id_or_name.strip().lower()
        return self._by_id.get(key) or self._by_name.get(key)

    def canonical_id(self, id: str) -> Optional[str]:
        """Return the registered spelling of an id, or None if it is unknown."""
        record = self._by_id.get(id.strip().lower())
        return record.id if record else None

    def is_deprecated(self, id: str) -> bool:
        record = self._by_id.get(id.lower())
        return record is not None and record.is_deprecated

    def ids(self, include_deprecated: bool = True) -> list[str]:
        return sorted(
            record.id
            for record in self._by_id.values()
            if include_deprecated or not record.is_deprecated
        )

    def __contains__(self, id: object) -> bool:
        return isinstance(id, str) and id.lower() in self._by_id

    def __iter__(self) -> Iterator[LicenseRecord]:
        return iter(sorted(self._by_id.values(), key=lambda record: record.id))

    def __len__(self) -> int:
        return len(self._by_id)


_LICENSE_INDEX = get_license_index()

LICENSES = LicenseRegistry.from_license_index(
    _LICENSE_INDEX,
    names=data.LICENSE_NAMES,
    texts=data.LICENSE_TEXTS,
    deprecated=data.DEPRECATED_LICENSES,
)
EXCEPTIONS = LicenseRegistry.from_license_index(
    _LICENSE_INDEX,
    exceptions=True,
    names=data.EXCEPTION_NAMES,
    deprecated=data.DEPRECATED_EXCEPTIONS,
)
