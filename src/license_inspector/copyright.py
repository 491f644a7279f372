"""Grouping of copyright statement variants.

Scanners report the same copyright in many textual variants, e.g.
"Copyright 2020 Jane Doe" and "Copyright (c) 2020 Jane Doe". The processor
normalizes each statement and groups statements that normalize to the same
holder and years, choosing one observed variant as the representative of each
group. Statements naming different holders are never merged.
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

# Markers identifying a text as a copyright statement, matched case-insensitively.
MARKER_PATTERN = re.compile(
    r"copyright|copr\.|\(c\)|©|&copy;|all\s+rights\s+reserved\.?",
    re.IGNORECASE,
)

# Markers are stripped from the start of a statement only, so a holder named
# "Copyright Clearance Center" keeps its name.
LEADING_MARKER_PATTERN = re.compile(
    r"^(?:\s*(?:copyright|copr\.|\(c\)|©|&copy;)[\s:]*)+", re.IGNORECASE
)

SYMBOL_PATTERN = re.compile(r"\(c\)|©|&copy;", re.IGNORECASE)

RESERVED_PATTERN = re.compile(r"all\s+rights\s+reserved\.?", re.IGNORECASE)

# A run of years separated by commas, dashes, slashes or white space.
YEARS_PATTERN = re.compile(
    r"(?:19|20)\d{2}(?:\s*(?:[-–—,/]|\s)\s*(?:19|20)\d{2})*(?:\s*[-–—]\s*(?:present|now))?",
    re.IGNORECASE,
)

WHITESPACE_PATTERN = re.compile(r"\s+")

BOILERPLATE_PATTERN = re.compile(r"^(?:by|of)\s+", re.IGNORECASE)

TRAILING_PUNCTUATION = " .,;:-"


def _normalize_years(text: str) -> str:
    """Render a run of years as a canonical comma/dash separated list."""
    ranges: list[str] = []
    text = re.sub(r"\s*[-–—]\s*", "-", text.strip())
    for part in re.split(r"[\s,/]+", text):
        bounds = [bound for bound in part.split("-") if bound]
        if not bounds:
            continue
        if len(bounds) == 1 or bounds[0] == bounds[-1]:
            ranges.append(bounds[0].lower())
        else:
            ranges.append(f"{bounds[0]}-{bounds[-1]}".lower())
    return ",".join(ranges)


@dataclass(frozen=True)
class NormalizedStatement:
    """The comparable parts of a copyright statement.

    Attributes:
        years: Canonical rendering of all years mentioned.
        holder: Case-folded holder text without markers and years.
    """

    years: str
    holder: str


def normalize_statement(statement: str) -> Optional[NormalizedStatement]:
    """Normalize a copyright statement for grouping.

    Args:
        statement: The raw statement.

    Returns:
        The normalized statement, or None if the text carries no copyright
        marker or no holder.
    """
    text = WHITESPACE_PATTERN.sub(" ", statement).strip()
    if not MARKER_PATTERN.search(text):
        return None

    text = LEADING_MARKER_PATTERN.sub("", RESERVED_PATTERN.sub(" ", text))

    years = [_normalize_years(match.group()) for match in YEARS_PATTERN.finditer(text)]
    text = YEARS_PATTERN.sub(" ", text)
    text = SYMBOL_PATTERN.sub(" ", text)

    holder = WHITESPACE_PATTERN.sub(" ", text).strip(TRAILING_PUNCTUATION).strip()
    holder = BOILERPLATE_PATTERN.sub("", holder).strip(TRAILING_PUNCTUATION).casefold()
    if not holder:
        return None

    return NormalizedStatement(",".join(year for year in years if year), holder)


@dataclass(frozen=True)
class CopyrightStatementsResult:
    """The grouping computed by CopyrightStatementsProcessor.

    Attributes:
        processed_statements: Representative statement mapped to all variants
            grouped under it (the representative included).
        unprocessed_statements: Statements that could not be grouped.
    """

    processed_statements: dict[str, frozenset[str]] = field(default_factory=dict)
    unprocessed_statements: frozenset[str] = frozenset()

    def all_statements(self) -> list[str]:
        """Return all representatives and unprocessed statements, sorted."""
        return sorted(set(self.processed_statements) | self.unprocessed_statements)

    def to_mapping(self) -> dict[str, frozenset[str]]:
        """Return the grouping with unprocessed statements as singleton groups."""
        mapping = dict(self.processed_statements)
        for statement in self.unprocessed_statements:
            mapping.setdefault(statement, frozenset({statement}))
        return mapping


class CopyrightStatementsProcessor:
    """Groups textual variants of the same copyright statement.

    The representative of a group is the variant observed most often; ties
    are broken by preferring the longest and then the lexicographically
    smallest variant. The result depends only on the input multiset.
    """

    def process(self, statements: Iterable[str]) -> CopyrightStatementsResult:
        """Group statements.

        Args:
            statements: Raw statements; repeated statements count towards the
                choice of representative.

        Returns:
            The grouping of all distinct statements.
        """
        counts = Counter(statements)
        groups: dict[NormalizedStatement, list[str]] = {}
        unprocessed: set[str] = set()

        for statement in sorted(counts):
            normalized = normalize_statement(statement)
            if normalized is None:
                unprocessed.add(statement)
            else:
                groups.setdefault(normalized, []).append(statement)

        processed: dict[str, frozenset[str]] = {}
        for normalized, variants in sorted(
            groups.items(), key=lambda item: (item[0].holder, item[0].years)
        ):
            representative = min(
                variants, key=lambda variant: (-counts[variant], -len(variant), variant)
            )
            processed[representative] = frozenset(variants)

        logger.debug(
            "Grouped %d distinct statements into %d groups, %d unprocessed",
            len(counts),
            len(processed),
            len(unprocessed),
        )

        return CopyrightStatementsResult(processed, frozenset(unprocessed))
