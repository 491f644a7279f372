"""Association of copyright findings with license findings.

Within one file, a copyright finding belongs to the license finding whose line
range covers the copyright's line. When several ranges cover the line, the
narrowest one wins and ties are broken by the smaller start line. Copyright
findings that no range covers are reported as unmatched instead of being
dropped.
"""

import heapq
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable

from license_inspector.models import CopyrightFinding, LicenseFinding, TextLocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FindingsMatcherResult:
    """The outcome of matching the findings of one provenance.

    Attributes:
        matched_findings: Every license finding with the copyright findings
            associated to it (possibly none).
        unmatched_copyrights: Copyright findings not covered by any license
            finding.
    """

    matched_findings: dict[LicenseFinding, frozenset[CopyrightFinding]] = field(
        default_factory=dict
    )
    unmatched_copyrights: frozenset[CopyrightFinding] = frozenset()


class FindingsMatcher:
    """Matches copyright findings to license findings by line ranges.

    Attributes:
        tolerance_lines: Number of lines by which each license range is
            extended in both directions before matching. The narrowness of a
            range is always measured on its original lines.
    """

    def __init__(self, tolerance_lines: int = 0) -> None:
        if tolerance_lines < 0:
            raise ValueError("tolerance_lines must not be negative.")
        self.tolerance_lines = tolerance_lines

    @staticmethod
    def _priority(finding: LicenseFinding) -> tuple[int, int, int, str]:
        location = finding.location
        return (location.span, location.start_line, location.end_line, str(finding.license))

    def _match_file(
        self,
        licenses: list[LicenseFinding],
        copyrights: list[CopyrightFinding],
        matched: dict[LicenseFinding, set[CopyrightFinding]],
        unmatched: set[CopyrightFinding],
    ) -> None:
        tolerance = self.tolerance_lines
        spans = sorted(
            (
                finding
                for finding in licenses
                if finding.location.start_line != TextLocation.UNKNOWN_LINE
            ),
            key=lambda finding: finding.location.start_line,
        )

        # Sweep the copyrights in line order. All spans starting at or before
        # the current line are kept in a heap ordered by narrowness; spans
        # ending before the current line are discarded lazily from its top.
        active: list[tuple[tuple[int, int, int, str], int, LicenseFinding]] = []
        next_span = 0

        for copyright in sorted(copyrights, key=lambda c: (c.location.start_line, c.statement)):
            line = copyright.location.start_line
            if line == TextLocation.UNKNOWN_LINE:
                unmatched.add(copyright)
                continue

            while next_span < len(spans) and spans[next_span].location.start_line - tolerance <= line:
                finding = spans[next_span]
                heapq.heappush(active, (self._priority(finding), next_span, finding))
                next_span += 1

            # Spans ending before the current line cannot cover any later line
            # either. Once those are gone, the top is the narrowest covering span.
            while active and active[0][2].location.end_line + tolerance < line:
                heapq.heappop(active)

            if active:
                matched[active[0][2]].add(copyright)
            else:
                unmatched.add(copyright)

    def match(
        self,
        license_findings: Iterable[LicenseFinding],
        copyright_findings: Iterable[CopyrightFinding],
    ) -> FindingsMatcherResult:
        """Match the findings of one provenance.

        Args:
            license_findings: License findings, possibly from many files.
            copyright_findings: Copyright findings, possibly from many files.

        Returns:
            The matched and unmatched findings.
        """
        licenses_by_path: dict[str, list[LicenseFinding]] = defaultdict(list)
        for finding in license_findings:
            licenses_by_path[finding.location.path].append(finding)

        copyrights_by_path: dict[str, list[CopyrightFinding]] = defaultdict(list)
        for finding in copyright_findings:
            copyrights_by_path[finding.location.path].append(finding)

        matched: dict[LicenseFinding, set[CopyrightFinding]] = {
            finding: set() for findings in licenses_by_path.values() for finding in findings
        }
        unmatched: set[CopyrightFinding] = set()

        for path in sorted(set(licenses_by_path) | set(copyrights_by_path)):
            self._match_file(
                licenses_by_path.get(path, []),
                copyrights_by_path.get(path, []),
                matched,
                unmatched,
            )

        logger.debug(
            "Matched copyrights to %d license findings, %d copyrights unmatched",
            len(matched),
            len(unmatched),
        )

        return FindingsMatcherResult(
            {finding: frozenset(copyrights) for finding, copyrights in matched.items()},
            frozenset(unmatched),
        )
