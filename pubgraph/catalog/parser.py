"""Parse pipe-delimited publication listings.

The listing format is one header line followed by ``Type|Author|Year|Title``
rows. The delimiter is always literal: there is no quoting, escaping or
multi-line field support. Rows with fewer than four fields are skipped
and unparseable years become ``UNKNOWN_YEAR``.

Example::

    from pubgraph.catalog.parser import parse_publications

    pubs = parse_publications(
        "Type|Author|Year|Title\\n"
        "artigoEmPeriodico|João Silva|2023|Inteligência Artificial na Educação"
    )
    pubs[0].year  # 2023
"""

from __future__ import annotations

import logging
import re

from pubgraph.catalog.models import UNKNOWN_YEAR, ParseReport, Publication

logger = logging.getLogger(__name__)

DELIMITER = "|"
MIN_FIELDS = 4

# Leading integer, as accepted by lenient year columns like "2021a" or "+2020"
_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def parse_year(raw: str) -> int | None:
    """Parse the leading integer of a year column.

    Args:
        raw: Field text, already stripped.

    Returns:
        The parsed integer, or None if the text does not start with one.

    Examples:
        >>> parse_year("2021")
        2021
        >>> parse_year("2021 (in press)")
        2021
        >>> parse_year("n.d.") is None
        True
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group())


def parse_publications_report(csv_text: str) -> ParseReport:
    """Parse a listing and count the lines and years that were dropped.

    The first line is always discarded as the header, even if it looks
    like data. Blank lines are ignored and not counted as skipped.

    Args:
        csv_text: Full listing text.

    Returns:
        ParseReport with the records in source order and the number of
        skipped lines and coerced years.
    """
    report = ParseReport()
    lines = csv_text.strip().split("\n")

    for line_no, raw_line in enumerate(lines[1:], start=2):
        line = raw_line.strip()
        if not line:
            continue

        columns = line.split(DELIMITER)
        if len(columns) < MIN_FIELDS:
            report.skipped_lines += 1
            logger.debug(
                "Skipping line %d: %d field(s), need %d", line_no, len(columns), MIN_FIELDS
            )
            continue

        year = parse_year(columns[2].strip())
        if year is None:
            report.coerced_years += 1
            logger.debug("Line %d: unparseable year %r, using %d", line_no, columns[2], UNKNOWN_YEAR)
            year = UNKNOWN_YEAR

        report.publications.append(
            Publication(
                type=columns[0].strip(),
                author=columns[1].strip(),
                year=year,
                title=columns[3].strip(),
            )
        )

    logger.debug(
        "Parsed %d publication(s), skipped %d line(s), coerced %d year(s)",
        len(report.publications),
        report.skipped_lines,
        report.coerced_years,
    )
    return report


def parse_publications(csv_text: str) -> list[Publication]:
    """Parse a listing into publication records.

    Args:
        csv_text: Full listing text, header line first.

    Returns:
        Publications in source order.
    """
    return parse_publications_report(csv_text).publications
