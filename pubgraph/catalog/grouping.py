"""Group publications by author, type and year, and summarise them.

Every function makes a single pass over the records and returns freshly
built aggregates; nothing is cached between calls.

Usage::

    from pubgraph.catalog.grouping import group_by_author, publication_stats

    by_author = group_by_author(pubs)
    by_author["João Silva"].total_publications   # 12
    publication_stats(pubs).top_authors          # {'João Silva': 12, ...}
"""

from __future__ import annotations

from typing import Iterable

from pubgraph.catalog.models import (
    RECENT_YEAR_CUTOFF,
    TOP_AUTHORS_LIMIT,
    AuthorSummary,
    Publication,
    PublicationStats,
    TypeSummary,
    YearRange,
    YearSummary,
)


def _increment(counts: dict, key) -> None:
    counts[key] = counts.get(key, 0) + 1


def _span(years: list[int]) -> YearRange:
    """Year range over known (non-zero) years, or ``YearRange(0, 0)``."""
    known = [y for y in years if y > 0]
    if not known:
        return YearRange()
    return YearRange(min(known), max(known))


def group_by_author(publications: Iterable[Publication]) -> dict[str, AuthorSummary]:
    """Group publications by exact author name.

    Args:
        publications: Parsed records.

    Returns:
        Mapping of author name to AuthorSummary, in first-seen order.
        ``publications_by_year`` and ``years_active`` are sorted by year.
    """
    authors: dict[str, AuthorSummary] = {}

    for pub in publications:
        summary = authors.get(pub.author)
        if summary is None:
            summary = authors[pub.author] = AuthorSummary(name=pub.author)

        summary.publications.append(pub)
        summary.total_publications += 1
        _increment(summary.publications_by_type, pub.type)
        _increment(summary.publications_by_year, pub.year)

    for summary in authors.values():
        summary.publications_by_year = dict(sorted(summary.publications_by_year.items()))
        summary.years_active = list(summary.publications_by_year)

    return authors


def group_by_type(publications: Iterable[Publication]) -> dict[str, TypeSummary]:
    """Group publications by type label.

    Returns:
        Mapping of type to TypeSummary, in first-seen order. Each
        summary's ``year_range`` ignores unknown years.
    """
    types: dict[str, TypeSummary] = {}
    years: dict[str, list[int]] = {}

    for pub in publications:
        summary = types.get(pub.type)
        if summary is None:
            summary = types[pub.type] = TypeSummary(type=pub.type)
            years[pub.type] = []

        summary.publications.append(pub)
        summary.total_count += 1
        if pub.author not in summary.authors:
            summary.authors.append(pub.author)
        years[pub.type].append(pub.year)

    for type_, summary in types.items():
        summary.year_range = _span(years[type_])

    return types


def group_by_year(publications: Iterable[Publication]) -> dict[int, YearSummary]:
    """Group publications by year, including the unknown-year bucket 0.

    Returns:
        Mapping of year to YearSummary, ordered by year ascending.
    """
    by_year: dict[int, YearSummary] = {}

    for pub in publications:
        summary = by_year.get(pub.year)
        if summary is None:
            summary = by_year[pub.year] = YearSummary(year=pub.year)

        summary.publications.append(pub)
        summary.total_count += 1
        if pub.author not in summary.authors:
            summary.authors.append(pub.author)
        _increment(summary.publication_types, pub.type)

    return dict(sorted(by_year.items()))


def publication_stats(publications: Iterable[Publication]) -> PublicationStats:
    """Compute the statistics snapshot for a publication list.

    Args:
        publications: Parsed records.

    Returns:
        PublicationStats. ``top_authors`` holds at most
        ``TOP_AUTHORS_LIMIT`` entries, sorted by count descending; authors
        with equal counts keep their first-appearance order.
    """
    stats = PublicationStats()
    author_counts: dict[str, int] = {}
    years: list[int] = []

    for pub in publications:
        stats.total_publications += 1
        _increment(stats.publication_types, pub.type)
        _increment(author_counts, pub.author)
        years.append(pub.year)
        if pub.year >= RECENT_YEAR_CUTOFF:
            _increment(stats.recent_years, pub.year)

    stats.unique_authors = len(author_counts)
    stats.year_range = _span(years)
    stats.recent_years = dict(sorted(stats.recent_years.items()))

    # sorted() is stable, so ties stay in first-appearance order
    ranked = sorted(author_counts.items(), key=lambda item: item[1], reverse=True)
    stats.top_authors = dict(ranked[:TOP_AUTHORS_LIMIT])

    return stats
