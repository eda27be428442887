"""Markdown summaries of catalog statistics and author lookups.

Example::

    from pubgraph.catalog.report import format_statistics

    print(format_statistics(publication_stats(pubs)))

    # **Total publications:** 42
    # **Unique authors:** 7
    # **Years:** 2015-2024
    #
    # ### Publication types
    #
    # | Type | Count |
    # | --- | ---: |
    # ...
"""

from __future__ import annotations

from pubgraph.catalog.models import AuthorPublications, PublicationStats


def _table(headers: list[str], counts: dict) -> str:
    """Two-column Markdown table of key/count pairs, or "" if empty."""
    if not counts:
        return ""
    lines = [
        f"| {headers[0]} | {headers[1]} |",
        "| --- | ---: |",
    ]
    lines.extend(f"| {key} | {count:,} |" for key, count in counts.items())
    return "\n".join(lines)


def format_statistics(stats: PublicationStats) -> str:
    """Render a statistics snapshot as Markdown.

    Tables with no rows are left out.
    """
    parts = [
        f"**Total publications:** {stats.total_publications:,}  ",
        f"**Unique authors:** {stats.unique_authors:,}  ",
    ]
    if stats.year_range.max:
        parts.append(f"**Years:** {stats.year_range.min}-{stats.year_range.max}")
    else:
        parts.append("**Years:** unknown")

    sections = [
        ("Publication types", ["Type", "Count"], stats.publication_types),
        ("Top authors", ["Author", "Publications"], stats.top_authors),
        ("Recent years", ["Year", "Publications"], stats.recent_years),
    ]
    for title, headers, counts in sections:
        table = _table(headers, counts)
        if table:
            parts.append("")
            parts.append(f"### {title}")
            parts.append("")
            parts.append(table)

    return "\n".join(parts)


def format_author_publications(result: AuthorPublications) -> str:
    """Render an author lookup as a Markdown bullet list.

    Each entry reads ``- Title (year, type)``; unknown years show "n.d.".
    """
    if not result.author:
        return "_No author selected._"

    header = f"**{result.author}**: {result.filtered_count} of {result.total_count} publication(s)"
    if result.title_filter:
        header += f' matching "{result.title_filter}"'

    lines = [header]
    if result.publications:
        lines.append("")
    for pub in result.publications:
        year = str(pub.year) if pub.has_known_year else "n.d."
        lines.append(f"- {pub.title} ({year}, {pub.type})")
    return "\n".join(lines)
