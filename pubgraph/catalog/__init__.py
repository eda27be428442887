"""Publication catalog: parse, group, summarise and filter listings.

Example:
    >>> from pubgraph.catalog import parse_publications, publication_stats
    >>> pubs = parse_publications(
    ...     "Type|Author|Year|Title\\n"
    ...     "artigoEmPeriodico|João Silva|2023|Inteligência Artificial na Educação"
    ... )
    >>> publication_stats(pubs).top_authors
    {'João Silva': 1}
"""

from pubgraph.catalog.models import (
    AuthorPublications,
    AuthorSummary,
    AuthorTitleOptions,
    MultiFilterOptions,
    ParseReport,
    Publication,
    PublicationStats,
    SearchCriteria,
    TypeSummary,
    YearRange,
    YearSummary,
)
from pubgraph.catalog.parser import parse_publications, parse_publications_report
from pubgraph.catalog.grouping import (
    group_by_author,
    group_by_type,
    group_by_year,
    publication_stats,
)
from pubgraph.catalog.query import (
    author_publications,
    filter_by_author_and_title,
    filter_by_authors_and_terms,
    search_publications,
)
from pubgraph.catalog.loader import (
    PublicationCatalog,
    build_catalog,
    catalog_from_text,
    load_publications,
    load_publications_async,
)
from pubgraph.catalog.report import format_author_publications, format_statistics

__all__ = [
    # Models
    "AuthorPublications",
    "AuthorSummary",
    "AuthorTitleOptions",
    "MultiFilterOptions",
    "ParseReport",
    "Publication",
    "PublicationStats",
    "SearchCriteria",
    "TypeSummary",
    "YearRange",
    "YearSummary",
    # Parsing
    "parse_publications",
    "parse_publications_report",
    # Grouping/statistics
    "group_by_author",
    "group_by_type",
    "group_by_year",
    "publication_stats",
    # Query
    "author_publications",
    "filter_by_author_and_title",
    "filter_by_authors_and_terms",
    "search_publications",
    # Loading
    "PublicationCatalog",
    "build_catalog",
    "catalog_from_text",
    "load_publications",
    "load_publications_async",
    # Reporting
    "format_author_publications",
    "format_statistics",
]
