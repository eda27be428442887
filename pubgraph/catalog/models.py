"""Data models for the publications catalog.

Provides the parsed ``Publication`` record, the derived per-author,
per-type and per-year aggregates, the statistics snapshot, and the
option structs accepted by the query functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

# Year assigned to records whose year column is missing or non-numeric
UNKNOWN_YEAR = 0

# Years at or above this count as "recent" in the statistics snapshot
RECENT_YEAR_CUTOFF = 2020

TOP_AUTHORS_LIMIT = 10

_LOGIC_VALUES = ("AND", "OR")


@dataclass(frozen=True)
class Publication:
    """A single publication parsed from one line of the listing.

    Args:
        type: Category label, e.g. a venue code like "artigoEmPeriodico".
        author: Author display name.
        year: Publication year, or ``UNKNOWN_YEAR`` (0) if unparseable.
        title: Publication title.
    """

    type: str
    author: str
    year: int
    title: str

    @property
    def has_known_year(self) -> bool:
        """Whether the year column held a usable value."""
        return self.year > UNKNOWN_YEAR


@dataclass(frozen=True)
class YearRange:
    """Inclusive year bounds.

    Aggregates report ``YearRange(0, 0)`` when no publication has a
    known year.

    Raises:
        ValueError: If ``min`` is greater than ``max``.
    """

    min: int = 0
    max: int = 0

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"year range min {self.min} exceeds max {self.max}")

    def __contains__(self, year: int) -> bool:
        return self.min <= year <= self.max


@dataclass
class AuthorSummary:
    """Publications and counts for one author (exact name match)."""

    name: str
    publications: list[Publication] = field(default_factory=list)
    total_publications: int = 0
    publications_by_type: dict[str, int] = field(default_factory=dict)
    publications_by_year: dict[int, int] = field(default_factory=dict)
    years_active: list[int] = field(default_factory=list)


@dataclass
class TypeSummary:
    """Publications, authors and year span for one publication type."""

    type: str
    publications: list[Publication] = field(default_factory=list)
    total_count: int = 0
    authors: list[str] = field(default_factory=list)
    year_range: YearRange = field(default_factory=YearRange)


@dataclass
class YearSummary:
    """Publications, authors and type counts for one year."""

    year: int
    publications: list[Publication] = field(default_factory=list)
    total_count: int = 0
    authors: list[str] = field(default_factory=list)
    publication_types: dict[str, int] = field(default_factory=dict)


@dataclass
class PublicationStats:
    """Read-only summary of a whole publication list.

    Args:
        total_publications: Number of records.
        unique_authors: Number of distinct author names.
        publication_types: Count per type label.
        year_range: Span of known years, ``YearRange(0, 0)`` if none.
        top_authors: Up to ten authors by count, descending. Ties keep
            the order in which authors first appeared.
        recent_years: Count per year for years >= ``RECENT_YEAR_CUTOFF``.
    """

    total_publications: int = 0
    unique_authors: int = 0
    publication_types: dict[str, int] = field(default_factory=dict)
    year_range: YearRange = field(default_factory=YearRange)
    top_authors: dict[str, int] = field(default_factory=dict)
    recent_years: dict[int, int] = field(default_factory=dict)


@dataclass
class ParseReport:
    """Parsed publications plus data-quality counters.

    Args:
        publications: Records in source order.
        skipped_lines: Non-empty data lines dropped for having fewer
            than four fields.
        coerced_years: Records whose year fell back to ``UNKNOWN_YEAR``.
    """

    publications: list[Publication] = field(default_factory=list)
    skipped_lines: int = 0
    coerced_years: int = 0


@dataclass
class AuthorPublications:
    """Result of looking up one author's publications.

    ``title_filter`` is None when no title filter was applied.
    """

    author: str = ""
    publications: list[Publication] = field(default_factory=list)
    filtered_count: int = 0
    total_count: int = 0
    title_filter: str | None = None


# ── Query options ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SearchCriteria:
    """Optional constraints for ``search_publications``.

    Empty strings, None and a year of 0 all mean "no constraint".

    Args:
        author: Case-insensitive substring of the author name.
        type: Exact publication type.
        year: Exact publication year.
        title: Case-insensitive substring of the title.
        year_range: Inclusive year bounds, as a YearRange, a
            ``(min, max)`` tuple or a ``{"min": ..., "max": ...}`` mapping.

    Raises:
        TypeError: If *year_range* is none of the accepted forms.
    """

    author: str | None = None
    type: str | None = None
    year: int | None = None
    title: str | None = None
    year_range: YearRange | None = None

    def __post_init__(self):
        value = self.year_range
        if value is None or isinstance(value, YearRange):
            return
        if isinstance(value, tuple):
            value = YearRange(*value)
        elif isinstance(value, Mapping):
            value = YearRange(**value)
        else:
            raise TypeError(
                f"year_range must be a YearRange, tuple or mapping, not {type(value).__name__}"
            )
        object.__setattr__(self, "year_range", value)


@dataclass(frozen=True)
class AuthorTitleOptions:
    """Matching modes for ``filter_by_author_and_title``.

    ``exact_title_match`` takes priority over ``whole_words``.
    """

    exact_author_match: bool = False
    exact_title_match: bool = False
    whole_words: bool = False


@dataclass(frozen=True)
class MultiFilterOptions:
    """Combination logic for ``filter_by_authors_and_terms``.

    Args:
        author_logic: "AND" requires every name to match, "OR" any one.
        title_logic: Same, for title terms.
        case_sensitive: Compare without case folding.

    Raises:
        ValueError: If a logic value is not "AND" or "OR".
    """

    author_logic: str = "OR"
    title_logic: str = "OR"
    case_sensitive: bool = False

    def __post_init__(self):
        for name in ("author_logic", "title_logic"):
            value = str(getattr(self, name)).upper()
            if value not in _LOGIC_VALUES:
                raise ValueError(f"{name} must be 'AND' or 'OR', got {getattr(self, name)!r}")
            object.__setattr__(self, name, value)
