"""Search and filter publication lists.

All filters are single-pass, keep the original relative order, and treat
an empty string the same as a missing criterion.

Example::

    from pubgraph.catalog.query import filter_by_author_and_title
    from pubgraph.catalog.models import AuthorTitleOptions

    ai_by_silva = filter_by_author_and_title(pubs, "Silva", "inteligência")
    reviews = filter_by_author_and_title(
        pubs, "", "art", AuthorTitleOptions(whole_words=True)
    )
"""

from __future__ import annotations

from typing import Sequence

from pubgraph.catalog.models import (
    AuthorPublications,
    AuthorTitleOptions,
    MultiFilterOptions,
    Publication,
    SearchCriteria,
)
from pubgraph.catalog.textmatch import contains, contains_whole_word


def _matches_criteria(pub: Publication, criteria: SearchCriteria) -> bool:
    if criteria.author and not contains(pub.author, criteria.author):
        return False
    if criteria.type and pub.type != criteria.type:
        return False
    if criteria.year and pub.year != criteria.year:
        return False
    if criteria.title and not contains(pub.title, criteria.title):
        return False
    if criteria.year_range is not None and pub.year not in criteria.year_range:
        return False
    return True


def search_publications(
    publications: Sequence[Publication],
    criteria: SearchCriteria | None = None,
    **fields,
) -> list[Publication]:
    """Filter publications by every supplied criterion.

    Args:
        publications: Records to search.
        criteria: Search constraints. If omitted, one is built from
            keyword *fields* (``author``, ``type``, ``year``, ``title``,
            ``year_range``).

    Returns:
        Matching publications in their original order.

    Raises:
        TypeError: If both *criteria* and keyword fields are given, or a
            keyword field is unknown.

    Examples:
        >>> search_publications(pubs, author="joão", year_range=(2020, 2023))
    """
    if criteria is None:
        criteria = SearchCriteria(**fields)
    elif fields:
        raise TypeError("pass either a SearchCriteria or keyword fields, not both")

    return [pub for pub in publications if _matches_criteria(pub, criteria)]


def filter_by_author_and_title(
    publications: Sequence[Publication],
    author_name: str | None = None,
    title_term: str | None = None,
    options: AuthorTitleOptions | None = None,
) -> Sequence[Publication]:
    """Filter publications by an author name AND a title term.

    Author matching is case-insensitive: exact equality against the
    trimmed name when ``exact_author_match`` is set, substring otherwise.
    Title matching uses exact equality, then whole-word matching, then
    substring containment, in that order of precedence.

    Args:
        publications: Records to filter.
        author_name: Author to look for. Empty or None means any author.
        title_term: Title term to look for. Empty or None means any title.
        options: Matching modes; defaults to substring matching.

    Returns:
        *publications* itself when both terms are empty, otherwise a new
        list of the records matching both conditions.
    """
    if not author_name and not title_term:
        return publications

    options = options or AuthorTitleOptions()
    wanted_author = author_name.lower().strip() if author_name else ""
    wanted_title = title_term.lower().strip() if title_term else ""

    def author_matches(pub: Publication) -> bool:
        if not author_name:
            return True
        if options.exact_author_match:
            return pub.author.lower() == wanted_author
        return wanted_author in pub.author.lower()

    def title_matches(pub: Publication) -> bool:
        if not title_term:
            return True
        if options.exact_title_match:
            return pub.title.lower() == wanted_title
        if options.whole_words:
            return contains_whole_word(pub.title, wanted_title)
        return wanted_title in pub.title.lower()

    return [pub for pub in publications if author_matches(pub) and title_matches(pub)]


def _combine(text: str, needles: Sequence[str], logic: str, case_sensitive: bool) -> bool:
    hits = (contains(text, needle, case_sensitive) for needle in needles)
    if logic == "AND":
        return all(hits)
    return any(hits)


def filter_by_authors_and_terms(
    publications: Sequence[Publication],
    author_names: Sequence[str] | None = None,
    title_terms: Sequence[str] | None = None,
    options: MultiFilterOptions | None = None,
) -> Sequence[Publication]:
    """Filter by several author names and several title terms.

    Names and terms are substring-matched against the author and title.
    Within each list, ``"AND"`` logic requires every element to match and
    ``"OR"`` at least one. An empty list places no constraint, and the
    author and title conditions must both hold.

    Args:
        publications: Records to filter.
        author_names: Author name fragments.
        title_terms: Title fragments.
        options: Logic per list and case sensitivity.

    Returns:
        *publications* itself when both lists are empty, otherwise a new
        list of matching records.
    """
    author_names = list(author_names or [])
    title_terms = list(title_terms or [])
    if not author_names and not title_terms:
        return publications

    options = options or MultiFilterOptions()

    def keep(pub: Publication) -> bool:
        if author_names and not _combine(
            pub.author, author_names, options.author_logic, options.case_sensitive
        ):
            return False
        if title_terms and not _combine(
            pub.title, title_terms, options.title_logic, options.case_sensitive
        ):
            return False
        return True

    return [pub for pub in publications if keep(pub)]


def author_publications(
    publications: Sequence[Publication],
    author_name: str | None,
    title_filter: str | None = None,
) -> AuthorPublications:
    """Look up an author's publications, optionally narrowed by title.

    Args:
        publications: Records to search.
        author_name: Case-insensitive substring of the author name.
        title_filter: Optional case-insensitive title substring.

    Returns:
        AuthorPublications. ``total_count`` counts the author's records
        before the title filter, ``filtered_count`` after it. An empty
        *author_name* gives an empty result.
    """
    if not author_name:
        return AuthorPublications()

    by_author = [pub for pub in publications if contains(pub.author, author_name)]
    if title_filter:
        matched = [pub for pub in by_author if contains(pub.title, title_filter)]
    else:
        matched = by_author

    return AuthorPublications(
        author=author_name,
        publications=matched,
        filtered_count=len(matched),
        total_count=len(by_author),
        title_filter=title_filter or None,
    )
