"""Fetch a publication listing over HTTP and build every aggregate.

``load_publications`` fetches with a ``TextClient``; the coroutine
``load_publications_async`` does the same with ``httpx.AsyncClient`` and
awaits only the network response. Fetch failures are logged and
re-raised unchanged, so callers can inspect
``httpx.HTTPStatusError.response.status_code`` or the ``httpx.RequestError``.

Usage::

    from pubgraph.catalog.loader import load_publications

    catalog = load_publications("https://lab.example.org/publicacoesPorMembro.csv")
    catalog.statistics.total_publications
    catalog.by_author["João Silva"].years_active
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from pubgraph.api_client import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, TextClient
from pubgraph.catalog.grouping import (
    group_by_author,
    group_by_type,
    group_by_year,
    publication_stats,
)
from pubgraph.catalog.models import (
    AuthorSummary,
    ParseReport,
    Publication,
    PublicationStats,
    TypeSummary,
    YearSummary,
)
from pubgraph.catalog.parser import parse_publications_report

logger = logging.getLogger(__name__)


@dataclass
class PublicationCatalog:
    """Parsed publications bundled with their derived views."""

    publications: list[Publication] = field(default_factory=list)
    by_author: dict[str, AuthorSummary] = field(default_factory=dict)
    by_type: dict[str, TypeSummary] = field(default_factory=dict)
    by_year: dict[int, YearSummary] = field(default_factory=dict)
    statistics: PublicationStats = field(default_factory=PublicationStats)
    skipped_lines: int = 0


def build_catalog(report: ParseReport) -> PublicationCatalog:
    """Compute all aggregates for a parse result."""
    pubs = report.publications
    return PublicationCatalog(
        publications=pubs,
        by_author=group_by_author(pubs),
        by_type=group_by_type(pubs),
        by_year=group_by_year(pubs),
        statistics=publication_stats(pubs),
        skipped_lines=report.skipped_lines,
    )


def catalog_from_text(csv_text: str) -> PublicationCatalog:
    """Parse listing text and build its catalog."""
    report = parse_publications_report(csv_text)
    if report.skipped_lines or report.coerced_years:
        logger.info(
            "Listing had %d malformed line(s) and %d unparseable year(s)",
            report.skipped_lines,
            report.coerced_years,
        )
    return build_catalog(report)


def load_publications(
    source: str,
    client: TextClient | None = None,
    **client_kwargs,
) -> PublicationCatalog:
    """Fetch a listing from *source* and build its catalog.

    Args:
        source: Absolute URL, or a path relative to the client's base URL.
        client: Client to fetch with. If omitted, a ``TextClient`` is
            created from *client_kwargs* and closed afterwards.
        **client_kwargs: Passed to ``TextClient`` when *client* is None.

    Returns:
        PublicationCatalog with every aggregate computed.

    Raises:
        httpx.HTTPStatusError: On a non-success HTTP status.
        httpx.RequestError: On a network failure or redirect loop.
    """
    owns_client = client is None
    if owns_client:
        client = TextClient(**client_kwargs)

    try:
        csv_text = client.get_text(source)
    except httpx.HTTPStatusError as exc:
        logger.error("Error loading %s: HTTP status %d", source, exc.response.status_code)
        raise
    except httpx.RequestError as exc:
        logger.error("Error loading %s: %s", source, exc)
        raise
    finally:
        if owns_client:
            client.close()

    return catalog_from_text(csv_text)


async def load_publications_async(
    source: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PublicationCatalog:
    """Asynchronous variant of ``load_publications``.

    Args:
        source: Absolute URL of the listing.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        transport: Optional async transport for testing.

    Raises:
        httpx.HTTPStatusError: On a non-success HTTP status.
        httpx.RequestError: On a network failure or redirect loop.
    """
    client_kwargs = {
        "timeout": timeout,
        "headers": {"User-Agent": user_agent},
        "follow_redirects": True,
    }
    if transport is not None:
        client_kwargs["transport"] = transport

    async with httpx.AsyncClient(**client_kwargs) as client:
        try:
            response = await client.get(source)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("Error loading %s: HTTP status %d", source, exc.response.status_code)
            raise
        except httpx.RequestError as exc:
            logger.error("Error loading %s: %s", source, exc)
            raise

    return catalog_from_text(response.text)
