"""Tests for pubgraph.catalog.grouping: aggregates and statistics."""

from pubgraph.catalog.grouping import (
    group_by_author,
    group_by_type,
    group_by_year,
    publication_stats,
)
from pubgraph.catalog.models import Publication, YearRange


def _pub(author, year=2020, type_="article", title="T"):
    return Publication(type=type_, author=author, year=year, title=title)


class TestGroupByAuthor:

    def test_totals_sum_to_record_count(self, pubs):
        groups = group_by_author(pubs)
        assert sum(g.total_publications for g in groups.values()) == len(pubs)

    def test_first_seen_order(self, pubs):
        assert list(group_by_author(pubs)) == [
            "João Silva", "Maria Santos", "Ana Costa", "Pedro Silva Costa",
        ]

    def test_author_summary(self, pubs):
        joao = group_by_author(pubs)["João Silva"]
        assert joao.name == "João Silva"
        assert joao.total_publications == 2
        assert [p.year for p in joao.publications] == [2023, 2021]
        assert joao.publications_by_type == {"artigoEmPeriodico": 2}
        assert joao.publications_by_year == {2021: 1, 2023: 1}
        assert joao.years_active == [2021, 2023]

    def test_unknown_year_included_in_years_active(self):
        groups = group_by_author([_pub("A", 2021), _pub("A", 0), _pub("A", 2021)])
        assert groups["A"].years_active == [0, 2021]
        assert groups["A"].publications_by_year == {0: 1, 2021: 2}

    def test_names_are_case_sensitive(self):
        groups = group_by_author([_pub("ana costa"), _pub("Ana Costa")])
        assert len(groups) == 2

    def test_empty(self):
        assert group_by_author([]) == {}


class TestGroupByType:

    def test_type_summary(self, pubs):
        groups = group_by_type(pubs)
        article = groups["artigoEmPeriodico"]
        assert article.total_count == 3
        assert article.authors == ["João Silva", "Maria Santos"]
        assert article.year_range == YearRange(2019, 2023)

    def test_year_range_ignores_unknown_years(self, pubs):
        livro = group_by_type(pubs)["livro"]
        assert livro.total_count == 1
        assert livro.year_range == YearRange(0, 0)

    def test_mixed_known_and_unknown(self):
        groups = group_by_type([_pub("A", 0), _pub("B", 2018), _pub("C", 2015)])
        assert groups["article"].year_range == YearRange(2015, 2018)


class TestGroupByYear:

    def test_keys_ascending_including_unknown(self, pubs):
        assert list(group_by_year(pubs)) == [0, 2019, 2020, 2021, 2022, 2023]

    def test_year_summary(self):
        groups = group_by_year([
            _pub("A", 2020, "article"),
            _pub("B", 2020, "book"),
            _pub("A", 2020, "article"),
        ])
        summary = groups[2020]
        assert summary.year == 2020
        assert summary.total_count == 3
        assert summary.authors == ["A", "B"]
        assert summary.publication_types == {"article": 2, "book": 1}


class TestPublicationStats:

    def test_sample_stats(self, pubs):
        stats = publication_stats(pubs)
        assert stats.total_publications == 6
        assert stats.unique_authors == 4
        assert stats.publication_types == {
            "artigoEmPeriodico": 3,
            "trabalhoCompletoEmCongresso": 2,
            "livro": 1,
        }
        assert stats.year_range == YearRange(2019, 2023)
        assert stats.recent_years == {2020: 1, 2021: 1, 2022: 1, 2023: 1}

    def test_top_authors_ties_keep_first_appearance(self, pubs):
        stats = publication_stats(pubs)
        assert list(stats.top_authors.items()) == [
            ("João Silva", 2),
            ("Maria Santos", 2),
            ("Ana Costa", 1),
            ("Pedro Silva Costa", 1),
        ]

    def test_top_authors_capped_at_ten_and_sorted(self):
        records = []
        for i in range(15):
            records.extend(_pub(f"Author {i}") for _ in range(i + 1))
        top = publication_stats(records).top_authors
        assert len(top) == 10
        counts = list(top.values())
        assert counts == sorted(counts, reverse=True)
        assert next(iter(top)) == "Author 14"

    def test_empty(self):
        stats = publication_stats([])
        assert stats.total_publications == 0
        assert stats.unique_authors == 0
        assert stats.year_range == YearRange(0, 0)
        assert stats.top_authors == {}
        assert stats.recent_years == {}

    def test_only_unknown_years(self):
        stats = publication_stats([_pub("A", 0)])
        assert stats.year_range == YearRange(0, 0)
