"""Tests for pubgraph.catalog.models: records, aggregates and option structs."""

import pytest

from pubgraph.catalog.models import (
    AuthorTitleOptions,
    MultiFilterOptions,
    Publication,
    PublicationStats,
    SearchCriteria,
    YearRange,
)


class TestPublication:

    def test_fields(self):
        p = Publication(type="livro", author="Ana Costa", year=2020, title="Tecnologia")
        assert p.type == "livro"
        assert p.has_known_year is True

    def test_unknown_year(self):
        assert Publication("livro", "Ana", 0, "T").has_known_year is False

    def test_hashable(self):
        a = Publication("livro", "Ana", 2020, "T")
        assert len({a, Publication("livro", "Ana", 2020, "T")}) == 1


class TestYearRange:

    def test_default_is_zero(self):
        assert YearRange() == YearRange(0, 0)

    def test_contains_inclusive(self):
        r = YearRange(2020, 2023)
        assert 2020 in r
        assert 2023 in r
        assert 2019 not in r

    def test_single_year(self):
        assert 2021 in YearRange(2021, 2021)


class TestOptionDefaults:

    def test_search_criteria(self):
        c = SearchCriteria()
        assert (c.author, c.type, c.year, c.title, c.year_range) == (None, None, None, None, None)

    def test_search_criteria_year_range_forms(self):
        assert SearchCriteria(year_range=(2019, 2020)).year_range == YearRange(2019, 2020)
        assert SearchCriteria(year_range={"min": 2019, "max": 2020}).year_range == YearRange(2019, 2020)

    def test_search_criteria_bad_year_range(self):
        with pytest.raises(TypeError):
            SearchCriteria(year_range=2020)
        with pytest.raises(TypeError):
            SearchCriteria(year_range={"start": 2019, "end": 2020})

    def test_author_title_options(self):
        o = AuthorTitleOptions()
        assert not (o.exact_author_match or o.exact_title_match or o.whole_words)

    def test_multi_filter_options(self):
        o = MultiFilterOptions()
        assert o.author_logic == "OR"
        assert o.title_logic == "OR"
        assert o.case_sensitive is False

    def test_invalid_title_logic(self):
        with pytest.raises(ValueError, match="title_logic"):
            MultiFilterOptions(title_logic="NOT")

    def test_stats_defaults_are_independent(self):
        a, b = PublicationStats(), PublicationStats()
        a.publication_types["x"] = 1
        assert b.publication_types == {}
