"""Unit tests for the phrase catalog and its flattened matching order."""

import pytest

from todofilter.domains.todoist.catalog import (
    FILTER_PATTERNS,
    SORTED_PATTERNS,
    STOPWORDS,
    Category,
    duplicate_phrases,
    flatten_patterns,
)


def _index(phrase: str) -> int:
    return [p.phrase for p in SORTED_PATTERNS].index(phrase)


class TestCatalogShape:
    """Tests for catalog contents."""

    def test_categories_in_declaration_order(self):
        assert list(FILTER_PATTERNS) == [
            Category.PRIORITY,
            Category.DATE,
            Category.PROJECT,
            Category.LABEL,
            Category.STATUS,
            Category.DEADLINE,
        ]

    def test_phrases_are_lowercase(self):
        for pairs in FILTER_PATTERNS.values():
            for phrase, _token in pairs:
                assert phrase == phrase.lower()

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            FILTER_PATTERNS[Category.PRIORITY] = ()

    def test_stopwords(self):
        assert len(STOPWORDS) == 21
        assert {"and", "tasks", "mention", "from"} <= STOPWORDS
        assert "paint" not in STOPWORDS


class TestSortedPatterns:
    """Tests for longest-first, stable ordering."""

    def test_sorted_by_length_descending(self):
        lengths = [len(p.phrase) for p in SORTED_PATTERNS]
        assert lengths == sorted(lengths, reverse=True)

    def test_longer_phrase_before_its_substring(self):
        assert _index("urgent tasks") < _index("urgent")
        assert _index("work project") < _index("work")
        assert _index("due this week") < _index("this week")

    def test_equal_length_keeps_catalog_order(self):
        # All 18 characters: date category first, then deadline in authoring order
        assert _index("scheduled tomorrow") < _index("deadline this week")
        assert _index("deadline this week") < _index("deadline next week")

    def test_each_phrase_once(self):
        phrases = [p.phrase for p in SORTED_PATTERNS]
        assert len(phrases) == len(set(phrases))


class TestDuplicatePhrases:
    """Phrases registered in more than one category: last registration wins."""

    def test_shipped_catalog_duplicates(self):
        # Flagged on purpose: "important" is both a priority and a label
        assert duplicate_phrases() == {"important": [Category.PRIORITY, Category.LABEL]}

    def test_shipped_duplicate_resolves_to_last_category(self):
        important = SORTED_PATTERNS[_index("important")]
        assert important.token == "@important"
        assert important.category is Category.LABEL

    def test_last_registered_wins(self):
        patterns = {
            Category.PRIORITY: (("focus", "p1"), ("calls", "p2")),
            Category.LABEL: (("focus", "@focus"),),
        }
        flat = flatten_patterns(patterns)
        assert [(p.phrase, p.token) for p in flat] == [("calls", "p2"), ("focus", "@focus")]

    def test_no_duplicates(self):
        patterns = {Category.DATE: (("today", "today"),), Category.STATUS: (("done", "completed"),)}
        assert duplicate_phrases(patterns) == {}
