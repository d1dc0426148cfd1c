"""Tests for the article search filter."""

from termblog.script.search import SEARCH_JS, ArticleCard, card_matches, filter_cards

CARDS = [
    ArticleCard("Python Performance", "Profiling hot loops"),
    ArticleCard("Rust Ownership", "Borrowing explained"),
    ArticleCard(None, "orphan excerpt with PYTHON inside"),
    ArticleCard("No excerpt", None),
]


class TestSearch:
    def test_case_insensitive_title_match(self) -> None:
        assert card_matches("python", CARDS[0])

    def test_excerpt_match(self) -> None:
        assert card_matches("borrowing", CARDS[1])

    def test_missing_elements_treated_as_empty(self) -> None:
        assert card_matches("python", CARDS[2])
        assert not card_matches("anything", ArticleCard())

    def test_filter_hides_non_matching(self) -> None:
        assert filter_cards(CARDS, "python") == ["", "none", "", "none"]

    def test_no_match_hides_all(self) -> None:
        assert filter_cards(CARDS, "zzz") == ["none"] * 4

    def test_empty_query_shows_all(self) -> None:
        assert filter_cards(CARDS, "") == ["", "", "", ""]

    def test_snippet_targets_cards(self) -> None:
        assert ".search-input" in SEARCH_JS
        assert ".article-card" in SEARCH_JS
        assert "toLowerCase" in SEARCH_JS
