"""Article search — case-insensitive substring filter over the card list."""

from collections.abc import Iterable
from dataclasses import dataclass

SEARCH_JS = """\
  /* search */
  var searchInput = document.querySelector('.search-input');
  var searchBtn = document.querySelector('.search-btn');

  if (searchInput) {
    searchInput.addEventListener('input', function(e) {
      var term = e.target.value.toLowerCase();
      document.querySelectorAll('.article-card').forEach(function(card) {
        var titleEl = card.querySelector('.article-title');
        var excerptEl = card.querySelector('.article-excerpt');
        var title = titleEl ? titleEl.textContent.toLowerCase() : '';
        var excerpt = excerptEl ? excerptEl.textContent.toLowerCase() : '';
        card.style.display = title.indexOf(term) !== -1 || excerpt.indexOf(term) !== -1 ? '' : 'none';
      });
    });

    if (searchBtn) {
      searchBtn.addEventListener('click', function() {
        searchInput.focus();
      });
    }
  }
"""


@dataclass(frozen=True, slots=True)
class ArticleCard:
    """Text of one ``.article-card``; None where the element is missing."""

    title: str | None = None
    excerpt: str | None = None


def card_matches(query: str, card: ArticleCard) -> bool:
    term = query.lower()
    return term in (card.title or "").lower() or term in (card.excerpt or "").lower()


def filter_cards(cards: Iterable[ArticleCard], query: str) -> list[str]:
    """Inline ``display`` value for each card: ``""`` shown, ``"none"`` hidden."""
    return ["" if card_matches(query, card) else "none" for card in cards]
