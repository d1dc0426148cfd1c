"""Archive category filter.

Clicking a ``.filter-btn`` makes it the single active button and hides
every ``.archive-item`` whose ``data-category`` differs from the
button's ``data-filter``.  The ``all`` filter shows everything.
"""

from collections.abc import Sequence

ARCHIVE_FILTER_JS = """\
  /* archive filter */
  var filterBtns = document.querySelectorAll('.filter-btn');
  var archiveItems = document.querySelectorAll('.archive-item');

  filterBtns.forEach(function(btn) {
    btn.addEventListener('click', function() {
      var filter = btn.dataset.filter;

      filterBtns.forEach(function(b) { b.classList.remove('active'); });
      btn.classList.add('active');

      archiveItems.forEach(function(item) {
        if (filter === cfg.allFilter || item.dataset.category === filter) {
          item.classList.remove('hidden');
        } else {
          item.classList.add('hidden');
        }
      });
    });
  });
"""


def item_visible(category: str | None, selected: str, all_filter: str = "all") -> bool:
    return selected == all_filter or category == selected


class ArchiveFilter:
    """Filter buttons and archive items of one archive page.

    *filters* are the buttons' ``data-filter`` values, *categories* the
    items' ``data-category`` values (None where the attribute is absent).
    Nothing is active and nothing hidden until the first click.
    """

    __slots__ = ("_all", "active", "categories", "filters", "hidden")

    def __init__(
        self,
        filters: Sequence[str],
        categories: Sequence[str | None],
        *,
        all_filter: str = "all",
    ) -> None:
        self.filters = tuple(filters)
        self.categories = tuple(categories)
        self._all = all_filter
        self.active: int | None = None
        self.hidden: list[bool] = [False] * len(self.categories)

    def click(self, index: int) -> list[bool]:
        """Click the button at *index*; returns the new hidden flags."""
        selected = self.filters[index]
        self.active = index
        self.hidden = [not item_visible(c, selected, self._all) for c in self.categories]
        return self.hidden

    @property
    def visible(self) -> list[str | None]:
        """Categories of the items currently shown."""
        return [c for c, hidden in zip(self.categories, self.hidden, strict=True) if not hidden]
