"""Page-type body class.

Adds exactly one class to ``<body>``: permalink when the host page
exposes ``window.T.entryInfo.entryId``, otherwise archive or category
by pathname, otherwise index.  Runs in its own closure after the
behaviors so a failure above never leaves the body unclassified.
"""

from enum import StrEnum

from termblog.config import ScriptConfig

PAGE_TYPE_JS = """\
  var body = document.body;
  var path = window.location.pathname;

  if (window.T && window.T.entryInfo && window.T.entryInfo.entryId) {
    body.classList.add(cfg.pageClasses.permalink);
  } else if (path.indexOf('/archive') !== -1) {
    body.classList.add(cfg.pageClasses.archive);
  } else if (path.indexOf('/category/') !== -1) {
    body.classList.add(cfg.pageClasses.category);
  } else {
    body.classList.add(cfg.pageClasses.index);
  }
"""


class PageType(StrEnum):
    PERMALINK = "permalink"
    ARCHIVE = "archive"
    CATEGORY = "category"
    INDEX = "index"


def classify_page(pathname: str, entry_id: object = None) -> PageType:
    """Classify a page from its pathname and the host's entry id (if any)."""
    if entry_id:
        return PageType.PERMALINK
    if "/archive" in pathname:
        return PageType.ARCHIVE
    if "/category/" in pathname:
        return PageType.CATEGORY
    return PageType.INDEX


def body_class(page_type: PageType, config: ScriptConfig | None = None) -> str:
    cfg = config or ScriptConfig()
    return {
        PageType.PERMALINK: cfg.permalink_class,
        PageType.ARCHIVE: cfg.archive_class,
        PageType.CATEGORY: cfg.category_class,
        PageType.INDEX: cfg.index_class,
    }[page_type]
