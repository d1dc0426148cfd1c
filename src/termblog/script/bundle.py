"""Page-behavior bundle assembly.

Joins the behavior snippets into one script::

    (function() {
      'use strict';
      var cfg = {...};        // ScriptConfig.to_client()
      ...behaviors...
    })();
    (function() {
      var cfg = {...};
      ...page type...
    })();

The first closure keeps the template's variables out of the host
page's globals; the page-type closure runs independently of it.
"""

import json
import logging
from pathlib import Path

from termblog.config import ScriptConfig
from termblog.script.archive import ARCHIVE_FILTER_JS
from termblog.script.code import CODE_COPY_JS, COPY_TEXT_JS, SYNTAX_JS
from termblog.script.effects import CARD_SHADOW_JS, GLITCH_JS, READING_PROGRESS_JS
from termblog.script.navigation import NAVIGATION_JS
from termblog.script.page_type import PAGE_TYPE_JS
from termblog.script.search import SEARCH_JS
from termblog.script.share import SHARE_JS
from termblog.script.terminal import TERMINAL_JS
from termblog.script.theme import THEME_JS

logger = logging.getLogger("termblog.script")

BUNDLE_HEADER = "/* termblog page behaviors (generated) */\n"

# Wiring order on page load.
BEHAVIORS: tuple[tuple[str, str], ...] = (
    ("copy-text", COPY_TEXT_JS),
    ("theme", THEME_JS),
    ("navigation", NAVIGATION_JS),
    ("search", SEARCH_JS),
    ("terminal", TERMINAL_JS),
    ("card-shadow", CARD_SHADOW_JS),
    ("glitch", GLITCH_JS),
    ("reading-progress", READING_PROGRESS_JS),
    ("syntax", SYNTAX_JS),
    ("code-copy", CODE_COPY_JS),
    ("share", SHARE_JS),
    ("archive-filter", ARCHIVE_FILTER_JS),
)


def _cfg_line(config: ScriptConfig) -> str:
    # "</" is escaped so the bundle stays safe to inline in a <script> tag
    payload = json.dumps(config.to_client(), ensure_ascii=False).replace("</", "<\\/")
    return f"  var cfg = {payload};\n"


def build_bundle(config: ScriptConfig | None = None) -> str:
    """Assemble the full page-behavior script for *config*."""
    config = config or ScriptConfig()
    cfg_line = _cfg_line(config)
    behaviors = "\n".join(snippet for _, snippet in BEHAVIORS)
    return (
        BUNDLE_HEADER
        + "(function() {\n  'use strict';\n\n"
        + cfg_line
        + "\n"
        + behaviors
        + "})();\n\n(function() {\n"
        + cfg_line
        + "\n"
        + PAGE_TYPE_JS
        + "})();\n"
    )


def script_tag(path: str = "/script.js") -> str:
    """``<script>`` tag that loads the bundle from *path*."""
    return f'<script src="{path}" defer data-termblog="script"></script>'


def write_bundle(target: str | Path, config: ScriptConfig | None = None) -> Path:
    """Write the bundle to *target*, creating parent directories.

    Returns the resolved path written.
    """
    path = Path(target)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_bundle(config), encoding="utf-8")
    logger.info("Wrote page script to %s", path.resolve())
    return path.resolve()
