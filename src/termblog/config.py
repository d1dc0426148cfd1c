"""Site configuration.

SiteConfig and ScriptConfig are frozen dataclasses — immutable after
creation, IDE-autocompletable, no string-key dict lookups.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from termblog.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ScriptConfig:
    """Constants baked into the page-behavior script.

    Serialized to a JSON object at the head of the bundle; every snippet
    reads its values from that object.  Defaults match the shipped blog
    template::

        config = ScriptConfig(copy_feedback_ms=1500)
    """

    # Theme
    theme_storage_key: str = "theme"
    light_icon: str = "◑"
    dark_icon: str = "◐"

    # Terminal typing: (text, delay in ms) pairs, played in order
    terminal_lines: tuple[tuple[str, int], ...] = (
        ("$ cat /about.txt", 0),
        ("분기별 고급 기술 아티클", 800),
        ("실전 경험 · 성능 최적화", 1200),
        ("$ _", 1600),
    )

    # Article card hover shadow, cycled by card index
    card_colors: tuple[str, ...] = ("var(--accent)", "var(--accent-2)", "var(--accent-3)")
    card_shadow_offset: int = 8

    # Hero title glitch
    glitch_steps: int = 3
    glitch_interval_ms: int = 50
    glitch_amplitude: float = 2.0

    # Clipboard feedback
    copy_feedback_ms: int = 2000
    copy_label: str = "COPY"
    copied_label: str = "COPIED!"
    failed_label: str = "FAILED"
    copied_class: str = "copied"
    link_copy_failed_message: str = "Failed to copy link"

    # Share intents: {url} and {title} are replaced with encoded values
    share_urls: tuple[tuple[str, str], ...] = (
        ("twitter", "https://twitter.com/intent/tweet?url={url}&text={title}"),
        ("linkedin", "https://www.linkedin.com/sharing/share-offsite/?url={url}"),
    )

    # Archive filter
    all_filter: str = "all"

    # Page-type body classes
    permalink_class: str = "tt-body-permalink"
    archive_class: str = "tt-body-archive"
    category_class: str = "tt-body-category"
    index_class: str = "tt-body-index"

    def to_client(self) -> dict[str, Any]:
        """The camelCase object the browser snippets read as ``cfg``."""
        return {
            "themeKey": self.theme_storage_key,
            "lightIcon": self.light_icon,
            "darkIcon": self.dark_icon,
            "terminalLines": [{"text": text, "delay": delay} for text, delay in self.terminal_lines],
            "cardColors": list(self.card_colors),
            "cardShadowOffset": self.card_shadow_offset,
            "glitchSteps": self.glitch_steps,
            "glitchIntervalMs": self.glitch_interval_ms,
            "glitchAmplitude": self.glitch_amplitude,
            "copyFeedbackMs": self.copy_feedback_ms,
            "copyLabel": self.copy_label,
            "copiedLabel": self.copied_label,
            "failedLabel": self.failed_label,
            "copiedClass": self.copied_class,
            "linkCopyFailed": self.link_copy_failed_message,
            "shareUrls": dict(self.share_urls),
            "allFilter": self.all_filter,
            "pageClasses": {
                "permalink": self.permalink_class,
                "archive": self.archive_class,
                "category": self.category_class,
                "index": self.index_class,
            },
        }


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Server configuration. Immutable after creation.

    All fields have defaults. Override what you need::

        config = SiteConfig(port=3000, public_dir="site", inject_script=True)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 4001
    debug: bool = False

    # Reload (development mode, requires debug=True)
    reload_include: tuple[str, ...] = (".html", ".css", ".js")

    # Static files
    public_dir: str | Path = "public"
    index: str = "index.html"
    not_found_page: str | None = None
    cache_control: str = "no-cache"

    # Page-behavior script
    script_path: str = "/script.js"
    inject_script: bool = False
    script: ScriptConfig = field(default_factory=ScriptConfig)

    # Logging
    log_level: str = "info"

    @property
    def public_path(self) -> Path:
        """Absolute path of the served directory."""
        return Path(self.public_dir).resolve()

    @property
    def index_url(self) -> str:
        """URL the root path redirects to."""
        return "/" + self.index.lstrip("/")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> "SiteConfig":
        """Build a config from ``TERMBLOG_*`` environment variables.

        Keyword *overrides* win over the environment.  Unset variables
        keep the dataclass defaults.

        Raises:
            ConfigurationError: If a port is unparsable or out of range, or a
                boolean variable cannot be parsed.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        if "TERMBLOG_HOST" in env:
            values["host"] = env["TERMBLOG_HOST"]
        if "TERMBLOG_PORT" in env:
            values["port"] = _parse_port(env["TERMBLOG_PORT"])
        if "TERMBLOG_PUBLIC_DIR" in env:
            values["public_dir"] = env["TERMBLOG_PUBLIC_DIR"]
        if "TERMBLOG_DEBUG" in env:
            values["debug"] = _parse_bool("TERMBLOG_DEBUG", env["TERMBLOG_DEBUG"])
        if "TERMBLOG_INJECT_SCRIPT" in env:
            values["inject_script"] = _parse_bool(
                "TERMBLOG_INJECT_SCRIPT", env["TERMBLOG_INJECT_SCRIPT"]
            )
        if "TERMBLOG_LOG_LEVEL" in env:
            values["log_level"] = env["TERMBLOG_LOG_LEVEL"].lower()

        values.update({k: v for k, v in overrides.items() if v is not None})
        if "port" in values:
            _check_port(values["port"])
        return cls(**values)


_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        msg = f"TERMBLOG_PORT must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from None
    return port


def _check_port(port: int) -> None:
    if not 0 < port < 65536:
        msg = f"Port out of range: {port}"
        raise ConfigurationError(msg)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    msg = f"{name} must be a boolean (1/0, true/false, yes/no, on/off), got {raw!r}"
    raise ConfigurationError(msg)
