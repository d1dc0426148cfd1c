"""Theme toggle — light/dark display mode persisted in local storage.

On load the stored preference wins; without one the OS color-scheme
preference decides, and a failing ``matchMedia`` falls back to dark.
The resolved theme is written to ``<html data-theme>`` and mirrored by
the toggle icon.  System preference changes are followed only while no
preference is stored.  Each toggle click flips the attribute and
persists the new value.

``ThemePreference`` is the same rule in Python, over any mutable
mapping standing in for ``localStorage``.
"""

from collections.abc import MutableMapping

LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)

THEME_JS = """\
  /* theme */
  var root = document.documentElement;
  var themeToggle = document.getElementById('themeToggle');
  var themeIcon = document.querySelector('.theme-icon');

  function storedTheme() {
    var saved = localStorage.getItem(cfg.themeKey);
    return saved === 'light' || saved === 'dark' ? saved : null;
  }

  function systemTheme() {
    try {
      if (window.matchMedia && window.matchMedia('(prefers-color-scheme: dark)').matches) {
        return 'dark';
      }
      return 'light';
    } catch (e) {
      return 'dark';
    }
  }

  function applyTheme(theme) {
    root.setAttribute('data-theme', theme);
    if (themeIcon) themeIcon.textContent = theme === 'light' ? cfg.lightIcon : cfg.darkIcon;
  }

  applyTheme(storedTheme() || systemTheme());

  try {
    window.matchMedia('(prefers-color-scheme: dark)').addEventListener('change', function(e) {
      if (!storedTheme()) applyTheme(e.matches ? 'dark' : 'light');
    });
  } catch (e) {
    console.log('System theme detection not supported');
  }

  if (themeToggle) {
    themeToggle.addEventListener('click', function() {
      var theme = root.getAttribute('data-theme') === 'light' ? 'dark' : 'light';
      applyTheme(theme);
      localStorage.setItem(cfg.themeKey, theme);
    });
  }
"""


def resolve_theme(saved: str | None, prefers_dark: bool | None) -> str:
    """Theme to apply on load.

    *prefers_dark* is ``None`` when color-scheme detection failed.
    """
    if saved in THEMES:
        return saved
    if prefers_dark is None:
        return DARK
    return DARK if prefers_dark else LIGHT


def toggle_theme(current: str | None) -> str:
    """Theme after a toggle click, given the current ``data-theme`` value."""
    return DARK if current == LIGHT else LIGHT


def theme_icon(theme: str, *, light_icon: str = "◑", dark_icon: str = "◐") -> str:
    return light_icon if theme == LIGHT else dark_icon


class ThemePreference:
    """Theme state for one page: the ``data-theme`` attribute plus storage.

    Usage::

        storage = {}
        pref = ThemePreference(storage)
        pref.load(prefers_dark=True)   # "dark"
        pref.toggle()                  # "light", storage["theme"] == "light"
    """

    __slots__ = ("_key", "_storage", "attribute", "dark_icon", "light_icon")

    def __init__(
        self,
        storage: MutableMapping[str, str],
        *,
        key: str = "theme",
        light_icon: str = "◑",
        dark_icon: str = "◐",
    ) -> None:
        self._storage = storage
        self._key = key
        self.light_icon = light_icon
        self.dark_icon = dark_icon
        self.attribute: str | None = None

    @property
    def stored(self) -> str | None:
        """The persisted preference, or None when absent or unrecognized."""
        saved = self._storage.get(self._key)
        return saved if saved in THEMES else None

    @property
    def icon(self) -> str:
        return theme_icon(self.attribute or DARK, light_icon=self.light_icon, dark_icon=self.dark_icon)

    def load(self, prefers_dark: bool | None) -> str:
        """Apply the initial theme. Reads storage, never writes it."""
        self.attribute = resolve_theme(self.stored, prefers_dark)
        return self.attribute

    def toggle(self) -> str:
        """Flip the theme and persist it."""
        self.attribute = toggle_theme(self.attribute)
        self._storage[self._key] = self.attribute
        return self.attribute

    def on_system_change(self, prefers_dark: bool) -> str | None:
        """Follow an OS preference change unless the user picked a theme.

        Returns the applied theme, or None when the change was ignored.
        """
        if self.stored is not None:
            return None
        self.attribute = DARK if prefers_dark else LIGHT
        return self.attribute
