# theme.py
import logging

logger = logging.getLogger(__name__)

COOKIE_NAME = "darkMode"
COOKIE_MAX_AGE = 365 * 24 * 3600

LIGHT_THEME = {
    "body": "#ffffff",
    "text": "#333333",
    "accent": "#4CAF50",  # matches the logo
    "background": "#f5f5f5",
}
DARK_THEME = {
    "body": "#121212",
    "text": "#f0f0f0",
    "accent": "#4CAF50",
    "background": "#1e1e1e",
}


def _is_true(raw):
    if isinstance(raw, bool):
        return raw
    return raw == "true"


class ThemePreference:
    """The one piece of state the site keeps: is dark mode on.

    `load()` is read once on construction; `save(flag)` is called on every toggle.
    Where the flag lives (cookie, file, dict in a test) is up to the caller.
    """

    def __init__(self, load, save):
        self._save = save
        self.dark_mode = _is_true(load())

    @property
    def palette(self):
        return DARK_THEME if self.dark_mode else LIGHT_THEME

    @property
    def icon(self):
        return "🌙" if self.dark_mode else "☀️"

    def toggle(self):
        self.dark_mode = not self.dark_mode
        self._save(self.dark_mode)
        logger.debug("theme toggled, dark_mode=%s", self.dark_mode)
        return self.dark_mode


def cookie_value(flag):
    return "true" if flag else "false"
