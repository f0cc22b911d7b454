# presence_settings/services/theme_service.py
import json
from pathlib import Path

from presence_settings.core.constants import DEFAULT_THEME_NAME, THEME_FILE_EXTENSION
from presence_settings.models.theme_model import Theme
from presence_settings.utils.logger_utils import logger

BUILTIN_THEMES: tuple[Theme, ...] = (
    Theme(
        name=DEFAULT_THEME_NAME,
        description="The original flat icon set.",
        icons={"ide": "classic/ide", "file": "classic/file"},
    ),
    Theme(
        name="Modern",
        description="Rounded icons with a dark background.",
        icons={"ide": "modern/ide", "file": "modern/file"},
    ),
    Theme(
        name="Material",
        description="Icons following the Material design palette.",
        icons={"ide": "material/ide", "file": "material/file"},
    ),
)


class ThemeService:
    """Catalog of available themes: the built-in set plus any theme files on disk."""

    def __init__(self, themes_dir: Path | None = None):
        self.themes_dir = themes_dir
        self._themes: dict[str, Theme] | None = None

    def list_themes(self) -> dict[str, Theme]:
        """Returns a mapping from theme name to Theme. Loaded once, then reused."""
        if self._themes is None:
            themes = {theme.name: theme for theme in BUILTIN_THEMES}
            themes.update(self._load_theme_files())
            self._themes = themes
            logger.debug(f"Theme catalog ready with {len(themes)} themes.")
        return dict(self._themes)

    def get_theme_by_name(self, name: str | None) -> Theme:
        """Looks a theme up by name, falling back to the default theme."""
        themes = self.list_themes()
        theme = themes.get(name) if isinstance(name, str) and name else None
        if theme is None:
            if name:
                logger.warning(f"Unknown theme '{name}'. Falling back to '{DEFAULT_THEME_NAME}'.")
            theme = themes[DEFAULT_THEME_NAME]
        return theme

    def _load_theme_files(self) -> dict[str, Theme]:
        if not self.themes_dir or not self.themes_dir.is_dir():
            return {}

        loaded: dict[str, Theme] = {}
        for theme_file in sorted(self.themes_dir.glob(f"*{THEME_FILE_EXTENSION}")):
            try:
                with open(theme_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                name = str(data["name"]).strip()
                if not name:
                    raise ValueError("Theme name is empty.")
                icons = data.get("icons", {})
                if not isinstance(icons, dict):
                    raise ValueError("'icons' must be an object.")
                loaded[name] = Theme(
                    name=name,
                    description=str(data.get("description", "")),
                    icons={str(k): str(v) for k, v in icons.items()},
                )
            except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                logger.error(f"Skipping malformed theme file '{theme_file}': {e}")
        return loaded
