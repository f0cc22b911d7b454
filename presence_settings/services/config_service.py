# presence_settings/services/config_service.py
import json
from dataclasses import fields
from pathlib import Path
from typing import Any

from presence_settings.core.constants import (
    DESCRIPTION_MAX_LENGTH,
    INACTIVITY_TIMEOUT_MAX,
    INACTIVITY_TIMEOUT_MIN,
    PROJECT_CONFIG_DIR_NAME,
    PROJECT_CONFIG_FILE_NAME,
)
from presence_settings.models.settings_model import ApplicationSettings, ProjectSettings
from presence_settings.services.theme_service import ThemeService
from presence_settings.utils.logger_utils import logger


class ConfigSaveError(IOError):
    pass


# Section of the application file each field is stored under.
APPLICATION_SECTIONS: dict[str, tuple[str, ...]] = {
    "settings": (
        "enabled",
        "show_unknown_image_ide",
        "show_unknown_image_file",
        "show_file_extensions",
        "hide_read_only_files",
        "show_reading_instead_of_writing",
        "show_ide_when_no_project_is_available",
        "show_files",
        "show_elapsed_time",
        "force_big_ide_icon",
        "theme",
    ),
    "inactivity": (
        "hide_after_period_of_inactivity",
        "inactivity_timeout",
        "reset_open_time_after_inactivity",
    ),
    "experimental": ("experimental_window_listener_enabled",),
    "debug": ("debug_logging_enabled", "debug_log_folder"),
}


def clamp_inactivity_timeout(value: Any) -> int:
    """Coerces a timeout in minutes into the supported range."""
    try:
        minutes = int(value)
    except (TypeError, ValueError, OverflowError):
        minutes = ApplicationSettings.inactivity_timeout
    return max(INACTIVITY_TIMEOUT_MIN, min(INACTIVITY_TIMEOUT_MAX, minutes))


class ConfigService:
    """Reads and writes the application settings file and per-project settings files."""

    def __init__(self, config_path: Path, theme_service: ThemeService):
        # --- Service Setup ---
        self.config_path = config_path
        self.theme_service = theme_service

    # --- Application scope ---

    def load_application_settings(self) -> ApplicationSettings:
        """
        Loads the application settings. A missing or unreadable file yields the defaults.
        """
        data = self._read_json(self.config_path)
        if data is None:
            return ApplicationSettings(theme=self.theme_service.get_theme_by_name(None))

        defaults = ApplicationSettings()
        values: dict[str, Any] = {}
        for section, attrs in APPLICATION_SECTIONS.items():
            section_data = data.get(section, {})
            if not isinstance(section_data, dict):
                logger.warning(f"Section '{section}' in '{self.config_path}' is not an object. Ignoring.")
                continue
            for attr in attrs:
                if attr in section_data:
                    values[attr] = section_data[attr]

        field_types = {f.name: type(getattr(defaults, f.name)) for f in fields(ApplicationSettings)}
        for attr, raw in list(values.items()):
            if attr == "theme":
                continue
            if attr == "inactivity_timeout":
                values[attr] = clamp_inactivity_timeout(raw)
            elif field_types[attr] is bool:
                if isinstance(raw, bool):
                    values[attr] = raw
                else:
                    logger.warning(f"Setting '{attr}' in '{self.config_path}' is not a boolean. Using default.")
                    del values[attr]
            else:
                values[attr] = str(raw)

        theme_name = values.get("theme")
        if theme_name is not None and not isinstance(theme_name, str):
            logger.warning(f"Theme in '{self.config_path}' is not a name. Using default.")
            theme_name = None
        values["theme"] = self.theme_service.get_theme_by_name(theme_name)

        logger.info(f"Loaded application settings from '{self.config_path}'.")
        return ApplicationSettings(**values)

    def save_application_settings(self, settings: ApplicationSettings):
        """Writes the application settings file. Raises ConfigSaveError on failure."""
        config_data: dict[str, dict[str, Any]] = {}
        for section, attrs in APPLICATION_SECTIONS.items():
            config_data[section] = {attr: getattr(settings, attr) for attr in attrs}
        config_data["settings"]["theme"] = settings.theme.name

        self._write_json(self.config_path, config_data)
        logger.info(f"Application settings saved to '{self.config_path}'.")

    # --- Project scope ---

    @staticmethod
    def project_config_path(project_dir: Path) -> Path:
        return project_dir / PROJECT_CONFIG_DIR_NAME / PROJECT_CONFIG_FILE_NAME

    def load_project_settings(self, project_dir: Path) -> ProjectSettings:
        """Loads the settings of one project; defaults are used for anything missing."""
        path = self.project_config_path(project_dir)
        data = self._read_json(path) or {}
        project = data.get("project", {})
        if not isinstance(project, dict):
            logger.warning(f"Section 'project' in '{path}' is not an object. Ignoring.")
            project = {}

        description = str(project.get("description", ""))
        if len(description) > DESCRIPTION_MAX_LENGTH:
            logger.warning(f"Project description in '{path}' is too long. Truncating.")
            description = description[:DESCRIPTION_MAX_LENGTH]

        return ProjectSettings(
            project_name=str(project.get("name") or project_dir.resolve().name),
            enabled=self._read_bool(project, "enabled", True, path),
            description=description,
        )

    def save_project_settings(self, project_dir: Path, settings: ProjectSettings):
        """Writes the project settings file. Raises ConfigSaveError on failure."""
        path = self.project_config_path(project_dir)
        self._write_json(
            path,
            {
                "project": {
                    "name": settings.project_name,
                    "enabled": settings.enabled,
                    "description": settings.description,
                }
            },
        )
        logger.info(f"Project settings for '{settings.project_name}' saved to '{path}'.")

    # --- File helpers ---

    @staticmethod
    def _read_bool(section: dict, key: str, default: bool, path: Path) -> bool:
        raw = section.get(key, default)
        if isinstance(raw, bool):
            return raw
        logger.warning(f"Setting '{key}' in '{path}' is not a boolean. Using default.")
        return default

    def _read_json(self, path: Path) -> dict | None:
        if not path.exists():
            logger.warning(f"Settings file not found at '{path}'. Using defaults.")
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse '{path}': {e}. Using defaults.")
            return None
        except OSError as e:
            logger.error(f"Failed to read '{path}': {e}. Using defaults.")
            return None
        if not isinstance(data, dict):
            logger.error(f"Settings root in '{path}' must be an object, found {type(data).__name__}.")
            return None
        return data

    def _write_json(self, path: Path, data: dict):
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
        except OSError as e:
            logger.error(f"IOError while saving '{path}': {e}", exc_info=True)
            raise ConfigSaveError(f"Failed to write to config file: {e}") from e
        except TypeError as e:
            logger.error(f"TypeError during JSON serialization: {e}", exc_info=True)
            raise ConfigSaveError(f"A data type could not be saved to JSON: {e}") from e
