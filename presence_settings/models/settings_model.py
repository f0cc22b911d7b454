# presence_settings/models/settings_model.py
from __future__ import annotations
from dataclasses import dataclass, field

from presence_settings.core.constants import (
    DEFAULT_DEBUG_LOG_FOLDER,
    DEFAULT_INACTIVITY_TIMEOUT,
    DEFAULT_THEME_NAME,
)
from presence_settings.models.theme_model import Theme


@dataclass(frozen=True)
class ApplicationSettings:
    """Holds the persisted application-wide settings. Immutable."""

    enabled: bool = True

    # --- Display ---
    show_unknown_image_ide: bool = True
    show_unknown_image_file: bool = True
    show_file_extensions: bool = True
    hide_read_only_files: bool = True
    show_reading_instead_of_writing: bool = False
    show_ide_when_no_project_is_available: bool = False
    show_files: bool = True
    show_elapsed_time: bool = True
    force_big_ide_icon: bool = False
    theme: Theme = field(default_factory=lambda: Theme(DEFAULT_THEME_NAME))

    # --- Inactivity ---
    hide_after_period_of_inactivity: bool = True
    inactivity_timeout: int = DEFAULT_INACTIVITY_TIMEOUT  # minutes
    reset_open_time_after_inactivity: bool = True

    # --- Experimental ---
    experimental_window_listener_enabled: bool = False

    # --- Debugging ---
    debug_logging_enabled: bool = False
    debug_log_folder: str = DEFAULT_DEBUG_LOG_FOLDER


@dataclass(frozen=True)
class ProjectSettings:
    """Holds the persisted settings of a single project. Immutable."""

    project_name: str = ""
    enabled: bool = True
    description: str = ""
