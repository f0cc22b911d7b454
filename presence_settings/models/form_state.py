# presence_settings/models/form_state.py
from __future__ import annotations
from dataclasses import dataclass, field

from presence_settings.core.constants import (
    DEFAULT_DEBUG_LOG_FOLDER,
    DEFAULT_INACTIVITY_TIMEOUT,
    DEFAULT_THEME_NAME,
)
from presence_settings.models.theme_model import Theme


@dataclass
class FormState:
    """
    The live, user-edited values of the settings dialog. Mutable.

    One instance lives for one dialog session: it is built from the persisted
    settings on reset and thrown away when the dialog closes without a commit.
    """

    # --- Project scope ---
    project_enabled: bool = True
    project_description: str = ""

    # --- Application scope ---
    enabled: bool = True
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
    hide_after_period_of_inactivity: bool = True
    inactivity_timeout: int = DEFAULT_INACTIVITY_TIMEOUT
    reset_open_time_after_inactivity: bool = True
    experimental_window_listener_enabled: bool = False
    debug_logging_enabled: bool = False
    debug_log_folder: str = DEFAULT_DEBUG_LOG_FOLDER
