# presence_settings/viewmodels/settings_vm.py

import dataclasses
from pathlib import Path
from typing import Any
from PyQt6.QtCore import QObject, pyqtSignal

from presence_settings.core.constants import (
    DESCRIPTION_MAX_LENGTH,
    MSG_INVALID_PATH,
    MSG_NOT_EXISTING,
    MSG_NOT_WRITABLE,
    MSG_PATH_IS_FILE,
)
from presence_settings.models.field_bindings import FIELD_BINDINGS, SettingsScope
from presence_settings.models.form_state import FormState
from presence_settings.models.log_folder_model import LogFolderState, ValidationResult
from presence_settings.models.settings_model import ApplicationSettings, ProjectSettings
from presence_settings.models.theme_model import Theme
from presence_settings.services.config_service import ConfigService, ConfigSaveError, clamp_inactivity_timeout
from presence_settings.services.debug_service import DebugService, DumpError
from presence_settings.services.theme_service import ThemeService
from presence_settings.utils.logger_utils import logger
from presence_settings.utils.system_utils import SystemUtils

# Toggles whose value changes what other fields may be edited.
ENABLEMENT_TRIGGERS = frozenset(
    {
        "hide_after_period_of_inactivity",
        "show_files",
        "hide_read_only_files",
        "debug_logging_enabled",
    }
)


def compute_enablement(form: FormState) -> dict[str, bool]:
    """Which dependent fields are editable, derived only from the form values."""
    return {
        "inactivity_timeout": form.hide_after_period_of_inactivity,
        "reset_open_time_after_inactivity": form.hide_after_period_of_inactivity,
        "show_unknown_image_file": form.show_files,
        "show_file_extensions": form.show_files,
        "hide_read_only_files": form.show_files,
        "show_reading_instead_of_writing": form.show_files and not form.hide_read_only_files,
        "debug_log_folder": form.debug_logging_enabled,
    }


class SettingsViewModel(QObject):
    """
    Keeps the settings dialog's form in sync with the persisted application and
    project settings. Implements the SettingsLifecycle the dialog drives.
    """

    # ---Signals for the View ---

    form_state_refreshed = pyqtSignal(object)  # FormState
    enablement_changed = pyqtSignal(dict)  # field name -> enabled
    log_folder_state_changed = pyqtSignal(object)  # LogFolderState
    settings_applied = pyqtSignal()
    toast_requested = pyqtSignal(str, str)  # message, level
    error_dialog_requested = pyqtSignal(str, str)  # title, message

    def __init__(
        self,
        config_service: ConfigService,
        theme_service: ThemeService,
        debug_service: DebugService,
        system_utils: SystemUtils,
        project_dir: Path,
    ):
        super().__init__()
        # ---Injected Services ---

        self.config_service = config_service
        self.theme_service = theme_service
        self.debug_service = debug_service
        self.system_utils = system_utils
        self.project_dir = project_dir

        # ---Persisted State (replaced only by apply) ---

        self.application_settings: ApplicationSettings = config_service.load_application_settings()
        self.project_settings: ProjectSettings = config_service.load_project_settings(project_dir)

        # ---Session State ---

        self.form = FormState()
        self.enablement: dict[str, bool] = compute_enablement(self.form)
        self.log_folder_state = LogFolderState(ValidationResult.NOT_EXISTING)

    # ---Lifecycle (called by the host) ---

    def load(self) -> None:
        self.reset()

    def is_dirty(self) -> bool:
        return self.is_modified()

    def commit(self) -> bool:
        return self.apply()

    # ---Synchronization ---

    def reset(self):
        """Overwrites the form with the persisted values, discarding unsaved edits."""
        values = {
            binding.form_attr: getattr(self._settings_for(binding.scope), binding.settings_attr)
            for binding in FIELD_BINDINGS
        }
        self.form = FormState(**values)
        logger.debug("Form state reset from persisted settings.")

        self.form_state_refreshed.emit(self.form)
        self.refresh_enablement()

    def is_modified(self) -> bool:
        """
        True if any field differs from its persisted value and the log folder is
        acceptable. A blocked folder never counts as a pending change.
        """
        if not self.validate_log_folder().is_valid:
            return False

        for binding in FIELD_BINDINGS:
            form_value = getattr(self.form, binding.form_attr)
            persisted_value = getattr(self._settings_for(binding.scope), binding.settings_attr)
            if not binding.equals(form_value, persisted_value):
                return True
        return False

    def apply(self) -> bool:
        """
        Writes the form back into both settings objects and saves them.

        The log folder is only written while it passes validation; every other
        field is always written. Returns False if saving to disk failed.
        """
        logger.info("Applying settings changes.")
        folder_state = self.validate_log_folder()

        changes: dict[SettingsScope, dict[str, Any]] = {"application": {}, "project": {}}
        for binding in FIELD_BINDINGS:
            value = getattr(self.form, binding.form_attr)
            if binding.requires_valid_log_folder:
                if not folder_state.is_valid:
                    logger.warning(
                        f"Not saving debug log folder '{value}': {folder_state.message or folder_state.result.name}"
                    )
                    continue
                value = str(self._ensure_log_folder(self.system_utils.parse_path(value)).absolute())
            changes[binding.scope][binding.settings_attr] = value

        new_application = dataclasses.replace(self.application_settings, **changes["application"])
        new_project = dataclasses.replace(self.project_settings, **changes["project"])

        try:
            self.config_service.save_application_settings(new_application)
            self.application_settings = new_application
            self.config_service.save_project_settings(self.project_dir, new_project)
            self.project_settings = new_project
        except ConfigSaveError as e:
            logger.critical(f"Failed to save settings: {e}", exc_info=True)
            self.error_dialog_requested.emit(
                "Save Error", f"Failed to save settings.\n\nReason: {e}"
            )
            return False

        saved_folder = changes["application"].get("debug_log_folder")
        if saved_folder is not None and saved_folder != self.form.debug_log_folder:
            # Keep the form in step with the stored absolute path
            self.form.debug_log_folder = saved_folder
            self.form_state_refreshed.emit(self.form)
            self.validate_log_folder()

        self.settings_applied.emit()
        return True

    # ---Derived State ---

    def refresh_enablement(self):
        """Recomputes which dependent fields are editable, then re-checks the log folder."""
        self.enablement = compute_enablement(self.form)
        self.enablement_changed.emit(dict(self.enablement))
        self.validate_log_folder()

    def validate_log_folder(self) -> LogFolderState:
        """
        Checks the current debug log folder text against the filesystem.
        Never cached: the folder can change outside the dialog at any time.
        """
        state = self._check_log_folder(self.form.debug_log_folder, self.form.debug_logging_enabled)
        self.log_folder_state = state
        self.log_folder_state_changed.emit(state)
        return state

    def _check_log_folder(self, text: str, logging_enabled: bool) -> LogFolderState:
        invalid_path = LogFolderState(
            ValidationResult.INVALID_PATH, marked_invalid=True, message=MSG_INVALID_PATH
        )
        try:
            path = self.system_utils.parse_path(text)
            is_file = path.is_file()
            exists = path.exists()
        except (ValueError, OSError) as e:
            logger.debug(f"Log folder '{text}' is not a valid path: {e}")
            return invalid_path

        if is_file:
            return LogFolderState(
                ValidationResult.PATH_IS_FILE, marked_invalid=True, message=MSG_PATH_IS_FILE
            )
        if not exists:
            # Created on apply or when opened, so this does not block a commit
            return LogFolderState(ValidationResult.NOT_EXISTING, message=MSG_NOT_EXISTING)
        if not self.system_utils.is_writable(path):
            return LogFolderState(
                ValidationResult.NOT_WRITABLE,
                marked_invalid=True,
                message=MSG_NOT_WRITABLE,
                dump_enabled=logging_enabled,
            )
        return LogFolderState(ValidationResult.VALID, dump_enabled=logging_enabled, open_enabled=True)

    # ---Form Setters (called by the View) ---

    def set_field(self, name: str, value: Any) -> bool:
        """
        Updates one form field. Returns False if the value was rejected.
        Toggles that drive other fields refresh the enablement afterwards.
        """
        if name == "project_description":
            return self.set_project_description(value)
        if name == "inactivity_timeout":
            self.set_inactivity_timeout(value)
            return True
        if name == "theme":
            if isinstance(value, str):
                self.set_theme_by_name(value)
            elif isinstance(value, Theme):
                self.set_theme(value)
            else:
                raise TypeError(f"Theme must be a Theme or a theme name, not {type(value).__name__}")
            return True
        if name == "debug_log_folder":
            self.set_debug_log_folder(value)
            return True
        if not hasattr(self.form, name):
            raise AttributeError(f"Unknown settings field: {name}")

        setattr(self.form, name, bool(value))
        logger.debug(f"Form field '{name}' set to {value!r}.")
        if name in ENABLEMENT_TRIGGERS:
            self.refresh_enablement()
        return True

    def set_project_description(self, text: str) -> bool:
        if len(text) > DESCRIPTION_MAX_LENGTH:
            logger.debug(f"Rejected project description longer than {DESCRIPTION_MAX_LENGTH} characters.")
            return False
        self.form.project_description = text
        return True

    def set_inactivity_timeout(self, minutes: int) -> int:
        self.form.inactivity_timeout = clamp_inactivity_timeout(minutes)
        return self.form.inactivity_timeout

    def set_debug_log_folder(self, text: str):
        self.form.debug_log_folder = text
        self.validate_log_folder()

    def set_theme(self, theme: Theme):
        self.form.theme = theme
        logger.debug(f"Form theme set to '{theme.name}'.")

    def set_theme_by_name(self, name: str) -> Theme:
        theme = self.theme_service.get_theme_by_name(name)
        self.set_theme(theme)
        return theme

    def available_themes(self) -> list[Theme]:
        return sorted(self.theme_service.list_themes().values(), key=lambda theme: theme.name.lower())

    # ---Actions ---

    def dump_current_state(self) -> Path | None:
        """Writes a diagnostic dump into the folder currently typed in the form."""
        try:
            dump_path = self.debug_service.dump_state(
                self.form.debug_log_folder, self.application_settings, self.project_settings
            )
        except DumpError as e:
            self.toast_requested.emit(f"Could not write state dump: {e}", "error")
            return None
        self.toast_requested.emit(f"State dumped to {dump_path.name}", "success")
        return dump_path

    def open_log_folder(self) -> bool:
        """Opens the log folder in the system file browser. Never raises."""
        try:
            if not self.validate_log_folder().is_valid:
                return False
            path = self._ensure_log_folder(self.system_utils.parse_path(self.form.debug_log_folder))
            self.system_utils.open_path_in_explorer(path)
            return True
        except Exception as e:
            logger.error("An error occurred while trying to open the debug log folder", exc_info=True)
            self.toast_requested.emit(f"Could not open the debug log folder: {e}", "error")
            return False

    # ---Helpers ---

    def _settings_for(self, scope: SettingsScope) -> ApplicationSettings | ProjectSettings:
        return self.application_settings if scope == "application" else self.project_settings

    def _ensure_log_folder(self, path: Path) -> Path:
        """Creates the folder if debug logging is on and it is missing. Failures only warn."""
        if self.form.debug_logging_enabled and not path.is_dir():
            try:
                self.system_utils.create_directories(path)
            except OSError as e:
                logger.warning(f"Could not create folder '{path}': {e}", exc_info=True)
        return path
