from .theme_model import Theme
from .settings_model import ApplicationSettings, ProjectSettings
from .form_state import FormState
from .log_folder_model import LogFolderState, ValidationResult
from .field_bindings import FIELD_BINDINGS, FieldBinding, SettingsScope

__all__ = [
    "Theme",
    "ApplicationSettings",
    "ProjectSettings",
    "FormState",
    "LogFolderState",
    "ValidationResult",
    "FIELD_BINDINGS",
    "FieldBinding",
    "SettingsScope",
]
