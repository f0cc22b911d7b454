# presence_settings/models/field_bindings.py
from __future__ import annotations
import operator
from dataclasses import dataclass
from typing import Any, Callable, Literal

SettingsScope = Literal["application", "project"]


@dataclass(frozen=True)
class FieldBinding:
    """Links one FormState attribute to one attribute of a persisted settings object."""

    form_attr: str
    scope: SettingsScope
    settings_attr: str
    equals: Callable[[Any, Any], bool] = operator.eq
    # Only committed while the debug log folder passes validation.
    requires_valid_log_folder: bool = False


def _app(name: str, **kwargs: Any) -> FieldBinding:
    return FieldBinding(form_attr=name, scope="application", settings_attr=name, **kwargs)


FIELD_BINDINGS: tuple[FieldBinding, ...] = (
    FieldBinding("project_enabled", "project", "enabled"),
    FieldBinding("project_description", "project", "description"),
    _app("enabled"),
    _app("show_unknown_image_ide"),
    _app("show_unknown_image_file"),
    _app("show_file_extensions"),
    _app("hide_read_only_files"),
    _app("show_reading_instead_of_writing"),
    _app("show_ide_when_no_project_is_available"),
    _app("hide_after_period_of_inactivity"),
    _app("inactivity_timeout"),
    _app("reset_open_time_after_inactivity"),
    _app("experimental_window_listener_enabled"),
    _app("debug_logging_enabled"),
    _app("debug_log_folder", requires_valid_log_folder=True),
    _app("show_files"),
    _app("show_elapsed_time"),
    _app("force_big_ide_icon"),
    # Theme.__eq__ compares names only.
    _app("theme"),
)

