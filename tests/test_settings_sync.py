from __future__ import annotations

from pathlib import Path

import pytest

from presence_settings.core.constants import DESCRIPTION_MAX_LENGTH, INACTIVITY_TIMEOUT_MAX, INACTIVITY_TIMEOUT_MIN
from presence_settings.models import FIELD_BINDINGS, Theme
from presence_settings.services import ConfigSaveError


def _changed_value(vm, name: str, tmp_path: Path):
    current = getattr(vm.form, name)
    if name == "project_description":
        return current + " (edited)"
    if name == "inactivity_timeout":
        return current + 1
    if name == "theme":
        return Theme("Modern")
    if name == "debug_log_folder":
        other = tmp_path / "other-logs"
        other.mkdir(exist_ok=True)
        return str(other)
    return not current


def test_reset_then_is_modified_is_false(view_model):
    assert view_model.is_modified() is False


def test_reset_discards_unsaved_edits(view_model):
    view_model.set_field("enabled", False)
    view_model.set_project_description("scratch")

    view_model.reset()

    assert view_model.form.enabled is True
    assert view_model.form.project_description == "Working on the demo"
    assert view_model.is_modified() is False


def test_reset_emits_form_and_enablement(view_model, record):
    forms = record(view_model.form_state_refreshed)
    enablement = record(view_model.enablement_changed)
    folder_states = record(view_model.log_folder_state_changed)

    view_model.reset()

    assert forms.last[0] is view_model.form
    assert enablement.last[0]["inactivity_timeout"] is True
    assert folder_states.calls


@pytest.mark.parametrize("name", [binding.form_attr for binding in FIELD_BINDINGS])
def test_single_field_change_round_trip(view_model, name, tmp_path):
    view_model.set_field(name, _changed_value(view_model, name, tmp_path))
    assert view_model.is_modified() is True

    assert view_model.apply() is True
    view_model.reset()

    assert view_model.is_modified() is False


def test_apply_persists_to_disk(view_model, config_service, project_dir):
    view_model.set_field("show_elapsed_time", False)
    view_model.set_field("project_enabled", False)
    view_model.set_theme_by_name("Material")

    view_model.apply()

    application = config_service.load_application_settings()
    project = config_service.load_project_settings(project_dir)
    assert application.show_elapsed_time is False
    assert application.theme.name == "Material"
    assert project.enabled is False


def test_apply_with_invalid_folder_commits_everything_else(view_model, config_service, tmp_path, log_folder):
    blocker = tmp_path / "not-a-folder.txt"
    blocker.write_text("x")
    view_model.set_field("enabled", False)
    view_model.set_field("debug_log_folder", str(blocker))

    assert view_model.apply() is True

    assert view_model.application_settings.enabled is False
    assert view_model.application_settings.debug_log_folder == str(log_folder)
    assert config_service.load_application_settings().debug_log_folder == str(log_folder)


def test_invalid_folder_is_never_reported_as_modified(view_model, tmp_path):
    blocker = tmp_path / "file.log"
    blocker.write_text("x")
    view_model.set_field("show_files", False)
    view_model.set_field("debug_log_folder", str(blocker))

    assert view_model.is_modified() is False


def test_theme_with_same_name_is_not_a_change(view_model):
    view_model.set_theme(Theme("Classic", description="a different object"))
    assert view_model.is_modified() is False


def test_apply_creates_missing_folder_when_logging_enabled(view_model, tmp_path):
    target = tmp_path / "nested" / "logs"
    view_model.set_field("debug_logging_enabled", True)
    view_model.set_field("debug_log_folder", str(target))

    view_model.apply()

    assert target.is_dir()
    assert view_model.application_settings.debug_log_folder == str(target.absolute())


def test_apply_does_not_create_folder_when_logging_disabled(view_model, tmp_path):
    target = tmp_path / "never-created"
    view_model.set_field("debug_log_folder", str(target))

    view_model.apply()

    assert not target.exists()
    assert view_model.application_settings.debug_log_folder == str(target)


def test_apply_survives_folder_creation_failure(view_model, tmp_path, monkeypatch):
    def _fail(path):
        raise PermissionError(f"denied: {path}")

    monkeypatch.setattr(view_model.system_utils, "create_directories", _fail)
    view_model.set_field("debug_logging_enabled", True)
    view_model.set_field("debug_log_folder", str(tmp_path / "locked"))
    view_model.set_field("show_elapsed_time", False)

    assert view_model.apply() is True
    assert view_model.application_settings.show_elapsed_time is False
    assert view_model.application_settings.debug_logging_enabled is True


def test_apply_reports_save_failure(view_model, record, monkeypatch):
    def _fail(settings):
        raise ConfigSaveError("disk full")

    monkeypatch.setattr(view_model.config_service, "save_application_settings", _fail)
    errors = record(view_model.error_dialog_requested)
    applied = record(view_model.settings_applied)
    before = view_model.application_settings
    view_model.set_field("enabled", False)

    assert view_model.apply() is False
    assert view_model.application_settings is before
    assert errors.last[0] == "Save Error"
    assert not applied.calls


def test_apply_emits_settings_applied(view_model, record):
    applied = record(view_model.settings_applied)
    view_model.apply()
    assert len(applied.calls) == 1


def test_lifecycle_methods_delegate(view_model):
    view_model.set_field("force_big_ide_icon", True)
    assert view_model.is_dirty() is True

    assert view_model.commit() is True
    assert view_model.application_settings.force_big_ide_icon is True

    view_model.set_field("force_big_ide_icon", False)
    view_model.load()
    assert view_model.form.force_big_ide_icon is True


def test_description_longer_than_limit_is_rejected(view_model):
    assert view_model.set_project_description("x" * DESCRIPTION_MAX_LENGTH) is True
    assert view_model.set_field("project_description", "y" * (DESCRIPTION_MAX_LENGTH + 1)) is False
    assert view_model.form.project_description == "x" * DESCRIPTION_MAX_LENGTH


@pytest.mark.parametrize(
    ("entered", "expected"),
    [(0, INACTIVITY_TIMEOUT_MIN), (-5, INACTIVITY_TIMEOUT_MIN), (90, 90), (99999, INACTIVITY_TIMEOUT_MAX)],
)
def test_inactivity_timeout_is_clamped(view_model, entered, expected):
    assert view_model.set_inactivity_timeout(entered) == expected
    assert view_model.form.inactivity_timeout == expected


def test_unknown_field_is_an_error(view_model):
    with pytest.raises(AttributeError):
        view_model.set_field("no_such_option", True)


def test_available_themes_sorted_by_name(view_model):
    names = [theme.name for theme in view_model.available_themes()]
    assert names == sorted(names, key=str.lower)
    assert "Classic" in names


def test_view_model_satisfies_lifecycle(view_model):
    from presence_settings.core.lifecycle import SettingsLifecycle

    assert isinstance(view_model, SettingsLifecycle)


def test_apply_normalizes_relative_folder_in_form(view_model, tmp_path, monkeypatch, record):
    monkeypatch.chdir(tmp_path)
    forms = record(view_model.form_state_refreshed)
    view_model.set_field("debug_log_folder", "rel-logs")

    assert view_model.apply() is True

    assert view_model.form.debug_log_folder == str((tmp_path / "rel-logs").absolute())
    assert forms.last[0].debug_log_folder == view_model.form.debug_log_folder
    assert view_model.is_modified() is False


def test_theme_field_accepts_a_name(view_model):
    assert view_model.set_field("theme", "Modern") is True

    assert isinstance(view_model.form.theme, Theme)
    assert view_model.form.theme.name == "Modern"
    assert view_model.is_modified() is True


def test_theme_field_rejects_other_values(view_model):
    with pytest.raises(TypeError):
        view_model.set_field("theme", ["Modern"])
