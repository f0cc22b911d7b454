from __future__ import annotations

import pytest

from presence_settings.core.constants import MSG_INVALID_PATH, MSG_NOT_WRITABLE, MSG_PATH_IS_FILE
from presence_settings.models import ValidationResult


@pytest.fixture()
def existing_file(tmp_path):
    path = tmp_path / "debug.log"
    path.write_text("not a folder")
    return path


def test_existing_writable_folder_is_valid(view_model, log_folder):
    view_model.set_field("debug_logging_enabled", True)
    view_model.set_debug_log_folder(str(log_folder))

    state = view_model.validate_log_folder()

    assert state.result is ValidationResult.VALID
    assert state.is_valid
    assert not state.marked_invalid
    assert state.dump_enabled and state.open_enabled


def test_dump_follows_debug_logging_toggle(view_model):
    view_model.set_field("debug_logging_enabled", False)
    state = view_model.validate_log_folder()

    assert state.result is ValidationResult.VALID
    assert state.dump_enabled is False
    assert state.open_enabled is True


@pytest.mark.parametrize("writable", [True, False])
def test_regular_file_always_fails(view_model, existing_file, monkeypatch, writable):
    monkeypatch.setattr(view_model.system_utils, "is_writable", lambda path: writable)
    view_model.set_field("debug_logging_enabled", True)
    view_model.set_debug_log_folder(str(existing_file))

    state = view_model.validate_log_folder()

    assert state.result is ValidationResult.PATH_IS_FILE
    assert not state.is_valid
    assert state.marked_invalid
    assert state.message == MSG_PATH_IS_FILE
    assert not state.dump_enabled and not state.open_enabled


def test_malformed_path_fails(view_model):
    view_model.set_field("debug_logging_enabled", True)
    view_model.set_debug_log_folder("logs\0here")

    state = view_model.validate_log_folder()

    assert state.result is ValidationResult.INVALID_PATH
    assert not state.is_valid
    assert state.message == MSG_INVALID_PATH
    assert not state.dump_enabled and not state.open_enabled


def test_missing_folder_in_writable_parent_is_valid_but_inactive(view_model, tmp_path):
    view_model.set_field("debug_logging_enabled", True)
    view_model.set_debug_log_folder(str(tmp_path / "does-not-exist-yet"))

    state = view_model.validate_log_folder()

    assert state.result is ValidationResult.NOT_EXISTING
    assert state.is_valid
    assert not state.marked_invalid
    assert not state.dump_enabled and not state.open_enabled


def test_unwritable_folder_is_a_soft_failure(view_model, monkeypatch):
    monkeypatch.setattr(view_model.system_utils, "is_writable", lambda path: False)
    view_model.set_field("debug_logging_enabled", True)

    state = view_model.validate_log_folder()

    assert state.result is ValidationResult.NOT_WRITABLE
    assert state.is_valid
    assert state.marked_invalid
    assert state.message == MSG_NOT_WRITABLE
    assert state.dump_enabled is True
    assert state.open_enabled is False


def test_validation_is_not_cached(view_model, log_folder):
    assert view_model.validate_log_folder().result is ValidationResult.VALID

    log_folder.rmdir()
    assert view_model.validate_log_folder().result is ValidationResult.NOT_EXISTING

    log_folder.write_text("now a file")
    assert view_model.validate_log_folder().result is ValidationResult.PATH_IS_FILE


def test_folder_edits_emit_state(view_model, record, existing_file):
    states = record(view_model.log_folder_state_changed)

    view_model.set_field("debug_log_folder", str(existing_file))

    assert states.last[0].result is ValidationResult.PATH_IS_FILE
    assert view_model.log_folder_state is states.last[0]


def test_open_folder_opens_valid_folder(view_model, log_folder, monkeypatch):
    opened = []
    monkeypatch.setattr(view_model.system_utils, "open_path_in_explorer", opened.append)

    assert view_model.open_log_folder() is True
    assert opened == [log_folder]


def test_open_folder_creates_it_when_logging_enabled(view_model, tmp_path, monkeypatch):
    opened = []
    monkeypatch.setattr(view_model.system_utils, "open_path_in_explorer", opened.append)
    target = tmp_path / "fresh" / "logs"
    view_model.set_field("debug_logging_enabled", True)
    view_model.set_debug_log_folder(str(target))

    assert view_model.open_log_folder() is True
    assert target.is_dir()
    assert opened == [target]


def test_open_folder_skips_invalid_folder(view_model, existing_file, monkeypatch):
    opened = []
    monkeypatch.setattr(view_model.system_utils, "open_path_in_explorer", opened.append)
    view_model.set_debug_log_folder(str(existing_file))

    assert view_model.open_log_folder() is False
    assert opened == []


def test_open_folder_failure_never_propagates(view_model, record, monkeypatch):
    def _explode(path):
        raise OSError("no file browser available")

    monkeypatch.setattr(view_model.system_utils, "open_path_in_explorer", _explode)
    toasts = record(view_model.toast_requested)

    assert view_model.open_log_folder() is False
    assert toasts.last[1] == "error"


def test_open_missing_folder_with_logging_disabled_is_reported(view_model, tmp_path, record):
    toasts = record(view_model.toast_requested)
    view_model.set_debug_log_folder(str(tmp_path / "absent"))

    assert view_model.open_log_folder() is False
    assert toasts.last[1] == "error"
