from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QApplication

from presence_settings.views.dialogs import SettingsDialog


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


@pytest.fixture()
def dialog(qapp, view_model):
    dlg = SettingsDialog(view_model)
    yield dlg
    dlg.deleteLater()


def test_dialog_loads_persisted_values(dialog, log_folder):
    assert dialog.checkboxes["project_enabled"].isChecked() is True
    assert dialog.description_edit.text() == "Working on the demo"
    assert dialog.folder_edit.text() == str(log_folder)
    assert dialog.theme_label.text() == "Classic"
    assert dialog.apply_button.isEnabled() is False


def test_unchecking_show_files_disables_file_options(dialog):
    dialog.checkboxes["show_files"].setChecked(False)

    assert dialog.view_model.form.show_files is False
    for name in ("show_unknown_image_file", "show_file_extensions", "hide_read_only_files"):
        assert dialog.checkboxes[name].isEnabled() is False
    assert dialog.apply_button.isEnabled() is True


def test_invalid_folder_disables_actions(dialog, tmp_path):
    blocker = tmp_path / "a-file"
    blocker.write_text("x")

    dialog.folder_edit.setText(str(blocker))

    assert dialog.open_folder_button.isEnabled() is False
    assert dialog.dump_button.isEnabled() is False
    assert dialog.folder_status_label.text() == "Path is a file"


def test_apply_button_commits(dialog):
    dialog.checkboxes["show_elapsed_time"].setChecked(False)
    dialog.apply_button.click()

    assert dialog.view_model.application_settings.show_elapsed_time is False
    assert dialog.apply_button.isEnabled() is False
