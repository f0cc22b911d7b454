# presence_settings/views/dialogs/settings_dialog.py

from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QDialog,
    QGroupBox,
    QFileDialog,
    QFormLayout,
)
from qfluentwidgets import (
    PrimaryPushButton,
    PushButton,
    Dialog,
    BodyLabel,
    LineEdit,
    CheckBox,
    SpinBox,
    ScrollArea,
)

from presence_settings.core.lifecycle import SettingsLifecycle
from presence_settings.core.constants import (
    DESCRIPTION_MAX_LENGTH,
    INACTIVITY_TIMEOUT_MAX,
    INACTIVITY_TIMEOUT_MIN,
)
from presence_settings.models.form_state import FormState
from presence_settings.models.log_folder_model import LogFolderState
from presence_settings.utils.logger_utils import logger
from presence_settings.utils.ui_utils import UiUtils
from presence_settings.viewmodels.settings_vm import SettingsViewModel
from presence_settings.views.dialogs.theme_chooser_dialog import ThemeChooserDialog

# (form field, label) for every plain checkbox, grouped as shown in the dialog.
APPLICATION_TOGGLES: tuple[tuple[str, str], ...] = (
    ("enabled", "Enable rich presence"),
    ("show_unknown_image_ide", "Show image for unknown IDEs"),
    ("show_ide_when_no_project_is_available", "Show IDE when no project is open"),
    ("show_elapsed_time", "Show elapsed time"),
    ("force_big_ide_icon", "Always use the big IDE icon"),
    ("show_files", "Show files"),
    ("show_unknown_image_file", "Show image for unknown files"),
    ("show_file_extensions", "Show file extensions"),
    ("hide_read_only_files", "Hide read-only files"),
    ("show_reading_instead_of_writing", "Show 'Reading' instead of 'Editing' for read-only files"),
    ("hide_after_period_of_inactivity", "Hide after a period of inactivity"),
    ("reset_open_time_after_inactivity", "Reset open time after inactivity"),
)
EXPERIMENTAL_TOGGLES: tuple[tuple[str, str], ...] = (
    ("experimental_window_listener_enabled", "Enable window focus listener"),
)
DEBUG_TOGGLES: tuple[tuple[str, str], ...] = (
    ("debug_logging_enabled", "Enable debug logging"),
)

INVALID_TEXT_COLOR = QColor("#d13438")


class SettingsDialog(QDialog):
    """
    Renders the settings form. All state lives in the view model; this dialog
    only mirrors it and forwards user input.
    """

    def __init__(self, viewmodel: SettingsViewModel, parent: QWidget | None = None):
        super().__init__(parent)
        self.view_model = viewmodel
        self.lifecycle: SettingsLifecycle = viewmodel
        self.checkboxes: dict[str, CheckBox] = {}
        self._populating = False
        self._init_ui()
        self._connect_signals()

        # Host lifecycle: load persisted values when the page opens
        self.lifecycle.load()
        self._refresh_apply_button()

    def _init_ui(self):
        self.setWindowTitle("Rich Presence Settings")
        self.setMinimumSize(560, 640)

        dialog_layout = QVBoxLayout(self)
        dialog_layout.setContentsMargins(15, 15, 15, 15)
        dialog_layout.setSpacing(10)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(12)
        content_layout.addWidget(self._create_project_group())
        content_layout.addWidget(self._create_application_group())
        content_layout.addWidget(self._create_experimental_group())
        content_layout.addWidget(self._create_debug_group())
        content_layout.addStretch(1)

        scroll_area = ScrollArea(self)
        scroll_area.setWidgetResizable(True)
        scroll_area.setWidget(content)
        dialog_layout.addWidget(scroll_area, 1)

        # ---Bottom Buttons ---
        button_layout = QHBoxLayout()
        button_layout.addStretch(1)
        self.cancel_button = PushButton("Cancel")
        self.apply_button = PushButton("Apply")
        self.save_button = PrimaryPushButton("Save")
        button_layout.addWidget(self.cancel_button)
        button_layout.addWidget(self.apply_button)
        button_layout.addWidget(self.save_button)
        dialog_layout.addLayout(button_layout)

    def _create_project_group(self) -> QGroupBox:
        project_name = self.view_model.project_settings.project_name
        group = QGroupBox(f"Project Settings ({project_name})")
        layout = QFormLayout(group)

        self._add_checkbox(layout, "project_enabled", "Enable rich presence for this project")
        self.description_edit = LineEdit(group)
        self.description_edit.setMaxLength(DESCRIPTION_MAX_LENGTH)
        self.description_edit.setPlaceholderText("Shown below the project name")
        layout.addRow("Description:", self.description_edit)
        return group

    def _create_application_group(self) -> QGroupBox:
        group = QGroupBox("Application Settings")
        layout = QFormLayout(group)
        for name, label in APPLICATION_TOGGLES:
            self._add_checkbox(layout, name, label)

        self.timeout_spin = SpinBox(group)
        self.timeout_spin.setRange(INACTIVITY_TIMEOUT_MIN, INACTIVITY_TIMEOUT_MAX)
        self.timeout_label = BodyLabel("Inactivity timeout (minutes):", group)
        layout.addRow(self.timeout_label, self.timeout_spin)

        theme_layout = QHBoxLayout()
        self.theme_label = BodyLabel("", group)
        self.theme_button = PushButton("Change...")
        theme_layout.addWidget(self.theme_label, 1)
        theme_layout.addWidget(self.theme_button)
        layout.addRow("Theme:", theme_layout)
        return group

    def _create_experimental_group(self) -> QGroupBox:
        group = QGroupBox("Experimental Settings")
        layout = QFormLayout(group)
        for name, label in EXPERIMENTAL_TOGGLES:
            self._add_checkbox(layout, name, label)
        return group

    def _create_debug_group(self) -> QGroupBox:
        group = QGroupBox("Debugging Settings")
        layout = QFormLayout(group)
        for name, label in DEBUG_TOGGLES:
            self._add_checkbox(layout, name, label)

        folder_layout = QHBoxLayout()
        self.folder_edit = LineEdit(group)
        self.browse_button = PushButton("Browse...")
        folder_layout.addWidget(self.folder_edit, 1)
        folder_layout.addWidget(self.browse_button)
        layout.addRow("Log folder:", folder_layout)

        self.folder_status_label = BodyLabel("", group)
        self.folder_status_label.setTextColor(INVALID_TEXT_COLOR, INVALID_TEXT_COLOR)
        layout.addRow("", self.folder_status_label)

        action_layout = QHBoxLayout()
        self.dump_button = PushButton("Dump current state")
        self.open_folder_button = PushButton("Open log folder")
        action_layout.addWidget(self.dump_button)
        action_layout.addWidget(self.open_folder_button)
        action_layout.addStretch(1)
        layout.addRow("", action_layout)
        return group

    def _add_checkbox(self, layout: QFormLayout, name: str, label: str):
        checkbox = CheckBox(label, self)
        self.checkboxes[name] = checkbox
        layout.addRow("", checkbox)

    def _connect_signals(self):
        # ---ViewModel -> View ---
        self.view_model.form_state_refreshed.connect(self._on_form_state_refreshed)
        self.view_model.enablement_changed.connect(self._on_enablement_changed)
        self.view_model.log_folder_state_changed.connect(self._on_log_folder_state_changed)
        self.view_model.toast_requested.connect(self._on_toast_requested)
        self.view_model.error_dialog_requested.connect(self._on_error_dialog_requested)

        # ---View -> ViewModel ---
        for name, checkbox in self.checkboxes.items():
            checkbox.toggled.connect(lambda checked, field=name: self._on_field_edited(field, checked))
        self.description_edit.textChanged.connect(
            lambda text: self._on_field_edited("project_description", text)
        )
        self.timeout_spin.valueChanged.connect(
            lambda value: self._on_field_edited("inactivity_timeout", value)
        )
        self.folder_edit.textChanged.connect(lambda text: self._on_field_edited("debug_log_folder", text))

        self.browse_button.clicked.connect(self._on_browse_folder)
        self.theme_button.clicked.connect(self._on_choose_theme)
        self.dump_button.clicked.connect(self.view_model.dump_current_state)
        self.open_folder_button.clicked.connect(self.view_model.open_log_folder)

        self.save_button.clicked.connect(self._on_save)
        self.apply_button.clicked.connect(self._on_apply)
        self.cancel_button.clicked.connect(self._on_cancel)

    # ---SLOTS (Responding to ViewModel Signals) ---

    def _on_form_state_refreshed(self, form: FormState):
        """Copies every form value into its widget without echoing edits back."""
        self._populating = True
        try:
            for name, checkbox in self.checkboxes.items():
                checkbox.setChecked(getattr(form, name))
            self.description_edit.setText(form.project_description)
            self.timeout_spin.setValue(form.inactivity_timeout)
            self.folder_edit.setText(form.debug_log_folder)
            self.theme_label.setText(form.theme.name)
        finally:
            self._populating = False

    def _on_enablement_changed(self, enablement: dict):
        for name, enabled in enablement.items():
            if name in self.checkboxes:
                self.checkboxes[name].setEnabled(enabled)
        self.timeout_spin.setEnabled(enablement["inactivity_timeout"])
        self.timeout_label.setEnabled(enablement["inactivity_timeout"])
        self.folder_edit.setEnabled(enablement["debug_log_folder"])
        self.browse_button.setEnabled(enablement["debug_log_folder"])

    def _on_log_folder_state_changed(self, state: LogFolderState):
        self.folder_status_label.setText(state.message if state.marked_invalid else "")
        self.folder_edit.setToolTip(state.message)
        self.dump_button.setEnabled(state.dump_enabled)
        self.open_folder_button.setEnabled(state.open_enabled)

    def _on_toast_requested(self, message: str, level: str):
        UiUtils.show_toast(parent=self, message=message, level=level)

    def _on_error_dialog_requested(self, title: str, message: str):
        dialog = Dialog(title, message, self)
        dialog.exec()

    # ---UI EVENT HANDLERS (Calling ViewModel methods) ---

    def _on_field_edited(self, name: str, value):
        if self._populating:
            return
        self.view_model.set_field(name, value)
        self._refresh_apply_button()

    def _on_browse_folder(self):
        selected_path = QFileDialog.getExistingDirectory(
            self, "Select Debug Log Folder", self.folder_edit.text()
        )
        if selected_path:
            self.folder_edit.setText(selected_path)

    def _on_choose_theme(self):
        dialog = ThemeChooserDialog(
            self.view_model.available_themes(), current=self.view_model.form.theme, parent=self
        )
        if dialog.exec():
            theme = dialog.selected_theme()
            if theme is not None:
                self.view_model.set_theme(theme)
                self.theme_label.setText(theme.name)
                self._refresh_apply_button()

    def _refresh_apply_button(self):
        self.apply_button.setEnabled(self.lifecycle.is_dirty())

    def _on_apply(self):
        if self.lifecycle.is_dirty() and self.lifecycle.commit():
            logger.info("Settings applied from dialog.")
        self._refresh_apply_button()

    def _on_save(self):
        """Commits pending changes and closes the dialog on success."""
        if self.lifecycle.is_dirty() and not self.lifecycle.commit():
            return
        self.accept()

    def _on_cancel(self):
        if self.lifecycle.is_dirty() and not UiUtils.show_confirm_dialog(
            self, "Discard Changes", "You have unsaved changes. Discard them?", "Discard", "Keep Editing"
        ):
            return
        self.lifecycle.load()
        self.reject()
