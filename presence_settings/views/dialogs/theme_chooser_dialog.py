# presence_settings/views/dialogs/theme_chooser_dialog.py

from PyQt6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QWidget, QListWidgetItem
from PyQt6.QtCore import Qt
from qfluentwidgets import SubtitleLabel, ListWidget, BodyLabel, PrimaryPushButton, PushButton

from presence_settings.models.theme_model import Theme


class ThemeChooserDialog(QDialog):
    """Lets the user pick one theme from the catalog."""

    def __init__(self, themes: list[Theme], current: Theme | None = None, parent: QWidget | None = None):
        super().__init__(parent)
        self.themes = themes

        # --- Dialog Setup ---
        self.setWindowTitle("Choose Theme")
        self.setFixedWidth(400)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(15, 15, 15, 15)
        main_layout.setSpacing(15)

        # --- Widgets ---
        title_label = SubtitleLabel("Select a theme", self)
        self.theme_list = ListWidget(self)
        for theme in themes:
            item = QListWidgetItem(theme.name)
            item.setData(Qt.ItemDataRole.UserRole, theme.name)
            self.theme_list.addItem(item)
        self.description_label = BodyLabel("", self)
        self.description_label.setWordWrap(True)

        button_layout = QHBoxLayout()
        button_layout.addStretch(1)
        self.confirm_button = PrimaryPushButton("Select")
        cancel_button = PushButton("Cancel")
        button_layout.addWidget(cancel_button)
        button_layout.addWidget(self.confirm_button)

        main_layout.addWidget(title_label)
        main_layout.addWidget(self.theme_list, 1)
        main_layout.addWidget(self.description_label)
        main_layout.addLayout(button_layout)

        # --- Connections ---
        self.theme_list.currentRowChanged.connect(self._on_row_changed)
        self.theme_list.itemDoubleClicked.connect(lambda _item: self.accept())
        self.confirm_button.clicked.connect(self.accept)
        cancel_button.clicked.connect(self.reject)

        names = [theme.name for theme in themes]
        if current is not None and current.name in names:
            self.theme_list.setCurrentRow(names.index(current.name))
        elif themes:
            self.theme_list.setCurrentRow(0)
        else:
            self.confirm_button.setEnabled(False)

    def _on_row_changed(self, row: int):
        if 0 <= row < len(self.themes):
            self.description_label.setText(self.themes[row].description)

    def selected_theme(self) -> Theme | None:
        row = self.theme_list.currentRow()
        if 0 <= row < len(self.themes):
            return self.themes[row]
        return None
