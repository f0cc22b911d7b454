from .settings_dialog import SettingsDialog
from .theme_chooser_dialog import ThemeChooserDialog

__all__ = ["SettingsDialog", "ThemeChooserDialog"]
