# Main.py
import sys
from pathlib import Path
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication
from qfluentwidgets import setTheme, Theme

from presence_settings.core.constants import (
    APP_DATA_DIR,
    APP_NAME,
    CONFIG_FILE_NAME,
    LOG_DIR_NAME,
    ORG_NAME,
)
from presence_settings.utils.logger_utils import logger, reconfigure_logger, set_log_directory

# Import services
from presence_settings.services import ConfigService, DebugService, ThemeService

# Import utilities
from presence_settings.utils import SystemUtils

# Import view models
from presence_settings.viewmodels import SettingsViewModel

# Import the dialog
from presence_settings.views.dialogs import SettingsDialog


def route_logs_to_debug_folder(view_model: SettingsViewModel):
    """Sends log files to the debug log folder while debug logging is switched on."""
    settings = view_model.application_settings
    if not settings.debug_logging_enabled:
        return
    folder = Path(settings.debug_log_folder)
    if not folder.is_dir():
        logger.warning(f"Debug log folder '{folder}' does not exist. Keeping current log file.")
        return
    try:
        reconfigure_logger(folder)
        logger.info(f"Debug logging to '{folder}'.")
    except OSError as e:
        logger.error(f"Could not switch logging to '{folder}': {e}", exc_info=True)


def main():
    """The main entry point for the application."""

    # --- 1. Paths & Logging ---
    project_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    set_log_directory(APP_DATA_DIR / LOG_DIR_NAME)

    # --- 2. Qt Application Setup ---
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(sys.argv)
    app.setOrganizationName(ORG_NAME)
    app.setApplicationName(APP_NAME)
    setTheme(Theme.AUTO)
    logger.info("Application starting...")

    # ---3. Composition Root: Create and Wire All Dependencies ---
    try:
        theme_service = ThemeService(APP_DATA_DIR / "themes")
        config_service = ConfigService(APP_DATA_DIR / CONFIG_FILE_NAME, theme_service)
        debug_service = DebugService()
        system_utils = SystemUtils()

        settings_vm = SettingsViewModel(
            config_service=config_service,
            theme_service=theme_service,
            debug_service=debug_service,
            system_utils=system_utils,
            project_dir=project_dir,
        )
        logger.info("Core services and view model initialized.")
    except Exception as e:
        logger.critical(f"Failed to initialize core components: {e}", exc_info=True)
        return 1

    route_logs_to_debug_folder(settings_vm)
    settings_vm.settings_applied.connect(lambda: route_logs_to_debug_folder(settings_vm))

    # ---4. Show the dialog and run the event loop ---
    try:
        dialog = SettingsDialog(settings_vm)
        dialog.show()
    except Exception as e:
        logger.critical(f"Failed to initialize or show the settings dialog: {e}", exc_info=True)
        return 1

    logger.info("Entering event loop...")
    exit_code = app.exec()
    logger.info(f"Application exiting with code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
