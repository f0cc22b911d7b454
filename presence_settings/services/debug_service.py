# presence_settings/services/debug_service.py
import json
import platform
import sys
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

from PyQt6.QtCore import PYQT_VERSION_STR, QT_VERSION_STR

from presence_settings.core.constants import APP_NAME, APP_VERSION, DUMP_FILE_PREFIX
from presence_settings.models.settings_model import ApplicationSettings, ProjectSettings
from presence_settings.utils.logger_utils import get_current_log_file, logger


class DumpError(IOError):
    pass


class DebugService:
    """Writes diagnostic snapshots of the application state for bug reports."""

    def build_dump(
        self,
        application_settings: ApplicationSettings,
        project_settings: ProjectSettings,
    ) -> dict:
        app_data = asdict(application_settings)
        # Only the theme name is meaningful in a report
        app_data["theme"] = application_settings.theme.name
        log_file = get_current_log_file()

        return {
            "created_at": datetime.now().isoformat(timespec="seconds"),
            "application": {"name": APP_NAME, "version": APP_VERSION},
            "environment": {
                "platform": platform.platform(),
                "python": sys.version.split()[0],
                "qt": QT_VERSION_STR,
                "pyqt": PYQT_VERSION_STR,
                "log_file": str(log_file) if log_file else None,
            },
            "application_settings": app_data,
            "project_settings": asdict(project_settings),
        }

    def dump_state(
        self,
        folder: str | Path,
        application_settings: ApplicationSettings,
        project_settings: ProjectSettings,
    ) -> Path:
        """
        Writes a JSON dump into `folder` and returns the file path.
        Raises DumpError if the file cannot be written.
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H-%M-%S")
        dump_path = Path(folder) / f"{DUMP_FILE_PREFIX}_{timestamp}.json"
        data = self.build_dump(application_settings, project_settings)

        try:
            with open(dump_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
        except OSError as e:
            logger.error(f"Could not write state dump to '{dump_path}': {e}", exc_info=True)
            raise DumpError(f"Failed to write state dump: {e}") from e

        logger.info(f"State dump written to '{dump_path}'.")
        return dump_path
