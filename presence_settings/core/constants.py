# presence_settings/core/constants.py
from pathlib import Path

# --- Application Info ---
APP_NAME: str = "Presence Settings"
ORG_NAME: str = "presence-settings"
APP_VERSION: str = "0.1.0"
LOGGER_NAME: str = "PresenceSettings"

# --- File & Directory Names ---
APP_DATA_DIR: Path = Path.home() / ".presence-settings"
CONFIG_FILE_NAME: str = "settings.json"
PROJECT_CONFIG_DIR_NAME: str = ".presence"
PROJECT_CONFIG_FILE_NAME: str = "project.json"
LOG_DIR_NAME: str = "logs"
LOG_FILE_PREFIX: str = "LOG_PRESENCE"
DUMP_FILE_PREFIX: str = "presence_dump"
DEFAULT_DEBUG_LOG_FOLDER: str = str(APP_DATA_DIR / LOG_DIR_NAME)

# --- Field Constraints ---
DESCRIPTION_MAX_LENGTH: int = 128
INACTIVITY_TIMEOUT_MIN: int = 1
INACTIVITY_TIMEOUT_MAX: int = 1440
DEFAULT_INACTIVITY_TIMEOUT: int = 20

# --- Themes ---
DEFAULT_THEME_NAME: str = "Classic"
THEME_FILE_EXTENSION: str = ".json"

# --- Log Folder Messages ---
MSG_INVALID_PATH: str = "Invalid path"
MSG_PATH_IS_FILE: str = "Path is a file"
MSG_NOT_WRITABLE: str = "Cannot write to this path"
MSG_NOT_EXISTING: str = "Folder does not exist yet and will be created"
