# presence_settings/utils/system_utils.py
import os
import sys
import subprocess
from pathlib import Path
from presence_settings.utils.logger_utils import logger

# Characters Windows refuses in a path component (the drive colon is handled separately).
_WINDOWS_RESERVED_CHARS = set('<>"|?*')


class SystemUtils:
    """A collection of static utility functions for OS-level interactions."""

    @staticmethod
    def parse_path(text: str) -> Path:
        """
        Turns user input into a Path.
        Raises ValueError if the text can never name a filesystem location.
        """
        if text is None:
            raise ValueError("Path is missing.")
        if "\0" in text:
            raise ValueError("Path contains a NUL character.")
        if sys.platform == "win32":
            drive, rest = os.path.splitdrive(text)
            if ":" in rest or _WINDOWS_RESERVED_CHARS.intersection(rest):
                raise ValueError(f"Path contains reserved characters: {text}")
        return Path(text)

    @staticmethod
    def is_writable(path: Path) -> bool:
        """True if the path exists and the current user may write to it."""
        return os.access(path, os.W_OK)

    @staticmethod
    def create_directories(path: Path) -> Path:
        """Creates the folder with all missing parents. Raises OSError on failure."""
        path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Ensured folder exists: {path}")
        return path

    @staticmethod
    def open_path_in_explorer(path: Path):
        """
        Opens a file or directory path in the default system file explorer.
        Raises FileNotFoundError or OSError; callers decide how to report it.
        """
        if not path or not path.exists():
            raise FileNotFoundError(f"Path does not exist: {path}")

        logger.info(f"Opening path: {path}")
        if sys.platform == "win32":
            os.startfile(path)
        elif sys.platform == "darwin":
            subprocess.Popen(["open", str(path)])
        else:
            subprocess.Popen(["xdg-open", str(path)])
