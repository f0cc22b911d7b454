# presence_settings/models/log_folder_model.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto


class ValidationResult(Enum):
    """Outcome of checking the debug log folder."""

    VALID = auto()
    INVALID_PATH = auto()
    PATH_IS_FILE = auto()
    NOT_WRITABLE = auto()
    NOT_EXISTING = auto()


# NOT_WRITABLE and NOT_EXISTING only disable actions; they do not block a commit.
BLOCKING_RESULTS = frozenset({ValidationResult.INVALID_PATH, ValidationResult.PATH_IS_FILE})


@dataclass(frozen=True)
class LogFolderState:
    """Derived UI state of the debug log folder input and its two actions."""

    result: ValidationResult
    marked_invalid: bool = False
    message: str = ""
    dump_enabled: bool = False
    open_enabled: bool = False

    @property
    def is_valid(self) -> bool:
        return self.result not in BLOCKING_RESULTS
