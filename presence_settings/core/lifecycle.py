# presence_settings/core/lifecycle.py
from typing import Protocol, runtime_checkable


@runtime_checkable
class SettingsLifecycle(Protocol):
    """
    What a preferences host needs from a settings page.

    The host calls `load` when the page opens or changes are discarded,
    `is_dirty` to decide whether Apply/Save is offered, and `commit` to persist.
    """

    def load(self) -> None: ...

    def is_dirty(self) -> bool: ...

    def commit(self) -> bool: ...
