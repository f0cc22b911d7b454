from .settings_vm import SettingsViewModel, compute_enablement

__all__ = ["SettingsViewModel", "compute_enablement"]
