from .theme_service import ThemeService
from .config_service import ConfigService, ConfigSaveError
from .debug_service import DebugService, DumpError

__all__ = ["ThemeService", "ConfigService", "ConfigSaveError", "DebugService", "DumpError"]
