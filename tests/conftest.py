from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from presence_settings.models import ApplicationSettings, ProjectSettings
from presence_settings.services import ConfigService, DebugService, ThemeService
from presence_settings.utils import SystemUtils
from presence_settings.utils.logger_utils import set_log_directory
from presence_settings.viewmodels import SettingsViewModel


@pytest.fixture(autouse=True, scope="session")
def _log_directory(tmp_path_factory: pytest.TempPathFactory) -> None:
    set_log_directory(tmp_path_factory.mktemp("logs"))


class SignalRecorder:
    """Collects every emission of a Qt signal."""

    def __init__(self, signal) -> None:
        self.calls: list[tuple] = []
        signal.connect(self._record)

    def _record(self, *args) -> None:
        self.calls.append(args)

    @property
    def last(self):
        return self.calls[-1] if self.calls else None


@pytest.fixture()
def theme_service() -> ThemeService:
    return ThemeService()


@pytest.fixture()
def config_service(tmp_path: Path, theme_service: ThemeService) -> ConfigService:
    return ConfigService(tmp_path / "config" / "settings.json", theme_service)


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "demo-project"
    path.mkdir()
    return path


@pytest.fixture()
def log_folder(tmp_path: Path) -> Path:
    path = tmp_path / "debug-logs"
    path.mkdir()
    return path


@pytest.fixture()
def persisted(config_service: ConfigService, theme_service: ThemeService, project_dir: Path, log_folder: Path):
    """Writes a known pair of settings files and returns them."""
    application = ApplicationSettings(
        debug_log_folder=str(log_folder),
        theme=theme_service.get_theme_by_name("Classic"),
    )
    project = ProjectSettings(project_name="demo-project", enabled=True, description="Working on the demo")
    config_service.save_application_settings(application)
    config_service.save_project_settings(project_dir, project)
    return application, project


@pytest.fixture()
def view_model(persisted, config_service: ConfigService, theme_service: ThemeService, project_dir: Path) -> SettingsViewModel:
    vm = SettingsViewModel(
        config_service=config_service,
        theme_service=theme_service,
        debug_service=DebugService(),
        system_utils=SystemUtils(),
        project_dir=project_dir,
    )
    vm.reset()
    return vm


@pytest.fixture()
def record():
    """Returns a factory: record(signal) -> SignalRecorder."""
    return SignalRecorder
