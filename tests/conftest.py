"""Pytest fixtures for hostenv-mcp tests."""

import pytest

from hostenv_mcp.resolver import logging


@pytest.fixture
def reset_logger_singleton():
    """Сбрасывает singleton _logger между тестами.

    Сохраняет текущее значение logging._logger, сбрасывает его в None
    перед тестом и восстанавливает после.
    """
    original_value = logging._logger

    logging._logger = None

    yield

    logging._logger = original_value


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Изолированное окружение: HOME, XDG каталоги и /etc внутри tmp_path.

    Возвращает словарь с путями, чтобы тесты могли создавать файлы
    конфигурации в нужных местах.
    """
    home = tmp_path / "home"
    config_home = tmp_path / "xdg_config"
    config_dir = tmp_path / "xdg_dirs"
    etc = tmp_path / "etc"
    for directory in (home, config_home, config_dir, etc):
        directory.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(config_dir))
    for name in ("HOSTENV_APP_NAME", "HOSTENV_CONFIG_FILE_NAME",
                 "HOSTENV_PASSWD_PATH", "HOSTENV_DSCL_TIMEOUT",
                 "HOSTENV_LOG_LEVEL", "HOSTENV_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("hostenv_mcp.resolver.locator.etc_root", lambda family=None: etc)

    return {
        "home": home,
        "config_home": config_home,
        "config_dir": config_dir,
        "etc": etc,
    }
