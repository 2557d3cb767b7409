from pathlib import Path

import pytest

from linediff.services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the user's ~/.linediff"""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("LINEDIFF_CONFIG_DIR", str(config_dir))
    ConfigManager.reset_instance()
    yield config_dir
    ConfigManager.reset_instance()


@pytest.fixture
def write_lines(tmp_path):
    """Write each line followed by a newline, like a text editor would"""

    def _write(name, *lines, encoding="utf-8") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding=encoding)
        return path

    return _write
