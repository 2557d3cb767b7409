import json

from linediff.services.config_manager import ConfigManager


def test_uses_config_dir_from_environment(isolated_config):
    manager = ConfigManager()
    assert manager.config_file == isolated_config / "config.json"


def test_defaults_when_no_file():
    config = ConfigManager().get_config()

    assert config["encoding"] == {"candidate": "utf-8", "reference": "utf-8"}
    assert config["limits"]["maxLines"] == 5000
    assert config["logLevel"] == "INFO"


def test_save_and_reload(isolated_config):
    ConfigManager().save_config({"limits": {"maxLines": 5}})

    assert json.loads((isolated_config / "config.json").read_text())["limits"] == {"maxLines": 5, "maxCells": 4_000_000}
    assert ConfigManager().get_config()["limits"]["maxLines"] == 5


def test_stored_sections_are_merged_over_defaults(isolated_config):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text(json.dumps({"encoding": {"candidate": "latin-1"}}))

    config = ConfigManager().get_config()

    assert config["encoding"] == {"candidate": "latin-1", "reference": "utf-8"}
    assert config["server"]["port"] == 8000


def test_corrupt_file_falls_back_to_defaults(isolated_config):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text("{not json")

    assert ConfigManager().get_config()["limits"]["maxLines"] == 5000


def test_get_and_set():
    manager = ConfigManager()
    manager.set("logLevel", "DEBUG")

    assert manager.get("logLevel") == "DEBUG"
    assert manager.get("missing", "fallback") == "fallback"
    assert ConfigManager().get("logLevel") == "DEBUG"


def test_get_config_returns_a_copy():
    manager = ConfigManager()
    config = manager.get_config()
    config["encoding"]["candidate"] = "ascii"

    assert manager.get_config()["encoding"]["candidate"] == "utf-8"


def test_singleton():
    assert ConfigManager.get_instance() is ConfigManager.get_instance()


def test_non_object_file_falls_back_to_defaults(isolated_config):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text("[1, 2]")

    config = ConfigManager().get_config()

    assert config["logLevel"] == "INFO"
    assert config["limits"]["maxCells"] == 4_000_000


def test_set_merges_into_section_like_save_config():
    manager = ConfigManager()
    manager.set("limits", {"maxCells": 10})
    manager.save_config({"server": {"port": 9000}})

    config = ConfigManager().get_config()
    assert config["limits"] == {"maxLines": 5000, "maxCells": 10}
    assert config["server"] == {"host": "127.0.0.1", "port": 9000}
