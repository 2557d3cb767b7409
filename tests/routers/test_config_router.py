import pytest
from fastapi.testclient import TestClient

from linediff.main import app
from linediff.services.config_manager import ConfigManager


@pytest.fixture
def client():
    return TestClient(app)


def test_get_default_config(client):
    response = client.get("/api/config")

    assert response.status_code == 200
    body = response.json()
    assert body["encoding"]["reference"] == "utf-8"
    assert body["limits"]["maxLines"] == 5000
    assert body["logLevel"] == "INFO"


def test_update_config_merges_sections(client):
    response = client.put("/api/config", json={"limits": {"maxLines": 10}, "logLevel": "debug"})

    assert response.status_code == 200
    assert response.json()["status"] == "success"

    body = client.get("/api/config").json()
    assert body["limits"]["maxLines"] == 10
    assert body["logLevel"] == "DEBUG"
    assert body["server"]["port"] == 8000
    assert ConfigManager.get_instance().get("limits") == {"maxLines": 10, "maxCells": 4_000_000}


def test_update_rejects_unknown_encoding(client):
    response = client.put("/api/config", json={"encoding": {"candidate": "no-such-encoding"}})

    assert response.status_code == 400
    assert client.get("/api/config").json()["encoding"]["candidate"] == "utf-8"


def test_numeric_strings_are_stored_as_numbers(client):
    response = client.put("/api/config", json={"limits": {"maxLines": "10"}})

    assert response.status_code == 200
    assert ConfigManager.get_instance().get_config()["limits"]["maxLines"] == 10

    diff_response = client.post("/api/diff/content", json={"candidate": "a\n", "reference": "b\n"})
    assert diff_response.status_code == 200


@pytest.mark.parametrize(
    "payload",
    [
        {"limits": {"maxLines": "ten"}},
        {"limits": {"maxCells": -1}},
        {"encoding": {"candidate": 5}},
        {"server": {"port": 70000}},
    ],
)
def test_malformed_sections_are_rejected_and_not_saved(client, payload):
    response = client.put("/api/config", json=payload)

    assert response.status_code == 422
    assert not ConfigManager.get_instance().config_file.exists()


def test_unknown_log_level_is_rejected(client):
    response = client.put("/api/config", json={"logLevel": "verbose"})

    assert response.status_code == 400
    assert ConfigManager.get_instance().get_config()["logLevel"] == "INFO"
