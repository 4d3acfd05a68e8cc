"""Tests for the HTTP surface in front of the address client"""

import pytest
from fastapi.testclient import TestClient

from geonorge_adresse import adresse
from geonorge_adresse.main import app

ADDRESS = {"adressenavn": "Storgata", "husnr": "1"}


@pytest.fixture
def api(client):
    app.dependency_overrides[adresse.get_client] = lambda: client
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(api):
    response = api.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_text_search(api, service):
    service.reply({"sokStatus": {"ok": True}, "totaltAntallTreff": 1, "adresser": [ADDRESS]})

    response = api.get("/api/adresse/sok", params={"q": " Storgata 1 ", "per_page": 5})

    assert response.status_code == 200
    assert response.json() == {"count": 1, "addresses": [ADDRESS]}
    assert service.last_params == {"sokestreng": "Storgata 1", "side": "0", "antPerSide": "5"}


def test_blank_text_is_bad_request(api, service):
    response = api.get("/api/adresse/sok", params={"q": "   "})

    assert response.status_code == 400
    assert service.requests == []


def test_radius_search(api, service):
    response = api.get("/api/adresse/radius", params={"north": 59.91, "east": 10.75})

    assert response.status_code == 200
    assert response.json() == {"count": 0, "addresses": []}
    assert service.requests[-1].url.path.endswith("/radius")
    assert service.last_params["radius"] == "1.0"


def test_box_search(api, service):
    response = api.get(
        "/api/adresse/box",
        params={"north_lower": 1, "east_lower": 2, "north_upper": 3, "east_upper": 4},
    )

    assert response.status_code == 200
    assert set(service.last_params) == {"nordLL", "austLL", "nordUR", "austUR", "side", "antPerSide"}


def test_service_failure_is_bad_gateway(api, service):
    service.reply({"sokStatus": {"ok": False, "melding": "bad query"}})

    response = api.get("/api/adresse/sok", params={"q": "Storgata"})

    assert response.status_code == 502
    assert response.json() == {"detail": "bad query"}
