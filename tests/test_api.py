# tests/test_api.py

from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def test_links_found():
    resp = client.post("/links", json={"text": "x test@example.com x"})
    assert resp.status_code == 200
    assert resp.json() == {
        "found": True,
        "links": [{"url": "mailto:test@example.com", "start": 2, "end": 18}],
    }


def test_links_none_found():
    resp = client.post("/links", json={"text": "hello world"})
    assert resp.status_code == 200
    assert resp.json() == {"found": False, "links": []}


def test_links_detector_selection():
    text = "test@example.com google.com"
    resp = client.post("/links", json={"text": text, "detectors": ["web_urls"]})
    assert resp.json()["links"] == [
        {"url": "http://google.com", "start": 17, "end": 27}
    ]


def test_links_unknown_detector():
    resp = client.post("/links", json={"text": "a", "detectors": ["phone_numbers"]})
    assert resp.status_code == 422
