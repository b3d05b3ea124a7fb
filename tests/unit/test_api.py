import random

import pytest
from fastapi.testclient import TestClient

from emoji_compact.core.lookup import EmojiLookup
from emoji_compact.core.records import CategoryIndex, CompactEmoji
from emoji_compact.main import create_app


@pytest.fixture
def client(lookup) -> TestClient:
    return TestClient(create_app(lookup=lookup))


def test_categories(client):
    response = client.get("/api/categories")
    assert response.status_code == 200
    assert response.json() == [
        {"name": "Smileys & Emotion", "count": 7},
        {"name": "People & Body", "count": 3},
        {"name": "Animals & Nature", "count": 3},
    ]


def test_category_records(client):
    response = client.get("/api/categories/Animals%20%26%20Nature")
    assert response.status_code == 200
    payload = response.json()
    assert [item["unified"] for item in payload] == ["1F436", "1F431", "1F435"]
    assert payload[0]["character"] == "\U0001F436"
    assert payload[0]["category"] == "Animals & Nature"


def test_unknown_category_is_empty(client):
    response = client.get("/api/categories/NonexistentCategory")
    assert response.status_code == 200
    assert response.json() == []


def test_search_first(client):
    response = client.get("/api/search", params={"q": "Thumbs Up"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["term"] == "thumbs up"
    assert [item["unified"] for item in payload["results"]] == ["1F44D"]
    assert payload["results"][0]["variants"] == ["1F3FB", "1F3FC", "1F3FD", "1F3FE", "1F3FF"]


def test_search_all(client):
    response = client.get("/api/search", params={"q": "smile", "all": 1})
    assert response.status_code == 200
    results = response.json()["results"]
    assert len(results) == 4
    assert all(item["category"] == "Smileys & Emotion" for item in results)


def test_search_miss(client):
    assert client.get("/api/search", params={"q": "unicorn"}).status_code == 404
    response = client.get("/api/search", params={"q": "unicorn", "all": 1})
    assert response.status_code == 200
    assert response.json()["results"] == []


def test_search_empty_term(client):
    assert client.get("/api/search", params={"q": "  "}).status_code == 400


def test_random(client):
    response = client.get("/api/random")
    assert response.status_code == 200
    assert response.json()["names"]


def test_random_empty_index():
    client = TestClient(create_app(lookup=EmojiLookup(CategoryIndex(), rng=random.Random(1))))
    assert client.get("/api/random").status_code == 404


def test_count(client):
    assert client.get("/api/count").json() == {"total": 13, "categories": 3}


def test_render(client):
    response = client.get("/api/render/1F600")
    assert response.json() == {"token": "1F600", "character": "\U0001F600"}
    assert client.get("/api/render/nothex").status_code == 400


def test_skin_tones(client):
    response = client.get("/api/skin-tones/1f44b")
    assert response.status_code == 200
    assert response.json() == {
        "unified": "1F44B",
        "tones": {"light": "\U0001F44B\U0001F3FB", "medium-light": "\U0001F44B\U0001F3FC"},
    }
    assert client.get("/api/skin-tones/1F436").status_code == 404
    assert client.get("/api/skin-tones/FFFFF").status_code == 404


def test_corrupt_data_is_server_error():
    index = CategoryIndex(categories={"Broken": (CompactEmoji(names=("broken",), unified="XYZ"),)})
    client = TestClient(create_app(lookup=EmojiLookup(index)))
    response = client.get("/api/categories/Broken")
    assert response.status_code == 500
    assert response.json()["detail"] == "Corrupted emoji data"


def test_render_rejects_surrogates(client):
    response = client.get("/api/render/D800")
    assert response.status_code == 400
    assert client.get("/api/render/0x1F600").status_code == 400
