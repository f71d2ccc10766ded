import json

import pytest

from server import app, engine


@pytest.fixture
def client():
    engine.clear_cache()
    return app.test_client()


def _post(client, path, payload):
    return client.post(path, data=json.dumps(payload), content_type="application/json")


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "ok"


def test_post_sentiment_analyzer_ok(client):
    resp = _post(client, "/sentimentAnalyzer", {"text": "PRODUTO EXCELENTE!!!"})
    assert resp.status_code == 200
    data = resp.get_json()
    for key in ["intensity", "sentiment", "magnitude", "emoji"]:
        assert key in data, f"missing key: {key}"

    assert data["sentiment"] == "positive"
    assert 0.0 < float(data["intensity"]) <= 0.9
    assert data["magnitude"] == data["intensity"]
    assert isinstance(data["emoji"], str)


def test_empty_text_is_neutral_not_an_error(client):
    resp = _post(client, "/sentimentAnalyzer", {"text": ""})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["intensity"] == 0
    assert data["sentiment"] == "neutral"


@pytest.mark.parametrize("payload", [{}, {"text": 12}, {"text": None}, ["bom"]])
def test_post_sentiment_analyzer_bad_request(client, payload):
    resp = _post(client, "/sentimentAnalyzer", payload)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_non_json_body_is_rejected(client):
    resp = client.post("/sentimentAnalyzer", data="bom produto", content_type="text/plain")
    assert resp.status_code == 400


def test_batch(client):
    resp = _post(client, "/sentimentAnalyzer/batch", {"texts": ["bom produto", "produto ruim 😢", "rs"]})
    assert resp.status_code == 200
    labels = [r["sentiment"] for r in resp.get_json()["results"]]
    assert labels == ["positive", "negative", "neutral"]


def test_batch_bad_request(client):
    resp = _post(client, "/sentimentAnalyzer/batch", {"texts": ["bom", 3]})
    assert resp.status_code == 400


def test_explain(client):
    resp = _post(client, "/sentimentAnalyzer/explain", {"text": "não é bom produto"})
    assert resp.status_code == 200
    trace = resp.get_json()
    assert trace["tokens"] == ["nao", "e", "bom", "produto"]
    assert trace["result"]["sentiment"] == "negative"
    assert "lexicon" in trace["contributions"]


def test_clear_cache(client):
    _post(client, "/sentimentAnalyzer", {"text": "bom produto"})
    assert engine.cache_size == 1
    resp = client.delete("/cache")
    assert resp.status_code == 204
    assert engine.cache_size == 0


def test_unknown_route_is_still_404(client):
    assert client.get("/nope").status_code == 404
