"""Flask server for the Sentiment Analyzer project."""
from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, List

from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

from sentiment_app import (
    InvalidPayloadError,
    SentimentConfig,
    SentimentEngine,
    format_sentiment,
    load_resources,
)
from sentiment_app.formatter import format_many
from sentiment_app.logging_config import setup_logging

load_dotenv()
setup_logging()

log = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)

engine = SentimentEngine(
    config=SentimentConfig.from_env(),
    resources=load_resources(os.getenv("SENTIMENT_RESOURCES_DIR")),
)
# The engine cache is not thread-safe; Flask may serve requests concurrently.
_engine_lock = threading.Lock()


def _payload() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise InvalidPayloadError("Request body must be a JSON object.")
    return payload


def _text_field(payload: Dict[str, Any]) -> str:
    text = payload.get("text")
    if not isinstance(text, str):
        raise InvalidPayloadError("Field 'text' must be a string.")
    return text


def _texts_field(payload: Dict[str, Any]) -> List[str]:
    texts = payload.get("texts")
    if not isinstance(texts, list) or not all(isinstance(t, str) for t in texts):
        raise InvalidPayloadError("Field 'texts' must be a list of strings.")
    return texts


@app.errorhandler(InvalidPayloadError)
def bad_payload(exc: InvalidPayloadError) -> tuple[Any, int]:
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(Exception)
def internal_error(exc: Exception) -> Any:
    if isinstance(exc, HTTPException):
        return exc
    log.exception("Unhandled error while serving %s", request.path)
    return jsonify({"error": f"Internal server error: {exc}"}), 500


@app.get("/health")
def health() -> tuple[str, int]:
    return "ok", 200


@app.post("/sentimentAnalyzer")
def analyze() -> tuple[Any, int]:
    text = _text_field(_payload())
    with _engine_lock:
        result = engine.analyze(text)
    return jsonify(format_sentiment(result)), 200


@app.post("/sentimentAnalyzer/batch")
def analyze_batch() -> tuple[Any, int]:
    texts = _texts_field(_payload())
    with _engine_lock:
        results = engine.analyze_many(texts)
    return jsonify({"results": format_many(results)}), 200


@app.post("/sentimentAnalyzer/explain")
def explain() -> tuple[Any, int]:
    text = _text_field(_payload())
    with _engine_lock:
        trace = engine.explain(text)
    return jsonify(trace), 200


@app.delete("/cache")
def clear_cache() -> tuple[str, int]:
    with _engine_lock:
        engine.clear_cache()
    log.info("Score cache cleared via HTTP")
    return "", 204


if __name__ == "__main__":
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "5000"))
    app.run(host=host, port=port)
