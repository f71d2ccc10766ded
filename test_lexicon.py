import pytest

from sentiment_app.lexicon import score_tokens
from sentiment_app.resources import SentimentResources

RES = SentimentResources.build(
    lexicon={"bom": 0.5, "ruim": -0.5, "otimo": 0.8, "x": 0.12345},
    intensity_words={"nao": -1, "nunca": -2, "muito": 2.0, "super": 1.5},
    connectors={"mas": 0.5, "e": 1.2},
    adversative=["mas"],
)


def test_plain_lexicon_words_add_their_weight():
    assert score_tokens(["bom"], RES) == 0.5
    assert score_tokens(["bom", "ruim", "otimo"], RES) == 0.8


def test_unknown_tokens_and_empty_input_score_zero():
    assert score_tokens([], RES) == 0.0
    assert score_tokens(["produto", "comum"], RES) == 0.0


def test_single_negation_flips_sign():
    assert score_tokens(["nao", "bom"], RES) == -0.5
    assert score_tokens(["nao", "ruim"], RES) == 0.5


def test_double_negation_restores_sign():
    assert score_tokens(["nao", "nao", "bom"], RES) == 0.5
    # Only parity matters, not the magnitude of the negation entry.
    assert score_tokens(["nunca", "bom"], RES) == -0.5


def test_intensifiers_multiply():
    assert score_tokens(["muito", "bom"], RES) == 1.0
    assert score_tokens(["muito", "super", "bom"], RES) == 1.5
    assert score_tokens(["nao", "muito", "bom"], RES) == -1.0


def test_state_resets_after_each_scored_word():
    assert score_tokens(["nao", "bom", "bom"], RES) == 0.0
    assert score_tokens(["muito", "bom", "bom"], RES) == 1.5
    assert score_tokens(["mas", "bom", "bom"], RES) == 0.75


def test_unknown_tokens_do_not_reset_state():
    assert score_tokens(["nao", "achei", "o", "bom"], RES) == -0.5


def test_connectors_multiply_context():
    assert score_tokens(["e", "bom"], RES) == 0.6
    assert score_tokens(["e", "e", "bom"], RES) == 0.72


def test_adversative_connector_replaces_context():
    assert score_tokens(["e", "mas", "bom"], RES) == 0.25
    assert score_tokens(["mas", "e", "bom"], RES) == 0.3


def test_adversative_dampens_following_word_only():
    assert score_tokens(["bom", "mas", "ruim"], RES) == 0.25


def test_connectors_can_be_switched_off():
    assert score_tokens(["mas", "bom"], RES, use_connectors=False) == 0.5
    assert score_tokens(["e", "bom"], RES, use_connectors=False) == 0.5


def test_result_is_rounded_to_three_decimals():
    assert score_tokens(["x"], RES) == 0.123
    assert score_tokens(["muito", "x"], RES) == pytest.approx(0.247)
