import pytest

from sentiment_app.classifier import classify, label_for, normalize_intensity


@pytest.mark.parametrize(
    "score, expected",
    [
        (0.0, 0.4),
        (0.3, 0.55),
        (1.0, 0.9),
        (-0.3, -0.55),
        (-1.0, -0.9),
        (1.5, 0.6),
        (3.0, 0.75),
        (-3.0, -0.25),
        (100.0, 0.9),
        (-100.0, -0.1),
    ],
)
def test_normalize_intensity(score, expected):
    assert normalize_intensity(score) == pytest.approx(expected)


def test_intensity_is_bounded():
    for score in (-50, -2, -1.01, -0.5, -0.01, 0, 0.01, 0.5, 1.01, 2, 50):
        value = normalize_intensity(score)
        assert -0.9 <= value <= 0.9
        assert abs(value) >= 0.1


def test_label_thresholds_use_raw_score():
    assert label_for(0.05) == "neutral"
    assert label_for(-0.05) == "neutral"
    assert label_for(0.051) == "positive"
    assert label_for(-0.051) == "negative"
    assert label_for(25.0) == "positive"


def test_zero_score_is_neutral_with_positive_intensity():
    assert classify(0.0) == (0.4, "neutral")


def test_classify_rounds_intensity():
    intensity, label = classify(0.123456)
    assert intensity == 0.462
    assert label == "positive"
    assert classify(-0.3) == (-0.55, "negative")
