import pytest

from weathermood.core import DEFAULT_CATEGORY, classify_condition, describe_mood


@pytest.mark.parametrize(
    "condition",
    ["Rain", "light rain showers", "DRIZZLE", "freezing drizzle at dawn", "Rainy"],
)
def test_rain_and_drizzle_map_to_rainy(condition: str) -> None:
    mood = classify_condition(condition)

    assert mood.category == "rainy"
    assert mood.terms[0] == "rainy"


@pytest.mark.parametrize("condition", ["Tornado", "Squall", "ash", "???"])
def test_unmatched_conditions_map_to_popular(condition: str) -> None:
    mood = classify_condition(condition)

    assert mood.category == DEFAULT_CATEGORY == "popular"
    assert mood.terms == ("popular", "hits", "trending", "viral")


def test_first_matching_rule_wins() -> None:
    # "clear" is checked before "cloud", "rain" before "storm"
    assert classify_condition("clear with some clouds").category == "sunny"
    assert classify_condition("rain and thunderstorm").category == "rainy"
    assert classify_condition("Thunderstorm").category == "stormy"


def test_known_categories() -> None:
    assert classify_condition("Clouds").category == "cloudy"
    assert classify_condition("Snow").category == "snowy"
    assert classify_condition("Mist").category == "foggy"
    assert classify_condition("Smoke").category == "hazy"
    assert classify_condition("strong breeze").category == "windy"


def test_terms_are_immutable_tuple() -> None:
    mood = classify_condition("Clear")

    assert mood.terms == ("sunny", "happy", "summer", "pop", "upbeat")
    with pytest.raises(AttributeError):
        mood.category = "rainy"  # type: ignore[misc]


@pytest.mark.parametrize("condition", ["", "   "])
def test_blank_condition_is_rejected(condition: str) -> None:
    with pytest.raises(ValueError):
        classify_condition(condition)


def test_describe_mood_labels() -> None:
    assert describe_mood("rainy").label.startswith("Rainy Chill")
    assert describe_mood("popular").label.startswith("Good Vibes")
    assert describe_mood("unknown").description == (
        "Great music for your current weather"
    )
