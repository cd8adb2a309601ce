"""Weather condition -> mood classification.

Conditions are matched case-insensitively against an ordered keyword table.
The first rule whose keywords appear anywhere in the condition wins, so
"clear" rules are checked before "cloud" rules and so on. A condition that
matches nothing falls back to the "popular" category.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .models import MoodQuery

DEFAULT_CATEGORY = "popular"

# (category, keywords, search terms); order matters
MOOD_RULES: Tuple[Tuple[str, Tuple[str, ...], Tuple[str, ...]], ...] = (
    ("sunny", ("clear", "sunny"), ("sunny", "happy", "summer", "pop", "upbeat")),
    ("rainy", ("rain", "drizzle"), ("rainy", "chill", "acoustic", "calm", "lo-fi")),
    ("stormy", ("storm", "thunder"), ("epic", "rock", "intense", "powerful", "metal")),
    (
        "cloudy",
        ("cloud", "overcast"),
        ("indie", "mellow", "thoughtful", "alternative", "dream-pop"),
    ),
    ("snowy", ("snow", "cold"), ("winter", "cozy", "ambient", "chill", "fireplace")),
    (
        "foggy",
        ("fog", "mist"),
        ("mysterious", "ambient", "atmospheric", "ethereal", "dreamy"),
    ),
    (
        "windy",
        ("wind", "breeze"),
        ("epic", "cinematic", "orchestral", "adventure", "travel"),
    ),
    ("hazy", ("haze", "smoke"), ("mysterious", "dark", "ambient", "electronic", "synth")),
)

DEFAULT_TERMS: Tuple[str, ...] = ("popular", "hits", "trending", "viral")


@dataclass(frozen=True)
class MoodDescription:
    label: str
    description: str


MOOD_DESCRIPTIONS: Dict[str, MoodDescription] = {
    "sunny": MoodDescription(
        "Sunny Vibes 🎉", "Bright and energetic music for sunny days"
    ),
    "rainy": MoodDescription("Rainy Chill 🌧️", "Calm and soothing music for rainy days"),
    "stormy": MoodDescription(
        "Stormy Energy ⚡", "Powerful and intense music for stormy weather"
    ),
    "cloudy": MoodDescription(
        "Cloudy Moods ☁️", "Thoughtful and mellow music for cloudy days"
    ),
    "snowy": MoodDescription("Cozy Snow ❄️", "Warm and cozy music for cold days"),
    "foggy": MoodDescription(
        "Mysterious Fog 🌫️", "Atmospheric and mysterious music for foggy days"
    ),
    "windy": MoodDescription(
        "Windy Adventure 🌬️", "Epic and adventurous music for windy days"
    ),
    "hazy": MoodDescription(
        "Mysterious Haze 💨", "Dark and atmospheric music for hazy conditions"
    ),
}

DEFAULT_DESCRIPTION = MoodDescription(
    "Good Vibes 🎵", "Great music for your current weather"
)


def classify_condition(condition: str) -> MoodQuery:
    """
    Map a free-text weather condition ("Rain", "light rain showers", ...) to
    a MoodQuery.

    Raises ValueError for an empty or blank condition.
    """
    if not condition or not condition.strip():
        raise ValueError("Weather condition must be a non-empty string.")

    lowered = condition.lower()
    for category, keywords, terms in MOOD_RULES:
        if any(keyword in lowered for keyword in keywords):
            return MoodQuery(category=category, terms=terms)

    return MoodQuery(category=DEFAULT_CATEGORY, terms=DEFAULT_TERMS)


def describe_mood(category: str) -> MoodDescription:
    """Display label and description for a mood category."""
    return MOOD_DESCRIPTIONS.get(category, DEFAULT_DESCRIPTION)
