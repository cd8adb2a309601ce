"""WeatherMood: weather-driven music discovery on top of the Spotify Web API."""

__version__ = "1.0.0"
