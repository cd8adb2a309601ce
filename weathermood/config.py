import os

from dotenv import load_dotenv

load_dotenv()

# Base & cache directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CACHE_DIR = os.getenv("WEATHERMOOD_CACHE_DIR", os.path.join(BASE_DIR, "cache"))

# Token file (single local user)
SPOTIFY_TOKEN_FILE = os.path.join(CACHE_DIR, "spotify_token.json")

# Spotify credentials (REQUIRED for the auth flow)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")
SPOTIFY_REDIRECT_URI = os.getenv(
    "SPOTIFY_REDIRECT_URI", "http://127.0.0.1:5000/auth/callback"
)

# Spotify API constants
SPOTIFY_AUTH_URL = "https://accounts.spotify.com/authorize"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"
SPOTIFY_MARKET = os.getenv("SPOTIFY_MARKET", "US")

SCOPES = [
    "user-read-private",
    "user-read-email",
    "user-top-read",
    "user-library-read",
    "user-read-playback-state",
    "streaming",
    "playlist-modify-public",
    "playlist-modify-private",
]

# Refresh the access token when it expires within this window
TOKEN_REFRESH_MARGIN_SECONDS = 300

# OpenWeatherMap
WEATHER_API_KEY = os.getenv("WEATHER_API_KEY")
WEATHER_API_URL = "https://api.openweathermap.org/data/2.5/weather"

# Outbound HTTP
HTTP_TIMEOUT_SECONDS = 10

# Track retrieval
MAX_TRACKS = 26
FALLBACK_SEARCH_TERM = "popular"
TOP_TRACKS_TIME_RANGE = "short_term"

# Playlists
PLAYLIST_DEFAULT_DESCRIPTION = "Created with WeatherMood 🎵"
PLAYLIST_ADD_CHUNK_SIZE = 100

# HTTP server
PORT = int(os.getenv("PORT", "5000"))
HOST = os.getenv("HOST", "127.0.0.1")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://127.0.0.1:5000").split(",")
    if origin.strip()
]

# Where the browser goes after the Spotify callback; unset serves a plain
# confirmation page from the API itself
FRONTEND_URL = os.getenv("FRONTEND_URL") or None

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
