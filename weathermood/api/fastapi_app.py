from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weathermood import __version__, config
from weathermood.api.auth.routes import router as auth_router
from weathermood.api.health import router as health_router
from weathermood.api.music.routes import router as music_router
from weathermood.api.spotify.routes import router as spotify_router
from weathermood.api.weather.routes import router as weather_router
from weathermood.core import configure_logging, log_section

configure_logging()

app = FastAPI(
    title="WeatherMood API",
    version=__version__,
    description="Music recommendations that follow the weather.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["health"])
app.include_router(weather_router, prefix="/weather", tags=["weather"])
app.include_router(auth_router, prefix="/auth", tags=["auth"])
app.include_router(music_router, tags=["music"])
app.include_router(spotify_router, tags=["spotify"])

log_section(f"WeatherMood API v{__version__}")
