# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (.env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    APP_NAME: str = "Waypoint Navigator API"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Cruising speed in knots used until the user changes it
    DEFAULT_SPEED_KNOTS: float = 5.0

    # Initial map view handed to the Leaflet frontend
    MAP_CENTER_LAT: float = 57.8
    MAP_CENTER_LNG: float = 11.3
    MAP_ZOOM: int = 10
    TILE_URL: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    TILE_ATTRIBUTION: str = "&copy; OpenStreetMap contributors"

    # Marker icons: the first waypoint is drawn with START_ICON_URL
    START_ICON_URL: str = "https://unpkg.com/leaflet@1.9.4/dist/images/marker-icon-2x.png"
    WAYPOINT_ICON_URL: str = "https://unpkg.com/leaflet@1.9.4/dist/images/marker-icon.png"

    # Passed to navigator.geolocation.getCurrentPosition on the frontend
    GEOLOCATION_TIMEOUT_MS: int = 10_000


settings = Settings()
