import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables from .env file
load_dotenv()


class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "Congress Lookup Service")
    port: int = int(os.getenv("PORT", "3000"))

    cors_origins: str = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    )

    # Upstreams
    geocoder_url: str = os.getenv(
        "GEOCODER_URL",
        "https://geocoding.geo.census.gov/geocoder/geographies/address",
    )
    zip_lookup_url: str = os.getenv(
        "ZIP_LOOKUP_URL",
        "https://whoismyrepresentative.com/getall_mems.php",
    )
    propublica_base_url: str = os.getenv(
        "PROPUBLICA_BASE_URL",
        "https://api.propublica.org/congress/v1",
    )
    propublica_api_key: str | None = os.getenv("PROPUBLICA_API_KEY")
    congress_number: int = int(os.getenv("CONGRESS_NUMBER", "115"))
    http_timeout_seconds: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str | None = os.getenv("LOG_FORMAT", None)
    upstream_log_level: str | None = os.getenv("UPSTREAM_LOG_LEVEL", None)

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
