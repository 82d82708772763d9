from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENVIRONMENT: str = "development"  # "development" or "production"
    LOG_LEVEL: str = "INFO"

    STATIC_MAP_BASE_URL: str = "https://maps.googleapis.com/maps/api/staticmap?"

    # Character count limit for a static map URL request.
    # Read at call time, so it can be overridden process-wide.
    MAX_URL_LENGTH: int = 8192

    DEFAULT_LATITUDE: float = 0.0
    DEFAULT_LONGITUDE: float = 0.0
    DEFAULT_ZOOM: int = 0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
