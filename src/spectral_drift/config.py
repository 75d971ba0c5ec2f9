"""Runtime configuration for Spectral Drift."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="SPECTRAL_DRIFT_", env_file=".env", extra="ignore")

    app_name: str = "spectral-drift"
    log_level: str = "INFO"
    drift_radius_meters: int = Field(default=2000, description="Geosearch radius around the user.")
    geosearch_limit: int = 50
    wiki_api_endpoint: str = "https://en.wikipedia.org/w/api.php"
    http_timeout_seconds: float = 10.0
    user_agent: str = Field(
        default="spectral-drift/0.1 (https://github.com/xlabcu/drift)",
        description="User-Agent sent to the Wikipedia API.",
    )
    cone_half_angle_degrees: float = Field(
        default=60.0,
        description="Points within this many degrees of the heading count as ahead of the user.",
    )
    stream_min_delay_ms: int = 20
    stream_max_delay_ms: int = 70
    drift_threshold_degrees: float = Field(
        default=0.00015,
        description="Latitude/longitude change that triggers a new drift.",
    )
    random_seed: int | None = None
    voice_enabled: bool = True
    voice_name: str = "Charon"
    telemetry_enabled: bool = True


settings = Settings()
