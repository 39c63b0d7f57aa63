"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Persistence
    history_file: str = "trips_data.txt"  # append-only plain-text log

    # Cost pipeline
    extra_components: list[str] = ["emergency_buffer"]  # registry identifiers

    # Presentation
    currency_symbol: str = "₹"  # INR
    log_level: str = "WARNING"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
