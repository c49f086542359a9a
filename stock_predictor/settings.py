"""
Application settings.

Loads deployment-level settings from environment variables and a .env file.
Numerical constants that are tuned by experimentation live in
stock_predictor.config instead.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from the environment.

    Attributes:
        project_name: Display name used by the CLI.
        version: Current package version string.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        history_days: Days of synthetic history generated per symbol.
        horizon_days: Number of future days to predict.
        moving_average_window: Trailing window of the baseline model.
        random_seed: Seed for the synthetic generator. None keeps it random.
    """

    model_config = SettingsConfigDict(
        env_prefix="STOCK_PREDICTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Stock Price Predictor"
    version: str = "0.1.0"
    log_level: str = "INFO"
    history_days: int = 180  # 6 months
    horizon_days: int = 30
    moving_average_window: int = 20
    random_seed: Optional[int] = None


settings = Settings()
