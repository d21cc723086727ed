"""Runtime configuration loaded from the environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from ``LOANCALC_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="LOANCALC_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    service_name: str = "loancalc"
    log_level: str = "INFO"

    # Graph canvas, pixels
    canvas_width: int = 600
    canvas_height: int = 300


settings = Settings()
