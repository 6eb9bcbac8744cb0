"""Runtime settings for the command-line surface.

The validation API takes explicit arguments; only the CLI reads these.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    marker_key: str = "editorElement"
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="EDITORCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Read settings from the environment (and ``.env``) at call time."""
    return Settings()
