"""Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Bulk insertion: combined list sizes above this build a set of existing ids
    # instead of rescanning the target list for every candidate
    hash_set_threshold: int = 16

    # Id format: "<partition_key><id_separator><document_id>"
    id_separator: str = ":"

    model_config = {"env_prefix": "IDPAIRS_", "env_file": ".env", "extra": "ignore"}


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
