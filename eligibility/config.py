import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    max_cycles: int = 100
    age_rule_priority: int = 10
    state_rule_priority: int = 20

    # Used by the interactive prompt, which only registers the age rule
    cli_rule_priority: int = 100

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="RULE_ENGINE_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
