from pydantic_settings import BaseSettings, SettingsConfigDict

from scass.version import __version__
from scass.core.constants import DEFAULT_OUTPUT_FILE


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SCASS_",
        case_sensitive=True,
        extra="ignore"
    )

    VERSION: str = __version__

    # --- LOGGING ---
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # --- CLI DEFAULTS ---
    DEFAULT_OUTPUT_FILE: str = DEFAULT_OUTPUT_FILE
    DEFAULT_DIRECTORY: str = "."


settings = Settings()
