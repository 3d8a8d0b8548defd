"""
Settings for plugin_config

Values are read from environment variables prefixed with PLUGIN_CONFIG_
(or a local .env file), e.g. PLUGIN_CONFIG_THROW_ON_UNSUPPORTED_OPERATION=false.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package-wide settings"""

    # Raise UnsupportedOperationError when saving/reloading a config without a file.
    # When False those calls are a logged no-op.
    throw_on_unsupported_operation: bool = True

    # Where the message prefix lives in newly created configs
    prefix_path: str = "prefix.prefix"

    # Alternate color character translated by Config.color()
    color_char: str = "&"

    # Log level used by the plugin-config CLI
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PLUGIN_CONFIG_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()


@lru_cache()
def get_settings() -> Settings:
    """Return the settings instance (cached)"""
    return settings
