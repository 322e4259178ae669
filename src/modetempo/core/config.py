"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional
from functools import lru_cache


class RegistrySettings(BaseSettings):
    """Template registry configuration."""

    name_prefix: str = Field("tempo:", alias="MT_NAME_PREFIX")

    model_config = {"env_prefix": "", "extra": "ignore"}


class EngineSettings(BaseSettings):
    """Reference template engine configuration."""

    # Applied to the text before point; group 1 is the candidate tag, the whole match is consumed
    tag_pattern: str = Field(r"(\w+)\Z", alias="MT_TAG_PATTERN")
    region_variable: str = Field("region", alias="MT_REGION_VARIABLE")

    model_config = {"env_prefix": "", "extra": "ignore"}


class DispatchSettings(BaseSettings):
    """Expansion dispatcher configuration."""

    key: str = Field("TAB", alias="MT_DISPATCH_KEY")
    no_templates_message: str = Field(
        "No templates defined for this session",
        alias="MT_NO_TEMPLATES_MESSAGE"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class TemplateSettings(BaseSettings):
    """Template source configuration."""

    template_file: Optional[str] = Field(None, alias="MT_TEMPLATE_FILE")
    load_builtin: bool = Field(True, alias="MT_LOAD_BUILTIN")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field("WARNING", alias="MT_LOG_LEVEL")
    format: str = Field("rich", alias="MT_LOG_FORMAT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Root configuration aggregating all settings."""

    registry: RegistrySettings = Field(default_factory=RegistrySettings)
    engine: EngineSettings = Field(default_factory=EngineSettings)
    dispatch: DispatchSettings = Field(default_factory=DispatchSettings)
    templates: TemplateSettings = Field(default_factory=TemplateSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "env_file": ".env",
        "env_nested_delimiter": "__",
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
