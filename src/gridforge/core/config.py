"""Configuration Management."""

from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from gridforge.dialect import Dialect

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="GRIDFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Dialects
    default_dialect: str = Field(default="basalt", description="Dialect for new documents")
    import_priority: list[str] = Field(
        default_factory=lambda: ["basalt", "pixelui", "primeui"],
        description="Order in which dialect extractors are tried on import",
    )
    canvas_preset: str = Field(default="computer", description="Canvas preset for new or size-less imports")

    # Generation
    emit_comments: bool = Field(default=True, description="Emit a comment line above each widget")
    json_indent: int = Field(default=2, ge=0, le=8, description="Indent for interchange files")

    # Limits
    max_source_bytes: int = Field(default=1_048_576, gt=0, description="Max import size")
    max_literal_depth: int = Field(default=32, gt=0, description="Max aggregate nesting")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    @field_validator("default_dialect")
    @classmethod
    def _known_dialect(cls, value: str) -> str:
        return Dialect(value.lower()).value

    @field_validator("import_priority")
    @classmethod
    def _known_dialects(cls, value: list[str]) -> list[str]:
        return [Dialect(name.lower()).value for name in value]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
