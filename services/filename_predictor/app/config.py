"""Configuration management for the Filename Predictor."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings."""

    model_config = SettingsConfigDict(
        env_prefix="FILENAME_PREDICTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "Filename Predictor"
    app_version: str = "0.1.0"
    debug: bool = Field(default=False, description="Debug mode")

    # Tokenizer settings
    separator_chars: str = Field(
        default=" ._-()[]#,~",
        min_length=1,
        description="Characters emitted as standalone separator tokens",
    )
    extension_min_length: int = Field(default=1, ge=1, description="Minimum extension length")
    extension_max_length: int = Field(default=5, ge=1, description="Maximum extension length")
    date_token_length: int = Field(default=8, ge=1, description="Digit-run length classified as a date")

    # Inference settings
    index_density_threshold: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Density above which a numeric column is an index"
    )

    # Suggestion settings
    max_scored_values: int = Field(default=5, ge=1, description="Values kept in scored non-index mode")
    next_index_score: float = Field(default=0.9, ge=0.0, le=1.0, description="Score of the next index")
    gap_base_score: float = Field(default=0.7, ge=0.0, le=1.0, description="Score of the first missing index")
    gap_score_step: float = Field(default=0.05, ge=0.0, description="Score decrease per subsequent gap")
    gap_min_score: float = Field(default=0.3, ge=0.0, le=1.0, description="Lower bound of gap scores")
    score_precision: int = Field(default=3, ge=0, description="Decimal places of emitted scores")

    # Runtime settings
    build_workers: int = Field(default=1, ge=1, description="Threads used while building a model")
    enable_parse_cache: bool = Field(default=True, description="Memoise parsed names")
    parse_cache_size: int = Field(default=1024, ge=1, description="Parsed names kept before the oldest is evicted")

    @model_validator(mode="after")
    def _check_extension_bounds(self) -> "Settings":
        if self.extension_max_length < self.extension_min_length:
            raise ValueError("extension_max_length must be >= extension_min_length")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached engine settings."""
    return Settings()
