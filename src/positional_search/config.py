"""Centralized configuration for positional-search using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Every field can be set through a ``POSITIONAL_SEARCH_``-prefixed variable
    (for example ``POSITIONAL_SEARCH_INDEX_PATH``) or a ``.env`` file. Command
    line flags take precedence over both.
    """

    model_config = SettingsConfigDict(
        env_prefix="POSITIONAL_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    index_path: Path = Field(default=Path("positional_index.txt"), description="Positional index file to query")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON log records")

    # Report layout
    column_width: int = Field(default=10, ge=4, description="Width of each document column in report tables")
    term_column_width: int = Field(default=15, ge=4, description="Width of the term column in report tables")
    score_precision: int = Field(default=4, ge=0, le=12, description="Decimal places printed for scores")

    # Index construction
    build_max_workers: int = Field(default=4, ge=1, description="Threads used to map documents while indexing")

    # Tracing
    tracing_enabled: bool = Field(default=True, description="Record OpenTelemetry spans for each query")
    trace_exporter: Literal["none", "console"] = Field(
        default="none", description="Where finished spans go: kept in-process (none) or printed to stderr (console)"
    )
    service_name: str = Field(default="positional-search", description="Service name reported on spans")

    # Metrics
    metrics_path: Path | None = Field(
        default=None, description="Prometheus text file written after queries run (textfile collector format)"
    )

    @model_validator(mode="after")
    def _check_log_level(self) -> "Settings":
        normalized = self.log_level.strip().lower()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}; expected one of {', '.join(_LOG_LEVELS)}")
        self.log_level = normalized
        return self
