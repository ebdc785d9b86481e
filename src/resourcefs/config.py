"""resourcefs configuration settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resourcefs.infrastructure.logging_setup import configure_logging
from resourcefs.infrastructure.storage.path_guard import (
    ensure_within_root,
    normalize_path,
)


class Settings(BaseSettings):
    """Settings with env var support (``RESOURCEFS_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="RESOURCEFS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sandbox container; the local capability refuses I/O outside it.
    sandbox_root: Path = Field(default=Path("~/.resourcefs/sandbox"))
    # Scratch directory for WellKnownDirectory.TEMPORARY; <sandbox_root>/tmp when unset.
    temporary_root: Optional[Path] = None

    # Observability
    log_level: str = "INFO"
    log_json: bool = False

    # I/O
    io_fsync: bool = True
    json_indent: int = Field(default=2, ge=0, le=8)  # 0 = compact

    def _normalize_paths(self) -> None:
        self.sandbox_root = normalize_path(self.sandbox_root)
        if self.temporary_root is not None:
            self.temporary_root = ensure_within_root(self.sandbox_root, self.temporary_root)

    @model_validator(mode="after")
    def _normalize_paths_validator(self) -> "Settings":
        self._normalize_paths()
        return self

    @property
    def scratch_root(self) -> Path:
        """Directory that ``WellKnownDirectory.TEMPORARY`` resolves to."""
        if self.temporary_root is not None:
            return self.temporary_root
        return self.sandbox_root / "tmp"

    def setup_logging(self) -> bool:
        return configure_logging(level=self.log_level, json_logs=self.log_json)


# Global settings instance
settings = Settings()
