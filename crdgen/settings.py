"""Tool configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APIS_DIR = "pkg/apis"
CRDS_DIR = "deploy/crds"
BUILD_BIN_DIR = "build/_output/bin"
BOILERPLATE_FILE = "hack/boilerplate.go.txt"


class Settings(BaseSettings):
    """Settings for the code-generation tool."""

    model_config = SettingsConfigDict(
        env_prefix="CRDGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_root: Path | None = Field(default=None)
    apis_dir: str = Field(default=APIS_DIR)
    crds_dir: str = Field(default=CRDS_DIR)
    header_file: Path | None = Field(default=None)
    generator_bin: str = Field(default="openapi-gen")
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the tool settings."""

    return Settings()
