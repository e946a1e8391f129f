"""Runtime configuration for the nexus upload step."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FinalNamePolicy(str, Enum):
    """How a missing ``project.build.finalName`` is handled."""

    STRICT = "strict"
    DERIVE = "derive"


class Settings(BaseSettings):
    """Configuration values mapped from ``NEXUS_UPLOAD_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NEXUS_UPLOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Nexus repository configuration
    url: str = Field("", description="Nexus host, e.g. nexus.example.com:8081")
    nexus_version: str = Field("nexus3", description="nexus2 or nexus3")
    repository: str = Field("", description="Target repository name")
    username: Optional[str] = Field(None)
    password: Optional[str] = Field(None)
    http_timeout: float = Field(60.0)

    # Artifact coordinates
    group_id: str = Field("")
    artifact_id: str = Field("")
    additional_classifiers: str = Field("", description="JSON array of {classifier, type}")

    # Project and pipeline locations
    project_root: str = Field(".")
    pipeline_env_root: str = Field(".")

    # Maven invocation
    maven_executable: str = Field("mvn")
    maven_project_settings_file: Optional[str] = Field(None)
    maven_global_settings_file: Optional[str] = Field(None)
    maven_m2_path: Optional[str] = Field(None)
    final_name_policy: FinalNamePolicy = Field(FinalNamePolicy.STRICT)

    verbose: bool = Field(False)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
