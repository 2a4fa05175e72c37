from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

# Load .env file from project root
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


Visibility = Literal["public", "private"]


class DiskSettings(BaseModel):
    driver: Literal["local", "s3"]
    root: str | None = None
    bucket: str | None = None
    region: str | None = None
    prefix: str = ""
    endpoint_url: str | None = None
    visibility: Visibility | None = None

    @model_validator(mode="after")
    def _check_driver_fields(self) -> "DiskSettings":
        if self.driver == "local" and not self.root:
            raise ValueError("local disks require a 'root' directory")
        if self.driver == "s3" and not self.bucket:
            raise ValueError("s3 disks require a 'bucket'")
        return self


class StorageSettings(BaseModel):
    default: str = "local"
    disks: dict[str, DiskSettings] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_default_disk(self) -> "StorageSettings":
        if self.default not in self.disks:
            raise ValueError(f"default disk '{self.default}' is not configured")
        return self


class ProviderSettings(BaseModel):
    default: str = "file"
    allowed_extensions: list[str] = Field(default_factory=list)
    url_timeout_seconds: float = Field(30.0, gt=0.0)

    @field_validator("allowed_extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: Any) -> list[str]:  # noqa: D401
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("allowed_extensions must be a list of strings")
        normalized: list[str] = []
        for item in value:
            ext = str(item).strip().lstrip(".").lower()
            if ext and ext not in normalized:
                normalized.append(ext)
        return normalized


class Settings(BaseModel):
    storage: StorageSettings
    providers: ProviderSettings = Field(default_factory=ProviderSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from YAML configuration file.

        Args:
            path: Optional path to configuration file. If not provided, uses
                UPLOADER_CONFIG environment variable or defaults to config/default.yaml.

        Returns:
            Settings instance with loaded configuration.

        Raises:
            FileNotFoundError: If configuration file does not exist.
            ValueError: If configuration is invalid.
        """
        config_path = path or Path(os.getenv("UPLOADER_CONFIG", "config/default.yaml"))
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        with config_path.open("r", encoding="utf-8") as fp:
            payload = yaml.safe_load(fp) or {}
        try:
            return cls(**payload)
        except Exception as exc:
            raise ValueError(f"Invalid configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings(path: str | None = None) -> Settings:
    return Settings.load(Path(path) if path else None)


__all__ = [
    "Settings",
    "DiskSettings",
    "StorageSettings",
    "ProviderSettings",
    "Visibility",
    "get_settings",
]
