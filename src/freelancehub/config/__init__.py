"""Configuration management utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

from ..schemas.config import AppConfig, load_config

BAAS_URL_ENV = "FREELANCEHUB_BAAS_URL"
BAAS_KEY_ENV = "FREELANCEHUB_BAAS_KEY"


@dataclass(frozen=True)
class BaasSettings:
    """Connection details for the hosted backend."""

    url: str
    key: str

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "BaasSettings | None":
        """Read credentials from the environment, after loading ``.env`` if present.

        Returns ``None`` unless both the URL and the key are set.
        """
        load_dotenv(env_file)
        url = os.getenv(BAAS_URL_ENV, "").strip()
        key = os.getenv(BAAS_KEY_ENV, "").strip()
        if not url or not key:
            return None
        return cls(url=url, key=key)


class ConfigManager:
    """YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> AppConfig:
        """Load and validate a YAML configuration by name without file extension."""
        path = self._base_path / f"{name}.yaml"
        with path.open("r", encoding="utf-8") as handle:
            return load_config(yaml.safe_load(handle) or {})


__all__ = ["BAAS_KEY_ENV", "BAAS_URL_ENV", "AppConfig", "BaasSettings", "ConfigManager", "load_config"]
