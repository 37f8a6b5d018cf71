from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from convogen.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    backend: str
    secrets_path: Path
    log_level: str


class OpenAISecrets(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_key: str = Field(alias="apiKey")


class Secrets(BaseModel):
    """Shape of secrets.yaml: `openai: {apiKey: ...}`."""

    model_config = ConfigDict(extra="ignore")

    openai: OpenAISecrets


def load_settings() -> Settings:
    # Allow users to keep overrides in a local `.env` (not committed).
    load_dotenv(override=False)

    def getenv(key: str, default: str) -> str:
        v = os.getenv(key)
        if v is None or v == "":
            return default
        return v

    log_level = getenv("CONVOGEN_LOG_LEVEL", "INFO").strip().upper()
    # getLevelName maps known names to their int level, anything else to a string
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"unknown CONVOGEN_LOG_LEVEL={log_level!r}, choose one of: DEBUG|INFO|WARNING|ERROR|CRITICAL")

    return Settings(
        backend=getenv("CONVOGEN_BACKEND", "openai").strip().lower(),
        secrets_path=Path(getenv("CONVOGEN_SECRETS_FILE", "secrets.yaml")),
        log_level=log_level,
    )


def load_secrets(path: Path) -> Secrets:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("could not read %s err=%s", path, exc)
        raise ConfigError(f"could not read {path}: {exc}") from exc

    try:
        data = yaml.safe_load(raw) or {}
        return Secrets.model_validate(data)
    except (yaml.YAMLError, ValidationError) as exc:
        logger.error("could not unmarshal %s err=%s", path, exc)
        raise ConfigError(f"could not unmarshal {path}: {exc}") from exc
