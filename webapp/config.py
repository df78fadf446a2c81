# webapp/config.py

import logging
import os
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, ConfigDict, PositiveInt, StrictStr, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Config object (built once by create_app, then passed around read-only)
# ---------------------------------------------------------------------------

class Config(BaseModel):
    # Any other environment key is kept as-is, unvalidated
    model_config = ConfigDict(extra="allow", frozen=True)

    MONGODB_URI: StrictStr

    MONGODB_DATABASE: Optional[str] = None
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: PositiveInt = 5000

    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    HOST: str = "127.0.0.1"
    PORT: int = 3000

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a declared field or any extra environment key."""
        if key in type(self).model_fields:
            return getattr(self, key)
        return (self.model_extra or {}).get(key, default)


def _read_dotenv(dotenv_path: Optional[str]) -> Dict[str, str]:
    path = dotenv_path or find_dotenv(usecwd=True)
    if not path or not os.path.isfile(path):
        return {}

    logger.debug("Reading environment overrides from %s", path)
    return {k: v for k, v in dotenv_values(path).items() if v is not None}


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


def load_config(
    env: Optional[Mapping[str, Any]] = None,
    dotenv: bool = True,
    dotenv_path: Optional[str] = None,
) -> Config:
    """
    Build the validated Config.

    - env defaults to os.environ
    - with dotenv on, values from the .env file sit underneath env
      (anything already set in env wins)
    """
    values: Dict[str, Any] = {}
    if dotenv:
        values.update(_read_dotenv(dotenv_path))
    values.update(os.environ if env is None else env)

    try:
        return Config.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {_describe(exc)}") from exc
