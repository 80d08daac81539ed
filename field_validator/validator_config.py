"""Console app settings, read from the environment (or a .env file)."""
import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class ValidatorConfig:
    log_level: int = logging.INFO
    # Field type names to prompt for, in order. Empty means every field type.
    fields: list[str] = field(default_factory=list)


def _parse_log_level(raw: str | None) -> int:
    name = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown LOG_LEVEL %r, using %s", raw, DEFAULT_LOG_LEVEL)
        return logging.INFO
    return level


def _parse_fields(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def load_config(dotenv: bool = True) -> ValidatorConfig:
    """Load settings. LOG_LEVEL and VALIDATOR_FIELDS are read after the .env file, if any."""
    if dotenv:
        load_dotenv()
    return ValidatorConfig(
        log_level=_parse_log_level(os.getenv("LOG_LEVEL")),
        fields=_parse_fields(os.getenv("VALIDATOR_FIELDS")),
    )
