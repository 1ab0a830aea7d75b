"""Load and save user settings as a TOML file."""

import logging
import tomllib
import tomli_w
from dataclasses import dataclass, asdict
from pathlib import Path
from data import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".photogallery.toml"


@dataclass
class Settings:
    window_width: int = 960
    window_height: int = 680
    image_base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"


def load(path: Path = DEFAULT_PATH) -> Settings:
    settings = Settings()
    if not path.exists():
        return settings
    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable or malformed settings file %s: %s", path, exc)
        return settings

    for key, convert in _FIELDS.items():
        if key not in raw:
            continue
        try:
            setattr(settings, key, convert(raw[key]))
        except (TypeError, ValueError) as exc:
            logger.warning("Ignoring bad %s in %s: %s", key, path, exc)

    settings.log_level = settings.log_level.upper()
    if not isinstance(logging.getLevelName(settings.log_level), int):
        logger.warning("Unknown log level %r in %s, using %s",
                       settings.log_level, path, Settings.log_level)
        settings.log_level = Settings.log_level
    return settings


def _as_int(value) -> int:
    # TOML booleans are ints to Python; a width of "true" is a mistake
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"expected an integer, got {value!r}")
    return int(value)


def _as_str(value) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


_FIELDS = {
    "window_width": _as_int,
    "window_height": _as_int,
    "image_base_url": _as_str,
    "log_level": _as_str,
}


def save(settings: Settings, path: Path = DEFAULT_PATH) -> None:
    with path.open("wb") as f:
        tomli_w.dump(asdict(settings), f)
    logger.debug("Settings saved to %s", path)
