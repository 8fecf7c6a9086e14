"""Runtime settings read from the environment (and an optional .env file)."""

import logging
import os

from dotenv import load_dotenv

from openlrae.bok.values import Verbosity
from openlrae.i18n import Language

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_LANGUAGE = "en"
DEFAULT_VERBOSITY = "RICH"
DEFAULT_LOG_LEVEL = "WARNING"


def get_language() -> Language:
    """Report language, from OPENLRAE_LANGUAGE (a locale tag such as es_ES)."""
    return Language.from_locale(os.getenv("OPENLRAE_LANGUAGE", DEFAULT_LANGUAGE))


def get_verbosity() -> Verbosity:
    """Report verbosity, from OPENLRAE_VERBOSITY."""
    raw = os.getenv("OPENLRAE_VERBOSITY", DEFAULT_VERBOSITY).strip().upper()
    try:
        return Verbosity(raw)
    except ValueError:
        logger.warning(f"Invalid OPENLRAE_VERBOSITY {raw!r}, using {DEFAULT_VERBOSITY}")
        return Verbosity(DEFAULT_VERBOSITY)


def get_log_level() -> int:
    """Logging level, from OPENLRAE_LOG_LEVEL."""
    raw = os.getenv("OPENLRAE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        logger.warning(f"Invalid OPENLRAE_LOG_LEVEL {raw!r}, using {DEFAULT_LOG_LEVEL}")
        return logging.WARNING
    return level
